"""
Record Sanitizer - MCP Server for log-safe records

A local MCP (Model Context Protocol) server that lets AI agents sanitize
records before quoting them in logs, tickets or chat. Sanitization follows the
YAML profile configured for the process (see sanitizer.settings).

Tools:
    - sanitize_record: Sanitize a record or list of records of a named entity
    - list_sanitized_entities: List the entities the profile covers

Safety Constraints:
    - Raw input is never echoed back, not even on failure
    - Without a profile file the records are returned unchanged
"""

from typing import Any

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from sanitizer import DataSanitizer, get_default_sanitizer

# Load environment variables from .env file
load_dotenv()

# Initialize MCP server
mcp = FastMCP(
    "record-sanitizer",
    instructions="MCP Server for hashing and suppressing sensitive fields in records"
)


def get_sanitizer() -> DataSanitizer:
    """Return the sanitizer configured from environment variables."""
    return get_default_sanitizer()


@mcp.tool()
def sanitize_record(entity_name: str, data: Any) -> dict[str, Any]:
    """
    Sanitize a record (or a list of records) of the given entity.

    Fields are hashed, suppressed or recursively sanitized as the entity's
    profile says. Fields the profile does not mention are kept as they are.

    Args:
        entity_name: The entity the record belongs to.
                     Example: "Contact", "Invoice" or "sales_order"
        data: A JSON object, or a list of JSON objects.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - entity: The entity name as given
        - data: The sanitized record(s) (success only)
        - message: What went wrong (error only)

    Example usage:
        sanitize_record("Contact", {"first_name": "John", "title": "CTO"})
        sanitize_record("Invoice", [{"public_note": "..."}, {"public_note": "..."}])
    """
    try:
        sanitizer = get_sanitizer()
    except Exception as e:
        return {
            "status": "error",
            "entity": entity_name,
            "message": f"Sanitizer unavailable: {type(e).__name__}"
        }

    result = sanitizer.sanitize(entity_name, data)
    if result is None:
        return {
            "status": "error",
            "entity": entity_name,
            "message": "Sanitization could not be performed, see server logs"
        }

    return {
        "status": "success",
        "entity": entity_name,
        "data": result
    }


@mcp.tool()
def list_sanitized_entities() -> dict[str, Any]:
    """
    List the entities that have a sanitization profile.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - enabled: False when no profile file is configured
        - profile: The profile file name
        - entities: Canonical entity names covered by the profile
        - count: Number of entities
    """
    try:
        sanitizer = get_sanitizer()
        entities = sanitizer.entities()

        return {
            "status": "success",
            "enabled": sanitizer.enabled,
            "profile": sanitizer.profile_name,
            "entities": entities,
            "count": len(entities)
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Could not load sanitizer profile: {type(e).__name__}"
        }


if __name__ == "__main__":
    # Run the MCP server using stdio transport
    mcp.run()
