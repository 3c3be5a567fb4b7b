"""
Entity name normalization.

Profiles are keyed by snake_case entity names, while callers pass whatever
their own models are called ("Contact", "SalesOrder", "sales-order").
"""

import re

from .errors import SanitizationError

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[-\s]+")


def normalize_entity_name(name: str) -> str:
    """
    Convert an entity name to its canonical underscored form.

    Example:
        normalize_entity_name("SomeEntity")   # "some_entity"
        normalize_entity_name("HTTPRequest")  # "http_request"
        normalize_entity_name("sales-order")  # "sales_order"
    """
    if not isinstance(name, str):
        raise SanitizationError(f"Entity name must be a string, got {type(name).__name__}")

    word = name.strip().replace("::", "/")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    word = _SEPARATORS.sub("_", word)
    return word.lower()
