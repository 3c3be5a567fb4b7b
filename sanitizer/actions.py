"""
Field actions - the closed set of things a profile can ask for.

A sanitization profile is a YAML document of the form:

    contact:
      first_name: hash
      email: suppress
      address:            # nested profile
        line1: suppress
        city: hash
      phones:             # list of records, same nested profile for each
        number: hash

Each leaf is parsed once, at load time, into one of:
    - SuppressAction: the field value becomes None
    - HashAction: the field value becomes a keyed digest
    - NestedAction: the field value is sanitized with a nested EntityProfile

Any directive that is not exactly "hash" and not a nested profile suppresses
the field ("Hash" included), so a typo in a profile errs on the side of
hiding data.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .errors import ProfileError
from .naming import normalize_entity_name

if TYPE_CHECKING:
    from .engine import DataSanitizer

HASH_DIRECTIVE = "hash"


class Action(ABC):
    """Base class for a per-field directive."""

    @abstractmethod
    def apply(self, sanitizer: "DataSanitizer", entity: str, value: Any) -> Any:
        """Return the replacement for a (non-blank) field value."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class SuppressAction(Action):
    """Replace the field value with None."""

    def apply(self, sanitizer: "DataSanitizer", entity: str, value: Any) -> Any:
        return None


class HashAction(Action):
    """Replace the field value with its keyed digest."""

    def apply(self, sanitizer: "DataSanitizer", entity: str, value: Any) -> Any:
        return sanitizer.hasher.hash_value(value)


@dataclass(frozen=True)
class EntityProfile:
    """Field name -> Action for one entity (or one nested level of it)."""
    fields: Mapping[str, Action]

    def __iter__(self):
        return iter(self.fields.items())

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, field_name) -> bool:
        return field_name in self.fields

    def get(self, field_name: str):
        return self.fields.get(field_name)


@dataclass(frozen=True)
class NestedAction(Action):
    """Recurse into the field with its own profile instead of a store lookup."""
    profile: EntityProfile

    def apply(self, sanitizer: "DataSanitizer", entity: str, value: Any) -> Any:
        return sanitizer.sanitize_with_profile(entity, value, self.profile)

    def __repr__(self) -> str:
        return f"<NestedAction: {sorted(self.profile.fields)}>"


# Profile: canonical entity name -> EntityProfile
Profile = Mapping[str, EntityProfile]

SUPPRESS = SuppressAction()
HASH = HashAction()


def _is_nested(raw: Any) -> bool:
    if isinstance(raw, Mapping):
        return True
    return isinstance(raw, list) and bool(raw) and all(isinstance(item, Mapping) for item in raw)


def parse_action(raw: Any) -> Action:
    """Parse a raw profile leaf into an Action."""
    if _is_nested(raw):
        if isinstance(raw, list):
            merged = {}
            for item in raw:
                merged.update(item)
            raw = merged
        return NestedAction(parse_entity_profile(raw))

    if raw == HASH_DIRECTIVE:
        return HASH

    return SUPPRESS


def parse_entity_profile(raw: Any) -> EntityProfile:
    if not isinstance(raw, Mapping):
        raise ProfileError(f"Entity profile must be a mapping of fields, got {type(raw).__name__}")

    fields = {str(name): parse_action(action) for name, action in raw.items()}
    return EntityProfile(MappingProxyType(fields))


def parse_profile(document: Any):
    """
    Parse a loaded YAML document into a Profile.

    Returns None for an empty document. Entity keys are normalized so that
    lookups are insensitive to case and naming convention.
    """
    if document is None:
        return None
    if not isinstance(document, Mapping):
        raise ProfileError(f"Profile document must map entity names to profiles, got {type(document).__name__}")

    entities = {}
    for entity, raw in document.items():
        entities[normalize_entity_name(str(entity))] = parse_entity_profile(raw)
    return MappingProxyType(entities)
