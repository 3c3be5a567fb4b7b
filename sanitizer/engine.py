"""
DataSanitizer - profile-driven sanitization of records before they are logged.

Given an entity name and a record (or a list of records), the sanitizer looks
up the entity's profile and returns a deep copy where:
1. fields with a "hash" action hold a keyed digest of their value
2. fields with a nested profile are sanitized recursively with that profile
3. any other listed field is suppressed (set to None)
4. fields not listed in the profile, or blank, are left as they are

Failures never propagate to the caller. They are logged as a warning and the
call returns None, never the unsanitized input.
"""

import copy
import logging
import threading
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional

from .actions import EntityProfile, NestedAction, parse_action
from .errors import ProfileError, SanitizationError
from .hashing import Hasher
from .log_scrubbing import install_log_scrubbing
from .naming import normalize_entity_name
from .profile_store import ProfileStore, get_default_store
from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class SanitizeResult:
    """Outcome of DataSanitizer.try_sanitize()."""
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_blank(value: Any) -> bool:
    """None, False, whitespace-only strings and empty collections are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bytes, list, tuple, dict, set, frozenset, Mapping)):
        return len(value) == 0
    return False


class DataSanitizer:
    """
    Sanitizes records according to a YAML profile.

    Example:
        sanitizer = DataSanitizer()

        sanitizer.sanitize("Contact", {"email": "john@example.com", "title": "CTO"})
        # {"email": None, "title": "CTO"}   with profile  contact: {email: suppress}

        sanitizer.sanitize("Contact", [contact_1, contact_2])
        # [sanitized_1, sanitized_2]

    If the profile file does not exist the sanitizer is disabled and
    sanitize() returns its input unchanged.

    Thread Safety:
        sanitize() keeps no per-call state on the instance; the only shared
        state is the ProfileStore cache, which is lock protected.
    """

    def __init__(
        self,
        profile_name: Optional[str] = None,
        store: Optional[ProfileStore] = None,
        secret_key: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the DataSanitizer.

        Args:
            profile_name: Profile file name under the store's root. Defaults to
                          SANITIZER_PROFILE / connec_sanitizer_profile.yml.
            store: ProfileStore to load from. Defaults to a store rooted at
                   settings.config_root when settings are given, otherwise the
                   process-wide default store.
            secret_key: Secret the hashing key is derived from. Defaults to
                        SECRET_KEY_BASE.
            settings: Explicit Settings instead of reading the environment.
        """
        if store is None:
            store = ProfileStore(settings.config_root) if settings else get_default_store()
        settings = settings or Settings.from_env()

        self.profile_name = profile_name or settings.profile_name
        self.store = store
        self.hasher = Hasher(secret_key if secret_key is not None else settings.secret_key)

        if settings.scrub_logs:
            install_log_scrubbing(__name__)

        # Only existence is checked here; parsing happens inside the
        # failure boundary of the first sanitize() call.
        self.enabled = self.store.exists(self.profile_name)
        if not self.enabled:
            logger.info(f"No sanitizer profile found at {self.store.path_for(self.profile_name)}, sanitization disabled")

    def entities(self) -> list[str]:
        """Return the entity names that have a profile configured."""
        if not self.enabled:
            return []
        profile = self.store.load(self.profile_name)
        return sorted(profile.keys()) if profile is not None else []

    def sanitize(self, entity: str, data: Any, profile: Any = None) -> Any:
        """
        Return a sanitized copy of data, or None if sanitization failed.

        Args:
            entity: Entity name, e.g. "Contact" or "sales_order".
            data: A record (mapping) or a list of records.
            profile: Optional explicit profile to apply instead of looking up
                     entity (an EntityProfile or its raw mapping form).

        Returns:
            The sanitized copy. None when an error occurred, in which case a
            warning has been logged. Callers must not fall back to data.
        """
        result = self.try_sanitize(entity, data, profile)
        if not result.ok:
            logger.warning(f"Error masking data for {entity}: {type(result.error).__name__}: {result.error}")
            return None
        return result.value

    def try_sanitize(self, entity: str, data: Any, profile: Any = None) -> SanitizeResult:
        """Like sanitize(), but report the failure instead of logging it."""
        if not self.enabled:
            return SanitizeResult(value=data)

        try:
            if self.store.load(self.profile_name) is None:
                return SanitizeResult(value=data)
            value = self.sanitize_with_profile(entity, data, self._coerce_profile(profile))
        except Exception as e:
            return SanitizeResult(error=e)

        return SanitizeResult(value=value)

    def _coerce_profile(self, profile: Any) -> Optional[EntityProfile]:
        if profile is None or isinstance(profile, EntityProfile):
            return profile
        if isinstance(profile, NestedAction):
            return profile.profile

        action = parse_action(profile)
        if not isinstance(action, NestedAction):
            raise ProfileError(f"Explicit profile must be a mapping of fields, got {type(profile).__name__}")
        return action.profile

    def sanitize_with_profile(self, entity: str, value: Any, profile: Optional[EntityProfile]) -> Any:
        """
        Sanitize value with profile, or with the entity's own profile if None.

        This is the recursion step used by nested actions. Unlike sanitize()
        it raises on failure.
        """
        if isinstance(value, (list, tuple)):
            items = [self.sanitize_with_profile(entity, item, profile) for item in value]
            if hasattr(value, "_make"):
                return value._make(items)
            return type(value)(items)
        return self._sanitize_record(entity, value, profile)

    def _sanitize_record(self, entity: str, record: Any, profile: Optional[EntityProfile]) -> Any:
        entity = normalize_entity_name(entity)
        if profile is None:
            profile = (self.store.load(self.profile_name) or {}).get(entity)

        sanitized = copy.deepcopy(record)
        if profile is None:
            return sanitized

        if not isinstance(sanitized, MutableMapping):
            raise SanitizationError(f"Cannot apply the '{entity}' profile to a {type(record).__name__} value")

        for field_name, action in profile:
            if is_blank(sanitized.get(field_name)):
                continue
            sanitized[field_name] = action.apply(self, entity, sanitized[field_name])

        return sanitized


_default_sanitizer: Optional[DataSanitizer] = None
_default_sanitizer_lock = threading.Lock()


def get_default_sanitizer() -> DataSanitizer:
    """
    Get the default DataSanitizer instance.

    This is a convenience function for simple use cases.
    For more control, instantiate DataSanitizer directly.
    """
    global _default_sanitizer
    with _default_sanitizer_lock:
        if _default_sanitizer is None:
            _default_sanitizer = DataSanitizer()
        return _default_sanitizer
