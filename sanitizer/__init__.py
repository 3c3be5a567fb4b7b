"""
Sanitizer - profile-driven field sanitization for records sent to logs.

A YAML profile maps entity names to per-field actions. The sanitizer walks a
record (or a list of records) of that entity and returns a deep copy with
fields hashed, suppressed, or recursively sanitized with a nested profile.

Architecture:
    - DataSanitizer: recursive engine, the public sanitize() entry point
    - ProfileStore: loads and caches profile files, thread-safe
    - actions: the closed set of field actions (suppress, hash, nested)

Example:
    from sanitizer import DataSanitizer

    sanitizer = DataSanitizer()
    safe = sanitizer.sanitize("Contact", {"email": "john@example.com", "name": "John"})
    # with profile  contact: {email: hash}
    # safe: {"email": "Zm9v...=", "name": "John"}
"""

from .actions import Action, EntityProfile, HashAction, NestedAction, SuppressAction
from .engine import DataSanitizer, SanitizeResult, get_default_sanitizer
from .errors import HashingError, ProfileError, SanitizationError
from .profile_store import ProfileStore, get_default_store

__all__ = [
    "DataSanitizer",
    "SanitizeResult",
    "get_default_sanitizer",
    "ProfileStore",
    "get_default_store",
    "Action",
    "EntityProfile",
    "HashAction",
    "NestedAction",
    "SuppressAction",
    "SanitizationError",
    "ProfileError",
    "HashingError",
]
