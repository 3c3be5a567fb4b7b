"""
Exception types raised inside the sanitizer.

None of these escape DataSanitizer.sanitize(): the engine turns them into a
logged warning and an empty result.
"""


class SanitizationError(Exception):
    """Base class for failures while sanitizing a value."""


class ProfileError(SanitizationError):
    """The profile document does not have the expected structure."""


class HashingError(SanitizationError):
    """A field could not be hashed (missing or short secret key, etc.)."""
