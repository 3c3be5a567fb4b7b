"""
Keyed, deterministic digests for the "hash" action.

The same value hashed with the same secret always yields the same digest, so
hashed fields can still be correlated across log lines without exposing the
raw value.
"""

import base64
import hashlib
import hmac
from typing import Any, Optional

from .errors import HashingError

KEY_LENGTH = 16


class Hasher:
    """
    HMAC-SHA256 over the value's string form, base64 encoded.

    Only the first 16 bytes of the secret are used as the key. The secret is
    checked lazily: a sanitizer without a secret works until a field with a
    "hash" action is actually hit.
    """

    def __init__(self, secret: Optional[str]):
        self._secret = secret

    @property
    def key(self) -> bytes:
        if not self._secret:
            raise HashingError("No secret key configured for hashing (set SECRET_KEY_BASE)")
        raw = self._secret.encode("utf-8")
        if len(raw) < KEY_LENGTH:
            raise HashingError(f"Secret key must be at least {KEY_LENGTH} bytes long")
        return raw[:KEY_LENGTH]

    def hash_value(self, value: Any) -> str:
        digest = hmac.new(self.key, str(value).encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")
