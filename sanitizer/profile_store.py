"""
ProfileStore - loads and caches sanitization profiles.

Profiles are YAML files living under a configuration root and are identified
by their file name (e.g. "connec_sanitizer_profile.yml"). Each file is parsed
at most once per store; the parsed Profile is immutable and shared by every
sanitizer that uses the store.
"""

import logging
import threading
from pathlib import Path
from typing import Optional, Union

import yaml

from .actions import Profile, parse_profile
from .settings import Settings

logger = logging.getLogger(__name__)


class ProfileStore:
    """
    Thread-safe cache of parsed profiles keyed by profile source identifier.

    Parsing is done outside the lock. If two threads race on the first load
    of the same file, both parse it and the first result published wins; the
    other thread gets that same object back, never a partially built one.

    Example:
        store = ProfileStore("config/profiles")
        if store.exists("connec_sanitizer_profile.yml"):
            profile = store.load("connec_sanitizer_profile.yml")
            profile["contact"]
    """

    def __init__(self, config_root: Union[str, Path]):
        self.config_root = Path(config_root)
        self._profiles: dict[str, Profile] = {}
        self._lock = threading.Lock()

    def path_for(self, source_id: str) -> Path:
        return self.config_root / source_id

    def exists(self, source_id: str) -> bool:
        return self.path_for(source_id).is_file()

    def load(self, source_id: str) -> Optional[Profile]:
        """
        Return the parsed profile for source_id, or None if there is none.

        Raises:
            yaml.YAMLError: the file is not valid YAML.
            ProfileError: the YAML does not have the profile structure.
        """
        with self._lock:
            cached = self._profiles.get(source_id)
        if cached is not None:
            return cached

        if not self.exists(source_id):
            logger.debug(f"No sanitizer profile at {self.path_for(source_id)}")
            return None

        with open(self.path_for(source_id), "r", encoding="utf-8") as f:
            profile = parse_profile(yaml.safe_load(f))

        if profile is None:
            logger.info(f"Sanitizer profile {source_id} is empty")
            return None

        with self._lock:
            profile = self._profiles.setdefault(source_id, profile)
        logger.info(f"Loaded sanitizer profile {source_id} ({len(profile)} entities)")
        return profile

    def loaded_sources(self) -> list[str]:
        with self._lock:
            return list(self._profiles.keys())

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()


_default_store: Optional[ProfileStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> ProfileStore:
    """
    Get the process-wide ProfileStore rooted at SANITIZER_CONFIG_ROOT.

    For tests or multiple roots, instantiate ProfileStore directly and pass
    it to DataSanitizer.
    """
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = ProfileStore(Settings.from_env().config_root)
        return _default_store
