"""
Runtime configuration for the sanitizer, read from environment variables.

A .env file in (or above) the working directory is honoured through
python-dotenv; variables already set in the environment take precedence.

Variables:
    SANITIZER_CONFIG_ROOT: directory holding profile files (default: config/profiles)
    SANITIZER_PROFILE: profile file name (default: connec_sanitizer_profile.yml)
    SECRET_KEY_BASE: application secret the hashing key is derived from
    SANITIZER_SCRUB_LOGS: scrub PII out of sanitizer log messages (default: true)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_CONFIG_ROOT = os.path.join("config", "profiles")
DEFAULT_PROFILE_NAME = "connec_sanitizer_profile.yml"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    config_root: Path
    profile_name: str = DEFAULT_PROFILE_NAME
    secret_key: Optional[str] = None
    scrub_logs: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            config_root=Path(os.getenv("SANITIZER_CONFIG_ROOT", DEFAULT_CONFIG_ROOT)),
            profile_name=os.getenv("SANITIZER_PROFILE", DEFAULT_PROFILE_NAME),
            secret_key=os.getenv("SECRET_KEY_BASE"),
            scrub_logs=os.getenv("SANITIZER_SCRUB_LOGS", "true").strip().lower() in _TRUTHY,
        )
