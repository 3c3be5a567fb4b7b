"""
Pytest configuration and shared fixtures for the sanitizer tests.

Profiles are written to a temporary directory per test, so every test gets
its own ProfileStore and nothing is shared through the process-wide store.
"""

import os
import sys

import pytest

# Add parent directory to path for sanitizer/server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sanitizer import DataSanitizer, ProfileStore  # noqa: E402
from sanitizer.settings import Settings  # noqa: E402

TEST_SECRET = "0123456789abcdef-rest-of-the-secret-key-base"
PROFILE_NAME = "connec_sanitizer_profile.yml"


@pytest.fixture
def profile_dir(tmp_path):
    """Directory acting as the configuration root for profiles."""
    root = tmp_path / "profiles"
    root.mkdir()
    return root


@pytest.fixture
def write_profile(profile_dir):
    """Write a YAML profile file and return its path."""
    def _write(content: str, name: str = PROFILE_NAME):
        path = profile_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def settings(profile_dir):
    """Settings pointing at the temporary profile directory, no log scrubbing."""
    return Settings(
        config_root=profile_dir,
        profile_name=PROFILE_NAME,
        secret_key=TEST_SECRET,
        scrub_logs=False,
    )


@pytest.fixture
def make_sanitizer(profile_dir, settings):
    """Build a DataSanitizer on a fresh store rooted at the profile directory."""
    def _make(secret_key=TEST_SECRET, **kwargs):
        return DataSanitizer(
            store=ProfileStore(profile_dir),
            secret_key=secret_key,
            settings=settings,
            **kwargs
        )
    return _make
