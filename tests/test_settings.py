"""Tests for environment based settings."""

from pathlib import Path

from sanitizer.settings import DEFAULT_PROFILE_NAME, Settings


class TestSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        """Should fall back to the defaults when nothing is set."""
        monkeypatch.chdir(tmp_path)
        for name in ("SANITIZER_CONFIG_ROOT", "SANITIZER_PROFILE", "SECRET_KEY_BASE", "SANITIZER_SCRUB_LOGS"):
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

        settings = Settings.from_env()

        assert settings.config_root == Path("config") / "profiles"
        assert settings.profile_name == DEFAULT_PROFILE_NAME
        assert settings.secret_key is None
        assert settings.scrub_logs is True

    def test_from_environment(self, monkeypatch, tmp_path):
        """Should read every variable from the environment."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SANITIZER_CONFIG_ROOT", str(tmp_path))
        monkeypatch.setenv("SANITIZER_PROFILE", "custom.yml")
        monkeypatch.setenv("SECRET_KEY_BASE", "s3cr3t-s3cr3t-s3cr3t")
        monkeypatch.setenv("SANITIZER_SCRUB_LOGS", "no")

        settings = Settings.from_env()

        assert settings.config_root == tmp_path
        assert settings.profile_name == "custom.yml"
        assert settings.secret_key == "s3cr3t-s3cr3t-s3cr3t"
        assert settings.scrub_logs is False

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Should pick values up from a .env file in the working directory."""
        monkeypatch.chdir(tmp_path)
        # set first so the value loaded from .env is undone after the test
        monkeypatch.setenv("SANITIZER_PROFILE", "unused.yml")
        monkeypatch.delenv("SANITIZER_PROFILE")
        (tmp_path / ".env").write_text("SANITIZER_PROFILE=from_dotenv.yml\n", encoding="utf-8")

        assert Settings.from_env().profile_name == "from_dotenv.yml"
