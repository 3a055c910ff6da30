"""
Notes API — Settings Tests
===========================

What:  Tests for environment-driven configuration parsing.
"""

import pydantic
import pytest

from notes_api.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.backend_port == 8000
        assert settings.notes_lock_stripes == 64
        assert settings.cors_origins_list == ["*"]

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_split(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NOTES_LOCK_STRIPES", "4")
        monkeypatch.setenv("BACKEND_PORT", "9000")
        settings = Settings()
        assert settings.notes_lock_stripes == 4
        assert settings.backend_port == 9000

    def test_stripe_bounds(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(notes_lock_stripes=0)
