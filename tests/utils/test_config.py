"""Tests for environment overrides."""

from tinygrep.utils.config import case_sensitive_from_env


class TestCaseSensitiveFromEnv:
    def test_unset(self):
        assert case_sensitive_from_env({}) is False

    def test_any_value_forces_case_sensitive(self):
        assert case_sensitive_from_env({"CASE_SENSITIVE": "0"}) is True
        assert case_sensitive_from_env({"CASE_SENSITIVE": ""}) is True
