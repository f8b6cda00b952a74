"""Environment overrides, resolved once before a search request is built."""

from __future__ import annotations

from collections.abc import Mapping

CASE_SENSITIVE_ENV = "CASE_SENSITIVE"


def case_sensitive_from_env(environ: Mapping[str, str]) -> bool:
    """CASE_SENSITIVE forces case-sensitive search when set to any value, even empty."""
    return CASE_SENSITIVE_ENV in environ
