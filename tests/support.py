"""Test helpers shared across suites."""

from __future__ import annotations

from greeter.core.config import Settings


def make_settings(**overrides) -> Settings:
    """Build Settings that ignore any `.env` file in the working directory."""

    return Settings(_env_file=None, **overrides)
