"""Shared pytest fixtures for mailsyntax tests."""

from __future__ import annotations

import os
from typing import Generator

import pytest

from mailsyntax.config.settings import Settings, get_settings
from mailsyntax.core.validator import EmailValidator, get_validator


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop any real MAILSYNTAX_* vars and reset the cached singletons.

    Keeps a developer's shell or ``.env`` from leaking into tests.
    """
    for key in list(os.environ):
        if key.upper().startswith("MAILSYNTAX_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    get_validator.cache_clear()
    yield
    get_settings.cache_clear()
    get_validator.cache_clear()


@pytest.fixture()
def settings() -> Settings:
    """Return a fresh ``Settings`` with defaults only."""
    return Settings(_env_file=None)


@pytest.fixture()
def validator() -> EmailValidator:
    """Return a validator using the default grammar."""
    return EmailValidator()
