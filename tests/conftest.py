"""Global test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from semcommit.config import ConfigLoader


@pytest.fixture(autouse=True)
def reset_config_loader() -> Generator[None, None, None]:
	"""Drop the cached ConfigLoader so each test resolves configuration afresh."""
	ConfigLoader._instance = None  # noqa: SLF001
	yield
	ConfigLoader._instance = None  # noqa: SLF001


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
	"""Provide a fake API key through the environment."""
	key = "sk-test-key"
	monkeypatch.setenv("OPENAI_API_KEY", key)
	return key
