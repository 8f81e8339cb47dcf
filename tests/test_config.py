"""
Tests for environment-driven configuration.
"""

import importlib

import pytest

from blogforge.core import config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_env_selects_dotenv_file():
    assert config.ENV_FILES["staging"] == ".env.staging"
    assert config.ENV_FILES["prod"] == config.ENV_FILES["production"] == ".env.production"


def test_values_come_from_environment(monkeypatch, reload_config):
    monkeypatch.setenv("ENV", "Staging")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("STORAGE_BACKEND", "MEMORY")
    reloaded = reload_config()
    assert reloaded.ENV == "staging"
    assert reloaded.OPENAI_MODEL == "gpt-4o-mini"
    assert reloaded.STORAGE_BACKEND == "memory"
