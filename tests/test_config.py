import pytest

from salary_system.config import get_settings_module, load_settings
from salary_system.container import build_container
from salary_system.i18n.messages import ENGLISH


@pytest.mark.parametrize("env, expected", [
    ("production", "salary_system.config.production"),
    ("prod", "salary_system.config.production"),
    ("testing", "salary_system.config.testing"),
    ("TEST", "salary_system.config.testing"),
    ("development", "salary_system.config.development"),
    ("anything-else", "salary_system.config.development"),
])
def test_get_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_default_settings_module(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "salary_system.config.development"


def test_load_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    settings = load_settings()

    assert settings.module == "salary_system.config.testing"
    assert settings.language == "en"
    assert settings.log_level == "DEBUG"
    assert settings.debug is False


def test_load_development_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")

    settings = load_settings()

    assert settings.module == "salary_system.config.development"
    assert settings.debug is True
    assert settings.log_level


def test_build_container_wires_registry():
    container = build_container(language="en")

    assert container.messages is ENGLISH
    assert container.registry.count() == 0
    assert container.works_repo.count() == 0
