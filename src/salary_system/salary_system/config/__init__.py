"""Runtime settings.

One settings module per environment (``development``, ``production``,
``testing``), chosen by ``APP_ENV``.
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass

_ENVIRONMENTS = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


@dataclass(frozen=True)
class Settings:
    module: str
    language: str
    log_level: str
    debug: bool


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return f"{__name__}.{_ENVIRONMENTS.get(env, 'development')}"


def load_settings() -> Settings:
    module_name = get_settings_module()
    module = importlib.import_module(module_name)
    return Settings(
        module=module_name,
        language=str(getattr(module, "LANGUAGE", "ru")),
        log_level=str(getattr(module, "LOG_LEVEL", "WARNING")),
        debug=bool(getattr(module, "DEBUG", False)),
    )
