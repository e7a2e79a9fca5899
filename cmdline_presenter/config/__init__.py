"""Module de configuration."""

from cmdline_presenter.config.loader import ConfigLoader, FileConfigLoader
from cmdline_presenter.config.settings import (
    LoggingSettings,
    PresenterSettings,
    ScriptFile,
    ScriptStep,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "LoggingSettings",
    "PresenterSettings",
    "ScriptFile",
    "ScriptStep",
]
