"""Config settings – env-based configuration and service wiring."""
from persistent_dismissible.config.settings.base import Settings
from persistent_dismissible.config.settings.dismissible import (
    DismissibleSettings,
    build_dismissibles,
    build_store,
    load_settings,
)
from persistent_dismissible.config.settings.factory import SettingsFactory
from persistent_dismissible.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DismissibleSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "build_dismissibles",
    "build_store",
    "load_settings",
]
