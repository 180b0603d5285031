"""Config settings – 12-factor env-based configuration."""
from sheetgen_client.config.settings.base import Settings
from sheetgen_client.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from sheetgen_client.config.settings.sheetgen import DEFAULT_TIMEOUT_MS, SheetGenSettings

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "SheetGenSettings",
]
