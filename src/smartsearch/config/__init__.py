"""
Settings management package for SmartSearch.

This package provides loading and saving of the per-user settings file.
"""

from .parser import (
    SettingsParser,
    SettingsParseResult,
    ConfigurationError,
    get_config_dir,
    get_config_path,
    load_settings,
    save_settings
)

__all__ = [
    'SettingsParser',
    'SettingsParseResult',
    'ConfigurationError',
    'get_config_dir',
    'get_config_path',
    'load_settings',
    'save_settings'
]
