"""
Settings file parser for SmartSearch.

This module loads and saves the flat ``Key=Value`` settings file kept in the
per-user application data directory. Unknown keys and malformed lines are
skipped, so older or hand-edited files still load.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional, List, Union
import logging
from dataclasses import dataclass

from ..models.settings import Settings


logger = logging.getLogger(__name__)


APP_NAME = "SmartSearch"
CONFIG_FILE_NAME = "config.txt"

KEY_FOLDER = "Folder"
KEY_DARK_THEME = "DarkTheme"
KEY_SHOW_IN_TASKBAR = "ShowInTaskbar"


@dataclass
class SettingsParseResult:
    """
    Result of settings parsing operation.

    Attributes:
        settings: The parsed settings
        warnings: List of non-fatal warnings
        config_path: Path to the settings file used
        is_default: Whether default settings were used
    """
    settings: Settings
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(Exception):
    """Raised when the settings file cannot be read or written."""
    pass


def get_config_dir() -> Path:
    """
    Per-user application data directory for SmartSearch.

    %APPDATA%/SmartSearch on Windows, ~/Library/Application Support/SmartSearch
    on macOS, $XDG_CONFIG_HOME/SmartSearch (or ~/.config/SmartSearch) elsewhere.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """Default location of the settings file."""
    return get_config_dir() / CONFIG_FILE_NAME


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _format_bool(value: bool) -> str:
    return "True" if value else "False"


class SettingsParser:
    """
    ``Key=Value`` settings parser with error handling.

    Recognised keys are ``Folder``, ``DarkTheme`` and ``ShowInTaskbar``.
    Boolean values are true only for the literal ``true`` in any case.
    """

    KNOWN_KEYS = (KEY_FOLDER, KEY_DARK_THEME, KEY_SHOW_IN_TASKBAR)

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the settings parser.

        Args:
            config_path: Settings file location. If None, the per-user default is used.
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_settings(self) -> SettingsParseResult:
        """
        Load settings from the settings file, or defaults if it does not exist.

        Returns:
            SettingsParseResult containing the parsed settings and metadata

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not self.config_path.exists():
            self.logger.info(f"No settings file at {self.config_path}, using defaults")
            return SettingsParseResult(
                settings=Settings(),
                warnings=["No settings file found, using default settings"],
                config_path=None,
                is_default=True
            )

        try:
            content = self.config_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read settings file {self.config_path}: {e}") from e

        settings, warnings = self.parse_text(content)
        self.logger.info(f"Settings loaded from {self.config_path}")

        return SettingsParseResult(
            settings=settings,
            warnings=warnings,
            config_path=self.config_path,
            is_default=False
        )

    def parse_text(self, content: str) -> tuple[Settings, List[str]]:
        """
        Parse settings file content.

        Args:
            content: Raw text of the settings file

        Returns:
            Tuple of (settings, warnings)
        """
        values: Dict[str, object] = {}
        warnings: List[str] = []

        for line_no, line in enumerate(content.splitlines(), 1):
            if not line.strip():
                continue

            key, sep, value = line.partition('=')
            if not sep:
                warnings.append(f"Line {line_no}: ignored, no '=' found")
                continue

            key = key.strip()
            value = value.strip()

            if key == KEY_FOLDER:
                if value and Path(value).is_dir():
                    values['folder_path'] = value
                elif value:
                    warnings.append(f"Configured folder does not exist: {value}")
            elif key == KEY_DARK_THEME:
                values['dark_theme'] = _parse_bool(value)
            elif key == KEY_SHOW_IN_TASKBAR:
                values['show_in_taskbar'] = _parse_bool(value)
            else:
                warnings.append(f"Line {line_no}: unknown key '{key}' ignored")

        for warning in warnings:
            self.logger.debug(warning)

        return Settings.from_dict(values), warnings

    def format_settings(self, settings: Settings) -> str:
        """Render settings in the on-disk ``Key=Value`` format."""
        lines = [
            f"{KEY_FOLDER}={settings.folder_path or ''}",
            f"{KEY_DARK_THEME}={_format_bool(settings.dark_theme)}",
            f"{KEY_SHOW_IN_TASKBAR}={_format_bool(settings.show_in_taskbar)}",
        ]
        return "\n".join(lines) + "\n"

    def save_settings(self, settings: Settings) -> Path:
        """
        Write settings to the settings file.

        Args:
            settings: Settings to save

        Returns:
            Path the settings were written to

        Raises:
            ConfigurationError: If the file cannot be written
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(self.format_settings(settings), encoding='utf-8')
        except OSError as e:
            raise ConfigurationError(f"Cannot write settings file {self.config_path}: {e}") from e

        self.logger.info(f"Settings saved to {self.config_path}")
        return self.config_path


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Convenience function to load settings.

    Args:
        config_path: Path to the settings file (optional)

    Returns:
        Parsed settings, or defaults if the file is missing

    Raises:
        ConfigurationError: If the file exists but cannot be read
    """
    parser = SettingsParser(config_path)
    return parser.load_settings().settings


def save_settings(settings: Settings, config_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Convenience function to save settings.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    parser = SettingsParser(config_path)
    return parser.save_settings(settings)
