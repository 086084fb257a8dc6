"""
Settings data model for SmartSearch.

This module defines the immutable settings value shared by the search logic
and the window: the folder being searched, the colour theme and whether the
window shows up in the taskbar.
"""

from typing import Dict, Any, Optional
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    """
    User settings persisted between sessions.

    Instances are frozen. Every mutation returns a new ``Settings`` that
    replaces the previous value as a whole.

    Attributes:
        folder_path: Folder searched on every keystroke (None until chosen)
        dark_theme: Whether the dark colour theme is active
        show_in_taskbar: Whether the window has a taskbar entry
    """

    model_config = ConfigDict(frozen=True)

    folder_path: Optional[str] = Field(None, description="Folder to search")
    dark_theme: bool = Field(True, description="Use the dark colour theme")
    show_in_taskbar: bool = Field(False, description="Show the window in the taskbar")

    @field_validator('folder_path')
    @classmethod
    def validate_folder_path(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank folder paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    def has_folder(self) -> bool:
        """Check if the configured folder is set and exists on disk."""
        return self.folder_path is not None and Path(self.folder_path).is_dir()

    def _replace(self, **changes: Any) -> 'Settings':
        """Validated copy with some fields changed."""
        return self.model_validate({**self.model_dump(), **changes})

    def with_folder(self, folder_path: str) -> 'Settings':
        return self._replace(folder_path=folder_path)

    def with_dark_theme(self, dark_theme: bool) -> 'Settings':
        return self._replace(dark_theme=bool(dark_theme))

    def with_show_in_taskbar(self, show_in_taskbar: bool) -> 'Settings':
        return self._replace(show_in_taskbar=bool(show_in_taskbar))

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create a Settings instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Folder: {self.folder_path or '(not set)'}"]
        parts.append(f"Theme: {'dark' if self.dark_theme else 'light'}")
        parts.append(f"Taskbar: {'shown' if self.show_in_taskbar else 'hidden'}")
        return " | ".join(parts)
