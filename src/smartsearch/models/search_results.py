"""
Search results data models for SmartSearch.

This module defines the outcome of a single search (an exact hit, a list of
partial matches, nothing at all, or no usable folder) and the snapshot of what
the results list is currently showing.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


BROWSER_ITEM_TEXT = "-- Search on Browser"


class MatchType(Enum):
    """Enumeration of the possible search outcomes."""
    EXACT = "exact"
    PARTIAL = "partial"
    NONE = "none"
    NO_FOLDER = "no_folder"


class MatchResult(BaseModel):
    """
    Result of matching one query against the configured folder.

    Attributes:
        match_type: Which outcome the search produced
        path: Absolute path of the exact match (EXACT only)
        names: File names of the partial matches, in enumeration order (PARTIAL only)
    """

    model_config = ConfigDict(frozen=True)

    match_type: MatchType = Field(..., description="Search outcome")
    path: Optional[str] = Field(None, description="Absolute path of the exact match")
    names: List[str] = Field(default_factory=list, description="Partial match file names")

    @field_validator('match_type', mode='before')
    @classmethod
    def validate_match_type(cls, v) -> MatchType:
        """Ensure match_type is MatchType enum."""
        if isinstance(v, str):
            try:
                return MatchType(v)
            except ValueError:
                raise ValueError(f"Invalid match type: {v}")
        return v

    @model_validator(mode='after')
    def validate_result(self):
        """Validate that the payload fits the match type."""
        if self.match_type == MatchType.EXACT and not self.path:
            raise ValueError("Exact match requires a path")
        if self.match_type != MatchType.EXACT and self.path is not None:
            raise ValueError("Only exact matches carry a path")
        if self.match_type == MatchType.PARTIAL and not self.names:
            raise ValueError("Partial match requires at least one name")
        if self.match_type != MatchType.PARTIAL and self.names:
            raise ValueError("Only partial matches carry names")
        return self

    @classmethod
    def exact(cls, path: str) -> 'MatchResult':
        return cls(match_type=MatchType.EXACT, path=path)

    @classmethod
    def partial(cls, names: List[str]) -> 'MatchResult':
        return cls(match_type=MatchType.PARTIAL, names=list(names))

    @classmethod
    def none(cls) -> 'MatchResult':
        return cls(match_type=MatchType.NONE)

    @classmethod
    def no_folder(cls) -> 'MatchResult':
        return cls(match_type=MatchType.NO_FOLDER)

    def is_exact(self) -> bool:
        return self.match_type == MatchType.EXACT

    def get_display_items(self) -> List[str]:
        """
        Get the strings the results list should show.

        Returns:
            Partial match names, the browser sentinel when nothing matched,
            or an empty list for exact hits and missing folders
        """
        if self.match_type == MatchType.PARTIAL:
            return list(self.names)
        if self.match_type == MatchType.NONE:
            return [BROWSER_ITEM_TEXT]
        return []

    def get_filename(self) -> Optional[str]:
        """Get the file name of the exact match."""
        return Path(self.path).name if self.path else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the match result to dictionary representation."""
        data = self.model_dump()
        data['match_type'] = self.match_type.value
        data['items'] = self.get_display_items()
        return data

    def __str__(self) -> str:
        if self.match_type == MatchType.EXACT:
            return f"Exact match: {self.path}"
        if self.match_type == MatchType.PARTIAL:
            return f"Found {len(self.names)} partial matches"
        if self.match_type == MatchType.NONE:
            return "No matches"
        return "No folder configured"


class ResultView(BaseModel):
    """
    Snapshot of the results list as currently displayed.

    Attributes:
        items: Strings shown in the list, top to bottom
        selected: Currently selected item, if any
        visible: Whether the list is shown
    """

    model_config = ConfigDict(frozen=True)

    items: List[str] = Field(default_factory=list, description="Displayed items")
    selected: Optional[str] = Field(None, description="Selected item")
    visible: bool = Field(False, description="Whether the list is visible")

    def is_browser_only(self) -> bool:
        """Check if the only visible item is the selected browser sentinel."""
        return (
            self.visible
            and len(self.items) == 1
            and self.selected == BROWSER_ITEM_TEXT
        )
