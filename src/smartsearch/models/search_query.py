"""
Search query data model for SmartSearch.

This module defines the query built from the search box contents on every
keystroke.
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_PARTIAL_RESULTS = 10


class SearchQuery(BaseModel):
    """
    Represents the trimmed text of the search box.

    Attributes:
        text: Search box contents with surrounding whitespace removed
        max_results: Maximum number of partial matches to list (default: 10)
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Trimmed search box text")
    max_results: int = Field(MAX_PARTIAL_RESULTS, gt=0, description="Maximum number of partial matches")

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate and normalize the search query text."""
        if not v or not v.strip():
            raise ValueError("Search query text cannot be empty")
        return v.strip()

    @staticmethod
    def is_blank(raw_text: str) -> bool:
        """Check if raw search box text is empty or whitespace only."""
        return not raw_text or not raw_text.strip()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the search query to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchQuery':
        """Create a SearchQuery instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        return f"Query: '{self.text}' | Max results: {self.max_results}"
