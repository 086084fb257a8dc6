"""
UI actions for SmartSearch.

Event handlers never touch the window, the filesystem launcher or the settings
file directly. They return a list of the actions below, which the dispatcher
then carries out in order.
"""

from typing import List, Union
from urllib.parse import quote
from pydantic import BaseModel, ConfigDict, Field

from .settings import Settings


BROWSER_SEARCH_URL = "https://www.google.com/search?q="


class UIAction(BaseModel):
    """Base class for all actions produced by event handlers."""

    model_config = ConfigDict(frozen=True)


class ShowResults(UIAction):
    """Fill the results list with ``items``, select the first and show it."""
    items: List[str] = Field(..., min_length=1, description="Items to display")


class HideResults(UIAction):
    """Clear and hide the results list."""


class ResetSearch(UIAction):
    """Hide the results list and clear the search box."""


class OpenFile(UIAction):
    """Open a file with the system default handler."""
    path: str = Field(..., min_length=1, description="Absolute file path")


class OpenFolder(UIAction):
    """Open a folder in the system file manager."""
    path: str = Field(..., min_length=1, description="Absolute folder path")


class OpenBrowserSearch(UIAction):
    """Run a web search for ``query`` in the default browser."""
    query: str = Field(..., description="Text to search for")

    @property
    def url(self) -> str:
        return build_search_url(self.query)


class RequestFolderSelection(UIAction):
    """
    Ask the user to pick the search folder.

    Attributes:
        mandatory: Cancelling exits the application
        confirm: Ask for confirmation before showing the picker
    """
    mandatory: bool = Field(False, description="Exit if the user cancels")
    confirm: bool = Field(False, description="Confirm before picking")


class UpdateSettings(UIAction):
    """Replace the current settings, persist them and re-apply them to the window."""
    settings: Settings


class ExitApplication(UIAction):
    """Terminate the application."""


Action = Union[
    ShowResults,
    HideResults,
    ResetSearch,
    OpenFile,
    OpenFolder,
    OpenBrowserSearch,
    RequestFolderSelection,
    UpdateSettings,
    ExitApplication,
]


def build_search_url(query: str) -> str:
    """
    Build the web search URL for a query.

    Args:
        query: Search text, percent-encoded in full (spaces become %20)

    Returns:
        Google search URL
    """
    return BROWSER_SEARCH_URL + quote(query, safe='')
