"""
Event handlers for the search window.

Each handler is a plain function of the search box text, the results list
snapshot and the current settings. It returns the actions to carry out and
performs no side effects apart from reading the filesystem.
"""

from typing import List, Optional
import logging

from ..models.actions import (
    Action,
    ExitApplication,
    HideResults,
    OpenBrowserSearch,
    OpenFile,
    OpenFolder,
    RequestFolderSelection,
    ResetSearch,
    ShowResults,
    UpdateSettings,
)
from ..models.search_query import SearchQuery
from ..models.search_results import BROWSER_ITEM_TEXT, MatchType, ResultView
from ..models.settings import Settings
from . import matcher


logger = logging.getLogger(__name__)


def on_text_changed(text: str, settings: Settings) -> List[Action]:
    """
    Handle a change of the search box text.

    Blank text or a missing folder hides the list. An exact hit is opened
    straight away and the search is reset. Otherwise the partial matches, or
    the browser sentinel, are shown.
    """
    if SearchQuery.is_blank(text) or not settings.has_folder():
        return [HideResults()]

    query = SearchQuery(text=text)
    result = matcher.search(query, settings.folder_path)
    logger.debug(f"{query}: {result}")

    if result.match_type == MatchType.EXACT:
        logger.info(f"Exact match for '{query.text}': {result.get_filename()}")
        return [OpenFile(path=result.path), ResetSearch()]
    if result.match_type == MatchType.NO_FOLDER:
        return [HideResults()]
    return [ShowResults(items=result.get_display_items())]


def on_enter(text: str, view: ResultView) -> List[Action]:
    """
    Handle the Enter key.

    Only the browser sentinel, shown alone and selected, is committed by
    Enter; everything else is ignored.
    """
    query = text.strip()
    if not query:
        return []
    if view.is_browser_only():
        return [OpenBrowserSearch(query=query), ResetSearch()]
    return []


def on_double_click(selected: Optional[str], text: str, settings: Settings) -> List[Action]:
    """
    Handle a double-click on a results list item.

    The sentinel runs a web search for the current text. A file name is
    looked up again under the folder and the first file with that name is
    opened. The search is reset afterwards in both cases.
    """
    if selected is None:
        return []

    actions: List[Action] = []
    if selected == BROWSER_ITEM_TEXT:
        actions.append(OpenBrowserSearch(query=text.strip()))
    elif selected and settings.has_folder():
        full_path = matcher.resolve_name(selected, settings.folder_path)
        if full_path is not None:
            actions.append(OpenFile(path=str(full_path)))
        else:
            logger.info(f"'{selected}' no longer exists under {settings.folder_path}")

    actions.append(ResetSearch())
    return actions


def on_escape() -> List[Action]:
    return [ExitApplication()]


def on_exit() -> List[Action]:
    return [ExitApplication()]


def on_open_custom_folder(settings: Settings) -> List[Action]:
    """Open the search folder, or offer to choose one if it is missing."""
    if settings.has_folder():
        return [OpenFolder(path=settings.folder_path)]
    return [RequestFolderSelection(mandatory=False, confirm=True)]


def on_change_folder() -> List[Action]:
    return [RequestFolderSelection(mandatory=False)]


def on_folder_chosen(settings: Settings, chosen: Optional[str], mandatory: bool) -> List[Action]:
    """
    Handle the outcome of the folder picker.

    Args:
        settings: Current settings
        chosen: Selected folder, or None if the picker was cancelled
        mandatory: Whether a folder had to be chosen (first run)
    """
    if chosen and chosen.strip():
        return [UpdateSettings(settings=settings.with_folder(chosen))]
    if mandatory:
        return [ExitApplication()]
    return []


def on_theme_toggled(settings: Settings, light: bool) -> List[Action]:
    return [UpdateSettings(settings=settings.with_dark_theme(not light))]


def on_taskbar_toggled(settings: Settings, show: bool) -> List[Action]:
    return [UpdateSettings(settings=settings.with_show_in_taskbar(show))]


def startup_actions(settings: Settings) -> List[Action]:
    """Force a folder choice on first run or when the saved folder is gone."""
    if settings.has_folder():
        return []
    return [RequestFolderSelection(mandatory=True)]
