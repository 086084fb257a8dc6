"""
Action dispatcher for SmartSearch.

The dispatcher owns the current Settings value and carries out the actions
returned by the event handlers against three collaborators: the search view,
the system opener and the settings parser.
"""

from typing import Iterable, List, Optional, Protocol
import logging

from ..config.parser import ConfigurationError, SettingsParser
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
from ..models.search_results import ResultView
from ..models.settings import Settings
from ..tools.opener import LaunchError, SystemOpener
from . import controller


logger = logging.getLogger(__name__)


class SearchView(Protocol):
    """What the dispatcher needs from the search window."""

    def show_results(self, items: List[str]) -> None: ...

    def hide_results(self) -> None: ...

    def reset_search(self) -> None: ...

    def show_error(self, message: str, title: str) -> None: ...

    def confirm(self, message: str, title: str) -> bool: ...

    def choose_folder(self, title: str) -> Optional[str]: ...

    def apply_settings(self, settings: Settings) -> None: ...

    def quit(self) -> None: ...


class Dispatcher:
    """
    Executes UI actions and keeps the current settings.

    The window forwards its events to the ``handle_*`` methods, which run the
    matching controller function and dispatch the resulting actions.
    """

    FOLDER_DIALOG_TITLE = "Select SmartSearch Folder"

    def __init__(self, view: SearchView, settings: Settings,
                 store: Optional[SettingsParser] = None,
                 opener: Optional[SystemOpener] = None):
        """
        Initialize the dispatcher.

        Args:
            view: Window that renders results and shows dialogs
            settings: Settings loaded at startup
            store: Parser used to persist settings (None disables saving)
            opener: Launcher for files, folders and URLs
        """
        self.view = view
        self.store = store
        self.opener = opener if opener is not None else SystemOpener()
        self._settings = settings
        self._exiting = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def exiting(self) -> bool:
        return self._exiting

    def dispatch(self, actions: Iterable[Action]) -> None:
        """
        Carry out actions in order.

        Nothing runs after an ExitApplication action.
        """
        for action in actions:
            if self._exiting:
                return
            self._execute(action)

    def _execute(self, action: Action) -> None:
        if isinstance(action, ShowResults):
            self.view.show_results(list(action.items))
        elif isinstance(action, HideResults):
            self.view.hide_results()
        elif isinstance(action, ResetSearch):
            self.view.reset_search()
        elif isinstance(action, OpenFile):
            self._launch(lambda: self.opener.open_path(action.path), "Unable to open file.")
        elif isinstance(action, OpenFolder):
            self._launch(lambda: self.opener.open_path(action.path), "Unable to open folder.")
        elif isinstance(action, OpenBrowserSearch):
            self._launch(lambda: self.opener.open_url(action.url), "Unable to launch browser.")
        elif isinstance(action, RequestFolderSelection):
            self._select_folder(action)
        elif isinstance(action, UpdateSettings):
            self._update_settings(action.settings)
        elif isinstance(action, ExitApplication):
            logger.info("Exit requested")
            self._exiting = True
            self.view.quit()
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def _launch(self, launch, error_message: str) -> None:
        try:
            launch()
        except LaunchError as e:
            logger.error(f"{error_message} {e}")
            self.view.show_error(error_message, "Error")

    def _select_folder(self, action: RequestFolderSelection) -> None:
        if action.confirm and not self.view.confirm(
                "Folder not set or missing. Select one?", "Folder Missing"):
            return
        chosen = self.view.choose_folder(self.FOLDER_DIALOG_TITLE)
        self.dispatch(controller.on_folder_chosen(self._settings, chosen, action.mandatory))

    def _update_settings(self, settings: Settings) -> None:
        self._settings = settings
        logger.info(f"Settings changed: {settings}")
        if self.store is not None:
            try:
                self.store.save_settings(settings)
            except ConfigurationError as e:
                logger.warning(f"Settings not saved: {e}")
        self.view.apply_settings(settings)

    # Window events

    def start(self) -> None:
        """Apply the loaded settings and ask for a folder if none is usable."""
        self.view.apply_settings(self._settings)
        self.dispatch(controller.startup_actions(self._settings))

    def handle_text_changed(self, text: str) -> None:
        self.dispatch(controller.on_text_changed(text, self._settings))

    def handle_enter(self, text: str, view: ResultView) -> None:
        self.dispatch(controller.on_enter(text, view))

    def handle_double_click(self, selected: Optional[str], text: str) -> None:
        self.dispatch(controller.on_double_click(selected, text, self._settings))

    def handle_escape(self) -> None:
        self.dispatch(controller.on_escape())

    def handle_exit(self) -> None:
        self.dispatch(controller.on_exit())

    def handle_open_custom_folder(self) -> None:
        self.dispatch(controller.on_open_custom_folder(self._settings))

    def handle_change_folder(self) -> None:
        self.dispatch(controller.on_change_folder())

    def handle_theme_toggled(self, light: bool) -> None:
        self.dispatch(controller.on_theme_toggled(self._settings, light))

    def handle_taskbar_toggled(self, show: bool) -> None:
        self.dispatch(controller.on_taskbar_toggled(self._settings, show))
