"""
Unit tests for the search window event handlers.

The handlers are pure functions of text, results view and settings, so they
are tested without any UI.
"""

import tempfile
import shutil
from pathlib import Path

from smartsearch.core import controller
from smartsearch.models.actions import (
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
from smartsearch.models.search_results import BROWSER_ITEM_TEXT, ResultView
from smartsearch.models.settings import Settings


class TestTextChanged:
    """Test cases for on_text_changed."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)
        for name in ["report.pdf", "reports-2023.xlsx", "todo.txt"]:
            (self.root / name).write_text(name)
        self.settings = Settings(folder_path=self.temp_dir)

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_blank_text_hides_results(self):
        for text in ("", "   ", "\t\n"):
            assert controller.on_text_changed(text, self.settings) == [HideResults()]

    def test_blank_text_hides_results_without_folder(self):
        assert controller.on_text_changed("  ", Settings()) == [HideResults()]

    def test_missing_folder_hides_results(self):
        settings = Settings(folder_path=self.temp_dir + "/gone")
        assert controller.on_text_changed("report", settings) == [HideResults()]

    def test_exact_match_opens_and_resets(self):
        actions = controller.on_text_changed("  Report ", self.settings)

        assert actions == [OpenFile(path=str(self.root / "report.pdf")), ResetSearch()]

    def test_partial_matches_are_shown(self):
        actions = controller.on_text_changed("repo", self.settings)

        assert actions == [ShowResults(items=["report.pdf", "reports-2023.xlsx"])]

    def test_no_matches_shows_sentinel(self):
        actions = controller.on_text_changed("holiday photos", self.settings)

        assert actions == [ShowResults(items=[BROWSER_ITEM_TEXT])]


class TestEnter:
    """Test cases for on_enter."""

    def setup_method(self):
        self.browser_view = ResultView(
            items=[BROWSER_ITEM_TEXT], selected=BROWSER_ITEM_TEXT, visible=True
        )

    def test_enter_on_sentinel_searches_web_and_resets(self):
        actions = controller.on_enter(" best pizza ", self.browser_view)

        assert actions == [OpenBrowserSearch(query="best pizza"), ResetSearch()]
        assert actions[0].url == "https://www.google.com/search?q=best%20pizza"

    def test_enter_with_blank_text_does_nothing(self):
        assert controller.on_enter("   ", self.browser_view) == []

    def test_enter_on_file_list_does_nothing(self):
        view = ResultView(items=["a.txt"], selected="a.txt", visible=True)
        assert controller.on_enter("a", view) == []

    def test_enter_with_hidden_list_does_nothing(self):
        assert controller.on_enter("a", ResultView()) == []


class TestDoubleClick:
    """Test cases for on_double_click."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)
        (self.root / "nested").mkdir()
        (self.root / "nested" / "slides.pptx").write_text("x")
        self.settings = Settings(folder_path=self.temp_dir)

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_no_selection_does_nothing(self):
        assert controller.on_double_click(None, "sli", self.settings) == []

    def test_sentinel_searches_web_with_current_text(self):
        actions = controller.on_double_click(BROWSER_ITEM_TEXT, " c# tips ", self.settings)

        assert actions == [OpenBrowserSearch(query="c# tips"), ResetSearch()]
        assert actions[0].url == "https://www.google.com/search?q=c%23%20tips"

    def test_file_name_is_resolved_and_opened(self):
        actions = controller.on_double_click("slides.pptx", "sli", self.settings)

        assert actions == [OpenFile(path=str(self.root / "nested" / "slides.pptx")), ResetSearch()]

    def test_vanished_file_only_resets(self):
        actions = controller.on_double_click("deleted.txt", "del", self.settings)
        assert actions == [ResetSearch()]

    def test_missing_folder_only_resets(self):
        actions = controller.on_double_click("slides.pptx", "sli", Settings())
        assert actions == [ResetSearch()]


class TestMenuAndSettingsHandlers:
    """Test cases for exit, folder and toggle handlers."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.settings = Settings(folder_path=self.temp_dir)

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_escape_and_exit(self):
        assert controller.on_escape() == [ExitApplication()]
        assert controller.on_exit() == [ExitApplication()]

    def test_open_custom_folder(self):
        assert controller.on_open_custom_folder(self.settings) == [OpenFolder(path=self.temp_dir)]

    def test_open_custom_folder_when_missing_asks_first(self):
        actions = controller.on_open_custom_folder(Settings())
        assert actions == [RequestFolderSelection(mandatory=False, confirm=True)]

    def test_change_folder(self):
        assert controller.on_change_folder() == [RequestFolderSelection(mandatory=False)]

    def test_folder_chosen_updates_settings(self):
        actions = controller.on_folder_chosen(Settings(dark_theme=False), self.temp_dir, mandatory=True)

        assert actions == [UpdateSettings(settings=Settings(folder_path=self.temp_dir, dark_theme=False))]

    def test_mandatory_cancel_exits(self):
        assert controller.on_folder_chosen(Settings(), None, mandatory=True) == [ExitApplication()]

    def test_optional_cancel_keeps_settings(self):
        assert controller.on_folder_chosen(self.settings, None, mandatory=False) == []
        assert controller.on_folder_chosen(self.settings, "  ", mandatory=False) == []

    def test_theme_toggle(self):
        actions = controller.on_theme_toggled(self.settings, light=True)
        assert actions == [UpdateSettings(settings=self.settings.with_dark_theme(False))]

        actions = controller.on_theme_toggled(self.settings, light=False)
        assert actions[0].settings.dark_theme is True

    def test_taskbar_toggle(self):
        actions = controller.on_taskbar_toggled(self.settings, show=True)
        assert actions == [UpdateSettings(settings=self.settings.with_show_in_taskbar(True))]

    def test_startup_requires_folder(self):
        assert controller.startup_actions(Settings()) == [RequestFolderSelection(mandatory=True)]
        assert controller.startup_actions(self.settings) == []
