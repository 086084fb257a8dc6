"""
Floating search window for SmartSearch.

A frameless, translucent, draggable window holding the search box and the
results list. It forwards its events to the Dispatcher and implements the
view calls the dispatcher makes back.
"""

from typing import List, Optional
import logging

from PyQt5.QtCore import Qt, QPoint, QPropertyAnimation, QEasingCurve, pyqtSignal
from PyQt5.QtGui import QCursor
from PyQt5.QtWidgets import (
    QApplication, QWidget, QFrame, QVBoxLayout, QHBoxLayout, QLineEdit,
    QListWidget, QCheckBox, QMenu, QAction, QMessageBox, QFileDialog
)

from ..models.search_results import ResultView
from ..models.settings import Settings
from .themes import theme_for, window_qss


logger = logging.getLogger(__name__)


HOVER_EDGE_THRESHOLD = 12
OPACITY_HOVER = 0.9
OPACITY_IDLE = 0.4
OPACITY_ANIM_MS = 200
WINDOW_WIDTH = 420


class SearchLineEdit(QLineEdit):
    """
    Search box that reports Enter and Escape as signals.
    """
    enterPressed = pyqtSignal(); escapePressed = pyqtSignal()

    def keyPressEvent(self, e):
        k = e.key()
        if k in (Qt.Key_Return, Qt.Key_Enter):
            self.enterPressed.emit(); e.accept(); return
        if k == Qt.Key_Escape:
            self.escapePressed.emit(); e.accept(); return
        super().keyPressEvent(e)


class SearchWindow(QWidget):
    """
    The quick-launcher window.
    """
    def __init__(self):
        super().__init__()
        self.dispatcher = None
        self._settings = Settings()
        self._drag_offset: Optional[QPoint] = None

        self.setWindowTitle("SmartSearch")
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint | Qt.Tool)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setMouseTracking(True)
        self.setFixedWidth(WINDOW_WIDTH)

        self.main_border = QFrame(self)
        self.main_border.setObjectName("MainBorder")
        self.main_border.setMouseTracking(True)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(self.main_border)

        self.search_box = SearchLineEdit()
        self.search_box.setPlaceholderText("Search…")
        self.search_box.setContextMenuPolicy(Qt.CustomContextMenu)

        self.topmost_toggle = QCheckBox("Pin")
        self.topmost_toggle.setChecked(True)
        self.topmost_toggle.setFocusPolicy(Qt.NoFocus)

        self.results_list = QListWidget()
        self.results_list.setVisible(False)
        self.results_list.setFocusPolicy(Qt.NoFocus)
        self.results_list.setMaximumHeight(240)

        row = QHBoxLayout()
        row.addWidget(self.search_box, 1)
        row.addWidget(self.topmost_toggle)
        layout = QVBoxLayout(self.main_border)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)
        layout.addLayout(row)
        layout.addWidget(self.results_list)

        self.search_box.textChanged.connect(self._on_text_changed)
        self.search_box.enterPressed.connect(self._on_enter)
        self.search_box.escapePressed.connect(self._on_escape)
        self.search_box.customContextMenuRequested.connect(self._show_context_menu)
        self.results_list.itemDoubleClicked.connect(self._on_item_double_clicked)
        self.topmost_toggle.toggled.connect(self._on_topmost_toggled)

        self._opacity_anim = QPropertyAnimation(self, b"windowOpacity", self)
        self._opacity_anim.setDuration(OPACITY_ANIM_MS)
        self._opacity_anim.setEasingCurve(QEasingCurve.InOutQuad)
        self.setWindowOpacity(OPACITY_HOVER)

    def bind(self, dispatcher) -> None:
        self.dispatcher = dispatcher

    # ------------------------------------------------------------------
    # Events forwarded to the dispatcher
    # ------------------------------------------------------------------
    def _on_text_changed(self, text: str):
        if self.dispatcher:
            self.dispatcher.handle_text_changed(text)

    def _on_enter(self):
        if self.dispatcher:
            self.dispatcher.handle_enter(self.search_box.text(), self.result_view())

    def _on_escape(self):
        if self.dispatcher:
            self.dispatcher.handle_escape()

    def _on_item_double_clicked(self, item):
        if self.dispatcher:
            selected = item.text() if item is not None else None
            self.dispatcher.handle_double_click(selected, self.search_box.text())

    def keyPressEvent(self, e):
        if e.key() == Qt.Key_Escape:
            self._on_escape(); e.accept(); return
        super().keyPressEvent(e)

    def result_view(self) -> ResultView:
        """Snapshot of the results list for the Enter handler."""
        items = [self.results_list.item(i).text() for i in range(self.results_list.count())]
        current = self.results_list.currentItem()
        return ResultView(
            items=items,
            selected=current.text() if current is not None else None,
            visible=self.results_list.isVisible()
        )

    # ------------------------------------------------------------------
    # Context menu
    # ------------------------------------------------------------------
    def _show_context_menu(self, pos):
        if not self.dispatcher:
            return
        menu = QMenu(self)

        open_folder = QAction("Open Custom Folder", menu)
        open_folder.triggered.connect(lambda: self.dispatcher.handle_open_custom_folder())
        menu.addAction(open_folder)

        change_folder = QAction("Change Search Folder", menu)
        change_folder.triggered.connect(lambda: self.dispatcher.handle_change_folder())
        menu.addAction(change_folder)

        menu.addSeparator()

        light_theme = QAction("Light Theme", menu)
        light_theme.setCheckable(True)
        light_theme.setChecked(not self._settings.dark_theme)
        light_theme.toggled.connect(self.dispatcher.handle_theme_toggled)
        menu.addAction(light_theme)

        taskbar = QAction("Show In Taskbar", menu)
        taskbar.setCheckable(True)
        taskbar.setChecked(self._settings.show_in_taskbar)
        taskbar.toggled.connect(self.dispatcher.handle_taskbar_toggled)
        menu.addAction(taskbar)

        menu.addSeparator()

        exit_action = QAction("Exit", menu)
        exit_action.triggered.connect(lambda: self.dispatcher.handle_exit())
        menu.addAction(exit_action)

        menu.exec_(self.search_box.mapToGlobal(pos))

    # ------------------------------------------------------------------
    # View calls made by the dispatcher
    # ------------------------------------------------------------------
    def show_results(self, items: List[str]) -> None:
        self.results_list.clear()
        self.results_list.addItems(items)
        self.results_list.setCurrentRow(0)
        self.results_list.setVisible(True)
        self.adjustSize()

    def hide_results(self) -> None:
        self.results_list.clear()
        self.results_list.setVisible(False)
        self.adjustSize()

    def reset_search(self) -> None:
        self.results_list.setVisible(False)
        self.search_box.clear()
        self.adjustSize()

    def show_error(self, message: str, title: str) -> None:
        QMessageBox.warning(self, title, message)

    def confirm(self, message: str, title: str) -> bool:
        answer = QMessageBox.question(self, title, message, QMessageBox.Yes | QMessageBox.No)
        return answer == QMessageBox.Yes

    def choose_folder(self, title: str) -> Optional[str]:
        start = self._settings.folder_path or ""
        folder = QFileDialog.getExistingDirectory(self, title, start)
        return folder or None

    def apply_settings(self, settings: Settings) -> None:
        self._settings = settings
        self.setStyleSheet(window_qss(theme_for(settings.dark_theme)))
        self._set_window_flag(Qt.Tool, not settings.show_in_taskbar)

    def quit(self) -> None:
        app = QApplication.instance()
        if app is not None:
            app.quit()

    # ------------------------------------------------------------------
    # Window chrome
    # ------------------------------------------------------------------
    def _set_window_flag(self, flag, on: bool) -> None:
        if bool(self.windowFlags() & flag) == on:
            return
        was_visible = self.isVisible()
        self.setWindowFlag(flag, on)
        if was_visible:
            self.show()

    def _on_topmost_toggled(self, checked: bool):
        self._set_window_flag(Qt.WindowStaysOnTopHint, checked)

    def _near_edge(self, pos: QPoint) -> bool:
        t = HOVER_EDGE_THRESHOLD
        return (
            pos.x() <= t or pos.x() >= self.width() - t
            or pos.y() <= t or pos.y() >= self.height() - t
        )

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._drag_offset = event.globalPos() - self.frameGeometry().topLeft()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._drag_offset is not None and event.buttons() & Qt.LeftButton:
            self.move(event.globalPos() - self._drag_offset)
            event.accept()
            return
        if self._near_edge(event.pos()):
            self.setCursor(QCursor(Qt.SizeAllCursor))
        else:
            self.unsetCursor()
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        self._drag_offset = None
        super().mouseReleaseEvent(event)

    def enterEvent(self, event):
        self._animate_opacity(OPACITY_HOVER)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.unsetCursor()
        self._animate_opacity(OPACITY_IDLE)
        super().leaveEvent(event)

    def _animate_opacity(self, target: float):
        self._opacity_anim.stop()
        self._opacity_anim.setStartValue(self.windowOpacity())
        self._opacity_anim.setEndValue(target)
        self._opacity_anim.start()
