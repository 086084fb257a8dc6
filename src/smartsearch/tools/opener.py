"""
System launchers for SmartSearch.

Opens files and folders with the platform's default association and web
searches in the default browser. Launches are fire-and-forget; a failure to
start raises LaunchError and is never retried.
"""

import os
import subprocess
import sys
import webbrowser
from pathlib import Path
from typing import List, Union
import logging


logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when a file, folder or URL cannot be handed to the system."""
    pass


def _open_command(target: str) -> List[str]:
    if sys.platform == "darwin":
        return ["open", target]
    return ["xdg-open", target]


class SystemOpener:
    """Hands paths and URLs to the operating system."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def open_path(self, path: Union[str, Path]) -> None:
        """
        Open a file or folder with its default application.

        Args:
            path: Absolute path to open

        Raises:
            LaunchError: If the system launcher could not be started
        """
        target = str(path)
        self.logger.info(f"Opening {target}")
        try:
            if sys.platform == "win32":
                os.startfile(target)  # type: ignore[attr-defined]
                return
            with open(os.devnull, "wb") as devnull:
                subprocess.Popen(
                    _open_command(target),
                    stdout=devnull, stderr=devnull, stdin=devnull,
                    start_new_session=True
                )
        except OSError as e:
            self.logger.error(f"Failed to open {target}: {e}")
            raise LaunchError(f"Unable to open {target}: {e}") from e

    def open_url(self, url: str) -> None:
        """
        Open a URL in the default browser.

        Raises:
            LaunchError: If no browser could be started
        """
        self.logger.info(f"Opening URL {url}")
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as e:
            self.logger.error(f"Failed to open {url}: {e}")
            raise LaunchError(f"Unable to launch browser: {e}") from e
        if not opened:
            self.logger.error(f"No browser accepted {url}")
            raise LaunchError("Unable to launch browser")
