"""
Entry point for SmartSearch.

Parses the command line, configures logging, loads settings and runs the
search window.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config.parser import ConfigurationError, SettingsParser
from .core.dispatcher import Dispatcher
from .models.settings import Settings


logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartsearch",
        description="Floating quick-launcher that opens files by name or searches the web."
    )
    parser.add_argument("--config", metavar="PATH",
                        help="settings file to use instead of the per-user default")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log informational messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def load_startup_settings(store: SettingsParser) -> Settings:
    """
    Load settings for startup.

    An unreadable settings file is logged and replaced by defaults.
    """
    try:
        result = store.load_settings()
    except ConfigurationError as e:
        logger.warning(f"{e}; using default settings")
        return Settings()
    for warning in result.warnings:
        logger.info(warning)
    return result.settings


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    store = SettingsParser(args.config)
    settings = load_startup_settings(store)
    logger.info(f"Starting with {settings}")

    from PyQt5.QtWidgets import QApplication
    from .ui.main_window import SearchWindow

    app = QApplication(sys.argv[:1])
    window = SearchWindow()
    dispatcher = Dispatcher(window, settings, store=store)
    window.bind(dispatcher)

    dispatcher.start()
    if dispatcher.exiting:
        return 0

    window.show()
    window.raise_()
    window.activateWindow()
    window.search_box.setFocus()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
