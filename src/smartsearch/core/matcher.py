"""
Query matching for SmartSearch.

A search walks the configured folder twice: once for a file whose name without
extension equals the query, and, if there is none, once more for file names
containing the query. A fresh walker is used for every call. The partial scan
is strict: if it reaches an unreadable directory, the query has no partial
matches at all.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..models.search_query import SearchQuery
from ..models.search_results import MatchResult
from ..tools.fs_walker import FSWalker


logger = logging.getLogger(__name__)


def search(query: SearchQuery, root_folder: Optional[Union[str, Path]]) -> MatchResult:
    """
    Match a query against the files under ``root_folder``.

    Args:
        query: Trimmed, non-empty search query
        root_folder: Folder to search; None or a missing folder yields NO_FOLDER

    Returns:
        EXACT with the file path, PARTIAL with up to ``query.max_results``
        names, NONE when nothing matched, or NO_FOLDER
    """
    if not root_folder or not Path(root_folder).is_dir():
        return MatchResult.no_folder()

    exact = FSWalker(root_folder).find_exact(query.text)
    if exact is not None:
        return MatchResult.exact(str(exact))

    walker = FSWalker(root_folder, strict=True)
    try:
        names = walker.find_partial(query.text, limit=query.max_results)
    except OSError as e:
        logger.warning(f"Partial search for '{query.text}' failed: {e}")
        names = []
    logger.debug(f"Partial scan stats: {walker.get_stats()}")

    if names:
        return MatchResult.partial(names)
    return MatchResult.none()


def resolve_name(filename: str, root_folder: Optional[Union[str, Path]]) -> Optional[Path]:
    """
    Find the first file under ``root_folder`` named exactly ``filename``.

    Returns:
        Path of the file, or None if the folder is missing or nothing matches
    """
    if not filename or not root_folder or not Path(root_folder).is_dir():
        return None
    return FSWalker(root_folder).find_by_name(filename)
