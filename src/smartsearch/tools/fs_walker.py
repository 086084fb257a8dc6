"""
Filesystem walker for SmartSearch.

This module enumerates every file under the search folder and implements the
three lookups the search box needs: exact name (extension ignored), partial
name and literal file name. Each lookup walks the tree from scratch; nothing
is cached between calls.
"""

import os
from itertools import islice
from pathlib import Path
from typing import Dict, List, Optional, Iterator, Union
import logging


logger = logging.getLogger(__name__)


class FSWalker:
    """
    Filesystem walker for a single root folder.

    Enumeration is top-down: the files of a directory come before the
    contents of its subdirectories, and both are visited in lexicographic
    order. Unreadable directories are logged and skipped, unless the walker
    is strict, in which case the first one aborts the walk with its OSError.
    """

    def __init__(self, root: Union[str, Path], strict: bool = False):
        """
        Initialize the filesystem walker.

        Args:
            root: Folder to enumerate recursively
            strict: Raise on the first unreadable directory instead of skipping it
        """
        self.root = Path(root)
        self.strict = strict
        self._stats = {
            'files_scanned': 0,
            'directories_traversed': 0,
            'errors': 0
        }

    def root_exists(self) -> bool:
        """Check if the root folder exists and is a directory."""
        return self.root.is_dir()

    def iter_files(self) -> Iterator[Path]:
        """
        Walk the root folder and yield the path of every file.

        Yields:
            File paths in enumeration order
        """
        if not self.root_exists():
            logger.warning(f"Root directory does not exist: {self.root}")
            return

        for current_dir, subdirs, files in os.walk(self.root, onerror=self._on_walk_error):
            current_path = Path(current_dir)
            self._stats['directories_traversed'] += 1
            subdirs.sort()

            for filename in sorted(files):
                self._stats['files_scanned'] += 1
                yield current_path / filename

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(f"Error walking directory {getattr(error, 'filename', self.root)}: {error}")
        self._stats['errors'] += 1
        if self.strict:
            raise error

    def find_exact(self, query: str) -> Optional[Path]:
        """
        Find the first file whose name without extension equals the query.

        Only the last extension is dropped, and a dotfile such as ``.bashrc``
        keeps its whole name.

        Args:
            query: Text to compare, case-insensitively

        Returns:
            Path of the first matching file, or None
        """
        folded = query.casefold()
        for file_path in self.iter_files():
            if file_path.stem.casefold() == folded:
                logger.debug(f"Exact match for '{query}': {file_path}")
                return file_path
        return None

    def find_partial(self, query: str, limit: int = 10) -> List[str]:
        """
        Find file names that contain the query.

        Args:
            query: Substring to look for, case-insensitively
            limit: Maximum number of names to return

        Returns:
            Up to ``limit`` file names (without directories) in enumeration order
        """
        folded = query.casefold()
        matches = (
            file_path.name
            for file_path in self.iter_files()
            if folded in file_path.name.casefold()
        )
        names = list(islice(matches, limit))
        logger.debug(f"Partial matches for '{query}': {len(names)}")
        return names

    def find_by_name(self, filename: str) -> Optional[Path]:
        """
        Find the first file with exactly the given name.

        Args:
            filename: File name including extension

        Returns:
            Path of the first file with that name, or None
        """
        for file_path in self.iter_files():
            if file_path.name == filename:
                return file_path
        return None

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the filesystem walking operations.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()
