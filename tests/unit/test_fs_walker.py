"""
Unit tests for the filesystem walker module.

Tests enumeration order, exact, partial and by-name lookups and error
handling of the FSWalker class.
"""

import os
import tempfile
import shutil
from pathlib import Path
from unittest.mock import patch
import pytest

from smartsearch.tools.fs_walker import FSWalker


class TestFSWalker:
    """Test cases for the FSWalker class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_root = Path(self.temp_dir)
        self._create_test_structure()
        self.walker = FSWalker(self.test_root)

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _create_test_structure(self):
        """Create a test directory structure with various file types."""
        test_files = [
            "notes.txt",
            "Budget.xlsx",
            "docs/report.pdf",
            "docs/readme.md",
            "docs/archive/report-2023.pdf",
            "src/main.py",
            "src/utils.py",
        ]

        for file_path in test_files:
            full_path = self.test_root / file_path
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(f"Content of {file_path}")

    def test_iter_files_enumeration_order(self):
        """Files of a directory come before its subdirectories, all sorted."""
        names = [p.relative_to(self.test_root).as_posix() for p in self.walker.iter_files()]

        assert names == [
            "Budget.xlsx",
            "notes.txt",
            "docs/readme.md",
            "docs/report.pdf",
            "docs/archive/report-2023.pdf",
            "src/main.py",
            "src/utils.py",
        ]

    def test_iter_files_missing_root(self):
        walker = FSWalker(self.test_root / "missing")

        assert walker.root_exists() is False
        assert list(walker.iter_files()) == []

    def test_find_exact_ignores_extension_and_case(self):
        match = self.walker.find_exact("REPORT")

        assert match == self.test_root / "docs" / "report.pdf"

    def test_find_exact_requires_whole_stem(self):
        assert self.walker.find_exact("repo") is None
        assert self.walker.find_exact("report.pdf") is None

    def test_find_exact_strips_only_last_extension(self):
        (self.test_root / "backup.tar.gz").write_text("x")

        assert self.walker.find_exact("backup.tar") == self.test_root / "backup.tar.gz"
        assert self.walker.find_exact("backup") is None

    def test_find_partial_returns_names_only(self):
        names = self.walker.find_partial("report")

        assert names == ["report.pdf", "report-2023.pdf"]

    def test_find_partial_matches_extension_case_insensitively(self):
        assert self.walker.find_partial(".PY") == ["main.py", "utils.py"]

    def test_find_partial_respects_limit(self):
        for i in range(1, 13):
            (self.test_root / f"a{i}.log").write_text("x")

        names = self.walker.find_partial("a", limit=10)

        assert len(names) == 10

    def test_find_partial_no_matches(self):
        assert self.walker.find_partial("zzz") == []

    def test_find_by_name(self):
        assert self.walker.find_by_name("readme.md") == self.test_root / "docs" / "readme.md"
        assert self.walker.find_by_name("README.md") is None
        assert self.walker.find_by_name("missing.md") is None

    def test_find_by_name_returns_first_in_order(self):
        (self.test_root / "src" / "readme.md").write_text("x")

        assert self.walker.find_by_name("readme.md") == self.test_root / "docs" / "readme.md"

    def test_walk_errors_are_counted_not_raised(self):
        def failing_walk(top, onerror=None):
            onerror(PermissionError(13, "Permission denied", str(top)))
            return iter([])

        with patch('smartsearch.tools.fs_walker.os.walk', side_effect=failing_walk):
            assert self.walker.find_partial("report") == []

        assert self.walker.get_stats()['errors'] == 1

    def test_strict_walker_raises_on_unreadable_directory(self):
        real_scandir = os.scandir

        def scandir(path='.'):
            if Path(path).name == "docs":
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        walker = FSWalker(self.test_root, strict=True)
        with patch('os.scandir', side_effect=scandir):
            with pytest.raises(PermissionError):
                walker.find_partial("report")

        assert walker.get_stats()['errors'] == 1

    def test_dotfile_keeps_whole_name_as_stem(self):
        (self.test_root / ".bashrc").write_text("x")

        assert self.walker.find_exact(".BASHRC") == self.test_root / ".bashrc"
        assert self.walker.find_exact("") is None

    def test_stats(self):
        list(self.walker.iter_files())
        stats = self.walker.get_stats()

        assert stats['files_scanned'] == 7
        assert stats['directories_traversed'] == 4
        assert stats['errors'] == 0

    def test_each_lookup_rescans(self):
        """Files added after a lookup are seen by the next one."""
        assert self.walker.find_exact("later") is None

        (self.test_root / "later.txt").write_text("x")

        assert self.walker.find_exact("later") == self.test_root / "later.txt"
