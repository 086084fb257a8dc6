"""
Filesystem and system tools for SmartSearch.

This module contains the directory walker used for matching and the launchers
that hand files and URLs to the operating system.
"""
