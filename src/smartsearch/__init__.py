"""
SmartSearch - Core Package

A floating quick-launcher that finds files by name under a single folder,
opens them with the system default handler, or falls back to a web search.
"""

__version__ = "0.1.0"
__author__ = "SmartSearch Team"
