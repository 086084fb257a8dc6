"""
PyQt5 user interface for SmartSearch.
"""
