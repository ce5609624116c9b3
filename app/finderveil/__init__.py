"""finderveil - hide non-Apple applications from Finder on macOS."""

__version__ = "2.0.0"
