"""Lanczos image resizing, script effect settings and shortcut capture for a raster paint program."""

__version__ = "0.1.1"