"""Interaction and presentation logic for an image viewer: selection, scrolling, clicks, image chains and info text."""

__version__ = "0.1.0"