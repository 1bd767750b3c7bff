"""
LyricSnap backend package.

Searches Genius for songs, scrapes the lyrics of a selected song into clean
plain text and exposes both through a FastAPI service consumed by the
front-end, which lets the user pick a few consecutive lines to export.
"""

from .main import create_app

__all__ = ["create_app"]
