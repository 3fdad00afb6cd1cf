"""Data models for Bounded Playlist."""

from .playlist import PlayList
from .track import Track

__all__ = ["PlayList", "Track"]
