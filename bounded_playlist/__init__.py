"""Bounded Playlist: fixed-capacity ordered track lists."""

from .models.playlist import PlayList
from .models.track import Track

__version__ = "0.1.0"

__all__ = ["PlayList", "Track"]
