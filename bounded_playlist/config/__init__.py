"""Configuration module for Bounded Playlist."""

from .settings import LoggingConfig, PlaylistConfig, Settings

__all__ = ["LoggingConfig", "PlaylistConfig", "Settings"]
