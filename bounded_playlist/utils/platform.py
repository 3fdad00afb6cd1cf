"""Platform-specific paths."""

import os
import sys
from pathlib import Path

APP_NAME = 'bounded-playlist'


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32' or os.name == 'nt'


def is_macos() -> bool:
    return sys.platform == 'darwin'


def get_config_dir() -> Path:
    """Get the configuration directory based on the platform.

    Returns:
        Path: Configuration directory path
            - Windows: %APPDATA%/bounded-playlist
            - macOS: ~/Library/Application Support/bounded-playlist
            - Linux: $XDG_CONFIG_HOME/bounded-playlist (~/.config by default)
    """
    if is_windows():
        base = Path(os.environ.get('APPDATA', Path.home()))
    elif is_macos():
        base = Path.home() / 'Library' / 'Application Support'
    else:
        base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return base / APP_NAME
