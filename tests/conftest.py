"""Shared fixtures for Bounded Playlist tests."""

import pytest

from bounded_playlist.models.playlist import PlayList
from bounded_playlist.models.track import Track


def make_playlist(durations, max_size=None):
    """Build a playlist with tracks t0, t1, ... of the given durations."""
    playlist = PlayList(len(durations) if max_size is None else max_size)
    for i, duration in enumerate(durations):
        assert playlist.append(Track(f"t{i}", duration))
    return playlist


def durations_of(playlist):
    return [track.duration for track in playlist]


def titles_of(playlist):
    return [track.title for track in playlist]


@pytest.fixture
def sample_durations():
    return [7, 1, 6, 7, 5, 8, 7]


@pytest.fixture
def sample_playlist(sample_durations):
    """Seven tracks t0..t6 in a playlist with room for three more."""
    return make_playlist(sample_durations, max_size=10)
