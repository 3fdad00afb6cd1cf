"""Bounded playlist model."""

import logging
from typing import Iterator, List, Optional

from .track import Track

logger = logging.getLogger(__name__)


class PlayList:
    """Ordered list of tracks with a fixed maximum capacity.

    Tracks live in a backing list pre-allocated to ``max_size`` slots.
    Slots ``[0, size)`` hold tracks in playback order; the remaining slots
    hold ``None``. Invalid input never raises: capacity and index problems
    are reported through return values or ignored.
    """

    def __init__(self, max_size: int):
        """Initialize an empty playlist.

        Args:
            max_size: Maximum number of tracks the playlist can hold

        Raises:
            ValueError: If max_size is negative
        """
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")

        self._max_size = max_size
        self._tracks: List[Optional[Track]] = [None] * max_size
        self._size = 0

    def capacity(self) -> int:
        """Return the maximum number of tracks."""
        return self._max_size

    def length(self) -> int:
        """Return the current number of tracks."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._max_size

    def get(self, index: int) -> Optional[Track]:
        """Get the track at index, or None if the index is out of range."""
        if 0 <= index < self._size:
            return self._tracks[index]
        return None

    def append(self, track: Track) -> bool:
        """Append a track to the end of the playlist.

        Args:
            track: Track to append

        Returns:
            True if the track was added, False if the playlist is full
        """
        if self.is_full():
            logger.debug(f"Playlist full ({self._max_size}), rejected '{track.title}'")
            return False

        self._tracks[self._size] = track
        self._size += 1
        return True

    def insert_at(self, index: int, track: Track) -> bool:
        """Insert a track at the given index.

        Tracks at ``[index, size)`` move one slot to the right. An index at
        or past the end of the playlist appends the track.

        Args:
            index: Position for the new track
            track: Track to insert

        Returns:
            True if the track was inserted, False if index is negative
            or the playlist is full
        """
        if index < 0 or self.is_full():
            logger.debug(f"Cannot insert '{track.title}' at index {index}")
            return False

        if self._size == 0 or index >= self._size:
            return self.append(track)

        for i in range(self._size - 1, index - 1, -1):
            self._tracks[i + 1] = self._tracks[i]

        self._tracks[index] = track
        self._size += 1
        return True

    def remove_last(self) -> None:
        """Remove the last track. Does nothing if the playlist is empty."""
        if self._size == 0:
            return

        self._size -= 1
        self._tracks[self._size] = None

    def remove_at(self, index: int) -> None:
        """Remove the track at index, closing the gap.

        Does nothing if the playlist is empty or the index is out of range.
        """
        if self._size == 0 or index < 0 or index >= self._size:
            logger.debug(f"Ignoring removal at index {index} (size {self._size})")
            return

        for i in range(index, self._size - 1):
            self._tracks[i] = self._tracks[i + 1]

        self._size -= 1
        self._tracks[self._size] = None

    def remove_by_title(self, title: str) -> None:
        """Remove the first track whose title matches (case-insensitive)."""
        self.remove_at(self.index_of_title(title))

    def remove_first(self) -> None:
        self.remove_at(0)

    def extend(self, other: 'PlayList') -> None:
        """Append all tracks of another playlist, in order.

        Nothing is added if the combined size exceeds this playlist's
        capacity.

        Args:
            other: Playlist whose tracks are appended
        """
        if self._size + other._size > self._max_size:
            logger.debug(
                f"Cannot extend: {self._size} + {other._size} exceeds capacity {self._max_size}"
            )
            return

        # Snapshot first so extending a playlist with itself terminates
        for track in list(other):
            self.append(track)

    def index_of_title(self, title: str) -> int:
        """Find the first track with the given title.

        Args:
            title: Title to look for (case-insensitive, exact match)

        Returns:
            Index of the first matching track, or -1 if not found
        """
        for i in range(self._size):
            if self._tracks[i].matches_title(title):
                return i
        return -1

    def total_duration(self) -> int:
        """Return the total duration of all tracks, in seconds."""
        return sum(track.duration for track in self)

    def min_index_from(self, start: int) -> int:
        """Find the shortest track among ``[start, size)``.

        For durations 7, 1, 6, 7, 5, 8, 7, ``min_index_from(2)`` returns 4.
        On equal durations the lowest index wins.

        Args:
            start: First index to consider

        Returns:
            Index of the shortest track, or -1 if start is negative or
            past the last track
        """
        if start < 0 or start > self._size - 1:
            return -1

        shortest_index = start
        shortest = self._tracks[start]

        for i in range(start, self._size):
            if self._tracks[i].is_shorter_than(shortest):
                shortest = self._tracks[i]
                shortest_index = i

        return shortest_index

    def shortest_track_title(self) -> Optional[str]:
        """Return the title of the shortest track, or None if empty."""
        if self._size == 0:
            return None
        return self._tracks[self.min_index_from(0)].title

    def sort_in_place(self) -> None:
        """Sort tracks by increasing duration using selection sort.

        Equal durations are not guaranteed to keep their original order.
        """
        for i in range(self._size):
            min_index = self.min_index_from(i)
            self._tracks[i], self._tracks[min_index] = self._tracks[min_index], self._tracks[i]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Track]:
        for i in range(self._size):
            yield self._tracks[i]

    def __str__(self) -> str:
        return "\n".join(str(track) for track in self)

    def __repr__(self) -> str:
        return f"PlayList(size={self._size}, max_size={self._max_size})"
