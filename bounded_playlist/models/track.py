"""Track data models."""

from dataclasses import dataclass
from typing import Any, Mapping


def _parse_duration(value: Any) -> int:
    """Accept whole seconds as an int or a string of digits."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(f"Invalid duration {value!r}: expected whole seconds")


@dataclass(frozen=True)
class Track:
    """Immutable track value: a title and a duration in seconds."""

    title: str
    duration: int  # Duration in seconds

    def __post_init__(self):
        """Validate track fields."""
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Track':
        """Build a track from a mapping with 'title' and 'duration' keys.

        Raises:
            ValueError: If a key is missing, the title is not a string or
                the duration is not a whole number of seconds
        """
        if 'title' not in data or 'duration' not in data:
            raise ValueError(f"Track entry is missing title or duration: {dict(data)}")

        title = data['title']
        if not isinstance(title, str):
            raise ValueError(f"Invalid title {title!r}: expected text")

        return cls(title=title, duration=_parse_duration(data['duration']))

    def is_shorter_than(self, other: 'Track') -> bool:
        """Check if this track is strictly shorter than another."""
        return self.duration < other.duration

    def matches_title(self, title: str) -> bool:
        """Case-insensitive exact title comparison."""
        return self.title.lower() == title.lower()

    def __str__(self) -> str:
        minutes, seconds = divmod(self.duration, 60)
        return f"{self.title} ({minutes}:{seconds:02d})"
