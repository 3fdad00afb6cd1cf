"""Command-line interface for Bounded Playlist."""

from pathlib import Path
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from .config.settings import Settings
from .models.playlist import PlayList
from .models.track import Track
from .utils.logger import setup_logger
from .utils.platform import get_config_dir

app = typer.Typer(help="Bounded-capacity track playlists")
console = Console()


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from file or defaults."""
    return Settings.from_file_or_default(config_path)


def read_tracks(path: Path) -> List[Track]:
    """Read tracks from a YAML file.

    The file holds either a list of ``{title, duration}`` entries or a
    mapping with such a list under ``tracks``.

    Args:
        path: Path to the track file

    Returns:
        Tracks in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file content is not a track list
    """
    if not path.exists():
        raise FileNotFoundError(f"Track file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get('tracks') or []

    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise ValueError(f"Expected a list of tracks in {path}")

    return [Track.from_dict(entry) for entry in data]


def build_playlist(tracks: List[Track], max_size: int) -> tuple[PlayList, List[Track]]:
    """Fill a playlist with tracks, returning it with the rejected tracks."""
    playlist = PlayList(max_size)
    rejected = [track for track in tracks if not playlist.append(track)]
    return playlist, rejected


def format_duration(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def load_playlist(
    track_file: Path,
    config: Optional[Path],
    max_size: Optional[int]
) -> tuple[PlayList, List[Track]]:
    """Configure logging and load a track file into a playlist."""
    settings = get_settings(config)
    logger = setup_logger(
        log_file=settings.logging.path,
        level=settings.logging.level,
        max_size_mb=settings.logging.max_size_mb,
        backup_count=settings.logging.backup_count,
        console=True
    )

    capacity = settings.playlist.max_size if max_size is None else max_size
    tracks = read_tracks(track_file)
    playlist, rejected = build_playlist(tracks, capacity)

    logger.info(f"Loaded {len(playlist)} of {len(tracks)} track(s) from {track_file}")
    if rejected:
        logger.warning(f"{len(rejected)} track(s) exceed capacity {capacity} and were skipped")

    return playlist, rejected


@app.command()
def show(
    track_file: Path = typer.Argument(..., help="YAML file with tracks"),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        "-m",
        min=0,
        help="Playlist capacity (default from config)"
    ),
    sort: bool = typer.Option(
        False,
        "--sort",
        "-s",
        help="Sort tracks by increasing duration"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """Show a playlist with its total duration and shortest track."""
    try:
        playlist, rejected = load_playlist(track_file, config, max_size)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if sort:
        playlist.sort_in_place()

    if playlist.is_empty():
        console.print("[yellow]Playlist is empty[/yellow]")
    else:
        table = Table(title=f"Playlist ({len(playlist)}/{playlist.capacity()})")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Duration", justify="right")

        for index, track in enumerate(playlist):
            table.add_row(str(index), track.title, format_duration(track.duration))

        console.print(table)
        console.print(f"Total duration: {format_duration(playlist.total_duration())}")
        console.print(f"Shortest track: {playlist.shortest_track_title()}")

    for track in rejected:
        console.print(f"[yellow]Skipped (playlist full): {track.title}[/yellow]")


@app.command()
def find(
    track_file: Path = typer.Argument(..., help="YAML file with tracks"),
    title: str = typer.Argument(..., help="Track title (case-insensitive)"),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        "-m",
        min=0,
        help="Playlist capacity (default from config)"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file"
    )
):
    """Print the position of a track in the playlist."""
    try:
        playlist, _ = load_playlist(track_file, config, max_size)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    index = playlist.index_of_title(title)
    if index == -1:
        console.print(f"[red]Track '{title}' not found[/red]")
        raise typer.Exit(1)

    console.print(f"{index}: {playlist.get(index)}")


@app.command()
def init_config(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path for config file"
    )
):
    """Initialize a configuration file with defaults."""
    if output is None:
        output = get_config_dir() / 'config.yaml'

    if output.exists():
        overwrite = typer.confirm(
            f"Config file already exists at {output}. Overwrite?",
            default=False
        )
        if not overwrite:
            console.print("[yellow]Cancelled[/yellow]")
            return

    settings = Settings()
    settings.save(output)

    console.print(f"[green]Configuration file created: {output}[/green]")
    console.print("\nEdit this file to customize your settings")


if __name__ == "__main__":
    app()
