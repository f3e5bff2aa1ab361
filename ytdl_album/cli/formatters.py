"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ytdl_album.core.template import PLACEHOLDERS
from ytdl_album.models.config import DEFAULT_TITLE_FORMAT, DEFAULT_TRACK_FORMAT
from ytdl_album.models.stats import AlbumResult
from ytdl_album.models.track import AlbumMeta, Track
from ytdl_album.utils.formatting import format_duration


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "NoTracksFoundError": [
            "• Compare the track format with a line of the description.",
            "• Use -f to match the listing, e.g. -f '%o %t' or -f '\\d+\\. %t %o'.",
            "• Run with --dry-run to preview the parsed tracks.",
            "• Pipe a hand-written listing with -i if the description has none.",
        ],
        "DownloadError": [
            "• Check that the URL or video id is correct.",
            "• Make sure yt-dlp (or your configured downloader) is installed.",
            "• Update the downloader; sites change their pages often.",
        ],
        "TemplateError": [
            "• Escape regex metacharacters such as ( ) [ ] . in literal text.",
            "• Run `ytdl-album --format-help` for the placeholder reference.",
        ],
        "TimecodeError": [
            "• Offsets must look like M:S or H:M:S.",
            "• Tighten the track format so %o only captures the time.",
        ],
        "DegenerateRegionError": [
            "• Offsets must increase from track to track.",
            "• If the listing gives track lengths, add -l/--lengths.",
        ],
        "ProbeError": [
            "• Make sure ffprobe (part of FFmpeg) is installed and in PATH.",
        ],
        "SplitError": [
            "• Make sure ffmpeg is installed and in PATH.",
            "• Run the command with -vv for detailed logs.",
        ],
        "ConfigurationError": [
            "• Check the configuration file, or recreate it with `ytdl-album init`.",
        ],
        "FileExistsError": [
            "• Remove the existing file or pass --overwrite.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the current configuration."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        if isinstance(value, list):
            value = " ".join(value)
        content += f"{key} = {escape(str(value))}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{escape(str(config_path))}[/dim])",
            border_style="cyan",
        )
    )


def print_format_help():
    """Displays the placeholder reference for track and title formats."""
    console = Console()
    table = Table(title="Format Placeholders", show_lines=False)
    table.add_column("Format", style="bold cyan")
    table.add_column("Placeholder", style="yellow")
    table.add_column("Captures")
    table.add_column("Default pattern", style="dim")

    for kind, placeholders in PLACEHOLDERS.items():
        for token, placeholder in placeholders.items():
            table.add_row(
                kind.value,
                token,
                placeholder.description,
                escape(placeholder.pattern),
            )

    console.print(table)
    console.print(
        f"\nDefaults: track [cyan]'{DEFAULT_TRACK_FORMAT}'[/cyan], "
        f"title [cyan]'{DEFAULT_TITLE_FORMAT}'[/cyan]\n"
        "Format strings can be intermixed with regex, e.g.\n\n"
        "  [cyan]ytdl-album download -f '\\d+ %t %o' URL[/cyan]\n\n"
        "will filter track numbers out of the track title string."
    )


def print_tracks_table(tracks: list[Track], meta: AlbumMeta, console: Console):
    """Displays the parsed track list."""
    title = f"{meta.performer or '?'} - {meta.album or '?'}"
    table = Table(title=escape(title))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Offset", style="cyan")
    table.add_column("Title")
    for number, track in enumerate(tracks, start=1):
        table.add_row(f"{number:02d}", str(track.offset), escape(track.title))
    console.print(table)


def print_summary_panel(result: AlbumResult, console: Console | None = None):
    """Displays the final summary of an album run."""
    console = console or Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("Album:", escape(result.album) or "[dim]unknown[/dim]")
    stats_table.add_row("Performer:", escape(result.performer) or "[dim]unknown[/dim]")
    if result.media_path:
        stats_table.add_row("Audio File:", f"[dim]{escape(str(result.media_path))}[/dim]")
    stats_table.add_row("Tracks:", f"[bold green]{result.tracks_found}[/bold green]")
    stats_table.add_row("Mode:", result.mode)

    if result.cuesheet_path:
        stats_table.add_row(
            "✓ Cuesheet:", f"[green]{escape(result.cuesheet_path.name)}[/green]"
        )
    if result.files_written:
        stats_table.add_row(
            "✓ Files Written:", f"[green]{len(result.files_written)}[/green]"
        )
    if result.files_tagged:
        stats_table.add_row("✓ Tagged:", f"[green]{result.files_tagged}[/green]")

    stats_table.add_row(
        "Time Elapsed:", f"[blue]{format_duration(result.elapsed_s)}[/blue]"
    )

    console.print(
        Panel(
            stats_table,
            title="[bold green]✓ Done[/bold green]",
            border_style="green",
            expand=False,
        )
    )
