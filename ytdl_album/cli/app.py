"""
Defines the command-line interface for the application using Typer.
"""

import logging
import os
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ytdl_album import __version__
from ytdl_album.core.album_processor import AlbumProcessor
from ytdl_album.exceptions import YtdlAlbumError
from ytdl_album.storage.config_manager import ConfigManager

from .formatters import (
    format_error_with_suggestions,
    print_config,
    print_format_help,
    print_summary_panel,
)

console = Console()
err_console = Console(stderr=True)

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("ytdl_album")

app = typer.Typer(
    name="ytdl-album",
    help=(
        "Download an album from a video site and write a cuesheet or split"
        " tracks, using the track listing in the video description."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "ytdl-album"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
    format_help: bool = typer.Option(
        False,
        "--format-help",
        help="Show the track and title format placeholders and exit.",
        is_eager=True,
    ),
):
    """ytdl-album"""
    if format_help:
        print_format_help()
        raise typer.Exit()

    if version:
        console.print(f"[bold]ytdl-album[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("ytdl_album").setLevel(log_level)

    if show_config:
        try:
            config = ConfigManager(CONFIG_FILE).load_config()
        except YtdlAlbumError as e:
            err_console.print(format_error_with_suggestions(e))
            raise typer.Exit(code=1) from e
        config_data = config.model_dump(include=config.get_ini_keys())
        print_config(CONFIG_FILE, dict(sorted(config_data.items())))
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration file."
    ),
):
    """Write a configuration file with the default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(CONFIG_FILE).save_new_config()
    except YtdlAlbumError as e:
        err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


def _read_description_from_stdin() -> str:
    """Reads the whole track listing from stdin."""
    if sys.stdin.isatty():
        console.print(
            "[yellow]⚠️  Reading the track listing from the terminal. "
            "Finish with Ctrl-D.[/yellow]"
        )
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Input interrupted.[/yellow]")
        raise typer.Exit(code=1) from None


@app.command(name="download")
def download_command(
    url: str = typer.Argument(..., help="Video URL or id of the album."),
    split: bool | None = typer.Option(
        None,
        "-s",
        "--split/--cue",
        help="Split into track files instead of writing a cuesheet.",
    ),
    stdin: bool = typer.Option(
        False,
        "-i",
        "--stdin",
        help="Read the track listing from stdin instead of the video description.",
    ),
    lengths: bool | None = typer.Option(
        None,
        "-l",
        "--lengths/--offsets",
        help="The listed times are track lengths, not offsets.",
    ),
    track_format: str | None = typer.Option(
        None,
        "-f",
        "--track-format",
        help="Track format (default: '%t %o'). See --format-help.",
    ),
    title_format: str | None = typer.Option(
        None,
        "-t",
        "--title-format",
        help="Title format matched against the file name (default: '%p - %a').",
    ),
    output_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "-o",
        "--output-dir",
        help="Directory for the download and the output files.",
    ),
    tag: bool | None = typer.Option(
        None,
        "--tag/--no-tag",
        help="Write title/album/artist tags to split track files.",
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace existing output files."
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Download and show the parsed tracks without writing output files.",
    ),
):
    """Download an album and write a cuesheet or split tracks."""
    cli_options = {
        key: value
        for key, value in {
            "split_tracks": split,
            "offsets_are_lengths": lengths,
            "track_format": track_format,
            "title_format": title_format,
            "output_dir": output_dir,
            "tag_tracks": tag,
        }.items()
        if value is not None
    }
    if stdin:
        cli_options["use_description"] = False
    if overwrite:
        cli_options["overwrite"] = True
    cli_options["dry_run"] = dry_run

    try:
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
        description = None if config.use_description else _read_description_from_stdin()
        processor = AlbumProcessor(config, console=console)
        result = processor.run(url, description)
    except (YtdlAlbumError, FileExistsError) as e:
        err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    print_summary_panel(result, console)
