"""Command-line interface for orphan-jpeg-cleaner."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from orphan_jpeg_cleaner import __version__
from orphan_jpeg_cleaner.core.cleaner import OrphanJpegCleaner, resolve_working_folder
from orphan_jpeg_cleaner.core.errors import CleanerError
from orphan_jpeg_cleaner.utils.config import Config
from orphan_jpeg_cleaner.utils.logger import set_package_level, setup_logger

console = Console()
logger = setup_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="orphan-jpeg-cleaner")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--folder",
    "-f",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="RAW folder to clean (default: the folder this program is in)",
)
@click.option(
    "--backend",
    "-b",
    type=click.Choice(["finder", "trash"], case_sensitive=False),
    help="Deletion backend (default: from config)",
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Show which files would be deleted without deleting them",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.orphan-jpeg-cleaner/config.json)",
)
@click.option(
    "--show-progress/--no-progress",
    default=False,
    help="Show progress bars while scanning",
)
def cli(
    verbose: bool,
    folder: Optional[Path],
    backend: Optional[str],
    dry_run: bool,
    config_file: Optional[Path],
    show_progress: bool,
) -> None:
    """
    Delete JPEG files that have no matching RAW file.

    Looks for .arw files in the RAW folder and .jpg/.jpeg files in its JPG
    subfolder. Every JPEG whose name (without extension) matches no RAW file
    is moved to the Trash.

    By default the RAW folder is the folder this program is stored in, not
    the current directory, so it can be copied onto a memory card and run
    from there.

    Example:
        orphan-jpeg-cleaner --folder /Volumes/SDCARD/DCIM/100MSDCF --dry-run
    """
    if verbose:
        set_package_level(logging.DEBUG)

    try:
        config = Config(config_file)
        raw_folder = folder or resolve_working_folder()
        logger.debug(f"RAW folder: {raw_folder}")

        cleaner = OrphanJpegCleaner.from_config(
            config,
            backend=backend.lower() if backend else None,
            dry_run=dry_run,
            console=console,
            show_progress=show_progress,
        )
        report = cleaner.run(raw_folder)
    except (CleanerError, OSError) as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    logger.debug(
        f"RAW files: {report.raw_count}, JPEG files: {report.jpg_count}, "
        f"outcomes: {report.counts}"
    )


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
