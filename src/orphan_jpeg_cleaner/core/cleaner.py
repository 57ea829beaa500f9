"""Deletes JPEG files that have no RAW counterpart."""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

from orphan_jpeg_cleaner.core.errors import PathResolutionError
from orphan_jpeg_cleaner.core.matcher import unmatched
from orphan_jpeg_cleaner.core.scanner import FolderScanner
from orphan_jpeg_cleaner.platforms.base import (
    DeletionOutcome,
    DeletionStatus,
    DryRunFileDeleter,
    FileDeleter,
    PathLocalizer,
)
from orphan_jpeg_cleaner.platforms.finder import FinderFileDeleter, FinderPathLocalizer
from orphan_jpeg_cleaner.platforms.trash import PosixPathLocalizer, TrashFileDeleter
from orphan_jpeg_cleaner.utils.config import Config
from orphan_jpeg_cleaner.utils.logger import setup_logger

logger = setup_logger(__name__)

JPG_FOLDER = "JPG"
RAW_EXTENSIONS = ("arw",)
JPG_EXTENSIONS = ("jpg", "jpeg")


def resolve_working_folder(executable: Optional[str] = None) -> Path:
    """
    Find the folder the running program lives in.

    The shell's current directory is deliberately not used: the program
    is meant to be copied next to the photos (e.g. onto a memory card)
    and launched from a file manager, where the current directory is
    somewhere else entirely.

    Args:
        executable: Program path (default: the frozen binary or ``sys.argv[0]``)

    Returns:
        Absolute folder containing the program

    Raises:
        PathResolutionError: If the location cannot be determined
    """
    if executable is None:
        if getattr(sys, "frozen", False):
            executable = sys.executable
        else:
            executable = sys.argv[0] if sys.argv else ""

    if not executable:
        raise PathResolutionError("Could not get current executable path")

    program = Path(os.path.abspath(executable))
    folder = program.parent
    if folder == program:
        raise PathResolutionError(f"Could not get parent directory of {executable!r}")

    try:
        str(folder).encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathResolutionError(f"Could not get string from path {folder!r}") from e

    return folder


@dataclass
class CleanupReport:
    """Summary of one cleanup run."""

    raw_folder: Path
    jpg_folder: Path
    raw_count: int = 0
    jpg_count: int = 0
    outcomes: List[DeletionOutcome] = field(default_factory=list)

    def count(self, status: DeletionStatus) -> int:
        """Number of outcomes with the given status."""
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def counts(self) -> Dict[str, int]:
        return {status.value: self.count(status) for status in DeletionStatus}


class OrphanJpegCleaner:
    """Finds JPEGs without a matching RAW file and deletes them."""

    def __init__(
        self,
        localizer: PathLocalizer,
        deleter: FileDeleter,
        console: Optional[Console] = None,
        scanner: Optional[FolderScanner] = None,
        jpg_folder_name: str = JPG_FOLDER,
        raw_extensions: Iterable[str] = RAW_EXTENSIONS,
        jpg_extensions: Iterable[str] = JPG_EXTENSIONS,
    ):
        """
        Initialize the cleaner.

        Args:
            localizer: Converts the JPEG folder into the deleter's path text
            deleter: Deletes single files
            console: Console for per-file output
            scanner: Folder scanner
            jpg_folder_name: Name of the JPEG subfolder
            raw_extensions: Extensions of RAW files
            jpg_extensions: Extensions of JPEG files
        """
        self.localizer = localizer
        self.deleter = deleter
        self.console = console or Console()
        self.scanner = scanner or FolderScanner()
        self.jpg_folder_name = jpg_folder_name
        self.raw_extensions = list(raw_extensions)
        self.jpg_extensions = list(jpg_extensions)

    @classmethod
    def from_config(
        cls,
        config: Config,
        backend: Optional[str] = None,
        dry_run: bool = False,
        console: Optional[Console] = None,
        show_progress: bool = False,
    ) -> "OrphanJpegCleaner":
        """
        Build a cleaner using the backend and folder layout from config.

        Args:
            config: Configuration instance
            backend: 'finder' or 'trash' (default: from config)
            dry_run: Report files without deleting them
            console: Console for per-file output
            show_progress: Show progress bars while scanning
        """
        backend = backend or config.get_backend()

        localizer: PathLocalizer
        deleter: FileDeleter
        if backend == "finder":
            osascript = config.get("finder.osascript", "osascript")
            localizer = FinderPathLocalizer(osascript)
            deleter = FinderFileDeleter(
                osascript,
                config.get("finder.not_found_signature", "29:106"),
            )
        else:
            localizer = PosixPathLocalizer()
            deleter = TrashFileDeleter()

        if dry_run:
            deleter = DryRunFileDeleter()

        logger.debug(f"Using {backend} backend{' (dry run)' if dry_run else ''}")

        return cls(
            localizer,
            deleter,
            console=console,
            scanner=FolderScanner(show_progress=show_progress),
            jpg_folder_name=config.get_jpg_folder_name(),
            raw_extensions=config.get_raw_extensions(),
            jpg_extensions=config.get_jpg_extensions(),
        )

    def run(self, raw_folder: Path) -> CleanupReport:
        """
        Delete every JPEG in the JPEG subfolder that has no RAW file.

        Everything that can fail fatally happens before the first deletion.
        Per-file failures are reported and the run continues.

        Args:
            raw_folder: Folder holding the RAW files and the JPEG subfolder

        Returns:
            Report of the run

        Raises:
            ConversionError: If the JPEG folder cannot be localized
            OSError: If either folder cannot be listed
        """
        self.console.print("🚀 Start deleting duplicated files")

        jpg_folder = raw_folder / self.jpg_folder_name
        localized_jpg_folder = self.localizer.localize(jpg_folder)

        raw_files = self.scanner.scan_filtered(raw_folder, self.raw_extensions)
        jpg_files = self.scanner.scan_filtered(jpg_folder, self.jpg_extensions)

        report = CleanupReport(
            raw_folder=raw_folder,
            jpg_folder=jpg_folder,
            raw_count=len(raw_files),
            jpg_count=len(jpg_files),
        )

        orphans = unmatched(raw_files, jpg_files)
        logger.debug(
            f"{len(orphans)} of {len(jpg_files)} JPEG files have no RAW counterpart"
        )

        for record in orphans:
            outcome = self.deleter.delete(record.full_name, localized_jpg_folder)
            report.outcomes.append(outcome)
            self._print_outcome(outcome)

        self.console.print("✅ Done")
        return report

    def _print_outcome(self, outcome: DeletionOutcome) -> None:
        filename = escape(outcome.filename)

        if outcome.status == DeletionStatus.DELETED:
            self.console.print(f"👍 Deleted {filename}")
        elif outcome.status == DeletionStatus.SKIPPED:
            self.console.print(f"[dim]🔎 Would delete {filename}[/dim]")
        elif outcome.status == DeletionStatus.NOT_FOUND:
            self.console.print(
                f"[yellow]❌ Could not delete file cause couldn't find the file "
                f"{filename}[/yellow]"
            )
        else:
            self.console.print(f"[red]❌ {filename}: {escape(outcome.message or '')}[/red]")
