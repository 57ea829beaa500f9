"""macOS Finder automation through ``osascript``.

Deleting through Finder moves files to the Trash, exactly as if the user
had pressed Cmd+Backspace, so they can be put back from there.
"""

import subprocess
from pathlib import Path
from typing import List

from orphan_jpeg_cleaner.core.errors import ConversionError
from orphan_jpeg_cleaner.platforms.base import (
    DeletionOutcome,
    FileDeleter,
    PathLocalizer,
    path_as_text,
)
from orphan_jpeg_cleaner.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_OSASCRIPT = "osascript"

# Error position AppleScript reports when the `file` reference cannot be
# resolved in the delete command below.
DEFAULT_NOT_FOUND_SIGNATURE = "29:106"


def quote_applescript(text: str) -> str:
    """Quote text as an AppleScript string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _osascript_command(osascript: str, script: str) -> List[str]:
    return [osascript, "-e", script]


class FinderPathLocalizer(PathLocalizer):
    """Converts POSIX paths into HFS path text (``Disk:Folder:Sub:``)."""

    def __init__(self, osascript: str = DEFAULT_OSASCRIPT):
        self.osascript = osascript

    def localize(self, path: Path) -> str:
        """
        Convert a POSIX path into an HFS alias path.

        Args:
            path: Existing filesystem path

        Returns:
            HFS path text, e.g. ``Macintosh HD:Users:me:Photos:JPG:``

        Raises:
            ConversionError: If the path is not text, osascript cannot be run,
                fails, or prints something that is not UTF-8
        """
        text = path_as_text(path)
        script = f"POSIX file {quote_applescript(text)} as alias as text"

        try:
            result = subprocess.run(
                _osascript_command(self.osascript, script), capture_output=True
            )
        except OSError as e:
            raise ConversionError(f"Cannot get HFS path for {text}: {e}") from e

        if result.returncode != 0:
            error = result.stderr.decode("utf-8", errors="replace").strip()
            raise ConversionError(f"Cannot get HFS path for {text}: {error}")

        try:
            hfs_path = result.stdout.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise ConversionError(f"Could not convert HFS path output to UTF-8: {e}") from e

        if not hfs_path:
            raise ConversionError(f"Cannot get HFS path for {text}: empty output")

        logger.debug(f"Localized {text} -> {hfs_path}")
        return hfs_path


class FinderFileDeleter(FileDeleter):
    """Asks Finder to delete a file, which moves it to the Trash."""

    def __init__(
        self,
        osascript: str = DEFAULT_OSASCRIPT,
        not_found_signature: str = DEFAULT_NOT_FOUND_SIGNATURE,
    ):
        """
        Initialize the Finder deleter.

        Args:
            osascript: osascript executable
            not_found_signature: Text in osascript's error output that means
                the file did not exist
        """
        self.osascript = osascript
        self.not_found_signature = not_found_signature

    def delete(self, filename: str, localized_folder: str) -> DeletionOutcome:
        script = (
            f'tell application "Finder" to delete '
            f"(file {quote_applescript(filename)} "
            f"of folder {quote_applescript(localized_folder)})"
        )

        try:
            result = subprocess.run(
                _osascript_command(self.osascript, script), capture_output=True
            )
        except OSError as e:
            logger.debug(f"Could not run {self.osascript}: {e}")
            return DeletionOutcome.other_failure(
                filename,
                f"Could not delete file {filename!r} of folder {localized_folder!r}, "
                "cause the command failed",
            )

        if result.returncode == 0:
            logger.debug(f"Finder deleted {filename}")
            return DeletionOutcome.deleted(filename)

        error = result.stderr.decode("utf-8", errors="replace")
        logger.debug(f"Finder failed to delete {filename}: {error.strip()}")

        if self.not_found_signature and self.not_found_signature in error:
            return DeletionOutcome.not_found(filename)
        return DeletionOutcome.other_failure(filename, error.strip())
