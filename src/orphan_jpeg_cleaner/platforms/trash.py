"""Desktop trash backend for hosts without Finder automation."""

import errno
from pathlib import Path

from send2trash import send2trash

from orphan_jpeg_cleaner.platforms.base import (
    DeletionOutcome,
    FileDeleter,
    PathLocalizer,
    path_as_text,
)
from orphan_jpeg_cleaner.utils.logger import setup_logger

logger = setup_logger(__name__)


class PosixPathLocalizer(PathLocalizer):
    """Keeps paths as plain filesystem text."""

    def localize(self, path: Path) -> str:
        return path_as_text(path)


class TrashFileDeleter(FileDeleter):
    """Moves files to the recycle bin / trash with send2trash."""

    def delete(self, filename: str, localized_folder: str) -> DeletionOutcome:
        # An empty name would point at the folder itself
        if not filename:
            logger.debug(f"Refusing to trash unnamed entry in {localized_folder}")
            return DeletionOutcome.not_found(filename)

        file_path = Path(localized_folder) / filename

        if not file_path.exists():
            logger.debug(f"File not found: {file_path}")
            return DeletionOutcome.not_found(filename)

        if not file_path.is_file():
            logger.debug(f"Not a file, skipping: {file_path}")
            return DeletionOutcome.other_failure(filename, f"Not a file: {file_path}")

        try:
            send2trash(str(file_path))
        except OSError as e:
            if e.errno == errno.ENOENT:
                return DeletionOutcome.not_found(filename)
            logger.debug(f"Failed to trash {file_path}: {e}")
            return DeletionOutcome.other_failure(filename, str(e))

        logger.debug(f"Moved to trash: {file_path}")
        return DeletionOutcome.deleted(filename)
