"""Host file manager backends for localizing paths and deleting files."""

from orphan_jpeg_cleaner.platforms.base import (
    DeletionOutcome,
    DeletionStatus,
    DryRunFileDeleter,
    FileDeleter,
    PathLocalizer,
)
from orphan_jpeg_cleaner.platforms.finder import FinderFileDeleter, FinderPathLocalizer
from orphan_jpeg_cleaner.platforms.trash import PosixPathLocalizer, TrashFileDeleter

__all__ = [
    "DeletionOutcome",
    "DeletionStatus",
    "DryRunFileDeleter",
    "FileDeleter",
    "FinderFileDeleter",
    "FinderPathLocalizer",
    "PathLocalizer",
    "PosixPathLocalizer",
    "TrashFileDeleter",
]
