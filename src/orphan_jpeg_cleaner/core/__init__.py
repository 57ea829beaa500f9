"""Core functionality for finding and deleting orphaned JPEG files."""

from orphan_jpeg_cleaner.core.cleaner import (
    CleanupReport,
    OrphanJpegCleaner,
    resolve_working_folder,
)
from orphan_jpeg_cleaner.core.filename import FileRecord
from orphan_jpeg_cleaner.core.matcher import unmatched
from orphan_jpeg_cleaner.core.scanner import FolderScanner

__all__ = [
    "CleanupReport",
    "FileRecord",
    "FolderScanner",
    "OrphanJpegCleaner",
    "resolve_working_folder",
    "unmatched",
]
