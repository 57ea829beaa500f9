"""
Orphan JPEG Cleaner - Delete JPEG files whose RAW counterpart is gone.

Photographers who shoot RAW+JPEG often cull the RAW files first. This package
finds the JPEGs left behind in the ``JPG`` subfolder and sends them to the
Trash through the host file manager.
"""

__version__ = "0.1.0"
__author__ = "Orphan JPEG Cleaner Contributors"

from orphan_jpeg_cleaner.core.cleaner import OrphanJpegCleaner
from orphan_jpeg_cleaner.core.matcher import unmatched
from orphan_jpeg_cleaner.core.scanner import FolderScanner

__all__ = ["FolderScanner", "OrphanJpegCleaner", "unmatched", "__version__"]
