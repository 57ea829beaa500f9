"""Folder scanner for discovering RAW and JPEG files."""

import os
from pathlib import Path
from typing import Iterable, List, Set

from tqdm import tqdm

from orphan_jpeg_cleaner.core.filename import FileRecord
from orphan_jpeg_cleaner.utils.logger import setup_logger

logger = setup_logger(__name__)


def normalize_extensions(extensions: Iterable[str]) -> Set[str]:
    """
    Normalize extensions to lowercase without a leading dot.

    Args:
        extensions: Extensions such as ``"ARW"``, ``".jpg"`` or ``"jpeg"``

    Returns:
        Set of normalized extensions
    """
    return {ext.lower().lstrip(".") for ext in extensions}


class FolderScanner:
    """Lists the entries of a single folder, without recursion."""

    def __init__(self, show_progress: bool = False):
        """
        Initialize the folder scanner.

        Args:
            show_progress: Show progress bar while filtering
        """
        self.show_progress = show_progress

    def scan(self, folder: Path) -> List[FileRecord]:
        """
        List every entry of a folder.

        Entries that cannot be read are skipped.

        Args:
            folder: Folder to list

        Returns:
            List of file records, in directory order

        Raises:
            OSError: If the folder cannot be opened for listing
        """
        logger.debug(f"Scanning folder: {folder}")

        try:
            entries = os.scandir(folder)
        except OSError as e:
            logger.debug(f"Could not read directory {folder}: {e}")
            raise

        records: List[FileRecord] = []
        with entries:
            while True:
                try:
                    entry = next(entries)
                except StopIteration:
                    break
                except OSError as e:
                    # scandir cannot resume after a read error
                    logger.debug(f"Stopped reading {folder} at unreadable entry: {e}")
                    break
                records.append(FileRecord.from_entry(entry))

        logger.debug(f"Found {len(records)} entries in {folder}")
        return records

    def scan_filtered(
        self, folder: Path, allowed_extensions: Iterable[str]
    ) -> List[FileRecord]:
        """
        List the entries of a folder whose extension is allowed.

        Args:
            folder: Folder to list
            allowed_extensions: Extensions to keep (case-insensitive)

        Returns:
            List of matching file records, in directory order

        Raises:
            OSError: If the folder cannot be opened for listing
        """
        allowed = normalize_extensions(allowed_extensions)
        all_records = self.scan(folder)

        if self.show_progress:
            record_iter = tqdm(all_records, desc=f"Filtering {folder.name}", unit="file")
        else:
            record_iter = all_records

        records = [record for record in record_iter if record.extension in allowed]

        logger.debug(
            f"Found {len(records)} {'/'.join(sorted(allowed))} files in {folder}"
        )
        return records
