"""Matching JPEG files against their RAW counterparts."""

from typing import List, Sequence

from orphan_jpeg_cleaner.core.filename import FileRecord


def unmatched(
    reference: Sequence[FileRecord], candidates: Sequence[FileRecord]
) -> List[FileRecord]:
    """
    Find candidates whose stem appears in no reference record.

    Stems are compared with exact string equality. Candidates keep their
    input order and are not deduplicated.

    Args:
        reference: Records to match against (e.g. RAW files)
        candidates: Records to filter (e.g. JPEG files)

    Returns:
        Candidates without a matching reference stem
    """
    reference_stems = {record.stem for record in reference}
    return [record for record in candidates if record.stem not in reference_stems]
