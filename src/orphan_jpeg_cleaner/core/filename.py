"""Filename parsing for directory entries."""

import os
from dataclasses import dataclass
from typing import Tuple, Union


def _as_text(value: str) -> str:
    """Return ``value`` if it is valid text, otherwise an empty string.

    Undecodable bytes in file names come back from the OS as lone
    surrogates, which cannot be encoded.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return value


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a base name into stem and extension.

    A leading dot does not start an extension, so ``.hidden`` has no
    extension and ``archive.tar.gz`` has the extension ``gz``.

    Args:
        name: File base name

    Returns:
        Tuple of (stem, extension)
    """
    if name in ("", ".."):
        return name, ""
    before, dot, after = name.rpartition(".")
    if not dot or not before:
        return name, ""
    return before, after


@dataclass(frozen=True)
class FileRecord:
    """A directory entry reduced to the parts used for matching."""

    full_name: str
    stem: str
    extension: str  # lowercased, without the dot

    @classmethod
    def from_name(cls, name: str) -> "FileRecord":
        """Build a record from a base name. Never raises."""
        stem, extension = split_name(name)
        return cls(
            full_name=_as_text(name),
            stem=_as_text(stem),
            extension=_as_text(extension).lower(),
        )

    @classmethod
    def from_entry(cls, entry: Union[os.DirEntry, os.PathLike]) -> "FileRecord":
        """Build a record from an ``os.DirEntry`` or a path."""
        return cls.from_name(os.path.basename(os.fspath(entry)))
