"""Capability interfaces for host file manager automation."""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from orphan_jpeg_cleaner.core.errors import ConversionError, DeletionFailure


class DeletionStatus(enum.Enum):
    """Result of a single deletion attempt."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    OTHER_FAILURE = "other_failure"
    SKIPPED = "skipped"  # dry run


@dataclass(frozen=True)
class DeletionOutcome:
    """Outcome of deleting one file."""

    filename: str
    status: DeletionStatus
    message: Optional[str] = None

    @classmethod
    def deleted(cls, filename: str) -> "DeletionOutcome":
        return cls(filename, DeletionStatus.DELETED)

    @classmethod
    def not_found(cls, filename: str) -> "DeletionOutcome":
        return cls(filename, DeletionStatus.NOT_FOUND)

    @classmethod
    def other_failure(cls, filename: str, message: str) -> "DeletionOutcome":
        return cls(filename, DeletionStatus.OTHER_FAILURE, message)

    @classmethod
    def skipped(cls, filename: str) -> "DeletionOutcome":
        return cls(filename, DeletionStatus.SKIPPED)

    @property
    def ok(self) -> bool:
        """True unless the deletion failed."""
        return self.status in (DeletionStatus.DELETED, DeletionStatus.SKIPPED)

    def raise_for_status(self) -> None:
        """
        Raise if the deletion failed.

        Raises:
            DeletionFailure: If the file was not found or could not be deleted
        """
        if self.status == DeletionStatus.NOT_FOUND:
            raise DeletionFailure(
                self.filename, f"File not found: {self.filename}", not_found=True
            )
        if self.status == DeletionStatus.OTHER_FAILURE:
            raise DeletionFailure(self.filename, self.message or "Unknown error")


class PathLocalizer(ABC):
    """Converts filesystem paths into the file manager's path text."""

    @abstractmethod
    def localize(self, path: Path) -> str:
        """
        Localize a path.

        Args:
            path: Filesystem path

        Returns:
            Path text understood by the matching :class:`FileDeleter`

        Raises:
            ConversionError: If the path cannot be localized
        """


class FileDeleter(ABC):
    """Deletes a named file inside a localized folder."""

    @abstractmethod
    def delete(self, filename: str, localized_folder: str) -> DeletionOutcome:
        """
        Delete one file. Never raises for per-file failures.

        Args:
            filename: Base name of the file
            localized_folder: Folder text from :meth:`PathLocalizer.localize`

        Returns:
            Outcome of the attempt
        """


class DryRunFileDeleter(FileDeleter):
    """Reports what would be deleted without touching anything."""

    def delete(self, filename: str, localized_folder: str) -> DeletionOutcome:
        return DeletionOutcome.skipped(filename)


def path_as_text(path: Path) -> str:
    """
    Return a path as text.

    Raises:
        ConversionError: If the path contains undecodable bytes
    """
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ConversionError(f"Could not get string from path {path!r}") from e
    return text
