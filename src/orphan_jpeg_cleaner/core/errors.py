"""Exceptions raised by orphan-jpeg-cleaner."""


class CleanerError(Exception):
    """Base class for errors raised by the cleaner."""


class PathResolutionError(CleanerError):
    """The working folder could not be determined."""


class ConversionError(CleanerError):
    """A path could not be localized for the host file manager."""


class DeletionFailure(CleanerError):
    """A single file could not be deleted.

    Deleters never raise this themselves; they report a
    :class:`~orphan_jpeg_cleaner.platforms.base.DeletionOutcome` instead.
    """

    def __init__(self, filename: str, message: str, not_found: bool = False):
        super().__init__(message)
        self.filename = filename
        self.message = message
        self.not_found = not_found
