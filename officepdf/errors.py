"""Exception hierarchy for officepdf.

Fatal errors (session start, directory walk, output directory) abort the
run. Open and export errors concern a single document and never leave the
controller loop.
"""

from __future__ import annotations


class OfficePdfError(Exception):
    """Base class for every error raised by officepdf."""


class AutomationError(OfficePdfError):
    """Wraps a COM automation failure with host and operation context."""

    def __init__(self, host: str, operation: str, cause: Exception) -> None:
        self.host = host
        self.operation = operation
        super().__init__(f"{host} {operation} failed: {cause}")
        self.__cause__ = cause


class SessionStartError(AutomationError):
    """The host application could not be launched or queried."""


class DocumentOpenError(AutomationError):
    """A document could not be opened."""


class DocumentExportError(AutomationError):
    """An opened document could not be saved as PDF."""


class SessionStateError(OfficePdfError):
    """A session operation was called in the wrong lifecycle state."""


class CollectionError(OfficePdfError):
    """The input directory could not be walked."""


class OutputDirError(OfficePdfError):
    """The output directory could not be created."""
