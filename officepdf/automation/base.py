"""Abstract host interface for Office automation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from officepdf.models import DocumentKind


class AutomationHost(ABC):
    """Narrow capability set the session needs from an Office application.

    Adapters hold the application object and its document collection; the
    session never touches either directly. Every method may raise whatever
    the underlying automation layer raises (``pywintypes.com_error`` for
    pywin32); the session wraps those into officepdf errors.
    """

    name: ClassVar[str]
    prog_id: ClassVar[str]
    kind: ClassVar[DocumentKind]
    pdf_format: ClassVar[int]

    def __init__(self, app: Any) -> None:
        self.app = app
        self.collection: Any = None

    @abstractmethod
    def attach(self) -> None:
        """Query the top-level document collection from the application."""
        ...

    @abstractmethod
    def set_visible(self, visible: bool) -> None:
        ...

    @abstractmethod
    def open(self, path: str) -> Any:
        """Open a document and return its handle."""
        ...

    @abstractmethod
    def export_pdf(self, document: Any, destination: str) -> None:
        ...

    @abstractmethod
    def close(self, document: Any) -> None:
        """Close without saving changes."""
        ...

    def quit(self) -> None:
        """Drop the collection handle, quit the application, drop the app handle."""
        self.collection = None
        app, self.app = self.app, None
        if app is not None:
            app.Quit()
