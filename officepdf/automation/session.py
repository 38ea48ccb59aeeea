"""AutomationSession — lifecycle of one live Office application instance."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from officepdf.automation.base import AutomationHost
from officepdf.errors import (
    DocumentExportError,
    DocumentOpenError,
    SessionStartError,
    SessionStateError,
)
from officepdf.models import ConversionJob, DocumentKind, JobOutcome, JobStatus

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    STARTED = "started"
    DOCUMENT_OPEN = "document_open"
    SHUT_DOWN = "shut_down"


class AutomationSession:
    """One exclusive connection to an Office host for the length of a batch.

    State machine::

        UNINITIALIZED -> STARTED -> (DOCUMENT_OPEN -> STARTED)* -> SHUT_DOWN

    Only one document is open at a time. ``shutdown()`` runs at most once;
    a shut-down session cannot be restarted.
    """

    def __init__(
        self, kind: DocumentKind, factory: Callable[[], AutomationHost]
    ) -> None:
        self.kind = kind
        self._factory = factory
        self._host: AutomationHost | None = None
        self._document: Any = None
        self._document_path: Path | None = None
        self.state = SessionState.UNINITIALIZED
        self.documents_processed = 0

    @property
    def name(self) -> str:
        return self._host.name if self._host is not None else self.kind.value

    @property
    def started(self) -> bool:
        return self.state in (SessionState.STARTED, SessionState.DOCUMENT_OPEN)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> AutomationSession:
        """Launch the host, hide it and fetch its document collection.

        Raises SessionStartError on any failure; the run cannot continue
        without the host.
        """
        self._require(SessionState.UNINITIALIZED, "start")
        try:
            host = self._factory()
        except Exception as e:
            raise SessionStartError(self.kind.value, "launch", e) from e
        try:
            host.set_visible(False)
            host.attach()
        except Exception as e:
            try:
                host.quit()
            except Exception:
                logger.warning("%s did not quit after a failed start", host.name, exc_info=True)
            raise SessionStartError(host.name, "attach", e) from e
        self._host = host
        self.state = SessionState.STARTED
        logger.debug("%s session started", host.name)
        return self

    def shutdown(self) -> None:
        """Release the collection, quit the host and release the application.

        Idempotent. A document still open (only possible after an
        unexpected error) is closed first.
        """
        if self.state in (SessionState.SHUT_DOWN, SessionState.UNINITIALIZED):
            self.state = SessionState.SHUT_DOWN
            return
        host = self._host
        if self.state is SessionState.DOCUMENT_OPEN:
            self.close_document(self._document)
        self.state = SessionState.SHUT_DOWN
        self._host = None
        try:
            host.quit()
        except Exception:
            logger.warning("%s did not quit cleanly", host.name, exc_info=True)
        logger.debug(
            "%s session shut down after %d document(s)",
            host.name,
            self.documents_processed,
        )

    # ------------------------------------------------------------------
    # Document operations
    # ------------------------------------------------------------------

    def open_document(self, path: str | Path) -> Any:
        """Open a document through the host. Raises DocumentOpenError."""
        self._require(SessionState.STARTED, "open_document")
        try:
            document = self._host.open(str(path))
        except Exception as e:
            raise DocumentOpenError(self._host.name, "open", e) from e
        self._document = document
        self._document_path = Path(path)
        self.state = SessionState.DOCUMENT_OPEN
        return document

    def export_as_pdf(self, document: Any, destination: str | Path) -> None:
        """Save the open document as PDF. Raises DocumentExportError."""
        self._require(SessionState.DOCUMENT_OPEN, "export_as_pdf")
        try:
            self._host.export_pdf(document, str(destination))
        except Exception as e:
            raise DocumentExportError(self._host.name, "save as PDF", e) from e

    def close_document(self, document: Any) -> None:
        """Close the open document, discarding changes.

        Close failures are logged rather than raised; the session returns
        to STARTED either way so the batch can move on.
        """
        self._require(SessionState.DOCUMENT_OPEN, "close_document")
        try:
            self._host.close(document)
        except Exception as e:
            logger.warning(
                "Error closing %s in %s: %s", self._document_path, self._host.name, e
            )
        finally:
            self._document = None
            self._document_path = None
            self.state = SessionState.STARTED
            self.documents_processed += 1

    def convert(self, job: ConversionJob) -> JobOutcome:
        """Open, export and close one document; never raises for per-file errors."""
        try:
            document = self.open_document(job.source)
        except DocumentOpenError as e:
            logger.error("Error opening %s: %s", job.source, e.__cause__)
            return JobOutcome(job=job, status=JobStatus.OPEN_FAILED, error=str(e))

        try:
            self.export_as_pdf(document, job.destination)
        except DocumentExportError as e:
            logger.error("Error saving %s as PDF: %s", job.source, e.__cause__)
            return JobOutcome(job=job, status=JobStatus.EXPORT_FAILED, error=str(e))
        finally:
            self.close_document(document)

        logger.info("Converted %s -> %s", job.source, job.destination)
        return JobOutcome(job=job, status=JobStatus.CONVERTED)

    def _require(self, state: SessionState, operation: str) -> None:
        if self.state is not state:
            raise SessionStateError(
                f"{self.name} session cannot {operation} while {self.state.value}"
            )
