"""Conversion controller — drives a batch of documents through Office sessions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import partial
from pathlib import Path

from officepdf.automation import ComApartment, create_host
from officepdf.automation.base import AutomationHost
from officepdf.automation.session import AutomationSession
from officepdf.config.models import ConversionConfig
from officepdf.models import (
    BatchResult,
    ConversionJob,
    DocumentKind,
    JobOutcome,
    JobStatus,
)
from officepdf.planner import plan_job

logger = logging.getLogger(__name__)

HostFactory = Callable[[DocumentKind, ComApartment], AutomationHost]

# Start order; shutdown runs in reverse.
_SESSION_KINDS = (DocumentKind.WORD, DocumentKind.PRESENTATION)

ProgressCallback = Callable[[int, int, ConversionJob], None]


class ConversionController:
    """Runs open -> export -> close for every document, one at a time.

    Per-file failures are logged and recorded in the BatchResult. A
    SessionStartError propagates to the caller. Sessions that were started
    are always shut down exactly once, even when a fatal error interrupts
    the batch.
    """

    def __init__(
        self,
        apartment: ComApartment,
        config: ConversionConfig | None = None,
        host_factory: HostFactory = create_host,
    ) -> None:
        self.apartment = apartment
        self.config = config or ConversionConfig()
        self._host_factory = host_factory
        self.sessions: dict[DocumentKind, AutomationSession] = {}

    def convert(
        self,
        paths: Iterable[str | Path],
        destination_dir: str | Path,
        on_progress: ProgressCallback | None = None,
    ) -> BatchResult:
        """Convert every path into a PDF under destination_dir, in input order."""
        if not self.apartment.active:
            raise RuntimeError("convert() requires an entered ComApartment")

        sources = list(paths)
        result = BatchResult(discovered=len(sources))
        self.sessions = {
            kind: AutomationSession(kind, partial(self._host_factory, kind, self.apartment))
            for kind in _SESSION_KINDS
        }

        try:
            if not self.config.lazy_sessions:
                for session in self.sessions.values():
                    session.start()

            produced: set[Path] = set()
            for index, source in enumerate(sources, start=1):
                job = plan_job(source, destination_dir)
                if job is None:
                    logger.info("Unsupported file type: %s", source)
                    continue

                if on_progress is not None:
                    on_progress(index, len(sources), job)
                logger.info("Converting: %s", job.source)

                outcome = self._convert_one(job, produced)
                result.attempted += 1
                result.outcomes.append(outcome)
        finally:
            self._shutdown()

        logger.info(
            "Batch finished: %d converted, %d failed, %d skipped of %d",
            result.converted,
            result.failed,
            result.skipped,
            result.discovered,
        )
        return result

    def _convert_one(self, job: ConversionJob, produced: set[Path]) -> JobOutcome:
        if not self.config.overwrite and job.destination.exists():
            logger.info("Skipped (already exists): %s", job.destination)
            return JobOutcome(job=job, status=JobStatus.SKIPPED)

        if job.destination in produced:
            logger.warning(
                "%s overwrites a PDF produced earlier in this batch: %s",
                job.source,
                job.destination,
            )

        session = self.sessions[job.kind]
        if not session.started:
            session.start()

        outcome = session.convert(job)
        if outcome.ok:
            produced.add(job.destination)
        return outcome

    def _shutdown(self) -> None:
        for kind in reversed(_SESSION_KINDS):
            session = self.sessions.get(kind)
            if session is not None:
                session.shutdown()
