"""Pydantic models for conversion jobs and batch results."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class DocumentKind(str, Enum):
    WORD = "word"
    PRESENTATION = "presentation"
    UNSUPPORTED = "unsupported"


class JobStatus(str, Enum):
    CONVERTED = "converted"
    OPEN_FAILED = "open_failed"
    EXPORT_FAILED = "export_failed"
    SKIPPED = "skipped"


class ConversionJob(BaseModel):
    """One source document paired with its kind and PDF destination."""

    model_config = ConfigDict(frozen=True)

    source: Path
    kind: DocumentKind
    destination: Path


class JobOutcome(BaseModel):
    """Result of the single conversion attempt made for a job."""

    job: ConversionJob
    status: JobStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == JobStatus.CONVERTED


class BatchResult(BaseModel):
    """Tally of one batch run, in input order."""

    discovered: int = 0
    attempted: int = 0
    outcomes: list[JobOutcome] = []

    @property
    def converted(self) -> int:
        return sum(1 for o in self.outcomes if o.status == JobStatus.CONVERTED)

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.status == JobStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return sum(
            1
            for o in self.outcomes
            if o.status in (JobStatus.OPEN_FAILED, JobStatus.EXPORT_FAILED)
        )
