"""officepdf: batch Word/PowerPoint to PDF conversion through Office automation."""

from officepdf.classifier import classify
from officepdf.collector import collect
from officepdf.controller import ConversionController
from officepdf.models import BatchResult, ConversionJob, DocumentKind, JobOutcome, JobStatus

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "ConversionController",
    "ConversionJob",
    "DocumentKind",
    "JobOutcome",
    "JobStatus",
    "classify",
    "collect",
]
