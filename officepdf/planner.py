"""Output-directory resolution and per-file job planning."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from officepdf.classifier import classify
from officepdf.errors import OutputDirError
from officepdf.models import ConversionJob, DocumentKind

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


def resolve_output_dir(
    input_dir: str | Path, output: str | Path | None, dir_name: str = "PDF"
) -> Path:
    """Return the output directory; a blank entry means ``<input>/<dir_name>``."""
    if output is None or not str(output).strip():
        return Path(input_dir) / dir_name
    return Path(str(output).strip())


def ensure_output_dir(path: str | Path) -> Path:
    """Create the output directory (and parents) if missing.

    Raises OutputDirError when the directory cannot be created, e.g. a file
    already sits at that path or permissions are missing.
    """
    out = Path(path)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(f"Cannot create output directory {out}: {e}") from e
    return out


def _absolute(path: str | Path) -> Path:
    return Path(os.path.abspath(path))


def destination_for(source: str | Path, destination_dir: str | Path) -> Path:
    """PDF path for a source: same base name, placed flat in destination_dir."""
    return _absolute(destination_dir) / (Path(source).stem + PDF_SUFFIX)


def plan_job(source: str | Path, destination_dir: str | Path) -> ConversionJob | None:
    """Build the ConversionJob for a source, or None if its type is unsupported.

    Both paths are made absolute: Office resolves relative paths against its
    own working folder, not ours.
    """
    kind = classify(source)
    if kind is DocumentKind.UNSUPPORTED:
        return None
    return ConversionJob(
        source=_absolute(source),
        kind=kind,
        destination=destination_for(source, destination_dir),
    )
