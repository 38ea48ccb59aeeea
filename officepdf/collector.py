"""Walk the input tree and gather convertible documents."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from officepdf.classifier import is_supported
from officepdf.config.models import CollectorConfig
from officepdf.errors import CollectionError

logger = logging.getLogger(__name__)

# Word and PowerPoint create owner files named ~$<name> next to open documents
LOCK_FILE_PREFIX = "~$"


def collect(
    root: str | Path,
    config: CollectorConfig | None = None,
    exclude: str | Path | None = None,
) -> list[Path]:
    """Return supported document paths under root, in sorted walk order.

    Unsupported files are logged and left out. Never reads file content.
    ``exclude`` prunes one directory (typically the output directory) from
    the walk. Raises CollectionError if root is missing or the walk fails.
    """
    config = config or CollectorConfig()
    root_path = Path(root)
    if not root_path.is_dir():
        raise CollectionError(f"Input path is not a directory: {root_path}")

    excluded = Path(exclude).resolve() if exclude is not None else None

    def _raise(err: OSError) -> None:
        raise CollectionError(f"Error walking the directory {root_path}: {err}") from err

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        current = Path(dirpath)
        dirnames.sort()
        if excluded is not None:
            dirnames[:] = [d for d in dirnames if (current / d).resolve() != excluded]

        for name in sorted(filenames):
            path = current / name
            if not is_supported(path):
                logger.info("Unsupported file type: %s", path)
                continue
            if config.skip_lock_files and name.startswith(LOCK_FILE_PREFIX):
                logger.info("Skipping Office lock file: %s", path)
                continue
            found.append(path)

    logger.debug("collected %d documents under %s", len(found), root_path)
    return found
