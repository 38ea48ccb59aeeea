"""Extension-based classification of candidate documents."""

from __future__ import annotations

from pathlib import Path

from officepdf.models import DocumentKind

WORD_EXTENSIONS: frozenset[str] = frozenset({".doc", ".docx"})
PRESENTATION_EXTENSIONS: frozenset[str] = frozenset({".ppt", ".pptx"})

_KIND_BY_EXTENSION: dict[str, DocumentKind] = {
    **{ext: DocumentKind.WORD for ext in WORD_EXTENSIONS},
    **{ext: DocumentKind.PRESENTATION for ext in PRESENTATION_EXTENSIONS},
}


def classify(file_path: str | Path) -> DocumentKind:
    """Return the document kind for a path, judged by its lower-cased extension."""
    ext = Path(file_path).suffix.lower()
    return _KIND_BY_EXTENSION.get(ext, DocumentKind.UNSUPPORTED)


def is_supported(file_path: str | Path) -> bool:
    return classify(file_path) is not DocumentKind.UNSUPPORTED
