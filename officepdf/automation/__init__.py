"""Office automation layer: COM apartment, host adapters and sessions."""

from officepdf.automation.base import AutomationHost
from officepdf.automation.com import ComApartment
from officepdf.automation.powerpoint import PowerPointHost
from officepdf.automation.session import AutomationSession, SessionState
from officepdf.automation.word import WordHost
from officepdf.models import DocumentKind

_HOST_MAP: dict[DocumentKind, type[AutomationHost]] = {
    DocumentKind.WORD: WordHost,
    DocumentKind.PRESENTATION: PowerPointHost,
}


def host_class(kind: DocumentKind) -> type[AutomationHost]:
    """Return the adapter class that handles documents of this kind."""
    cls = _HOST_MAP.get(kind)
    if cls is None:
        raise ValueError(
            f"No automation host for {kind.value!r} documents. "
            f"Supported: {', '.join(k.value for k in _HOST_MAP)}"
        )
    return cls


def create_host(kind: DocumentKind, apartment: ComApartment) -> AutomationHost:
    """Launch the Office application for ``kind`` inside the apartment."""
    cls = host_class(kind)
    return cls(apartment.dispatch(cls.prog_id))


__all__ = [
    "AutomationHost",
    "AutomationSession",
    "ComApartment",
    "PowerPointHost",
    "SessionState",
    "WordHost",
    "create_host",
    "host_class",
]
