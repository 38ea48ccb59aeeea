"""Scoped COM initialisation for one conversion run."""

from __future__ import annotations

import logging
from typing import Any

from officepdf.errors import SessionStartError

logger = logging.getLogger(__name__)

try:
    import pythoncom
    import win32com.client
except ImportError:
    pythoncom = None  # type: ignore[assignment]
    win32com = None  # type: ignore[assignment]
    logger.debug("pywin32 not installed; Office automation unavailable")


class ComApartment:
    """Owns CoInitialize/CoUninitialize for the calling thread.

    Use as a context manager around the whole batch; uninitialisation runs
    on every exit path, including fatal errors raised inside the block.
    Application objects are created through :meth:`dispatch`, which only
    works while the apartment is entered.
    """

    def __init__(self, isolated: bool = True) -> None:
        self.isolated = isolated
        self._entered = False

    @property
    def active(self) -> bool:
        return self._entered

    def __enter__(self) -> ComApartment:
        if pythoncom is None:
            raise SessionStartError(
                "COM", "initialize", RuntimeError("pywin32 is not installed")
            )
        pythoncom.CoInitialize()
        self._entered = True
        logger.debug("COM initialized")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._entered:
            return
        self._entered = False
        pythoncom.CoUninitialize()
        logger.debug("COM uninitialized")

    def dispatch(self, prog_id: str) -> Any:
        """Create an automation object for prog_id (e.g. ``Word.Application``)."""
        if not self._entered:
            raise RuntimeError("ComApartment.dispatch() called outside the apartment")
        if self.isolated:
            return win32com.client.DispatchEx(prog_id)
        return win32com.client.Dispatch(prog_id)
