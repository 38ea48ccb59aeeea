"""Microsoft PowerPoint adapter."""

from __future__ import annotations

import logging
from typing import Any

from officepdf.automation.base import AutomationHost
from officepdf.models import DocumentKind

logger = logging.getLogger(__name__)

PP_SAVE_AS_PDF = 32


class PowerPointHost(AutomationHost):
    name = "PowerPoint"
    prog_id = "PowerPoint.Application"
    kind = DocumentKind.PRESENTATION
    pdf_format = PP_SAVE_AS_PDF

    def attach(self) -> None:
        self.collection = self.app.Presentations

    def set_visible(self, visible: bool) -> None:
        # Several PowerPoint builds reject hiding the main window. Presentations
        # are still opened with WithWindow=False, so nothing is ever shown.
        try:
            self.app.Visible = visible
        except Exception as e:
            logger.warning("PowerPoint refused Visible=%s: %s", visible, e)

    def open(self, path: str) -> Any:
        # ReadOnly, Untitled (no title-bar file name), WithWindow
        return self.collection.Open(path, True, True, False)

    def export_pdf(self, document: Any, destination: str) -> None:
        document.SaveAs(destination, self.pdf_format)

    def close(self, document: Any) -> None:
        document.Close()
