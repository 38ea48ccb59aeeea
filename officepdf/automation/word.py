"""Microsoft Word adapter."""

from __future__ import annotations

from typing import Any

from officepdf.automation.base import AutomationHost
from officepdf.models import DocumentKind

WD_FORMAT_PDF = 17
WD_DO_NOT_SAVE_CHANGES = 0


class WordHost(AutomationHost):
    name = "Word"
    prog_id = "Word.Application"
    kind = DocumentKind.WORD
    pdf_format = WD_FORMAT_PDF

    def attach(self) -> None:
        self.collection = self.app.Documents

    def set_visible(self, visible: bool) -> None:
        self.app.Visible = visible

    def open(self, path: str) -> Any:
        return self.collection.Open(path)

    def export_pdf(self, document: Any, destination: str) -> None:
        document.SaveAs(destination, self.pdf_format)

    def close(self, document: Any) -> None:
        document.Close(WD_DO_NOT_SAVE_CHANGES)
