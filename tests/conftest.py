"""Shared test fixtures for officepdf."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from officepdf.automation.base import AutomationHost
from officepdf.automation.com import ComApartment
from officepdf.config.models import OfficePdfConfig
from officepdf.models import DocumentKind


class FakeDocument:
    def __init__(self, path: str) -> None:
        self.path = path


class FakeHost(AutomationHost):
    """In-memory Office host. Export writes a tiny placeholder PDF."""

    name = "Fake"
    prog_id = "Fake.Application"
    kind = DocumentKind.WORD
    pdf_format = 0

    def __init__(self, kind, fail_open=(), fail_export=(), fail_close=()):
        super().__init__(app=MagicMock(name=f"{kind.value}_app"))
        self.kind = kind
        self.name = f"Fake{kind.value.title()}"
        self.fail_open = set(fail_open)
        self.fail_export = set(fail_export)
        self.fail_close = set(fail_close)
        self.visible = None
        self.opened: list[str] = []
        self.exported: list[tuple[str, str]] = []
        self.closed: list[str] = []
        self.quit_calls = 0

    def attach(self):
        self.collection = MagicMock(name="collection")

    def set_visible(self, visible):
        self.visible = visible

    def open(self, path):
        if Path(path).name in self.fail_open:
            raise RuntimeError(f"cannot open {Path(path).name}")
        self.opened.append(path)
        return FakeDocument(path)

    def export_pdf(self, document, destination):
        if Path(document.path).name in self.fail_export:
            raise RuntimeError(f"cannot export {Path(document.path).name}")
        Path(destination).write_bytes(b"%PDF-1.7 fake")
        self.exported.append((document.path, destination))

    def close(self, document):
        self.closed.append(document.path)
        if Path(document.path).name in self.fail_close:
            raise RuntimeError("close failed")

    def quit(self):
        self.quit_calls += 1
        super().quit()


class HostRecorder:
    """Host factory for ConversionController that remembers what it launched."""

    def __init__(self):
        self.hosts: dict[DocumentKind, FakeHost] = {}
        self.launches: list[DocumentKind] = []
        self.fail_open: set[str] = set()
        self.fail_export: set[str] = set()
        self.fail_launch: set[DocumentKind] = set()

    def __call__(self, kind, apartment):
        self.launches.append(kind)
        if kind in self.fail_launch:
            raise OSError(f"Invalid class string for {kind.value}")
        host = FakeHost(kind, fail_open=self.fail_open, fail_export=self.fail_export)
        self.hosts[kind] = host
        return host


@pytest.fixture
def host_recorder():
    return HostRecorder()


@pytest.fixture
def apartment():
    mock = MagicMock(spec=ComApartment)
    mock.active = True
    return mock


@pytest.fixture
def sample_config():
    return OfficePdfConfig()


@pytest.fixture
def docs_tree(tmp_path):
    """3 .docx, 2 .pptx and 1 .txt spread over nested folders."""
    root = tmp_path / "docs"
    (root / "reports" / "2024").mkdir(parents=True)
    (root / "slides").mkdir()
    files = [
        root / "a.docx",
        root / "reports" / "b.docx",
        root / "reports" / "2024" / "c.DOCX",
        root / "slides" / "d.pptx",
        root / "slides" / "e.pptx",
        root / "notes.txt",
    ]
    for f in files:
        f.write_bytes(b"content")
    return root
