"""Tests for officepdf.planner: destinations and output directory handling."""

from pathlib import Path

import pytest

from officepdf.errors import OutputDirError
from officepdf.models import ConversionJob, DocumentKind
from officepdf.planner import (
    destination_for,
    ensure_output_dir,
    plan_job,
    resolve_output_dir,
)


class TestResolveOutputDir:
    def test_blank_defaults_to_pdf_under_input(self):
        assert resolve_output_dir("/data/docs", "") == Path("/data/docs/PDF")

    def test_none_defaults_to_pdf_under_input(self):
        assert resolve_output_dir("/data/docs", None) == Path("/data/docs/PDF")

    def test_whitespace_only_counts_as_blank(self):
        assert resolve_output_dir("/data/docs", "   ") == Path("/data/docs/PDF")

    def test_custom_dir_name(self):
        assert resolve_output_dir("/data/docs", "", dir_name="out") == Path("/data/docs/out")

    def test_explicit_output_wins(self):
        assert resolve_output_dir("/data/docs", "/tmp/pdfs") == Path("/tmp/pdfs")


class TestDestination:
    def test_extension_replaced_with_pdf(self, tmp_path):
        assert destination_for("/in/report.docx", tmp_path) == tmp_path / "report.pdf"

    def test_nested_source_lands_flat(self, tmp_path):
        dest = destination_for("/in/a/b/c/deck.PPTX", tmp_path)
        assert dest.parent == tmp_path
        assert dest.name == "deck.pdf"

    def test_only_last_extension_stripped(self, tmp_path):
        assert destination_for("/in/v1.2.doc", tmp_path).name == "v1.2.pdf"


class TestPlanJob:
    def test_word_job(self, tmp_path):
        job = plan_job("/in/a.docx", tmp_path)
        assert isinstance(job, ConversionJob)
        assert job.kind is DocumentKind.WORD
        assert job.source == Path("/in/a.docx")
        assert job.destination == tmp_path / "a.pdf"

    def test_presentation_job(self, tmp_path):
        assert plan_job("/in/a.ppt", tmp_path).kind is DocumentKind.PRESENTATION

    def test_unsupported_returns_none(self, tmp_path):
        assert plan_job("/in/a.txt", tmp_path) is None

    def test_relative_paths_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        job = plan_job(Path("docs") / "a.docx", "PDF")
        assert job.source == tmp_path / "docs" / "a.docx"
        assert job.destination == tmp_path / "PDF" / "a.pdf"

    def test_job_is_immutable(self, tmp_path):
        job = plan_job("/in/a.docx", tmp_path)
        with pytest.raises(Exception):
            job.destination = tmp_path / "other.pdf"


class TestEnsureOutputDir:
    def test_creates_missing_parents(self, tmp_path):
        out = ensure_output_dir(tmp_path / "x" / "y" / "PDF")
        assert out.is_dir()

    def test_existing_dir_is_fine(self, tmp_path):
        assert ensure_output_dir(tmp_path) == tmp_path

    def test_file_in_the_way_raises(self, tmp_path):
        blocker = tmp_path / "PDF"
        blocker.write_text("not a dir")
        with pytest.raises(OutputDirError):
            ensure_output_dir(blocker)
