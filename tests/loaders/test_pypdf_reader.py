# tests/loaders/test_pypdf_reader.py
"""Tests for PyPDFTextReader."""

import importlib.util

import pytest

from quizprep.loaders.base import PdfText, PdfTextReader

HAS_PYPDF = importlib.util.find_spec("pypdf") is not None

pytestmark = pytest.mark.skipif(not HAS_PYPDF, reason="pypdf not installed")


@pytest.fixture
def blank_pdf(tmp_path):
    """Create a two-page PDF without a text layer."""
    from pypdf import PdfWriter

    pdf_path = tmp_path / "lecture.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_blank_page(width=612, height=792)
    with open(pdf_path, "wb") as f:
        writer.write(f)
    return pdf_path


class TestPyPDFTextReader:
    def test_is_pdf_text_reader(self):
        from quizprep.loaders.pypdf_reader import PyPDFTextReader

        assert isinstance(PyPDFTextReader(), PdfTextReader)

    def test_lazy_import_from_package(self):
        from quizprep.loaders import PyPDFTextReader
        from quizprep.loaders.pypdf_reader import PyPDFTextReader as Direct

        assert PyPDFTextReader is Direct

    def test_supports_pdf(self):
        from quizprep.loaders.pypdf_reader import PyPDFTextReader

        reader = PyPDFTextReader()
        assert reader.supports("notes.pdf")
        assert reader.supports("NOTES.PDF")
        assert not reader.supports("notes.txt")

    def test_reads_page_count_and_name(self, blank_pdf):
        from quizprep.loaders.pypdf_reader import PyPDFTextReader

        result = PyPDFTextReader().read(str(blank_pdf))
        assert isinstance(result, PdfText)
        assert result.page_count == 2
        assert result.file_name == "lecture.pdf"
        assert result.text == ""

    def test_missing_file(self, tmp_path):
        from quizprep.loaders.pypdf_reader import PyPDFTextReader

        with pytest.raises(FileNotFoundError):
            PyPDFTextReader().read(str(tmp_path / "missing.pdf"))
