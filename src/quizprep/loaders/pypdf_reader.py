# src/quizprep/loaders/pypdf_reader.py
"""PDF text reader using pypdf - lightweight, pure Python."""

from pathlib import Path

from quizprep.loaders.base import PdfText, PdfTextReader


class PyPDFTextReader(PdfTextReader):
    """Read the text layer of a PDF with pypdf.

    Page texts are joined with blank lines so page boundaries read as
    paragraph breaks to the chunker.

    Requires: pip install quizprep[pdf]
    """

    SUPPORTED_EXTENSIONS = {".pdf"}

    def supports(self, path: str) -> bool:
        """Check if this reader supports the given file."""
        return Path(path).suffix.lower() in self.SUPPORTED_EXTENSIONS

    def read(self, path: str) -> PdfText:
        """Read all pages of a PDF file.

        Raises:
            ImportError: If pypdf is not installed
            FileNotFoundError: If file does not exist
        """
        try:
            from pypdf import PdfReader
        except ImportError:
            raise ImportError(
                "pypdf is required for PDF text extraction. Install with: pip install quizprep[pdf]"
            ) from None

        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        reader = PdfReader(path)
        pages = []
        for page in reader.pages:
            text = (page.extract_text() or "").strip()
            if text:
                pages.append(text)

        return PdfText(
            text="\n\n".join(pages),
            page_count=len(reader.pages),
            file_name=file_path.name,
        )
