import asyncio

import pymupdf

from notesflow.recognition.base import BaseTextRecognizer
from notesflow.recognition.exceptions import RecognitionError


class PyMuPdfRecognizer(BaseTextRecognizer):
    """Reads the embedded text layer using PyMuPDF."""

    async def recognize(self, pdf_bytes: bytes) -> str:
        return await asyncio.to_thread(self._recognize, pdf_bytes)

    def _recognize(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [self._page_text(page) for page in doc]
            return "\n".join(pages).strip()
        except RecognitionError:
            raise
        except Exception as exc:
            raise RecognitionError(f"pymupdf recognition failed: {exc}") from exc

    def _page_text(self, page: pymupdf.Page) -> str:
        return page.get_text()


class PyMuPdfOcrRecognizer(PyMuPdfRecognizer):
    """Runs Tesseract OCR on every page through PyMuPDF.

    Requires a Tesseract installation visible to PyMuPDF (TESSDATA_PREFIX).
    """

    def __init__(self, language: str = "eng", dpi: int = 300) -> None:
        self._language = language
        self._dpi = dpi

    def _page_text(self, page: pymupdf.Page) -> str:
        textpage = page.get_textpage_ocr(language=self._language, dpi=self._dpi, full=True)
        return page.get_text(textpage=textpage)
