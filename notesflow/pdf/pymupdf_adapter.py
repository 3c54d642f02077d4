import asyncio

import pymupdf

from notesflow.pdf.base import BaseRangeExtractor
from notesflow.pdf.exceptions import ExtractionError


class PyMuPdfRangeExtractor(BaseRangeExtractor):
    """Copies a page range into a new PDF using PyMuPDF."""

    async def extract_range(self, pdf_bytes: bytes, start: int, end: int) -> bytes:
        return await asyncio.to_thread(self._extract, pdf_bytes, start, end)

    def _extract(self, pdf_bytes: bytes, start: int, end: int) -> bytes:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as source:  # type: ignore[no-untyped-call]
                page_count = source.page_count
                if start < 1 or end < start or end > page_count:
                    raise ExtractionError(
                        f"Page range {start}-{end} is outside the document "
                        f"({page_count} pages)"
                    )
                with pymupdf.open() as target:  # type: ignore[no-untyped-call]
                    target.insert_pdf(source, from_page=start - 1, to_page=end - 1)
                    return target.tobytes()
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pymupdf range extraction failed: {exc}") from exc
