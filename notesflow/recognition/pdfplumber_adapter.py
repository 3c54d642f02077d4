import asyncio
import io

import pdfplumber

from notesflow.recognition.base import BaseTextRecognizer
from notesflow.recognition.exceptions import RecognitionError


class PdfPlumberRecognizer(BaseTextRecognizer):
    """Reads the embedded text layer using pdfplumber."""

    async def recognize(self, pdf_bytes: bytes) -> str:
        return await asyncio.to_thread(self._recognize, pdf_bytes)

    def _recognize(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except RecognitionError:
            raise
        except Exception as exc:
            raise RecognitionError(f"pdfplumber recognition failed: {exc}") from exc
