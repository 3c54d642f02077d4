import asyncio

import pymupdf

from notesflow.preview.base import BasePreviewRenderer, PreviewSurface
from notesflow.preview.exceptions import RenderError


class PyMuPdfPreviewRenderer(BasePreviewRenderer):
    """Rasterizes PDF pages to PNG images using PyMuPDF."""

    def __init__(self, zoom: float = 1.0) -> None:
        self._zoom = zoom

    async def render(self, pdf_bytes: bytes, surface: PreviewSurface) -> None:
        images = await asyncio.to_thread(self._rasterize, pdf_bytes)
        try:
            surface.draw(images)
        except Exception as exc:
            raise RenderError(f"Drawing on surface '{surface.name}' failed: {exc}") from exc

    def _rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        matrix = pymupdf.Matrix(self._zoom, self._zoom)
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_pixmap(matrix=matrix).tobytes("png") for page in doc]
        except Exception as exc:
            raise RenderError(f"pymupdf rendering failed: {exc}") from exc
