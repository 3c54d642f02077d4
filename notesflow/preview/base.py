from abc import ABC, abstractmethod


class PreviewSurface(ABC):
    """A target that displays rendered page images."""

    name: str = "surface"

    @abstractmethod
    def draw(self, images: list[bytes]) -> None:
        """Replace the surface content with the given PNG page images."""

    @abstractmethod
    def clear(self) -> None:
        """Remove any displayed content."""


class BasePreviewRenderer(ABC):
    """Contract for all preview rendering adapters."""

    @abstractmethod
    async def render(self, pdf_bytes: bytes, surface: PreviewSurface) -> None:
        """Render every page of a PDF onto a surface.

        Raises:
            RenderError: if rendering fails for any reason.
        """
