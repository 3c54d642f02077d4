from abc import ABC, abstractmethod


class BaseRangeExtractor(ABC):
    """Contract for all PDF page-range extraction adapters."""

    @abstractmethod
    async def extract_range(self, pdf_bytes: bytes, start: int, end: int) -> bytes:
        """Build a new PDF holding pages start..end of the source.

        Args:
            pdf_bytes: Raw PDF file content.
            start: First page to keep, 1-based.
            end: Last page to keep, 1-based and inclusive.

        Returns:
            Bytes of the new PDF document.

        Raises:
            ExtractionError: if end exceeds the page count or the document
                is malformed.
        """
