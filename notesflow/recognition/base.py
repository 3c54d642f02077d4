from abc import ABC, abstractmethod


class BaseTextRecognizer(ABC):
    """Contract for all text recognition adapters."""

    @abstractmethod
    async def recognize(self, pdf_bytes: bytes) -> str:
        """Recognize the text of every page of a PDF.

        Args:
            pdf_bytes: Raw PDF content, usually an extracted page range.

        Returns:
            Recognized text as a single normalized string.

        Raises:
            RecognitionError: if recognition fails for any reason.
        """
