from collections.abc import Callable

from notesflow.config.settings import Settings
from notesflow.recognition.base import BaseTextRecognizer
from notesflow.recognition.pdfplumber_adapter import PdfPlumberRecognizer
from notesflow.recognition.pymupdf_adapter import PyMuPdfOcrRecognizer, PyMuPdfRecognizer


class RecognizerFactory:
    """Creates the correct text recognizer based on settings."""

    ADAPTERS: dict[str, Callable[[Settings], BaseTextRecognizer]] = {
        "pdfplumber": lambda _settings: PdfPlumberRecognizer(),
        "pymupdf": lambda _settings: PyMuPdfRecognizer(),
        "pymupdf_ocr": lambda settings: PyMuPdfOcrRecognizer(
            language=settings.ocr_language,
            dpi=settings.ocr_dpi,
        ),
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextRecognizer:
        engine = settings.recognition_engine.lower()
        builder = cls.ADAPTERS.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown recognition engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return builder(settings)
