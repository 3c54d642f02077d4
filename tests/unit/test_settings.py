from pathlib import Path

import pytest
from pydantic import ValidationError

from notesflow.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_recognition_engine(self) -> None:
        s = Settings()
        assert s.recognition_engine == "pymupdf"

    def test_default_notes_provider(self) -> None:
        s = Settings()
        assert s.notes_provider == "example"

    def test_default_export_dir(self) -> None:
        s = Settings()
        assert s.export_dir == Path("exports")

    def test_default_notes_openai_timeout(self) -> None:
        s = Settings()
        assert s.notes_openai_timeout_seconds == 60


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_export_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPORT_DIR", "/tmp/notes")
        s = Settings()
        assert s.export_dir == Path("/tmp/notes")

    def test_loads_ocr_dpi(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_DPI", "200")
        s = Settings()
        assert s.ocr_dpi == 200


class TestSettingsValidation:
    def test_invalid_ocr_dpi_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_DPI", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_preview_zoom_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PREVIEW_ZOOM", "abc")
        with pytest.raises(ValidationError):
            Settings()
