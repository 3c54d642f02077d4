from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    files_root: Path = Path(".")
    export_dir: Path = Path("exports")
    preview_dir: Path = Path("previews")
    preview_zoom: float = 1.0

    recognition_engine: str = "pymupdf"
    ocr_language: str = "eng"
    ocr_dpi: int = 300

    notes_provider: str = "example"
    notes_temperature: float = 0.3

    notes_openai_api_key: str = ""
    notes_openai_model_name: str = "gpt-4o-mini"
    notes_openai_timeout_seconds: int = 60

    notes_openai_compatible_api_key: str = ""
    notes_openai_compatible_model_name: str = ""
    notes_openai_compatible_timeout_seconds: int = 60
    notes_openai_compatible_base_url: str = ""
