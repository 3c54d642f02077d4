from notesflow.config.settings import Settings
from notesflow.notes.base import BaseNotesGenerator
from notesflow.notes.example_client_adapter import ExampleClientAdapter
from notesflow.notes.generator import NotesGenerator
from notesflow.notes.openai_client_adapter import OpenAIClientAdapter

SUPPORTED_PROVIDERS = ("example", "openai", "openai_compatible")


class NotesGeneratorFactory:
    """Creates the configured notes generator."""

    @classmethod
    def create(cls, settings: Settings) -> BaseNotesGenerator:
        """Create a configured notes generator from application settings."""
        provider = settings.notes_provider.lower()
        if provider == "example":
            return NotesGenerator(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        if provider == "openai":
            client = OpenAIClientAdapter(
                api_key=settings.notes_openai_api_key,
                timeout_seconds=settings.notes_openai_timeout_seconds,
                base_url=None,
            )
            model = settings.notes_openai_model_name
        elif provider == "openai_compatible":
            client = OpenAIClientAdapter(
                api_key=settings.notes_openai_compatible_api_key,
                timeout_seconds=settings.notes_openai_compatible_timeout_seconds,
                base_url=cls._compatible_base_url(settings),
            )
            model = settings.notes_openai_compatible_model_name
        else:
            raise ValueError(
                f"Unknown notes provider '{provider}'. Choose from: {list(SUPPORTED_PROVIDERS)}"
            )
        return NotesGenerator(
            client=client,
            model=model,
            temperature=settings.notes_temperature,
        )

    @staticmethod
    def _compatible_base_url(settings: Settings) -> str:
        url = settings.notes_openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "notes_openai_compatible_base_url is required for "
                "notes_provider=openai_compatible"
            )
        return url
