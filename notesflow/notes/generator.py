"""AI-powered notes generator."""

from pathlib import Path

from notesflow.logging.logger import Log
from notesflow.notes.base import BaseNotesGenerator
from notesflow.notes.client_base import BaseNotesClient
from notesflow.notes.exceptions import GenerationError
from notesflow.notes.prompt_loader import load_prompt_template
from notesflow.workflow.models import RichContent

DEFAULT_SYSTEM_PROMPT = "You turn raw document text into well-structured HTML study notes."


class NotesGenerator(BaseNotesGenerator):
    """Generates HTML notes from recognized text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseNotesClient,
        model: str,
        temperature: float = 0.3,
        prompt_template_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)

    async def generate(self, text: str) -> RichContent:
        """Turn recognized text into HTML notes."""
        prompt = self._build_prompt(text)
        Log.debug(f"Notes prompt:\n{prompt}")

        raw_response = await self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        html = self._strip_code_fence(raw_response)
        if not html:
            raise GenerationError("AI returned blank notes")

        Log.info(f"Notes generation complete: {len(html)} chars of HTML")
        return RichContent(html=html)

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.replace("{recognized_text}", text)

    @staticmethod
    def _strip_code_fence(raw: str) -> str:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines).strip()
        return cleaned
