"""Example notes client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseNotesClient and register the provider in NotesGeneratorFactory.
"""

from typing import ClassVar

from notesflow.notes.client_base import BaseNotesClient


class ExampleClientAdapter(BaseNotesClient):
    """Example adapter that returns a fixed HTML notes document.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "<h2>Notes</h2>\n"
        "<ul>\n"
        "<li>Generated offline by the example provider.</li>\n"
        "</ul>"
    )

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return self.DEFAULT_RESPONSE
