from abc import ABC, abstractmethod

from notesflow.workflow.models import RichContent


class BaseNotesGenerator(ABC):
    """Contract for all notes generation adapters."""

    @abstractmethod
    async def generate(self, text: str) -> RichContent:
        """Turn recognized text into study notes.

        Args:
            text: Plain text from the recognition step.

        Returns:
            RichContent holding the notes as HTML.

        Raises:
            GenerationError: on any failure.
        """
