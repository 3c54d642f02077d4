from abc import ABC, abstractmethod

from notesflow.workflow.models import RichContent


class BaseNotesEditor(ABC):
    """Contract for the rich-text editor holding the notes."""

    @abstractmethod
    def load_content(self, content: RichContent) -> None:
        """Replace the editor content."""

    @abstractmethod
    def read_content(self) -> RichContent:
        """Return the content currently in the editor.

        Raises:
            EditorError: if the editor has nothing loaded or cannot be read.
        """
