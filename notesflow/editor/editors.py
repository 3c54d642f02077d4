from pathlib import Path

from notesflow.editor.base import BaseNotesEditor
from notesflow.editor.exceptions import EditorError
from notesflow.workflow.models import RichContent


class InMemoryNotesEditor(BaseNotesEditor):
    """Holds the notes in memory. The UI layer mutates it through set_html."""

    def __init__(self) -> None:
        self._content: RichContent | None = None

    def load_content(self, content: RichContent) -> None:
        self._content = content

    def read_content(self) -> RichContent:
        if self._content is None:
            raise EditorError("Editor has no content loaded")
        return self._content

    def set_html(self, html: str) -> None:
        self._content = RichContent(html=html)


class FileNotesEditor(BaseNotesEditor):
    """Backs the editor with an HTML file the user edits with any tool."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_content(self, content: RichContent) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(content.html, encoding="utf-8")
        except OSError as exc:
            raise EditorError(f"Failed to write editor file {self._path}: {exc}") from exc

    def read_content(self) -> RichContent:
        try:
            return RichContent(html=self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise EditorError(f"Failed to read editor file {self._path}: {exc}") from exc
