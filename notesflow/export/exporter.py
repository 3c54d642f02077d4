from dataclasses import dataclass

from notesflow.workflow.models import RichContent

EXPORT_FILENAME = "processed-notes.html"
EXPORT_MIME_TYPE = "text/html"


@dataclass(frozen=True)
class ExportedFile:
    """A downloadable file produced from the notes."""

    filename: str
    mime_type: str
    content: bytes

    def text(self) -> str:
        return self.content.decode("utf-8")


class NotesExporter:
    """Serializes notes verbatim into the downloadable HTML file."""

    def serialize(self, notes: RichContent) -> ExportedFile:
        return ExportedFile(
            filename=EXPORT_FILENAME,
            mime_type=EXPORT_MIME_TYPE,
            content=notes.html.encode("utf-8"),
        )
