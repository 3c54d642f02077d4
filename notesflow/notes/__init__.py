from notesflow.notes.base import BaseNotesGenerator
from notesflow.notes.factory import NotesGeneratorFactory
from notesflow.notes.generator import NotesGenerator

__all__ = ["BaseNotesGenerator", "NotesGenerator", "NotesGeneratorFactory"]
