from notesflow.workflow.exceptions import CollaboratorError


class EditorError(CollaboratorError):
    """Raised when the notes editor cannot load or return its content."""
