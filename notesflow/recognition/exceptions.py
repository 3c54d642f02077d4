from notesflow.workflow.exceptions import CollaboratorError


class RecognitionError(CollaboratorError):
    """Raised when text recognition fails."""
