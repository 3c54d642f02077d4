from notesflow.workflow.exceptions import CollaboratorError


class ReadError(CollaboratorError):
    """Raised when an uploaded document cannot be read."""
