from notesflow.workflow.exceptions import CollaboratorError


class ExtractionError(CollaboratorError):
    """Raised when a page range cannot be extracted from a PDF."""
