from notesflow.workflow.exceptions import CollaboratorError


class DownloadError(CollaboratorError):
    """Raised when an exported file cannot be delivered."""
