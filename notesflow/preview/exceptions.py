from notesflow.workflow.exceptions import CollaboratorError


class RenderError(CollaboratorError):
    """Raised when a preview cannot be rendered."""
