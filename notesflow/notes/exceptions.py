from notesflow.workflow.exceptions import CollaboratorError


class GenerationError(CollaboratorError):
    """Raised when notes generation fails."""


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
