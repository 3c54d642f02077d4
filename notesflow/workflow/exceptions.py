from notesflow.workflow.models import Action, Panel


class WorkflowError(Exception):
    """Base exception for all workflow errors surfaced to the user."""

    def __init__(self, action: Action, panel: Panel, message: str) -> None:
        super().__init__(message)
        self.action = action
        self.panel = panel
        self.message = message


class ValidationError(WorkflowError):
    """Raised when a transition's preconditions are not met."""


class StageFailure(WorkflowError):
    """Raised when an external collaborator fails during a transition."""

    def __init__(
        self,
        action: Action,
        panel: Panel,
        message: str,
        cause: Exception,
    ) -> None:
        super().__init__(action, panel, message)
        self.cause = cause


class ReentrancyRejection(WorkflowError):
    """Raised when an action is triggered while the same action is in flight."""

    def __init__(self, action: Action, panel: Panel) -> None:
        super().__init__(
            action, panel, "Please wait for the current operation to finish."
        )


class CollaboratorError(Exception):
    """Base exception for failures raised by external collaborators."""
