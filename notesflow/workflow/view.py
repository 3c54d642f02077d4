from abc import ABC, abstractmethod

from notesflow.logging.logger import Log
from notesflow.workflow.models import Panel


class BaseWorkflowView(ABC):
    """Contract for the UI adapter that applies visibility directives."""

    @abstractmethod
    def show(self, panel: Panel) -> None:
        """Make a panel visible."""

    @abstractmethod
    def hide(self, panel: Panel) -> None:
        """Hide a panel. Hiding a hidden panel is a no-op."""

    @abstractmethod
    def show_error(self, panel: Panel, message: str) -> None:
        """Surface a user-facing error message on a panel."""

    @abstractmethod
    def show_text(self, panel: Panel, text: str) -> None:
        """Display plain text content inside a panel."""


class RecordingView(BaseWorkflowView):
    """Keeps visibility state, errors and text content in memory."""

    def __init__(self) -> None:
        self.visible: set[Panel] = {Panel.UPLOAD}
        self.errors: list[tuple[Panel, str]] = []
        self.texts: dict[Panel, str] = {}

    def show(self, panel: Panel) -> None:
        self.visible.add(panel)

    def hide(self, panel: Panel) -> None:
        self.visible.discard(panel)

    def show_error(self, panel: Panel, message: str) -> None:
        self.errors.append((panel, message))

    def show_text(self, panel: Panel, text: str) -> None:
        self.texts[panel] = text

    def is_visible(self, panel: Panel) -> bool:
        return panel in self.visible


class LoggingView(RecordingView):
    """Recording view that also mirrors every directive to the log."""

    def show(self, panel: Panel) -> None:
        super().show(panel)
        Log.debug(f"show {panel.value}")

    def hide(self, panel: Panel) -> None:
        super().hide(panel)
        Log.debug(f"hide {panel.value}")

    def show_error(self, panel: Panel, message: str) -> None:
        super().show_error(panel, message)
        Log.error(f"[{panel.value}] {message}")

    def show_text(self, panel: Panel, text: str) -> None:
        super().show_text(panel, text)
        Log.info(f"[{panel.value}] {len(text)} chars of text displayed")
