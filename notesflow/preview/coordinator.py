from notesflow.logging.logger import Log
from notesflow.preview.base import BasePreviewRenderer, PreviewSurface
from notesflow.workflow.models import Panel
from notesflow.workflow.view import BaseWorkflowView


class PreviewCoordinator:
    """Keeps at most one of the original and extracted previews visible.

    Rendering is delegated to the renderer. A failed render propagates its
    RenderError and is not retried; the preview stays the visible one.
    """

    def __init__(
        self,
        renderer: BasePreviewRenderer,
        view: BaseWorkflowView,
        original_surface: PreviewSurface,
        extracted_surface: PreviewSurface,
    ) -> None:
        self._renderer = renderer
        self._view = view
        self._surfaces = {
            Panel.ORIGINAL_PREVIEW: original_surface,
            Panel.EXTRACTED_PREVIEW: extracted_surface,
        }
        self._visible: Panel | None = None

    @property
    def visible(self) -> Panel | None:
        return self._visible

    async def show_original(self, payload: bytes) -> None:
        await self._show(Panel.ORIGINAL_PREVIEW, payload)

    async def show_extracted(self, payload: bytes) -> None:
        await self._show(Panel.EXTRACTED_PREVIEW, payload)

    def hide_all(self) -> None:
        for panel in self._surfaces:
            self._view.hide(panel)
        self._visible = None

    async def _show(self, panel: Panel, payload: bytes) -> None:
        self.hide_all()
        self._view.show(panel)
        self._visible = panel
        Log.debug(f"Rendering {len(payload)} bytes into {panel.value}")
        await self._renderer.render(payload, self._surfaces[panel])
