import inspect
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from notesflow.config.settings import Settings
from notesflow.documents.base import BaseDocumentReader
from notesflow.documents.file_reader import FileDocumentReader
from notesflow.editor.base import BaseNotesEditor
from notesflow.editor.editors import InMemoryNotesEditor
from notesflow.export.downloader import BaseDownloader, FileSystemDownloader
from notesflow.export.exporter import ExportedFile, NotesExporter
from notesflow.logging.logger import Log
from notesflow.notes.base import BaseNotesGenerator
from notesflow.notes.factory import NotesGeneratorFactory
from notesflow.pdf.base import BaseRangeExtractor
from notesflow.pdf.pymupdf_adapter import PyMuPdfRangeExtractor
from notesflow.preview.coordinator import PreviewCoordinator
from notesflow.preview.exceptions import RenderError
from notesflow.preview.pymupdf_renderer import PyMuPdfPreviewRenderer
from notesflow.preview.surfaces import ImageDirectorySurface
from notesflow.recognition.base import BaseTextRecognizer
from notesflow.recognition.factory import RecognizerFactory
from notesflow.workflow.artifact_store import ArtifactStore
from notesflow.workflow.exceptions import (
    CollaboratorError,
    ReentrancyRejection,
    StageFailure,
    ValidationError,
    WorkflowError,
)
from notesflow.workflow.models import Action, Artifact, PageRange, Panel, PipelineStage, RichContent
from notesflow.workflow.stage_gate import can_enter, can_export, rejection_message
from notesflow.workflow.view import BaseWorkflowView, RecordingView

ERROR_PANELS: dict[Action, Panel] = {
    Action.UPLOAD: Panel.ORIGINAL_PREVIEW,
    Action.SELECT_RANGE: Panel.EXTRACTED_PREVIEW,
    Action.EXTRACT: Panel.EXTRACTED_PREVIEW,
    Action.RECOGNIZE: Panel.OCR_TEXT_PREVIEW,
    Action.GENERATE_NOTES: Panel.NOTES_EDITOR,
    Action.EDIT_NOTES: Panel.NOTES_EDITOR,
    Action.EXPORT: Panel.NOTES_EDITOR,
}

FAILURE_MESSAGES: dict[Action, str] = {
    Action.UPLOAD: "Failed to load the PDF. Please try again.",
    Action.EXTRACT: "Failed to split the PDF. Please try again.",
    Action.RECOGNIZE: "Failed to perform OCR. Please try again.",
    Action.GENERATE_NOTES: "Failed to generate notes. Please try again.",
    Action.EDIT_NOTES: "Failed to update the notes. Please try again.",
    Action.EXPORT: "Failed to export the notes. Please try again.",
}

RENDER_FAILURE_MESSAGE = "Failed to render the preview."
SUPERSEDED_MESSAGE = "The input changed before this operation finished. Please try again."

# Panels that belong to stages after the upload.
_DOWNSTREAM_PANELS = (
    Panel.OCR_CONTROLS,
    Panel.OCR_TEXT_PREVIEW,
    Panel.NOTES_CONTROLS,
    Panel.NOTES_EDITOR,
)


class WorkflowController:
    """Drives the upload -> extract -> recognize -> notes -> export workflow.

    Each action checks the stage gate, marks itself in flight, awaits one
    collaborator and only then writes the store and advances the stage.
    A failing collaborator therefore leaves artifacts, stage and panels as
    they were. Errors are surfaced on the action's panel and re-raised.
    """

    def __init__(
        self,
        *,
        reader: BaseDocumentReader,
        extractor: BaseRangeExtractor,
        recognizer: BaseTextRecognizer,
        notes_generator: BaseNotesGenerator,
        editor: BaseNotesEditor,
        previews: PreviewCoordinator,
        view: BaseWorkflowView,
        exporter: NotesExporter | None = None,
        downloader: BaseDownloader | None = None,
        store: ArtifactStore | None = None,
    ) -> None:
        self._reader = reader
        self._extractor = extractor
        self._recognizer = recognizer
        self._notes_generator = notes_generator
        self._editor = editor
        self._previews = previews
        self._view = view
        self._exporter = exporter if exporter is not None else NotesExporter()
        self._downloader = downloader
        self._store = store if store is not None else ArtifactStore()
        self._stage = PipelineStage.EMPTY
        self._in_flight: set[Action] = set()

    @property
    def stage(self) -> PipelineStage:
        return self._stage

    @property
    def store(self) -> ArtifactStore:
        return self._store

    @property
    def in_flight(self) -> frozenset[Action]:
        return frozenset(self._in_flight)

    async def upload(self, file: Path | str | None) -> None:
        """Read a new document. Replaces every upstream artifact except notes."""
        action = Action.UPLOAD
        self._ensure_idle(action)
        if file is None or not can_enter(PipelineStage.UPLOADED, self._store):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            raw = await self._invoke(action, self._reader.read, file)

            self._store.invalidate_from(PipelineStage.UPLOADED)
            self._store.set(PipelineStage.UPLOADED, raw)
            self._advance(PipelineStage.UPLOADED)
            for panel in _DOWNSTREAM_PANELS:
                self._view.hide(panel)
            self._view.show(Panel.SPLIT_CONTROLS)
            Log.info(f"Uploaded document of {len(raw)} bytes")
            await self._render(self._previews.show_original, raw)

    async def select_range(self, start: int, end: int) -> None:
        """Record the page range to extract. Clears any previous extraction."""
        action = Action.SELECT_RANGE
        self._ensure_idle(action, Action.EXTRACT)
        page_range = PageRange(start=start, end=end)
        if not can_enter(PipelineStage.RANGE_SELECTED, self._store, page_range):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            self._commit_range(page_range)
            if self._previews.visible == Panel.EXTRACTED_PREVIEW:
                raw = self._require(PipelineStage.UPLOADED)
                await self._render(self._previews.show_original, raw.payload)

    async def extract(self, start: int | None = None, end: int | None = None) -> None:
        """Extract a page range from the uploaded document.

        A range given here is recorded only once the extraction succeeds;
        without one the previously selected range is used.
        """
        action = Action.EXTRACT
        self._ensure_idle(action, Action.SELECT_RANGE)
        candidate: PageRange | None = None
        if start is not None or end is not None:
            candidate = PageRange(start=start, end=end)  # type: ignore[arg-type]
            if not can_enter(PipelineStage.RANGE_SELECTED, self._store, candidate):
                raise self._surface(self._rejection(action))
        elif not can_enter(PipelineStage.EXTRACTED, self._store):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            raw = self._require(PipelineStage.UPLOADED)
            inputs = [raw]
            if candidate is None:
                selected = self._require(PipelineStage.RANGE_SELECTED)
                inputs.append(selected)
                page_range: PageRange = selected.payload  # type: ignore[assignment]
            else:
                page_range = candidate
            extracted = await self._invoke(
                action,
                self._extractor.extract_range,
                raw.payload,
                page_range.start,
                page_range.end,
            )
            if self._superseded(action, *inputs):
                return

            if candidate is not None:
                self._commit_range(candidate)
            self._store.invalidate_from(PipelineStage.EXTRACTED)
            self._store.set(PipelineStage.EXTRACTED, extracted)
            self._advance(PipelineStage.EXTRACTED)
            self._view.show(Panel.OCR_CONTROLS)
            Log.info(
                f"Extracted pages {page_range.start}-{page_range.end} "
                f"({len(extracted)} bytes)"
            )
            await self._render(self._previews.show_extracted, extracted)

    async def recognize(self) -> None:
        """Run text recognition on the extracted range."""
        action = Action.RECOGNIZE
        self._ensure_idle(action)
        if not can_enter(PipelineStage.RECOGNIZED, self._store):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            extracted = self._require(PipelineStage.EXTRACTED)
            text = await self._invoke(action, self._recognizer.recognize, extracted.payload)
            if self._superseded(action, extracted):
                return

            self._store.invalidate_from(PipelineStage.RECOGNIZED)
            self._store.set(PipelineStage.RECOGNIZED, text)
            self._advance(PipelineStage.RECOGNIZED)
            self._previews.hide_all()
            self._view.show_text(Panel.OCR_TEXT_PREVIEW, text)
            self._view.show(Panel.OCR_TEXT_PREVIEW)
            self._view.show(Panel.NOTES_CONTROLS)
            Log.info(f"Recognized {len(text)} chars of text")

    async def generate_notes(self) -> None:
        """Generate notes from the recognized text and load them into the editor."""
        action = Action.GENERATE_NOTES
        self._ensure_idle(action, Action.EDIT_NOTES)
        if not can_enter(PipelineStage.NOTES_GENERATED, self._store):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            text = self._require(PipelineStage.RECOGNIZED)
            notes = await self._invoke(action, self._notes_generator.generate, text.payload)
            if self._superseded(action, text):
                return
            await self._invoke(action, self._editor.load_content, notes)

            self._store.set(PipelineStage.NOTES_GENERATED, notes)
            self._advance(PipelineStage.NOTES_GENERATED)
            self._view.hide(Panel.OCR_TEXT_PREVIEW)
            self._view.show(Panel.NOTES_EDITOR)
            Log.info(f"Generated notes of {len(notes.html)} chars")

    async def edit_notes(self, content: RichContent | str | None = None) -> None:
        """Store edited notes.

        With content, the editor is loaded with it; otherwise the editor's
        current content is taken as the edit. Recognized text is kept.
        """
        action = Action.EDIT_NOTES
        self._ensure_idle(action, Action.GENERATE_NOTES)
        if not can_enter(PipelineStage.NOTES_EDITED, self._store):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            if content is None:
                notes = await self._invoke(action, self._editor.read_content)
            else:
                notes = content if isinstance(content, RichContent) else RichContent(html=content)
                await self._invoke(action, self._editor.load_content, notes)

            self._store.set(PipelineStage.NOTES_EDITED, notes)
            if self._stage >= PipelineStage.NOTES_GENERATED:
                self._advance(PipelineStage.NOTES_EDITED)
            Log.info(f"Notes edited ({len(notes.html)} chars)")

    async def export(self) -> ExportedFile:
        """Serialize the notes into processed-notes.html. Never changes the stage."""
        action = Action.EXPORT
        self._ensure_idle(action)
        if not can_export(self._store):
            raise self._surface(self._rejection(action))

        async with self._running(action):
            notes: RichContent = self._require(PipelineStage.NOTES_GENERATED).payload  # type: ignore[assignment]
            exported = self._exporter.serialize(notes)
            if self._downloader is not None:
                await self._invoke(action, self._downloader.download, exported)
            Log.info(f"Exported {exported.filename} ({len(exported.content)} bytes)")
            return exported

    def _commit_range(self, page_range: PageRange) -> None:
        self._store.invalidate_from(PipelineStage.RANGE_SELECTED)
        self._store.set(PipelineStage.RANGE_SELECTED, page_range)
        self._advance(PipelineStage.RANGE_SELECTED)
        for panel in (Panel.OCR_CONTROLS, Panel.OCR_TEXT_PREVIEW, Panel.NOTES_CONTROLS):
            self._view.hide(panel)

    def _ensure_idle(self, action: Action, *related: Action) -> None:
        if self._in_flight.intersection((action, *related)):
            raise self._surface(ReentrancyRejection(action, ERROR_PANELS[action]))

    @asynccontextmanager
    async def _running(self, action: Action) -> AsyncIterator[None]:
        self._in_flight.add(action)
        self._view.show(Panel.LOADING_INDICATOR)
        Log.debug(f"{action.value} in flight")
        try:
            yield
        finally:
            self._in_flight.discard(action)
            if not self._in_flight:
                self._view.hide(Panel.LOADING_INDICATOR)

    async def _invoke(self, action: Action, func: Callable[..., object], *args: object) -> Any:
        try:
            result = func(*args)
            if inspect.isawaitable(result):
                result = await result
        except CollaboratorError as exc:
            raise self._surface(
                StageFailure(action, ERROR_PANELS[action], FAILURE_MESSAGES[action], exc)
            ) from exc
        return result

    async def _render(self, show: Callable[[bytes], object], payload: bytes) -> None:
        try:
            result = show(payload)
            if inspect.isawaitable(result):
                await result
        except RenderError as exc:
            panel = self._previews.visible or Panel.ORIGINAL_PREVIEW
            Log.error(f"Preview rendering failed: {exc}")
            self._view.show_error(panel, RENDER_FAILURE_MESSAGE)

    def _superseded(self, action: Action, *inputs: Artifact) -> bool:
        """Return True when an input artifact was replaced while action ran."""
        for artifact in inputs:
            if self._store.get(artifact.stage) is not artifact:
                Log.warning(
                    f"Discarding {action.value} result: {artifact.stage.name} "
                    "changed while it was in flight"
                )
                self._view.show_error(ERROR_PANELS[action], SUPERSEDED_MESSAGE)
                return True
        return False

    def _require(self, stage: PipelineStage) -> Artifact:
        artifact = self._store.get(stage)
        if artifact is None:
            raise RuntimeError(f"{stage.name} artifact missing after gate check")
        return artifact

    def _advance(self, stage: PipelineStage) -> None:
        Log.info(f"Stage {self._stage.name} -> {stage.name}")
        self._stage = stage

    def _rejection(self, action: Action) -> ValidationError:
        return ValidationError(action, ERROR_PANELS[action], rejection_message(action))

    def _surface(self, error: WorkflowError) -> WorkflowError:
        Log.warning(f"{type(error).__name__} during {error.action.value}: {error.message}")
        self._view.show_error(error.panel, error.message)
        return error


def build_controller(
    settings: Settings,
    view: BaseWorkflowView | None = None,
    editor: BaseNotesEditor | None = None,
) -> WorkflowController:
    """Build a WorkflowController with all adapters configured from settings."""
    view = view if view is not None else RecordingView()
    previews = PreviewCoordinator(
        renderer=PyMuPdfPreviewRenderer(zoom=settings.preview_zoom),
        view=view,
        original_surface=ImageDirectorySurface(
            settings.preview_dir / "original", name=Panel.ORIGINAL_PREVIEW.value
        ),
        extracted_surface=ImageDirectorySurface(
            settings.preview_dir / "extracted", name=Panel.EXTRACTED_PREVIEW.value
        ),
    )
    return WorkflowController(
        reader=FileDocumentReader(files_root=settings.files_root),
        extractor=PyMuPdfRangeExtractor(),
        recognizer=RecognizerFactory.create(settings),
        notes_generator=NotesGeneratorFactory.create(settings),
        editor=editor if editor is not None else InMemoryNotesEditor(),
        previews=previews,
        view=view,
        downloader=FileSystemDownloader(settings.export_dir),
    )
