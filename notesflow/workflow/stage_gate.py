"""Pure precondition checks for entering each pipeline stage."""

from notesflow.workflow.artifact_store import ArtifactStore
from notesflow.workflow.models import Action, PageRange, PipelineStage, RichContent

_REJECTION_MESSAGES: dict[Action, str] = {
    Action.UPLOAD: "No file selected. Please choose a PDF to upload.",
    Action.SELECT_RANGE: "Invalid input. Please specify a valid page range.",
    Action.EXTRACT: "Invalid input. Please specify a valid page range.",
    Action.RECOGNIZE: "No split PDF available. Please split the PDF first.",
    Action.GENERATE_NOTES: "No OCR text available. Please perform OCR first.",
    Action.EDIT_NOTES: "No notes available. Please generate notes first.",
    Action.EXPORT: "No notes available. Please generate notes first.",
}


def is_valid_range(start: object, end: object) -> bool:
    """Check a page range syntactically. The real page count is not consulted."""
    if isinstance(start, bool) or isinstance(end, bool):
        return False
    if not isinstance(start, int) or not isinstance(end, int):
        return False
    return start >= 1 and end >= start


def can_enter(
    target: PipelineStage,
    store: ArtifactStore,
    page_range: PageRange | None = None,
) -> bool:
    """Return whether the workflow may move into target given the store.

    Args:
        target: Stage the caller wants to enter.
        store: Current artifacts.
        page_range: Candidate range for RANGE_SELECTED. Defaults to the
            range already held by the store.

    Returns:
        False for any missing prerequisite. Never raises.
    """
    if target == PipelineStage.EMPTY:
        return False
    if target == PipelineStage.UPLOADED:
        return True
    if target == PipelineStage.RANGE_SELECTED:
        return _range_selectable(store, page_range)
    if target == PipelineStage.EXTRACTED:
        return _range_selectable(store, None)
    if target == PipelineStage.RECOGNIZED:
        return isinstance(store.payload(PipelineStage.EXTRACTED), bytes)
    if target == PipelineStage.NOTES_GENERATED:
        text = store.payload(PipelineStage.RECOGNIZED)
        return isinstance(text, str) and bool(text.strip())
    if target == PipelineStage.NOTES_EDITED:
        return can_export(store)
    return False


def can_export(store: ArtifactStore) -> bool:
    """Export is legal whenever notes exist, whatever the current stage."""
    return isinstance(store.payload(PipelineStage.NOTES_GENERATED), RichContent)


def rejection_message(action: Action) -> str:
    return _REJECTION_MESSAGES[action]


def _range_selectable(store: ArtifactStore, page_range: PageRange | None) -> bool:
    if not store.has(PipelineStage.UPLOADED):
        return False
    if page_range is None:
        stored = store.payload(PipelineStage.RANGE_SELECTED)
        if not isinstance(stored, PageRange):
            return False
        page_range = stored
    return is_valid_range(page_range.start, page_range.end)
