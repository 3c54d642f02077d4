from dataclasses import dataclass
from enum import Enum, IntEnum


class PipelineStage(IntEnum):
    """Linear workflow stages, ordered upstream to downstream."""

    EMPTY = 0
    UPLOADED = 1
    RANGE_SELECTED = 2
    EXTRACTED = 3
    RECOGNIZED = 4
    NOTES_GENERATED = 5
    NOTES_EDITED = 6


class Action(str, Enum):
    """User-triggered operations. Each one may be in flight at most once."""

    UPLOAD = "upload"
    SELECT_RANGE = "select_range"
    EXTRACT = "extract"
    RECOGNIZE = "recognize"
    GENERATE_NOTES = "generate_notes"
    EDIT_NOTES = "edit_notes"
    EXPORT = "export"


class Panel(str, Enum):
    """Named UI surfaces the controller can show or hide."""

    UPLOAD = "upload"
    SPLIT_CONTROLS = "splitControls"
    OCR_CONTROLS = "ocrControls"
    OCR_TEXT_PREVIEW = "ocrTextPreview"
    NOTES_CONTROLS = "notesControls"
    NOTES_EDITOR = "notesEditor"
    ORIGINAL_PREVIEW = "originalPreview"
    EXTRACTED_PREVIEW = "extractedPreview"
    LOADING_INDICATOR = "loadingIndicator"


@dataclass(frozen=True)
class PageRange:
    """1-based inclusive page range."""

    start: int
    end: int


@dataclass(frozen=True)
class RichContent:
    """Notes content as an HTML fragment."""

    html: str


@dataclass(frozen=True)
class Artifact:
    """A stored stage output stamped with the store revision that wrote it."""

    stage: PipelineStage
    payload: object
    revision: int
    origin: str | None = None  # "raw", "extracted" or None
