import pytest

from notesflow.workflow.artifact_store import ArtifactStore
from notesflow.workflow.models import Action, PageRange, PipelineStage, RichContent
from notesflow.workflow.stage_gate import can_enter, can_export, is_valid_range, rejection_message


def _store(*stages: PipelineStage, text: str = "recognized text") -> ArtifactStore:
    payloads: dict[PipelineStage, object] = {
        PipelineStage.UPLOADED: b"raw",
        PipelineStage.RANGE_SELECTED: PageRange(2, 4),
        PipelineStage.EXTRACTED: b"extracted",
        PipelineStage.RECOGNIZED: text,
        PipelineStage.NOTES_GENERATED: RichContent("<p>notes</p>"),
    }
    store = ArtifactStore()
    for stage in stages:
        store.set(stage, payloads[stage])
    return store


class TestIsValidRange:
    @pytest.mark.parametrize(("start", "end"), [(1, 1), (2, 4), (1, 10_000)])
    def test_accepts_valid_ranges(self, start: int, end: int) -> None:
        assert is_valid_range(start, end)

    @pytest.mark.parametrize(
        ("start", "end"),
        [(0, 3), (-1, 2), (5, 3), ("2", "4"), (2.0, 4), (None, 4), (True, 2)],
    )
    def test_rejects_invalid_ranges(self, start: object, end: object) -> None:
        assert not is_valid_range(start, end)


class TestCanEnter:
    def test_empty_is_never_enterable(self) -> None:
        assert not can_enter(PipelineStage.EMPTY, _store())

    def test_upload_always_allowed(self) -> None:
        assert can_enter(PipelineStage.UPLOADED, _store())

    def test_range_requires_raw_document(self) -> None:
        assert not can_enter(PipelineStage.RANGE_SELECTED, _store(), PageRange(1, 2))
        assert can_enter(PipelineStage.RANGE_SELECTED, _store(PipelineStage.UPLOADED), PageRange(1, 2))

    def test_range_requires_valid_candidate(self) -> None:
        store = _store(PipelineStage.UPLOADED)
        assert not can_enter(PipelineStage.RANGE_SELECTED, store, PageRange(5, 3))

    def test_range_does_not_check_page_count(self) -> None:
        store = _store(PipelineStage.UPLOADED)
        assert can_enter(PipelineStage.RANGE_SELECTED, store, PageRange(1, 999))

    def test_extracted_requires_stored_range(self) -> None:
        assert not can_enter(PipelineStage.EXTRACTED, _store(PipelineStage.UPLOADED))
        assert can_enter(
            PipelineStage.EXTRACTED,
            _store(PipelineStage.UPLOADED, PipelineStage.RANGE_SELECTED),
        )

    def test_recognized_requires_extracted_range(self) -> None:
        assert not can_enter(
            PipelineStage.RECOGNIZED,
            _store(PipelineStage.UPLOADED, PipelineStage.RANGE_SELECTED),
        )
        assert can_enter(PipelineStage.RECOGNIZED, _store(PipelineStage.EXTRACTED))

    def test_notes_require_non_blank_text(self) -> None:
        assert not can_enter(PipelineStage.NOTES_GENERATED, _store())
        assert not can_enter(
            PipelineStage.NOTES_GENERATED, _store(PipelineStage.RECOGNIZED, text="  \n")
        )
        assert can_enter(PipelineStage.NOTES_GENERATED, _store(PipelineStage.RECOGNIZED))

    def test_editing_requires_notes(self) -> None:
        assert not can_enter(PipelineStage.NOTES_EDITED, _store(PipelineStage.RECOGNIZED))
        assert can_enter(PipelineStage.NOTES_EDITED, _store(PipelineStage.NOTES_GENERATED))

    @pytest.mark.parametrize(
        "target",
        [
            PipelineStage.RANGE_SELECTED,
            PipelineStage.EXTRACTED,
            PipelineStage.RECOGNIZED,
            PipelineStage.NOTES_GENERATED,
            PipelineStage.NOTES_EDITED,
        ],
    )
    def test_every_downstream_stage_closed_on_empty_store(self, target: PipelineStage) -> None:
        assert not can_enter(target, ArtifactStore(), PageRange(1, 2))


class TestCanExport:
    def test_requires_notes_only(self) -> None:
        assert not can_export(_store(PipelineStage.UPLOADED))
        assert can_export(_store(PipelineStage.NOTES_GENERATED))


class TestRejectionMessage:
    def test_every_action_has_a_message(self) -> None:
        for action in Action:
            assert rejection_message(action)

    def test_recognize_message_points_to_split(self) -> None:
        assert "split the PDF first" in rejection_message(Action.RECOGNIZE)
