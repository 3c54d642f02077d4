from notesflow.workflow.models import Artifact, PipelineStage

# Slots cleared together by invalidate_from, upstream first.
_CHAIN: tuple[PipelineStage, ...] = (
    PipelineStage.UPLOADED,
    PipelineStage.RANGE_SELECTED,
    PipelineStage.EXTRACTED,
    PipelineStage.RECOGNIZED,
)

_ORIGINS: dict[PipelineStage, str] = {
    PipelineStage.UPLOADED: "raw",
    PipelineStage.EXTRACTED: "extracted",
}


def _slot(stage: PipelineStage) -> PipelineStage:
    # Edited notes overwrite the generated notes slot.
    if stage == PipelineStage.NOTES_EDITED:
        return PipelineStage.NOTES_GENERATED
    return stage


class ArtifactStore:
    """Holds the current artifact for each stage and their provenance.

    Derived notes live outside the invalidation chain: replacing the raw
    document or any other upstream artifact never clears them.
    """

    def __init__(self) -> None:
        self._artifacts: dict[PipelineStage, Artifact] = {}
        self._revision = 0

    @property
    def revision(self) -> int:
        return self._revision

    def set(self, stage: PipelineStage, payload: object) -> Artifact:
        """Store a payload for a stage, stamped with the next revision."""
        if stage == PipelineStage.EMPTY:
            raise ValueError("No artifact can be stored for the EMPTY stage")
        self._revision += 1
        slot = _slot(stage)
        artifact = Artifact(
            stage=stage,
            payload=payload,
            revision=self._revision,
            origin=_ORIGINS.get(slot),
        )
        self._artifacts[slot] = artifact
        return artifact

    def get(self, stage: PipelineStage) -> Artifact | None:
        return self._artifacts.get(_slot(stage))

    def payload(self, stage: PipelineStage) -> object | None:
        artifact = self.get(stage)
        return artifact.payload if artifact is not None else None

    def has(self, stage: PipelineStage) -> bool:
        return _slot(stage) in self._artifacts

    def invalidate_from(self, stage: PipelineStage) -> None:
        """Clear the artifact at stage and every chained stage downstream."""
        slot = _slot(stage)
        if slot in _CHAIN:
            cleared = _CHAIN[_CHAIN.index(slot):]
        elif slot == PipelineStage.EMPTY:
            cleared = _CHAIN
        else:
            cleared = (slot,)
        for key in cleared:
            self._artifacts.pop(key, None)
        self._revision += 1

    def snapshot(self) -> dict[PipelineStage, Artifact]:
        return dict(self._artifacts)
