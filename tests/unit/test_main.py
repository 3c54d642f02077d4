from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notesflow.export.exporter import ExportedFile
from notesflow.main import build_arg_parser, main
from notesflow.workflow.exceptions import ValidationError
from notesflow.workflow.models import Action, Panel, PipelineStage


def _make_controller() -> MagicMock:
    controller = MagicMock()
    for name in ("upload", "extract", "recognize", "generate_notes", "edit_notes"):
        setattr(controller, name, AsyncMock())
    controller.export = AsyncMock(
        return_value=ExportedFile("processed-notes.html", "text/html", b"<p>x</p>")
    )
    controller.stage = PipelineStage.NOTES_GENERATED
    return controller


@pytest.fixture(autouse=True)
def _isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.setenv("PREVIEW_DIR", str(tmp_path / "previews"))


class TestArgParser:
    def test_parses_range(self) -> None:
        args = build_arg_parser().parse_args(["doc.pdf", "--start", "2", "--end", "4"])
        assert args.document == Path("doc.pdf")
        assert (args.start, args.end) == (2, 4)
        assert args.edited_notes is None


class TestMain:
    def test_runs_whole_workflow(self) -> None:
        controller = _make_controller()
        with patch("notesflow.main.build_controller", return_value=controller):
            code = main(["doc.pdf", "--start", "2", "--end", "4"])

        assert code == 0
        controller.upload.assert_awaited_once_with(Path("doc.pdf"))
        controller.extract.assert_awaited_once_with(2, 4)
        controller.recognize.assert_awaited_once()
        controller.generate_notes.assert_awaited_once()
        controller.edit_notes.assert_not_called()
        controller.export.assert_awaited_once()

    def test_applies_edited_notes(self, tmp_path: Path) -> None:
        edited = tmp_path / "edited.html"
        edited.write_text("<p>mine</p>", encoding="utf-8")
        controller = _make_controller()
        with patch("notesflow.main.build_controller", return_value=controller):
            code = main(["doc.pdf", "--start", "1", "--end", "1", "--edited-notes", str(edited)])

        assert code == 0
        controller.edit_notes.assert_awaited_once_with("<p>mine</p>")

    def test_returns_one_on_workflow_error(self) -> None:
        controller = _make_controller()
        controller.extract.side_effect = ValidationError(
            Action.EXTRACT, Panel.EXTRACTED_PREVIEW, "Invalid input."
        )
        with patch("notesflow.main.build_controller", return_value=controller):
            code = main(["doc.pdf", "--start", "5", "--end", "3"])

        assert code == 1
        controller.recognize.assert_not_called()
        controller.export.assert_not_called()

    def test_returns_one_when_edited_notes_missing(self, tmp_path: Path) -> None:
        controller = _make_controller()
        with patch("notesflow.main.build_controller", return_value=controller):
            code = main(
                [
                    "doc.pdf",
                    "--start",
                    "1",
                    "--end",
                    "1",
                    "--edited-notes",
                    str(tmp_path / "absent.html"),
                ]
            )

        assert code == 1
        controller.export.assert_not_called()
