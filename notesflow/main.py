import argparse
import asyncio
from pathlib import Path

from notesflow.config.settings import Settings
from notesflow.editor.editors import FileNotesEditor
from notesflow.logging.logger import Log
from notesflow.workflow.controller import build_controller
from notesflow.workflow.exceptions import WorkflowError
from notesflow.workflow.view import LoggingView


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="notesflow",
        description=(
            "Extract a page range from a PDF, recognize its text, generate notes "
            "and export them as processed-notes.html."
        ),
    )
    p.add_argument("document", type=Path, help="PDF file to upload.")
    p.add_argument("--start", type=int, required=True, help="First page, 1-based.")
    p.add_argument("--end", type=int, required=True, help="Last page, inclusive.")
    p.add_argument(
        "--edited-notes",
        type=Path,
        default=None,
        help="HTML file holding edited notes to apply before export (optional).",
    )
    return p


async def run(settings: Settings, args: argparse.Namespace) -> None:
    """Run upload -> extract -> recognize -> generate -> [edit] -> export."""
    editor = FileNotesEditor(settings.export_dir / "editor" / "notes.html")
    controller = build_controller(settings, view=LoggingView(), editor=editor)

    await controller.upload(args.document)
    await controller.extract(args.start, args.end)
    await controller.recognize()
    await controller.generate_notes()
    if args.edited_notes is not None:
        await controller.edit_notes(args.edited_notes.read_text(encoding="utf-8"))
    exported = await controller.export()
    Log.info(
        f"Saved {exported.filename} to {settings.export_dir} "
        f"(stage {controller.stage.name})"
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run the workflow once."""
    args = build_arg_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        asyncio.run(run(settings, args))
    except WorkflowError as exc:
        Log.error(f"Workflow stopped at {exc.action.value}: {exc.message}")
        return 1
    except OSError as exc:
        Log.error(f"Failed to read edited notes: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
