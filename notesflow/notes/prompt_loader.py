from pathlib import Path

from notesflow.notes.exceptions import GenerationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the notes prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled notes_prompt.txt.

    Returns:
        The raw template string with a {recognized_text} placeholder.

    Raises:
        GenerationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "notes_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load prompt template: {exc}") from exc
