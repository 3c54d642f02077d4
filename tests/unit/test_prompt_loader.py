"""Tests for notes prompt template loading."""

from pathlib import Path

import pytest

from notesflow.notes.exceptions import GenerationError
from notesflow.notes.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{recognized_text}" in template
        assert "HTML" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {recognized_text}")
        result = load_prompt_template(custom)
        assert result == "Hello {recognized_text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(GenerationError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))
