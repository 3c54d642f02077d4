import asyncio
from pathlib import Path

from notesflow.documents.base import BaseDocumentReader
from notesflow.documents.exceptions import ReadError


class FileDocumentReader(BaseDocumentReader):
    """Reads uploaded documents from the local filesystem."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root if files_root is not None else Path(".")

    async def read(self, file: Path | str) -> bytes:
        path = self._resolve_path(Path(file))
        return await asyncio.to_thread(self._read_bytes, path)

    def _resolve_path(self, file: Path) -> Path:
        if file.is_absolute():
            return file
        return self._files_root / file

    @staticmethod
    def _read_bytes(path: Path) -> bytes:
        if not path.is_file():
            raise ReadError(f"File not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ReadError(f"Failed to read {path}: {exc}") from exc
        if not data:
            raise ReadError(f"File is empty: {path}")
        return data
