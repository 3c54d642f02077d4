import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

from notesflow.export.exceptions import DownloadError
from notesflow.export.exporter import ExportedFile


class BaseDownloader(ABC):
    """Contract for delivering an exported file to the user."""

    @abstractmethod
    async def download(self, exported: ExportedFile) -> None:
        """Hand the file to the user.

        Raises:
            DownloadError: if delivery fails.
        """


class FileSystemDownloader(BaseDownloader):
    """Saves exported files into a local directory, overwriting older exports."""

    def __init__(self, export_dir: Path) -> None:
        self._export_dir = export_dir

    def target_path(self, exported: ExportedFile) -> Path:
        return self._export_dir / exported.filename

    async def download(self, exported: ExportedFile) -> None:
        await asyncio.to_thread(self._write, exported)

    def _write(self, exported: ExportedFile) -> None:
        path = self.target_path(exported)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(exported.content)
        except OSError as exc:
            raise DownloadError(f"Failed to save {path}: {exc}") from exc
