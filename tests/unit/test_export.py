from pathlib import Path

import pytest

from notesflow.export.downloader import FileSystemDownloader
from notesflow.export.exceptions import DownloadError
from notesflow.export.exporter import ExportedFile, NotesExporter
from notesflow.workflow.models import RichContent


class TestNotesExporter:
    def test_serializes_html_verbatim(self) -> None:
        html = "<h2>Über</h2>\n<p>naïve &amp; café</p>"
        exported = NotesExporter().serialize(RichContent(html=html))
        assert exported.filename == "processed-notes.html"
        assert exported.mime_type == "text/html"
        assert exported.content == html.encode("utf-8")
        assert exported.text() == html


class TestFileSystemDownloader:
    @pytest.mark.asyncio
    async def test_writes_file_into_export_dir(self, tmp_path: Path) -> None:
        downloader = FileSystemDownloader(tmp_path / "exports")
        exported = ExportedFile("processed-notes.html", "text/html", b"<p>x</p>")

        await downloader.download(exported)

        assert (tmp_path / "exports" / "processed-notes.html").read_bytes() == b"<p>x</p>"

    @pytest.mark.asyncio
    async def test_overwrites_previous_export(self, tmp_path: Path) -> None:
        downloader = FileSystemDownloader(tmp_path)
        await downloader.download(ExportedFile("processed-notes.html", "text/html", b"old"))
        await downloader.download(ExportedFile("processed-notes.html", "text/html", b"new"))
        assert (tmp_path / "processed-notes.html").read_bytes() == b"new"

    @pytest.mark.asyncio
    async def test_raises_download_error_when_target_is_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        downloader = FileSystemDownloader(blocker)
        with pytest.raises(DownloadError, match="Failed to save"):
            await downloader.download(ExportedFile("processed-notes.html", "text/html", b"x"))
