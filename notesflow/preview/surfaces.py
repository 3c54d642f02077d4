from pathlib import Path

from notesflow.preview.base import PreviewSurface


class ImageDirectorySurface(PreviewSurface):
    """Writes rendered pages as page-NNN.png files into a directory."""

    def __init__(self, directory: Path, name: str = "surface") -> None:
        self._directory = directory
        self.name = name

    @property
    def directory(self) -> Path:
        return self._directory

    def draw(self, images: list[bytes]) -> None:
        self.clear()
        self._directory.mkdir(parents=True, exist_ok=True)
        for number, image in enumerate(images, start=1):
            (self._directory / f"page-{number:03d}.png").write_bytes(image)

    def clear(self) -> None:
        if not self._directory.is_dir():
            return
        for page in self._directory.glob("page-*.png"):
            page.unlink()
