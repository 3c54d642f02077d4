from abc import ABC, abstractmethod
from pathlib import Path


class BaseDocumentReader(ABC):
    """Contract for adapters that turn an uploaded file into bytes."""

    @abstractmethod
    async def read(self, file: Path | str) -> bytes:
        """Read the full content of an uploaded file.

        Raises:
            ReadError: on any I/O failure.
        """
