from abc import ABC, abstractmethod


class FileStorage(ABC):
    @abstractmethod
    async def save(self, file_content: bytes, filename: str, subdir: str = "") -> str:
        """Save file and return the relative file path."""
        ...

    @abstractmethod
    async def makedirs(self, subdir: str) -> None:
        """Create a directory (and parents) even if no file is written into it."""
        ...
