import asyncio
from pathlib import Path

from resume_mcp.storage.base import FileStorage


class LocalFileStorage(FileStorage):
    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir).resolve()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    async def save(self, file_content: bytes, filename: str, subdir: str = "") -> str:
        target_dir = self.base_dir / subdir
        await asyncio.to_thread(target_dir.mkdir, parents=True, exist_ok=True)
        file_path = target_dir / filename
        await asyncio.to_thread(file_path.write_bytes, file_content)
        return str(Path(subdir) / filename) if subdir else filename

    async def makedirs(self, subdir: str) -> None:
        await asyncio.to_thread((self.base_dir / subdir).mkdir, parents=True, exist_ok=True)
