from pathlib import Path
from typing import Protocol


class SourceLocator(Protocol):
    async def list_files(self, root: Path, pattern: str, *, exclude_generated: bool = False) -> list[Path]: ...
