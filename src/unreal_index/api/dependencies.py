from __future__ import annotations

from collections.abc import AsyncIterator

from unreal_index.core.config import create_index
from unreal_index.core.index import ClassIndex

_index: ClassIndex | None = None


async def get_index() -> AsyncIterator[ClassIndex]:
    """Yield the process-wide ``ClassIndex``, creating it from the environment on first call."""
    global _index  # noqa: PLW0603
    if _index is None:
        _index = create_index()
    yield _index
