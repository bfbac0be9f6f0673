from typing import Literal

from fastapi import APIRouter, Depends, Query

from unreal_index.api.dependencies import get_index
from unreal_index.core.index import ClassIndex
from unreal_index.core.search import DEFAULT_FILE_PATTERN, search_text
from unreal_index.core.search import (
    find_references as _find_references,
)
from unreal_index.models import CodeMatch

router = APIRouter(tags=["search"])


@router.get("/references/{identifier}", response_model=list[CodeMatch])
async def references(
    identifier: str,
    kind: Literal["class", "function", "variable"] | None = Query(None),
    index: ClassIndex = Depends(get_index),
) -> list[CodeMatch]:
    return await _find_references(index, identifier, kind)


@router.get("/search", response_model=list[CodeMatch])
async def search(
    q: str = Query(..., min_length=1),
    file_pattern: str = Query(DEFAULT_FILE_PATTERN),
    include_comments: bool = Query(True),
    index: ClassIndex = Depends(get_index),
) -> list[CodeMatch]:
    return await search_text(index, q, file_pattern, include_comments)
