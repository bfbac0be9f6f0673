from fastapi import APIRouter, Depends, Query

from unreal_index.api.dependencies import get_index
from unreal_index.api.schemas import PatternsRequest
from unreal_index.core.api_reference import query_api
from unreal_index.core.index import ClassIndex
from unreal_index.core.patterns import detect_patterns
from unreal_index.core.practices import get_best_practices
from unreal_index.core.subsystems import analyze_subsystem
from unreal_index.models import ApiQueryResult, BestPracticeGuide, PatternMatch, SubsystemSummary

router = APIRouter(tags=["reference"])


@router.post("/patterns", response_model=list[PatternMatch])
async def patterns(body: PatternsRequest) -> list[PatternMatch]:
    return detect_patterns(body.content, body.file_path)


@router.get("/practices/{concept}", response_model=BestPracticeGuide)
async def practices(concept: str) -> BestPracticeGuide:
    return get_best_practices(concept)


@router.get("/subsystems/{name}", response_model=SubsystemSummary)
async def subsystem(
    name: str,
    index: ClassIndex = Depends(get_index),
) -> SubsystemSummary:
    return await analyze_subsystem(index, name)


@router.get("/api-reference", response_model=list[ApiQueryResult])
async def api_reference(
    q: str = Query(..., min_length=1),
    category: str | None = Query(None),
    module: str | None = Query(None),
    include_examples: bool = Query(False),
    max_results: int = Query(10, ge=1),
    index: ClassIndex = Depends(get_index),
) -> list[ApiQueryResult]:
    return await query_api(index, q, category, module, include_examples, max_results)
