from fastapi import APIRouter, Depends, Query

from unreal_index.api.dependencies import get_index
from unreal_index.api.schemas import RootsRequest, RootsResponse
from unreal_index.core.hierarchy import build_hierarchy
from unreal_index.core.index import ClassIndex
from unreal_index.models import HierarchyNode, StructuralRecord

router = APIRouter(tags=["classes"])


@router.put("/roots", response_model=RootsResponse)
async def configure_roots(
    body: RootsRequest,
    index: ClassIndex = Depends(get_index),
) -> RootsResponse:
    roots = index.configure_roots(custom_path=body.custom_path, engine_path=body.engine_path)
    return RootsResponse(
        custom_root=str(roots.custom_root) if roots.custom_root else None,
        engine_root=str(roots.engine_root) if roots.engine_root else None,
    )


@router.get("/classes/{name}", response_model=StructuralRecord)
async def get_class(
    name: str,
    index: ClassIndex = Depends(get_index),
) -> StructuralRecord:
    index.require_configured()
    return await index.resolve_class(name)


@router.get("/classes/{name}/hierarchy", response_model=HierarchyNode)
async def get_hierarchy(
    name: str,
    include_interfaces: bool = Query(True),
    index: ClassIndex = Depends(get_index),
) -> HierarchyNode:
    index.require_configured()
    return await build_hierarchy(index, name, include_interfaces)
