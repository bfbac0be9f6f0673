from __future__ import annotations

import logging

from unreal_index.core.errors import ClassNotFoundError
from unreal_index.core.index import ClassIndex
from unreal_index.models import HierarchyNode

logger = logging.getLogger(__name__)


async def build_hierarchy(index: ClassIndex, name: str, include_interfaces: bool = True) -> HierarchyNode:
    """Expand *name* into its superclass tree.

    Failure to resolve *name* itself propagates. Unresolvable ancestors become
    leaves, and an ancestor already on the current path becomes a leaf with
    ``cycle=True``.
    """
    return await _build(index, name, include_interfaces, frozenset())


async def _build(
    index: ClassIndex, name: str, include_interfaces: bool, path: frozenset[str]
) -> HierarchyNode:
    record = await index.resolve_class(name)
    node = HierarchyNode(
        class_name=record.name,
        interfaces=list(record.interface_names) if include_interfaces else [],
    )
    on_path = path | {record.name}

    for superclass in record.superclass_names:
        if superclass in on_path:
            logger.warning("Inheritance cycle detected: %s -> %s", record.name, superclass)
            node.superclasses.append(HierarchyNode(class_name=superclass, cycle=True))
            continue
        try:
            child = await _build(index, superclass, include_interfaces, on_path)
        except ClassNotFoundError:
            child = HierarchyNode(class_name=superclass)
        node.superclasses.append(child)

    return node
