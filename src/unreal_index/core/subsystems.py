from __future__ import annotations

import logging

from unreal_index.core.errors import NotInitializedError, SubsystemDirectoryNotFoundError, UnknownSubsystemError
from unreal_index.core.extractor import find_class_names
from unreal_index.core.index import ClassIndex
from unreal_index.core.locator import read_source
from unreal_index.models import SubsystemSummary

logger = logging.getLogger(__name__)

SUBSYSTEM_DIRS: dict[str, str] = {
    "Rendering": "Engine/Source/Runtime/RenderCore",
    "Physics": "Engine/Source/Runtime/PhysicsCore",
    "Audio": "Engine/Source/Runtime/AudioCore",
    "Networking": "Engine/Source/Runtime/Networking",
    "Input": "Engine/Source/Runtime/InputCore",
    "AI": "Engine/Source/Runtime/AIModule",
    "Animation": "Engine/Source/Runtime/AnimationCore",
    "UI": "Engine/Source/Runtime/UMG",
}


async def analyze_subsystem(index: ClassIndex, name: str) -> SubsystemSummary:
    """List the sources of an engine subsystem and the classes its headers declare."""
    engine_root = index.require_configured().engine_root
    if engine_root is None:
        raise NotInitializedError()

    rel_dir = SUBSYSTEM_DIRS.get(name)
    if rel_dir is None:
        raise UnknownSubsystemError(name, list(SUBSYSTEM_DIRS))

    directory = engine_root / rel_dir
    if not directory.is_dir():
        raise SubsystemDirectoryNotFoundError(str(directory))

    files = await index.locator.list_files(directory, "*.{h,cpp}")
    summary = SubsystemSummary(name=name, source_files=[str(f) for f in files])
    for path in files:
        if path.suffix != ".h":
            continue
        content = read_source(path)
        if content is None:
            continue
        summary.main_classes.extend(find_class_names(content))

    logger.info("Subsystem %s: %d files, %d classes", name, len(files), len(summary.main_classes))
    return summary
