"""Shared fixtures and helpers for tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from unreal_index.core.index import ClassIndex
from unreal_index.core.locator import FileSystemLocator

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: every test under tests/unit is a unit test
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Fake source trees
# ---------------------------------------------------------------------------

ACTOR_H = """\
#pragma once

#include "CoreMinimal.h"
#include "Actor.generated.h"

UCLASS(BlueprintType, Blueprintable)
class ENGINE_API AActor : public UObject
{
    GENERATED_BODY()

public:
    virtual void BeginPlay();
    virtual void Tick(float DeltaSeconds) override;

    UPROPERTY(EditAnywhere, Category = "Actor")
    float InitialLifeSpan;
};
"""

OBJECT_H = """\
#pragma once

class COREUOBJECT_API UObject : public UObjectBaseUtility
{
public:
    bool IsValidLowLevel() const;
};
"""

SCENE_COMPONENT_H = """\
#pragma once

UCLASS()
class ENGINE_API USceneComponent : public UActorComponent, public IInterface_AssetUserData
{
    GENERATED_BODY()
};
"""


def write_file(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class CountingLocator(FileSystemLocator):
    """Filesystem locator that records each enumeration."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, str]] = []

    async def list_files(self, root: Path, pattern: str, *, exclude_generated: bool = False) -> list[Path]:
        self.calls.append((root, pattern))
        return await super().list_files(root, pattern, exclude_generated=exclude_generated)


@pytest.fixture
def engine_root(tmp_path: Path) -> Path:
    root = tmp_path / "UE"
    runtime = "Engine/Source/Runtime"
    write_file(root, f"{runtime}/Engine/Classes/GameFramework/Actor.h", ACTOR_H)
    write_file(root, f"{runtime}/CoreUObject/Public/UObject/Object.h", OBJECT_H)
    write_file(root, f"{runtime}/Engine/Classes/Components/SceneComponent.h", SCENE_COMPONENT_H)
    return root


@pytest.fixture
def custom_root(tmp_path: Path) -> Path:
    root = tmp_path / "MyGame"
    (root / "Source").mkdir(parents=True)
    return root


@pytest.fixture
def locator() -> CountingLocator:
    return CountingLocator()


@pytest.fixture
def engine_index(engine_root: Path, locator: CountingLocator) -> ClassIndex:
    index = ClassIndex(locator=locator)
    index.configure_roots(engine_path=str(engine_root))
    return index


@pytest.fixture
def make_file() -> Callable[[Path, str, str], Path]:
    """Return a helper that writes *text* to ``root / rel``, creating parent directories."""
    return write_file
