"""Catalog of Unreal idioms and the heuristics that review each occurrence."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path

from unreal_index.core.locator import context_window, read_source, split_lines
from unreal_index.models import LearningResource, PatternInfo, PatternMatch

logger = logging.getLogger(__name__)


class PatternKind(Enum):
    UPROPERTY_MACRO = "UPROPERTY Macro"
    COMPONENT_SETUP = "Component Setup"
    EVENT_BINDING = "Event Binding"


PATTERN_CATALOG: dict[PatternKind, PatternInfo] = {
    PatternKind.UPROPERTY_MACRO: PatternInfo(
        name=PatternKind.UPROPERTY_MACRO.value,
        description="Property declaration for Unreal reflection system",
        best_practices=(
            "Use appropriate property specifiers (EditAnywhere, BlueprintReadWrite, etc.)",
            "Consider replication needs (Replicated, ReplicatedUsing)",
            "Group related properties with categories",
        ),
        documentation="https://docs.unrealengine.com/5.0/en-US/unreal-engine-uproperty-specifier-reference/",
        examples=(
            'UPROPERTY(EditAnywhere, BlueprintReadWrite, Category = "Combat")\nfloat Health;',
            "UPROPERTY(Replicated)\nFVector Location;",
        ),
        related_patterns=("UFUNCTION Macro", "UCLASS Macro"),
    ),
    PatternKind.COMPONENT_SETUP: PatternInfo(
        name=PatternKind.COMPONENT_SETUP.value,
        description="Creating and initializing components in constructor",
        best_practices=(
            "Create components in constructor",
            "Set default values in constructor",
            "Use CreateDefaultSubobject for components",
            "Set root component appropriately",
        ),
        documentation="https://docs.unrealengine.com/5.0/en-US/components-in-unreal-engine/",
        examples=(
            'RootComponent = CreateDefaultSubobject<USceneComponent>(TEXT("Root"));',
            'MeshComponent = CreateDefaultSubobject<UStaticMeshComponent>(TEXT("Mesh"));',
        ),
        related_patterns=("Actor Initialization", "Component Registration"),
    ),
    PatternKind.EVENT_BINDING: PatternInfo(
        name=PatternKind.EVENT_BINDING.value,
        description="Binding to delegate events and implementing event handlers",
        best_practices=(
            "Bind events in BeginPlay",
            "Unbind events in EndPlay",
            "Use DECLARE_DYNAMIC_MULTICAST_DELEGATE for Blueprint exposure",
            "Consider weak pointer bindings for safety",
        ),
        documentation="https://docs.unrealengine.com/5.0/en-US/delegates-in-unreal-engine/",
        examples=(
            "OnHealthChanged.AddDynamic(this, &AMyActor::HandleHealthChanged);",
            'FScriptDelegate Delegate; Delegate.BindUFunction(this, "OnCustomEvent");',
        ),
        related_patterns=("Delegate Declaration", "Event Dispatching"),
    ),
}

_MATCHERS: dict[PatternKind, re.Pattern[str]] = {
    PatternKind.UPROPERTY_MACRO: re.compile(r"UPROPERTY\s*\([^)]*\)"),
    PatternKind.COMPONENT_SETUP: re.compile(r"CreateDefaultSubobject\s*<[^>]+>\s*\("),
    PatternKind.EVENT_BINDING: re.compile(r"\.Add(?:Dynamic|Unique|Raw|Lambda)|BindUFunction"),
}


def learning_resources(name: str, url: str) -> list[LearningResource]:
    return [
        LearningResource(
            title="Official Documentation",
            type="documentation",
            url=url,
            description=f"Official Unreal Engine documentation for {name}",
        )
    ]


def suggest_improvements(kind: PatternKind, context: str) -> list[str]:
    improvements: list[str] = []
    match kind:
        case PatternKind.UPROPERTY_MACRO:
            if "Category" not in context:
                improvements.append("Consider adding a Category specifier for better organization")
            if "BlueprintReadWrite" in context and "Meta" not in context:
                improvements.append("Consider adding Meta specifiers for validation")
        case PatternKind.COMPONENT_SETUP:
            if "RootComponent" not in context:
                improvements.append("Consider setting up component hierarchy")
        case PatternKind.EVENT_BINDING:
            lowered = context.lower()
            if "beginplay" not in lowered and "endplay" not in lowered:
                improvements.append("Consider managing event binding/unbinding in BeginPlay/EndPlay")
    return improvements


def detect_patterns(content: str, file_path: str) -> list[PatternMatch]:
    """Report every line matching a catalog pattern, grouped by pattern in catalog order."""
    lines = split_lines(content)
    matches: list[PatternMatch] = []
    for kind in PatternKind:
        info = PATTERN_CATALOG[kind]
        matcher = _MATCHERS[kind]
        for i, line in enumerate(lines):
            if not matcher.search(line):
                continue
            context = context_window(lines, i)
            matches.append(
                PatternMatch(
                    pattern=info,
                    file=file_path,
                    line=i + 1,
                    context=context,
                    suggested_improvements=suggest_improvements(kind, context),
                    learning_resources=learning_resources(info.name, info.documentation),
                )
            )
    return matches


async def detect_patterns_in_file(path: str) -> list[PatternMatch]:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    content = read_source(file_path)
    if content is None:
        raise OSError(f"Could not read file: {path}")
    return detect_patterns(content, path)
