"""Derived API reference entries and relevance ranking over already-resolved classes."""

from __future__ import annotations

from pathlib import PurePath
from typing import TYPE_CHECKING

from unreal_index.core.patterns import learning_resources
from unreal_index.models import ApiCategory, ApiEntry, ApiQueryResult, StructuralRecord

if TYPE_CHECKING:
    from unreal_index.core.index import ClassIndex

DEFAULT_MODULE = "Core"
API_VERSION = "5.0"
API_DOCS_BASE = "https://dev.epicgames.com/documentation/en-us/unreal-engine/API"

NAME_WEIGHT = 10
CATEGORY_WEIGHT = 5
MODULE_WEIGHT = 5
TEXT_WEIGHT = 2


def determine_category(record: StructuralRecord) -> ApiCategory:
    if record.name.startswith("U"):
        return ApiCategory.OBJECT
    if record.name.startswith("A"):
        return ApiCategory.ACTOR
    if record.name.startswith("F"):
        return ApiCategory.STRUCTURE
    if any("Component" in base for base in record.superclass_names):
        return ApiCategory.COMPONENT
    return ApiCategory.MISCELLANEOUS


def determine_module(source_file: str) -> str:
    parts = PurePath(source_file).parts
    if "Runtime" in parts:
        i = parts.index("Runtime")
        if i + 1 < len(parts):
            return parts[i + 1]
    return DEFAULT_MODULE


def class_syntax(record: StructuralRecord) -> str:
    syntax = f"class {record.name}"
    if record.superclass_names:
        syntax += " : public " + ", public ".join(record.superclass_names)
    return syntax


def synthesize(record: StructuralRecord) -> ApiEntry:
    return ApiEntry(
        class_name=record.name,
        description=f"Class {record.name}",
        syntax=class_syntax(record),
        category=determine_category(record),
        module=determine_module(record.source_file),
        related_classes=(*record.superclass_names, *record.interface_names),
        version=API_VERSION,
    )


def score(entry: ApiEntry, terms: list[str]) -> int:
    """Weighted term match; a single term can score in every field it hits."""
    name = entry.class_name.lower()
    category = entry.category.value.lower()
    module = entry.module.lower()
    text = " ".join(
        [entry.class_name, entry.description, entry.category.value, entry.module, *entry.related_classes]
    ).lower()

    total = 0
    for term in terms:
        if term in name:
            total += NAME_WEIGHT
        if term in category:
            total += CATEGORY_WEIGHT
        if term in module:
            total += MODULE_WEIGHT
        if term in text:
            total += TEXT_WEIGHT
    return total


def api_context(entry: ApiEntry, include_examples: bool = False) -> str:
    context = f"{entry.class_name} - {entry.description}\n"
    context += f"Module: {entry.module}\n"
    context += f"Category: {entry.category.value}\n\n"
    context += f"Syntax:\n{entry.syntax}\n"
    if include_examples and entry.examples:
        context += "\nExamples:\n"
        context += "\n".join(f"{example}\n" for example in entry.examples)
    return context


def api_docs_url(entry: ApiEntry) -> str:
    return f"{API_DOCS_BASE}/{entry.module}/{entry.class_name}"


async def query_api(
    index: ClassIndex,
    text: str,
    category: str | None = None,
    module: str | None = None,
    include_examples: bool = False,
    max_results: int = 10,
) -> list[ApiQueryResult]:
    """Rank the classes resolved so far against *text*; never triggers new resolution."""
    index.require_configured()
    terms = [t for t in text.lower().split() if t]

    results: list[ApiQueryResult] = []
    for record in index.cached_records():
        entry = index.api_entry(record)
        if category and entry.category.value != category:
            continue
        if module and entry.module != module:
            continue
        relevance = score(entry, terms)
        if relevance <= 0:
            continue
        results.append(
            ApiQueryResult(
                reference=entry,
                context=api_context(entry, include_examples),
                relevance=relevance,
                learning_resources=learning_resources(entry.class_name, api_docs_url(entry)),
            )
        )

    results.sort(key=lambda r: r.relevance, reverse=True)
    return results[: max_results or 10]
