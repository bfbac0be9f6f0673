"""FastMCP server exposing unreal-index tools."""

from __future__ import annotations

from typing import Any, Literal

from fastmcp import FastMCP

from unreal_index.core.api_reference import api_docs_url
from unreal_index.core.api_reference import (
    query_api as _query_api,
)
from unreal_index.core.hierarchy import build_hierarchy
from unreal_index.core.index import ClassIndex
from unreal_index.core.patterns import detect_patterns_in_file
from unreal_index.core.practices import (
    get_best_practices as _get_best_practices,
)
from unreal_index.core.search import DEFAULT_FILE_PATTERN, search_text
from unreal_index.core.search import (
    find_references as _find_references,
)
from unreal_index.core.subsystems import (
    analyze_subsystem as _analyze_subsystem,
)

SymbolKind = Literal["class", "function", "variable"]
SubsystemName = Literal["Rendering", "Physics", "Audio", "Networking", "Input", "AI", "Animation", "UI"]
ConceptName = Literal["UPROPERTY", "UFUNCTION", "Components", "Events", "Replication", "Blueprints"]


def create_mcp_server(index: ClassIndex) -> FastMCP:
    """Create a FastMCP server wired to the given index."""

    mcp = FastMCP(
        "unreal-index",
        instructions="Analyze Unreal Engine and custom C++ source trees: classes, hierarchies, references and API.",
    )

    @mcp.tool()
    async def set_unreal_path(path: str) -> str:
        """Set the path to Unreal Engine source code."""
        index.configure_roots(engine_path=path)
        return f"Successfully set Unreal Engine path to: {path}"

    @mcp.tool()
    async def set_custom_codebase(path: str) -> str:
        """Set the path to a custom C++ codebase for analysis."""
        index.configure_roots(custom_path=path)
        return f"Successfully set custom codebase path to: {path}"

    @mcp.tool()
    async def analyze_class(class_name: str) -> dict[str, Any]:
        """Get detailed information about a C++ class."""
        index.require_configured()
        record = await index.resolve_class(class_name)
        return record.model_dump()

    @mcp.tool()
    async def find_class_hierarchy(class_name: str, include_implemented_interfaces: bool = True) -> dict[str, Any]:
        """Get the inheritance hierarchy for a class."""
        index.require_configured()
        node = await build_hierarchy(index, class_name, include_implemented_interfaces)
        return node.model_dump()

    @mcp.tool()
    async def find_references(identifier: str, type: SymbolKind | None = None) -> list[dict[str, Any]]:
        """Find all references to a class, function, or variable."""
        matches = await _find_references(index, identifier, type)
        return [m.model_dump() for m in matches]

    @mcp.tool()
    async def search_code(
        query: str, file_pattern: str = DEFAULT_FILE_PATTERN, include_comments: bool = True
    ) -> list[dict[str, Any]]:
        """Search through code with context. Supports C++ headers, source files, and HLSL shaders (*.{usf,ush})."""
        matches = await search_text(index, query, file_pattern, include_comments)
        return [m.model_dump() for m in matches]

    @mcp.tool()
    async def detect_patterns(file_path: str) -> list[dict[str, Any]]:
        """Detect Unreal Engine patterns in a file and suggest improvements."""
        matches = await detect_patterns_in_file(file_path)
        return [
            {
                "pattern": m.pattern.name,
                "description": m.pattern.description,
                "location": f"{m.file}:{m.line}",
                "context": m.context,
                "improvements": "\n".join(m.suggested_improvements),
                "documentation": m.pattern.documentation,
                "best_practices": "\n".join(m.pattern.best_practices),
                "examples": "\n".join(m.pattern.examples),
            }
            for m in matches
        ]

    @mcp.tool()
    async def get_best_practices(concept: ConceptName) -> dict[str, Any]:
        """Get Unreal Engine best practices and documentation for a specific concept."""
        return _get_best_practices(concept).model_dump()

    @mcp.tool()
    async def analyze_subsystem(subsystem: SubsystemName) -> dict[str, Any]:
        """Analyze a specific Unreal Engine subsystem."""
        summary = await _analyze_subsystem(index, subsystem)
        return summary.model_dump()

    @mcp.tool()
    async def query_api(
        query: str,
        category: str | None = None,
        module: str | None = None,
        include_examples: bool = True,
        max_results: int = 10,
    ) -> list[dict[str, Any]]:
        """Rank previously analyzed classes as API reference entries for a query."""
        results = await _query_api(index, query, category, module, include_examples, max_results)
        return [
            {
                "class": r.reference.class_name,
                "description": r.reference.description,
                "module": r.reference.module,
                "category": r.reference.category.value,
                "syntax": r.reference.syntax,
                "examples": list(r.reference.examples),
                "remarks": list(r.reference.remarks),
                "documentation": api_docs_url(r.reference),
                "relevance": r.relevance,
            }
            for r in results
        ]

    return mcp
