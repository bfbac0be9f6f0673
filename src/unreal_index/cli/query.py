import asyncio
from collections.abc import Sequence
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from unreal_index.core.api_reference import query_api
from unreal_index.core.config import create_index
from unreal_index.core.errors import UnrealIndexError
from unreal_index.core.hierarchy import build_hierarchy
from unreal_index.core.index import ClassIndex
from unreal_index.core.patterns import detect_patterns_in_file
from unreal_index.core.practices import get_best_practices
from unreal_index.core.search import DEFAULT_FILE_PATTERN, find_references, search_text
from unreal_index.core.subsystems import analyze_subsystem
from unreal_index.models import CodeMatch, HierarchyNode

query_app = typer.Typer(help="Query an Unreal source tree.")
console = Console()

EnginePath = Annotated[
    str | None, typer.Option("--engine-path", help="Unreal Engine root (defaults to $UNREAL_ENGINE_PATH).")
]
CustomPath = Annotated[
    str | None, typer.Option("--custom-path", help="Custom codebase root (defaults to $UNREAL_CUSTOM_CODEBASE).")
]


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _render_matches(matches: Sequence[CodeMatch]) -> None:
    _render_table(
        ["file", "line", "column", "text"],
        [(m.file, m.line, m.column, m.context.split("\n")[min(2, m.line - 1)].strip()) for m in matches],
    )


def _add_branch(tree: Tree, node: HierarchyNode) -> None:
    label = node.class_name
    if node.interfaces:
        label += f" [dim]({', '.join(node.interfaces)})[/dim]"
    if node.cycle:
        label += " [yellow](cycle)[/yellow]"
    branch = tree.add(label)
    for parent in node.superclasses:
        _add_branch(branch, parent)


def _get_index(engine_path: str | None, custom_path: str | None) -> ClassIndex:
    return create_index(engine_path=engine_path, custom_path=custom_path)


def _run(coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except UnrealIndexError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None


@query_app.command("class")
def class_(
    name: Annotated[str, typer.Argument(help="Class name, e.g. AActor.")],
    engine_path: EnginePath = None,
    custom_path: CustomPath = None,
) -> None:
    """Show the structure of a class."""
    index = _get_index(engine_path, custom_path)
    record = _run(index.resolve_class(name))
    console.print(f"[bold]{record.name}[/bold]  {record.source_file}:{record.definition_line}")
    console.print(f"Superclasses: {', '.join(record.superclass_names) or '-'}")
    console.print(f"Interfaces:   {', '.join(record.interface_names) or '-'}")
    _render_table(
        ["method", "returns", "virtual", "override", "line"],
        [(m.name, m.return_type, m.is_virtual, m.is_override, m.line) for m in record.methods],
    )
    _render_table(["property", "type", "line"], [(p.name, p.type, p.line) for p in record.properties])


@query_app.command("hierarchy")
def hierarchy(
    name: Annotated[str, typer.Argument(help="Class name.")],
    interfaces: Annotated[bool, typer.Option(help="Include implemented interfaces.")] = True,
    engine_path: EnginePath = None,
    custom_path: CustomPath = None,
) -> None:
    """Print the inheritance tree of a class."""
    index = _get_index(engine_path, custom_path)
    node = _run(build_hierarchy(index, name, interfaces))
    tree = Tree(f"[bold]{node.class_name}[/bold]")
    if node.interfaces:
        tree.label = f"[bold]{node.class_name}[/bold] [dim]({', '.join(node.interfaces)})[/dim]"
    for parent in node.superclasses:
        _add_branch(tree, parent)
    console.print(tree)


@query_app.command("refs")
def refs(
    identifier: Annotated[str, typer.Argument(help="Identifier to look up.")],
    kind: Annotated[str | None, typer.Option(help="Symbol kind: class, function or variable.")] = None,
    engine_path: EnginePath = None,
    custom_path: CustomPath = None,
) -> None:
    """Find whole-word references to an identifier."""
    index = _get_index(engine_path, custom_path)
    _render_matches(_run(find_references(index, identifier, kind)))


@query_app.command("search")
def search(
    query: Annotated[str, typer.Argument(help="Regular expression (case-insensitive).")],
    file_pattern: Annotated[str, typer.Option(help="File glob, e.g. '*.{usf,ush}'.")] = DEFAULT_FILE_PATTERN,
    include_comments: Annotated[bool, typer.Option(help="Match lines that start a comment.")] = True,
    engine_path: EnginePath = None,
    custom_path: CustomPath = None,
) -> None:
    """Search source lines with a regular expression."""
    index = _get_index(engine_path, custom_path)
    _render_matches(_run(search_text(index, query, file_pattern, include_comments)))


@query_app.command("api")
def api(
    query: Annotated[str, typer.Argument(help="Free-text query.")],
    resolve: Annotated[
        list[str] | None, typer.Option("--resolve", "-r", help="Class to resolve before ranking (repeatable).")
    ] = None,
    category: Annotated[str | None, typer.Option(help="Only this category.")] = None,
    module: Annotated[str | None, typer.Option(help="Only this module.")] = None,
    max_results: Annotated[int, typer.Option(help="Max rows to return.")] = 10,
    engine_path: EnginePath = None,
    custom_path: CustomPath = None,
) -> None:
    """Rank API entries; only classes resolved in this invocation are candidates."""
    index = _get_index(engine_path, custom_path)

    async def _query() -> list[Any]:
        for name in resolve or []:
            await index.resolve_class(name)
        return await query_api(index, query, category, module, max_results=max_results)

    results = _run(_query())
    _render_table(
        ["class", "category", "module", "relevance", "syntax"],
        [
            (r.reference.class_name, r.reference.category.value, r.reference.module, r.relevance, r.reference.syntax)
            for r in results
        ],
    )


@query_app.command("subsystem")
def subsystem(
    name: Annotated[str, typer.Argument(help="Rendering, Physics, Audio, Networking, Input, AI, Animation or UI.")],
    engine_path: EnginePath = None,
    custom_path: CustomPath = None,
) -> None:
    """Summarize an engine subsystem."""
    index = _get_index(engine_path, custom_path)
    summary = _run(analyze_subsystem(index, name))
    console.print(f"[bold]{summary.name}[/bold]: {len(summary.source_files)} files")
    _render_table(["class"], [(c,) for c in summary.main_classes])


@query_app.command("patterns")
def patterns(
    file: Annotated[str, typer.Argument(help="Source file to review.")],
) -> None:
    """Detect Unreal idioms in a file and suggest improvements."""
    try:
        matches = asyncio.run(detect_patterns_in_file(file))
    except OSError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    _render_table(
        ["pattern", "line", "suggestions"],
        [(m.pattern.name, m.line, "; ".join(m.suggested_improvements) or "-") for m in matches],
    )


@query_app.command("practices")
def practices(
    concept: Annotated[
        str, typer.Argument(help="UPROPERTY, UFUNCTION, Components, Events, Replication or Blueprints.")
    ],
) -> None:
    """Show best practices for a concept."""
    try:
        guide = get_best_practices(concept)
    except UnrealIndexError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    console.print(f"[bold]{guide.concept}[/bold]: {guide.description}")
    for item in guide.best_practices:
        console.print(f"  • {item}")
    console.print(f"More: {guide.search_url}")
