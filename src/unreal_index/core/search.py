"""Line-oriented reference and free-text search over the configured roots."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from unreal_index.core.errors import InvalidQueryError
from unreal_index.core.index import ClassIndex
from unreal_index.core.locator import context_window, is_shader_pattern, read_source, split_lines
from unreal_index.models import CodeMatch

logger = logging.getLogger(__name__)

MAX_RESULTS = 100
DEFAULT_FILE_PATTERN = "*.{h,cpp}"

_COMMENT_OPENERS = ("//", "/*")


async def _collect_files(index: ClassIndex, file_pattern: str) -> list[Path]:
    """Union of matching files across all text-search roots, de-duplicated by absolute path."""
    roots = index.require_configured()
    seen: set[Path] = set()
    files: list[Path] = []
    for root in roots.text_search_roots(include_shaders=is_shader_pattern(file_pattern)):
        for path in await index.locator.list_files(root, file_pattern):
            resolved = path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            files.append(resolved)
    return files


def _scan(
    files: list[Path],
    pattern: re.Pattern[str],
    *,
    include_comments: bool = True,
    limit: int = MAX_RESULTS,
) -> list[CodeMatch]:
    results: list[CodeMatch] = []
    for path in files:
        content = read_source(path)
        if content is None:
            continue
        lines = split_lines(content)
        for i, line in enumerate(lines):
            if not include_comments and line.strip().startswith(_COMMENT_OPENERS):
                continue
            match = pattern.search(line)
            if match is None:
                continue
            results.append(
                CodeMatch(
                    file=str(path),
                    line=i + 1,
                    column=match.start() + 1,
                    context=context_window(lines, i),
                )
            )
            if len(results) >= limit:
                return results
    return results


async def find_references(index: ClassIndex, identifier: str, kind: str | None = None) -> list[CodeMatch]:
    """Whole-word occurrences of *identifier* in headers and sources.

    *kind* (class, function or variable) is accepted for callers but does not
    change the matching.
    """
    logger.debug("Finding references to %s (kind=%s)", identifier, kind)
    files = await _collect_files(index, DEFAULT_FILE_PATTERN)
    pattern = re.compile(rf"\b{re.escape(identifier)}\b")
    return _scan(files, pattern)


async def search_text(
    index: ClassIndex,
    query: str,
    file_pattern: str = DEFAULT_FILE_PATTERN,
    include_comments: bool = True,
) -> list[CodeMatch]:
    """Case-insensitive regex search; comment lines are only recognised by their opening token."""
    try:
        pattern = re.compile(query, re.IGNORECASE)
    except re.error as exc:
        raise InvalidQueryError(query, str(exc)) from None
    files = await _collect_files(index, file_pattern)
    return _scan(files, pattern, include_comments=include_comments)
