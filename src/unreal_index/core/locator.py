"""Search-root layout and filesystem enumeration of candidate source files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

INTERMEDIATE_DIR = "Intermediate"
GENERATED_HEADER_SUFFIX = ".generated.h"

# Relative to the engine root, highest priority first. The engine root itself is tried last.
_ENGINE_CLASS_DIRS: tuple[str, ...] = (
    "Engine/Source/Runtime",
    "Engine/Source/Editor",
    "Source/Runtime",
    "Source",
)
_ENGINE_SHADER_DIRS: tuple[str, ...] = ("Engine/Shaders", "Shaders")
_SHADER_EXTENSIONS: tuple[str, ...] = ("usf", "ush")

_BRACE_RE = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``*.{h,cpp}`` into ``["*.h", "*.cpp"]``; nested groups expand recursively."""
    match = _BRACE_RE.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option.strip()}{tail}"))
    return expanded


def is_shader_pattern(pattern: str) -> bool:
    return any(ext in pattern for ext in _SHADER_EXTENSIONS)


def read_source(path: Path) -> str | None:
    """Read a source file as UTF-8 text, or ``None`` when it cannot be read."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.debug("Skipping unreadable file %s: %s", path, exc)
        return None
    # Invalid UTF-8 sequences become U+FFFD instead of dropping the file.
    return data.decode("utf-8", errors="replace")


def split_lines(content: str) -> list[str]:
    return [line.rstrip("\r") for line in content.split("\n")]


def context_window(lines: list[str], index: int, radius: int = 2) -> str:
    """Return the line at *index* with *radius* lines either side, clipped at the file bounds."""
    return "\n".join(lines[max(0, index - radius) : index + radius + 1])


@dataclass(frozen=True)
class SearchRoots:
    custom_root: Path | None = None
    engine_root: Path | None = None

    @property
    def is_configured(self) -> bool:
        return self.custom_root is not None or self.engine_root is not None

    def class_search_roots(self) -> list[Path]:
        """Roots for single-class resolution, in priority order; missing directories are dropped."""
        candidates: list[Path] = []
        if self.custom_root is not None:
            candidates.append(self.custom_root)
        if self.engine_root is not None:
            candidates.extend(self.engine_root / rel for rel in _ENGINE_CLASS_DIRS)
            candidates.append(self.engine_root)
        return [c for c in candidates if c.is_dir()]

    def text_search_roots(self, *, include_shaders: bool = False) -> list[Path]:
        roots: list[Path] = []
        if self.custom_root is not None:
            roots.append(self.custom_root)
        if self.engine_root is not None:
            roots.append(self.engine_root)
            if include_shaders:
                roots.extend(
                    self.engine_root / rel for rel in _ENGINE_SHADER_DIRS if (self.engine_root / rel).is_dir()
                )
        return roots


class FileSystemLocator:
    """Enumerate files under a root with ``Path.rglob``.

    Implements the ``SourceLocator`` protocol. Anything below an ``Intermediate``
    directory is skipped; generated headers are skipped on request.
    """

    async def list_files(self, root: Path, pattern: str, *, exclude_generated: bool = False) -> list[Path]:
        base = root.resolve()
        if not base.is_dir():
            return []
        found: set[Path] = set()
        for sub_pattern in expand_braces(pattern):
            for path in base.rglob(sub_pattern):
                if not path.is_file():
                    continue
                if INTERMEDIATE_DIR in path.relative_to(base).parts:
                    continue
                if exclude_generated and path.name.endswith(GENERATED_HEADER_SUFFIX):
                    continue
                found.add(path)
        return sorted(found)
