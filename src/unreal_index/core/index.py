"""Class index: resolves class names to structural records across the configured roots."""

from __future__ import annotations

import logging
from pathlib import Path

from unreal_index.core.api_reference import synthesize
from unreal_index.core.cache import DEFAULT_CACHE_SIZE, LruCache
from unreal_index.core.errors import (
    ClassNotFoundError,
    InvalidEnginePathError,
    InvalidPathError,
    NoSearchPathConfiguredError,
    NotInitializedError,
)
from unreal_index.core.extractor import contains_class_definition, extract_class
from unreal_index.core.locator import FileSystemLocator, SearchRoots, read_source
from unreal_index.core.ports.locator import SourceLocator
from unreal_index.models import ApiEntry, StructuralRecord

logger = logging.getLogger(__name__)

HEADER_PATTERN = "*.h"


class ClassIndex:
    """Process-lifetime index of resolved classes.

    Records are cached by class name and never invalidated; edits to the
    scanned tree after a class was resolved are not picked up.
    """

    def __init__(
        self,
        roots: SearchRoots | None = None,
        locator: SourceLocator | None = None,
        cache_size: int = DEFAULT_CACHE_SIZE,
    ) -> None:
        self._roots = roots or SearchRoots()
        self._locator: SourceLocator = locator or FileSystemLocator()
        self._classes: LruCache[str, StructuralRecord] = LruCache(cache_size)
        self._api_entries: LruCache[str, ApiEntry] = LruCache(cache_size)

    @property
    def roots(self) -> SearchRoots:
        return self._roots

    @property
    def locator(self) -> SourceLocator:
        return self._locator

    @property
    def is_configured(self) -> bool:
        return self._roots.is_configured

    def require_configured(self) -> SearchRoots:
        if not self._roots.is_configured:
            raise NotInitializedError()
        return self._roots

    def configure_roots(self, custom_path: str | None = None, engine_path: str | None = None) -> SearchRoots:
        """Validate and set the custom and/or engine roots; unspecified roots keep their value."""
        custom_root = self._roots.custom_root
        engine_root = self._roots.engine_root

        if engine_path is not None:
            engine = Path(engine_path)
            if not engine.is_dir():
                raise InvalidPathError(engine_path)
            if not (engine / "Engine").is_dir() and not (engine / "Source").is_dir():
                raise InvalidEnginePathError(engine_path)
            engine_root = engine.resolve()
            logger.info("Initialized with Unreal Engine path: %s", engine_root)

        if custom_path is not None:
            custom = Path(custom_path)
            if not custom.is_dir():
                raise InvalidPathError(custom_path)
            custom_root = custom.resolve()
            logger.info("Initialized with custom codebase path: %s", custom_root)

        self._roots = SearchRoots(custom_root=custom_root, engine_root=engine_root)
        return self._roots

    async def resolve_class(self, name: str) -> StructuralRecord:
        """Resolve *name* case-insensitively; the record carries the spelling declared in the source."""
        key = name.lower()
        cached = self._classes.get(key)
        if cached is not None:
            logger.debug("Class cache hit for %s", name)
            return cached

        search_roots = self._roots.class_search_roots()
        if not search_roots:
            raise NoSearchPathConfiguredError()

        for root in search_roots:
            files = await self._locator.list_files(root, HEADER_PATTERN, exclude_generated=True)
            for path in files:
                content = read_source(path)
                if content is None or not contains_class_definition(content, name):
                    continue
                record = extract_class(content, name, str(path))
                if record is not None:
                    logger.debug("Resolved %s in %s:%d", name, path, record.definition_line)
                    self._classes.put(key, record)
                    return record

        raise ClassNotFoundError(name)

    def cached_records(self) -> list[StructuralRecord]:
        return list(self._classes.values())

    def cache_size(self) -> int:
        return self._classes.size()

    def api_entry(self, record: StructuralRecord) -> ApiEntry:
        entry = self._api_entries.get(record.name)
        if entry is None:
            entry = synthesize(record)
            self._api_entries.put(record.name, entry)
        return entry
