"""Tests for search-root layout and file enumeration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from unreal_index.core.locator import (
    FileSystemLocator,
    SearchRoots,
    context_window,
    expand_braces,
    is_shader_pattern,
    read_source,
    split_lines,
)


class TestExpandBraces:
    def test_plain_pattern(self) -> None:
        assert expand_braces("*.h") == ["*.h"]

    def test_single_group(self) -> None:
        assert expand_braces("*.{h,cpp}") == ["*.h", "*.cpp"]

    def test_two_groups(self) -> None:
        assert expand_braces("{A,B}*.{h,cpp}") == ["A*.h", "A*.cpp", "B*.h", "B*.cpp"]

    def test_shader_detection(self) -> None:
        assert is_shader_pattern("*.{usf,ush}") is True
        assert is_shader_pattern("*.{h,cpp}") is False


class TestFileSystemLocator:
    @pytest.mark.asyncio
    async def test_skips_intermediate_and_generated(
        self, tmp_path: Path, make_file: Callable[[Path, str, str], Path]
    ) -> None:
        make_file(tmp_path, "Source/Game/Hero.h", "")
        make_file(tmp_path, "Source/Game/Hero.generated.h", "")
        make_file(tmp_path, "Intermediate/Build/Hero.h", "")
        make_file(tmp_path, "Source/Game/Hero.cpp", "")

        locator = FileSystemLocator()
        headers = await locator.list_files(tmp_path, "*.h", exclude_generated=True)
        assert headers == [(tmp_path / "Source/Game/Hero.h").resolve()]

        everything = await locator.list_files(tmp_path, "*.{h,cpp}")
        names = sorted(p.name for p in everything)
        assert names == ["Hero.cpp", "Hero.generated.h", "Hero.h"]

    @pytest.mark.asyncio
    async def test_missing_root_yields_nothing(self, tmp_path: Path) -> None:
        assert await FileSystemLocator().list_files(tmp_path / "nope", "*.h") == []


class TestSearchRoots:
    def test_unconfigured(self) -> None:
        roots = SearchRoots()
        assert roots.is_configured is False
        assert roots.class_search_roots() == []
        assert roots.text_search_roots() == []

    def test_class_roots_priority(self, tmp_path: Path) -> None:
        custom = tmp_path / "Game"
        engine = tmp_path / "UE"
        for d in (custom, engine / "Engine/Source/Runtime", engine / "Engine/Source/Editor", engine / "Source"):
            d.mkdir(parents=True)

        roots = SearchRoots(custom_root=custom, engine_root=engine)
        assert roots.class_search_roots() == [
            custom,
            engine / "Engine/Source/Runtime",
            engine / "Engine/Source/Editor",
            engine / "Source",
            engine,
        ]

    def test_shader_roots_only_when_requested(self, tmp_path: Path) -> None:
        engine = tmp_path / "UE"
        (engine / "Engine/Shaders").mkdir(parents=True)
        roots = SearchRoots(engine_root=engine)
        assert roots.text_search_roots() == [engine]
        assert roots.text_search_roots(include_shaders=True) == [engine, engine / "Engine/Shaders"]


class TestTextHelpers:
    def test_context_window_clips_at_bounds(self) -> None:
        lines = ["a", "b", "c", "d", "e", "f"]
        assert context_window(lines, 0) == "a\nb\nc"
        assert context_window(lines, 3) == "b\nc\nd\ne\nf"
        assert context_window(lines, 5) == "d\ne\nf"

    def test_split_lines_strips_carriage_returns(self) -> None:
        assert split_lines("a\r\nb\n") == ["a", "b", ""]

    def test_read_source_missing(self, tmp_path: Path) -> None:
        assert read_source(tmp_path / "missing.h") is None

    def test_read_source_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "Latin.h"
        path.write_bytes(b"class A\xe9 {};\n")
        content = read_source(path)
        assert content is not None
        assert content.startswith("class A")

    def test_read_source_os_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "Locked.h"
        path.write_bytes(b"class A\xe9 {};\n")

        def _deny(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_bytes", _deny)
        assert read_source(path) is None

    def test_read_source_directory(self, tmp_path: Path) -> None:
        assert read_source(tmp_path) is None
