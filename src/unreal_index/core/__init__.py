from unreal_index.core.api_reference import query_api, synthesize
from unreal_index.core.cache import LruCache
from unreal_index.core.config import create_index
from unreal_index.core.errors import (
    ClassNotFoundError,
    InvalidEnginePathError,
    InvalidPathError,
    InvalidQueryError,
    NoSearchPathConfiguredError,
    NotInitializedError,
    SubsystemDirectoryNotFoundError,
    UnknownConceptError,
    UnknownSubsystemError,
    UnrealIndexError,
)
from unreal_index.core.extractor import extract_class
from unreal_index.core.hierarchy import build_hierarchy
from unreal_index.core.index import ClassIndex
from unreal_index.core.locator import FileSystemLocator, SearchRoots
from unreal_index.core.patterns import detect_patterns
from unreal_index.core.practices import get_best_practices
from unreal_index.core.search import find_references, search_text
from unreal_index.core.subsystems import analyze_subsystem

__all__ = [
    "ClassIndex",
    "ClassNotFoundError",
    "FileSystemLocator",
    "InvalidEnginePathError",
    "InvalidPathError",
    "InvalidQueryError",
    "LruCache",
    "NoSearchPathConfiguredError",
    "NotInitializedError",
    "SearchRoots",
    "SubsystemDirectoryNotFoundError",
    "UnknownConceptError",
    "UnknownSubsystemError",
    "UnrealIndexError",
    "analyze_subsystem",
    "build_hierarchy",
    "create_index",
    "detect_patterns",
    "extract_class",
    "find_references",
    "get_best_practices",
    "query_api",
    "search_text",
    "synthesize",
]
