import logging
import os

from unreal_index.core.cache import DEFAULT_CACHE_SIZE
from unreal_index.core.errors import InvalidPathError
from unreal_index.core.index import ClassIndex

logger = logging.getLogger(__name__)

ENGINE_PATH_ENV = "UNREAL_ENGINE_PATH"
CUSTOM_CODEBASE_ENV = "UNREAL_CUSTOM_CODEBASE"
CACHE_SIZE_ENV = "UNREAL_INDEX_CACHE_SIZE"


def get_cache_size() -> int:
    raw = os.getenv(CACHE_SIZE_ENV)
    if not raw:
        return DEFAULT_CACHE_SIZE
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", CACHE_SIZE_ENV, raw)
        return DEFAULT_CACHE_SIZE
    return value if value > 0 else DEFAULT_CACHE_SIZE


def create_index(engine_path: str | None = None, custom_path: str | None = None) -> ClassIndex:
    """Build a ``ClassIndex`` from explicit paths, falling back to the environment.

    A path that fails validation is logged and left unset so the index can
    still be configured later through the server tools.
    """
    index = ClassIndex(cache_size=get_cache_size())
    engine = engine_path or os.getenv(ENGINE_PATH_ENV)
    custom = custom_path or os.getenv(CUSTOM_CODEBASE_ENV)

    if engine:
        try:
            index.configure_roots(engine_path=engine)
        except InvalidPathError as exc:
            logger.error("Auto-initialization of engine path failed: %s", exc)
    if custom:
        try:
            index.configure_roots(custom_path=custom)
        except InvalidPathError as exc:
            logger.error("Auto-initialization of custom codebase failed: %s", exc)
    return index
