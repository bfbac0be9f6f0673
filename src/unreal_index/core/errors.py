"""Error types raised by the source index."""


class UnrealIndexError(Exception):
    """Base error for index operations."""

    pass


class NotInitializedError(UnrealIndexError):
    """No source root has been configured."""

    def __init__(self) -> None:
        super().__init__("No codebase initialized. Set an Unreal Engine path or a custom codebase first.")


class InvalidPathError(UnrealIndexError):
    """Configured path does not exist."""

    def __init__(self, path: str, reason: str = "Directory does not exist") -> None:
        super().__init__(f"Invalid path: {reason} - {path}")
        self.path = path


class InvalidEnginePathError(InvalidPathError):
    """Engine path exists but has neither an Engine nor a Source directory."""

    def __init__(self, path: str) -> None:
        super().__init__(path, reason="Neither Engine nor Source directory found")


class NoSearchPathConfiguredError(UnrealIndexError):
    """None of the candidate search roots exists."""

    def __init__(self) -> None:
        super().__init__("No valid search path configured")


class ClassNotFoundError(UnrealIndexError):
    """No header under any search root defines the class."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Class not found: {name}")
        self.name = name


class UnknownSubsystemError(UnrealIndexError):
    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(f"Unknown subsystem: {name}. Available: {', '.join(available)}")
        self.name = name


class SubsystemDirectoryNotFoundError(UnrealIndexError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Subsystem directory not found: {path}")
        self.path = path


class UnknownConceptError(UnrealIndexError):
    def __init__(self, concept: str, available: list[str]) -> None:
        super().__init__(f"Unknown concept: {concept}. Available: {', '.join(available)}")
        self.concept = concept


class InvalidQueryError(UnrealIndexError):
    """Search query is not a valid regular expression."""

    def __init__(self, query: str, detail: str) -> None:
        super().__init__(f"Invalid search query '{query}': {detail}")
        self.query = query
