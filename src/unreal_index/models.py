from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    name: str
    type: str
    default_value: str | None = None


class Method(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    return_type: str
    is_virtual: bool = False
    is_override: bool = False
    line: int
    # Parameter parsing is not implemented by the extractor; always empty.
    parameters: tuple[Parameter, ...] = ()


class Property(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    line: int


class StructuralRecord(BaseModel):
    """Parsed per-class structural summary, immutable once created."""

    model_config = ConfigDict(frozen=True)

    name: str
    source_file: str
    definition_line: int
    superclass_names: tuple[str, ...] = ()
    interface_names: tuple[str, ...] = ()
    methods: tuple[Method, ...] = ()
    properties: tuple[Property, ...] = ()


class HierarchyNode(BaseModel):
    class_name: str
    superclasses: list["HierarchyNode"] = Field(default_factory=list)
    interfaces: list[str] = Field(default_factory=list)
    cycle: bool = False


HierarchyNode.model_rebuild()  # necessary for recursive types


class CodeMatch(BaseModel):
    file: str
    line: int
    column: int
    context: str


class SubsystemSummary(BaseModel):
    name: str
    main_classes: list[str] = Field(default_factory=list)
    source_files: list[str] = Field(default_factory=list)
    key_features: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class ApiCategory(StrEnum):
    OBJECT = "Object"
    ACTOR = "Actor"
    STRUCTURE = "Structure"
    COMPONENT = "Component"
    MISCELLANEOUS = "Miscellaneous"


class ApiEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    class_name: str
    description: str
    syntax: str
    category: ApiCategory
    module: str
    related_classes: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    remarks: tuple[str, ...] = ()
    version: str = "5.0"


class LearningResource(BaseModel):
    title: str
    type: str = "documentation"
    url: str
    description: str


class ApiQueryResult(BaseModel):
    reference: ApiEntry
    context: str
    relevance: int
    learning_resources: list[LearningResource] = Field(default_factory=list)


class PatternInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    best_practices: tuple[str, ...] = ()
    documentation: str
    examples: tuple[str, ...] = ()
    related_patterns: tuple[str, ...] = ()


class PatternMatch(BaseModel):
    pattern: PatternInfo
    file: str
    line: int
    context: str
    suggested_improvements: list[str] = Field(default_factory=list)
    learning_resources: list[LearningResource] = Field(default_factory=list)


class BestPracticeGuide(BaseModel):
    concept: str
    description: str
    search_terms: list[str] = Field(default_factory=list)
    best_practices: list[str] = Field(default_factory=list)
    reference_notes: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    search_url: str
