"""Heuristic, line-oriented extraction of C++ class structure.

Reflection and export macros make the headers hostile to a real grammar, so
classes are recognised with regular expressions only. The results are an
approximation: template bases, nested classes and multi-line declarations are
not understood.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from unreal_index.core.locator import read_source, split_lines
from unreal_index.models import Method, Property, StructuralRecord

logger = logging.getLogger(__name__)

MAX_MEMBERS = 100

# Marker interface every UINTERFACE derives from; it is a base class, not an implemented interface.
_INTERFACE_MARKER = "IInterface"
# Bases such as ``IntBox`` or ``Int32Range`` start with "I" but are value types.
_INTEGER_PREFIX = "Int"

_SKIP_METHOD_TOKENS = ("DECLARE_", "typedef", "#define")

_BASE_RE = re.compile(r"(?:public|private|protected)\s+(\w+)")
_METHOD_RE = re.compile(
    r"^\s*(?:UFUNCTION\s*\([^)]*\)\s*)?(?:virtual\s+)?(?:static\s+)?(?:\w+_API\s+)?"
    r"(\w+(?:<[^>]+>)?(?:\s*[*&])?)\s+(\w+)\s*\([^)]*\)\s*(?:const)?\s*(?:override)?"
)
_PROPERTY_RE = re.compile(
    r"^[ \t]*UPROPERTY\s*\([^)]*\)[ \t]*\n?\s*(\w+(?:<[^>]+>)?(?:\s*[*&])?)\s+(\w+)",
    re.MULTILINE,
)
_ANY_CLASS_RE = re.compile(r"\bclass\s+(?:\w+_API\s+)?(\w+)\s*(?:final)?\s*:")


def _definition_pattern(class_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"^\s*(?:UCLASS\s*\([^)]*\)\s*)?class\s+(?:\w+_API\s+)?({re.escape(class_name)})\b"
        r"(?!\s*(?:final\s*)?;)\s*(?:final)?\s*(?::\s*(.+))?",
        re.IGNORECASE,
    )


def _existence_pattern(class_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"\bclass\s+(?:\w+_API\s+)?{re.escape(class_name)}\s*(?:final)?\s*(?::|{{)",
        re.IGNORECASE,
    )


def is_interface_name(name: str) -> bool:
    return name.startswith("I") and name != _INTERFACE_MARKER and not name.startswith(_INTEGER_PREFIX)


def contains_class_definition(content: str, class_name: str) -> bool:
    """Cheap pre-check: does any ``class <name> ... :`` or ``{`` appear in the text?"""
    return _existence_pattern(class_name).search(content) is not None


def find_class_names(content: str) -> list[str]:
    """Names of all classes declared with an inheritance clause, in file order."""
    return _ANY_CLASS_RE.findall(content)


def parse_inheritance(clause: str) -> tuple[list[str], list[str]]:
    """Split an inheritance clause into (superclasses, interfaces)."""
    superclasses: list[str] = []
    interfaces: list[str] = []
    clause = re.sub(r"\s*\{.*$", "", clause).strip()
    if not clause:
        return superclasses, interfaces
    for entry in clause.split(","):
        match = _BASE_RE.search(entry.strip())
        if match is None:
            continue
        base = match.group(1)
        if is_interface_name(base):
            interfaces.append(base)
        else:
            superclasses.append(base)
    return superclasses, interfaces


def extract_methods(lines: list[str]) -> list[Method]:
    methods: list[Method] = []
    for i, line in enumerate(lines):
        if any(token in line for token in _SKIP_METHOD_TOKENS):
            continue
        match = _METHOD_RE.match(line)
        if match is None:
            continue
        methods.append(
            Method(
                name=match.group(2),
                return_type=match.group(1),
                is_virtual="virtual" in line,
                is_override="override" in line,
                line=i + 1,
            )
        )
        if len(methods) >= MAX_MEMBERS:
            break
    return methods


def extract_properties(content: str) -> list[Property]:
    properties: list[Property] = []
    for match in _PROPERTY_RE.finditer(content):
        properties.append(
            Property(
                name=match.group(2),
                type=match.group(1),
                line=content.count("\n", 0, match.start()) + 1,
            )
        )
        if len(properties) >= MAX_MEMBERS:
            break
    return properties


def extract_class(content: str, class_name: str, source_file: str) -> StructuralRecord | None:
    """Build a ``StructuralRecord`` for *class_name*, or ``None`` if its definition line is absent.

    Methods and properties are collected from the whole file, not only from the
    class body.
    """
    lines = split_lines(content)
    definition = _definition_pattern(class_name)

    definition_line = -1
    declared_name = class_name
    inheritance = ""
    for i, line in enumerate(lines):
        match = definition.match(line)
        if match:
            definition_line = i + 1
            declared_name = match.group(1)
            inheritance = match.group(2) or ""
            break

    if definition_line == -1:
        return None

    superclasses, interfaces = parse_inheritance(inheritance)
    return StructuralRecord(
        name=declared_name,
        source_file=source_file,
        definition_line=definition_line,
        superclass_names=tuple(superclasses),
        interface_names=tuple(interfaces),
        methods=tuple(extract_methods(lines)),
        properties=tuple(extract_properties(content)),
    )


def extract_class_from_file(path: Path, class_name: str) -> StructuralRecord | None:
    content = read_source(path)
    if content is None:
        return None
    return extract_class(content, class_name, str(path))
