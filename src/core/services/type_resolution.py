"""
Type resolution — turn manifest entries into generator descriptors.

The manifest lets users write inner types the way they would in C#
(``string``, ``Guid``, ``MyApp.Money``).  The generator needs the
fully-qualified spelling, the nullability marker for the inner type and
whether it is a GUID.  This module works those out.
"""

from __future__ import annotations

import re

from src.core.models.descriptor import ValueObjectDescriptor
from src.core.models.manifest import ValueObjectEntry

GLOBAL_PREFIX = "global::"
GUID_TYPE = "global::System.Guid"

# C# keyword → BCL type
_ALIASES: dict[str, str] = {
    "bool": "global::System.Boolean",
    "byte": "global::System.Byte",
    "sbyte": "global::System.SByte",
    "char": "global::System.Char",
    "decimal": "global::System.Decimal",
    "double": "global::System.Double",
    "float": "global::System.Single",
    "int": "global::System.Int32",
    "uint": "global::System.UInt32",
    "long": "global::System.Int64",
    "ulong": "global::System.UInt64",
    "short": "global::System.Int16",
    "ushort": "global::System.UInt16",
    "nint": "global::System.IntPtr",
    "nuint": "global::System.UIntPtr",
    "object": "global::System.Object",
    "string": "global::System.String",
}

# Unqualified System types people commonly wrap
_SYSTEM_TYPES = frozenset({
    "Boolean", "Byte", "SByte", "Char", "Decimal", "Double", "Single",
    "Int16", "Int32", "Int64", "UInt16", "UInt32", "UInt64",
    "String", "Object", "Guid", "DateTime", "DateTimeOffset", "DateOnly",
    "TimeOnly", "TimeSpan", "Uri", "Version",
})

_REFERENCE_TYPES = frozenset({
    "global::System.String",
    "global::System.Object",
    "global::System.Uri",
    "global::System.Version",
})

_VALUE_TYPES = frozenset(
    name for name in (*_ALIASES.values(), *(f"{GLOBAL_PREFIX}System.{t}" for t in _SYSTEM_TYPES))
    if name not in _REFERENCE_TYPES
)

_IDENTIFIER_RE = re.compile(r"^@?[A-Za-z_][A-Za-z0-9_]*$")

_KEYWORDS = frozenset({
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator",
    "out", "override", "params", "private", "protected", "public",
    "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
    "stackalloc", "static", "string", "struct", "switch", "this", "throw",
    "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
    "ushort", "using", "virtual", "void", "volatile", "while",
})


def is_valid_identifier(name: str) -> bool:
    """Check ``name`` is a usable C# identifier.

    Keywords are only accepted in verbatim form (``@class``).
    """
    if not _IDENTIFIER_RE.match(name):
        return False
    if name.startswith("@"):
        return True
    return name not in _KEYWORDS


def is_valid_namespace(name: str) -> bool:
    """Check every dot-separated segment of ``name`` is an identifier."""
    return bool(name) and all(is_valid_identifier(part) for part in name.split("."))


def resolve_inner_type_name(name: str) -> str:
    """Fully qualify an inner type name.

    ``string`` → ``global::System.String``, ``Guid`` →
    ``global::System.Guid``, ``MyApp.Money`` → ``global::MyApp.Money``.
    Already-global names and bare user types are returned unchanged.
    """
    name = name.strip()
    if name.startswith(GLOBAL_PREFIX):
        return name
    if name in _ALIASES:
        return _ALIASES[name]
    if name in _SYSTEM_TYPES:
        return f"{GLOBAL_PREFIX}System.{name}"
    if "." in name:
        return f"{GLOBAL_PREFIX}{name}"
    return name


def is_guid_type(resolved_name: str) -> bool:
    return resolved_name == GUID_TYPE


def nullability_marker_for(resolved_name: str) -> str:
    """``""`` for known value types, ``"?"`` for everything else.

    User structs can't be told apart from classes here; their entries
    need ``nullable: ""``.
    """
    return "" if resolved_name in _VALUE_TYPES else "?"


def build_descriptor(
    entry: ValueObjectEntry,
    default_namespace: str | None = None,
) -> ValueObjectDescriptor:
    """Resolve one manifest entry into a generator descriptor.

    Explicit ``nullable`` and ``guid`` settings on the entry win over the
    inferred values.
    """
    inner = resolve_inner_type_name(entry.type)

    marker = entry.nullable if entry.nullable is not None else nullability_marker_for(inner)
    guid = entry.guid if entry.guid is not None else is_guid_type(inner)

    return ValueObjectDescriptor(
        type_name=entry.name,
        inner_type_name=inner,
        nullability_marker=marker,
        has_default_value=entry.default_value,
        has_default_equality_comparer=entry.default_equality_comparer,
        is_guid_like=guid,
        namespace=entry.namespace or default_namespace,
    )
