"""
Source file generator — wraps value object members in a complete .g.cs file.

Adds the auto-generated header, the optional file-scoped namespace, the
debugger/coverage attributes, the partial struct declaration with its
interface list and the ``Value`` field, then delegates the members to
``value_object.write_members``.
"""

from __future__ import annotations

from src.core.models.descriptor import ValueObjectDescriptor
from src.core.models.template import GeneratedFile
from src.core.services.generators.code_writer import INDENT, CodeWriter
from src.core.services.generators.value_object import write_members

ARTIFACT_SUFFIX = ".g.cs"
VALUE_OBJECT_INTERFACE = "global::TransparentValueObjects.Augments.IValueObject"

_ATTRIBUTES = (
    '[global::System.Diagnostics.DebuggerDisplay("{Value}")]',
    "[global::System.Diagnostics.CodeAnalysis.ExcludeFromCodeCoverage"
    '(Justification = "Auto-generated.")]',
)


def artifact_name(descriptor: ValueObjectDescriptor) -> str:
    """File name of the generated source, e.g. ``UserId.g.cs``."""
    return f"{descriptor.type_name}{ARTIFACT_SUFFIX}"


def _interfaces(descriptor: ValueObjectDescriptor) -> list[str]:
    vo = descriptor.type_name
    inner = descriptor.inner_type_name
    return [
        f"{VALUE_OBJECT_INTERFACE}<{inner}>",
        f"global::System.IEquatable<{vo}>",
        f"global::System.IEquatable<{inner}>",
    ]


def render_source_file(descriptor: ValueObjectDescriptor) -> str:
    """Render the full companion source file for one value object."""
    writer = CodeWriter()

    writer.append_line("// <auto-generated/>")
    writer.append_line("#nullable enable")
    if descriptor.namespace:
        writer.append_line(f"namespace {descriptor.namespace};")
    writer.append_blank_line()

    for attribute in _ATTRIBUTES:
        writer.append_line(attribute)
    writer.append_line(f"readonly partial struct {descriptor.type_name} :")

    interfaces = _interfaces(descriptor)
    for i, interface in enumerate(interfaces):
        separator = "," if i < len(interfaces) - 1 else ""
        writer.append_line(f"{INDENT}{interface}{separator}")

    with writer.open_block():
        writer.append_line(f"public readonly {descriptor.inner_type_name} Value;")
        writer.append_blank_line()
        write_members(writer, descriptor)

    return writer.serialize()


def generate(descriptor: ValueObjectDescriptor) -> GeneratedFile:
    """Render ``descriptor`` into a :class:`GeneratedFile`."""
    return GeneratedFile(
        path=artifact_name(descriptor),
        content=render_source_file(descriptor),
        type_name=descriptor.type_name,
        overwrite=True,
    )
