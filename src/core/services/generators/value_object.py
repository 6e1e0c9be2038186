"""
Value object generator — emits the members of a transparent value object.

Every ``add_*`` / ``implement_*`` / ``override_*`` function appends one
self-contained fragment to a :class:`CodeWriter`.  They only read their
arguments, so each one can be exercised on its own.  ``write_members``
runs them in their fixed order; ``generate_value_object`` does the same
against a fresh writer and returns the text.

Output for a given descriptor is byte-identical across runs.
"""

from __future__ import annotations

from src.core.models.descriptor import ValueObjectDescriptor
from src.core.services.generators.code_writer import CodeWriter

EQUALITY_COMPARER_TYPE = "global::System.Collections.Generic.IEqualityComparer"
DEFAULT_EQUALITY_COMPARER = "InnerValueDefaultEqualityComparer"


# ── Constructors ────────────────────────────────────────────────


def add_public_constructor(
    writer: CodeWriter,
    value_object_type: str,
    has_default_value: bool,
) -> None:
    """Parameterless constructor.

    Types with a ``DefaultValue`` copy its wrapped value.  Types without
    one get a constructor that is an error to call and throws at runtime,
    pointing callers at ``From``.
    """
    if has_default_value:
        writer.append_line(f"public {value_object_type}()")
        with writer.open_block():
            writer.append_line("Value = DefaultValue.Value;")
        return

    message = f'$"Use {value_object_type}.{{nameof(From)}} instead."'
    writer.append_line(f"[global::System.Obsolete({message}, error: true)]")
    writer.append_line(f"public {value_object_type}()")
    with writer.open_block():
        writer.append_line(f"throw new global::System.InvalidOperationException({message});")


def add_private_constructor(
    writer: CodeWriter,
    value_object_type: str,
    inner_value_type: str,
) -> None:
    writer.append_line(f"private {value_object_type}({inner_value_type} value)")
    with writer.open_block():
        writer.append_line("Value = value;")


def add_factory_method(
    writer: CodeWriter,
    value_object_type: str,
    inner_value_type: str,
) -> None:
    writer.append_line(
        f"public static {value_object_type} From({inner_value_type} value) => new(value);"
    )
    writer.append_blank_line()


# ── object overrides ────────────────────────────────────────────


def override_base_methods(writer: CodeWriter) -> None:
    writer.append_line("public override int GetHashCode() => Value.GetHashCode();")
    writer.append_blank_line()
    writer.append_line("public override string ToString() => Value.ToString();")
    writer.append_blank_line()


# ── Equality ────────────────────────────────────────────────────


def implement_equals_methods(
    writer: CodeWriter,
    value_object_type: str,
    inner_value_type: str,
    nullability_marker: str,
    has_default_equality_comparer: bool,
) -> None:
    """Typed ``Equals`` overloads plus the ``object`` override.

    Only the bare inner-value overload depends on the declared default
    comparer; the overload taking an explicit comparer always uses the
    one it is given.
    """
    vo = value_object_type
    inner = inner_value_type

    if has_default_equality_comparer:
        inner_equals = f"{DEFAULT_EQUALITY_COMPARER}.Equals(Value, other)"
    else:
        inner_equals = "Value.Equals(other)"

    writer.append_line(f"public bool Equals({vo} other) => Equals(other.Value);")
    writer.append_line(
        f"public bool Equals({inner}{nullability_marker} other) => {inner_equals};"
    )
    writer.append_line(
        f"public bool Equals({vo} other, {EQUALITY_COMPARER_TYPE}<{inner}> comparer)"
        " => comparer.Equals(Value, other.Value);"
    )

    # Same-type check must come before the inner-type check.
    writer.append_line("public override bool Equals(object? obj)")
    with writer.open_block():
        writer.append_line("if (obj is null) return false;")
        writer.append_line(f"if (obj is {vo} value) return Equals(value);")
        writer.append_line(f"if (obj is {inner} innerValue) return Equals(innerValue);")
        writer.append_line("return false;")


def add_equality_operators(
    writer: CodeWriter,
    value_object_type: str,
    inner_value_type: str,
) -> None:
    """``==``/``!=`` pairs for VO/VO, VO/inner and inner/VO.

    The inner/VO pair swaps operands so the value object is always the
    receiver of ``Equals``.
    """
    vo = value_object_type
    inner = inner_value_type

    pairs = (
        (vo, vo, "left.Equals(right)"),
        (vo, inner, "left.Equals(right)"),
        (inner, vo, "right.Equals(left)"),
    )
    for left, right, call in pairs:
        writer.append_line(f"public static bool operator ==({left} left, {right} right) => {call};")
        writer.append_line(f"public static bool operator !=({left} left, {right} right) => !{call};")
        writer.append_blank_line()


# ── Conversions ─────────────────────────────────────────────────


def add_explicit_cast_operators(
    writer: CodeWriter,
    value_object_type: str,
    inner_value_type: str,
) -> None:
    vo = value_object_type
    inner = inner_value_type
    writer.append_line(f"public static explicit operator {vo}({inner} value) => From(value);")
    writer.append_line(f"public static explicit operator {inner}({vo} value) => value.Value;")
    writer.append_blank_line()


# ── Type-specific extras ────────────────────────────────────────


def add_guid_specific_code(
    writer: CodeWriter,
    value_object_type: str,
    inner_value_type: str,
) -> None:
    writer.append_line(
        f"public static {value_object_type} NewId() => From({inner_value_type}.NewGuid());"
    )
    writer.append_blank_line()


# ── Public API ──────────────────────────────────────────────────


def write_members(writer: CodeWriter, descriptor: ValueObjectDescriptor) -> None:
    """Append every member for ``descriptor`` at the writer's current depth."""
    vo = descriptor.type_name
    inner = descriptor.inner_type_name

    add_public_constructor(writer, vo, descriptor.has_default_value)
    add_private_constructor(writer, vo, inner)
    add_factory_method(writer, vo, inner)

    override_base_methods(writer)

    implement_equals_methods(
        writer,
        vo,
        inner,
        descriptor.nullability_marker,
        descriptor.has_default_equality_comparer,
    )
    add_equality_operators(writer, vo, inner)
    add_explicit_cast_operators(writer, vo, inner)

    if descriptor.is_guid_like:
        add_guid_specific_code(writer, vo, inner)


def generate_value_object(descriptor: ValueObjectDescriptor) -> str:
    """Render the member body for one value object.

    Args:
        descriptor: Resolved description of the wrapper type.

    Returns:
        The generated members, starting at depth 0.
    """
    writer = CodeWriter()
    write_members(writer, descriptor)
    return writer.serialize()
