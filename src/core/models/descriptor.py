"""
Value object descriptor — the resolved input to one generation run.

Built by the manifest layer (see ``src.core.services.type_resolution``)
and consumed unchanged by the generators.  Names are expected to be
valid C# identifiers already; the generators do not re-check them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValueObjectDescriptor(BaseModel):
    """Everything the generator needs to know about one wrapper type.

    Attributes:
        type_name:                     Name of the generated wrapper type.
        inner_type_name:               Fully-qualified wrapped value type.
        nullability_marker:            Suffix for the nullable inner type in
                                       the bare-value ``Equals`` ("" or "?").
        has_default_value:             Type provides a ``DefaultValue``.
        has_default_equality_comparer: Type provides
                                       ``InnerValueDefaultEqualityComparer``.
        is_guid_like:                  Inner type is a GUID (adds ``NewId``).
        namespace:                     Namespace of the generated file,
                                       ``None`` for the global namespace.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str
    inner_type_name: str
    nullability_marker: str = ""
    has_default_value: bool = False
    has_default_equality_comparer: bool = False
    is_guid_like: bool = False
    namespace: str | None = None
