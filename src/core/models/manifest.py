"""
Manifest model — the value objects declared in valueobjects.yml.

Each entry is a declaration of intent: "generate a wrapper called
``name`` around ``type``, with these capabilities."  Resolving the entry
into something the generator can use happens in
``src.core.services.type_resolution``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValueObjectEntry(BaseModel):
    """One value object declared in the manifest."""

    name: str
    type: str
    default_value: bool = False
    default_equality_comparer: bool = False
    namespace: str | None = None
    nullable: str | None = None    # None = infer from the inner type
    guid: bool | None = None       # None = infer from the inner type


class Manifest(BaseModel):
    """Root of valueobjects.yml."""

    version: int = 1

    namespace: str | None = None
    output: str = "."
    value_objects: list[ValueObjectEntry] = Field(default_factory=list)

    def get_value_object(self, name: str) -> ValueObjectEntry | None:
        """Look up an entry by type name."""
        for entry in self.value_objects:
            if entry.name == name:
                return entry
        return None

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.value_objects]
