"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from src.core.models.descriptor import ValueObjectDescriptor

SAMPLE_MANIFEST = textwrap.dedent("""\
    namespace: TestNamespace
    output: Generated
    value_objects:
      - name: SampleValueObject
        type: string
        default_value: true
        default_equality_comparer: true
      - name: UserId
        type: Guid
      - name: Quantity
        type: int
        namespace: Inventory
""")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a valueobjects.yml into tmp_path."""

    def _write(content: str = SAMPLE_MANIFEST) -> Path:
        path = tmp_path / "valueobjects.yml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def string_descriptor() -> ValueObjectDescriptor:
    """MyValueObject wrapping string, no capabilities."""
    return ValueObjectDescriptor(
        type_name="MyValueObject",
        inner_type_name="string",
        nullability_marker="?",
    )


@pytest.fixture
def guid_descriptor() -> ValueObjectDescriptor:
    """MyId wrapping Guid."""
    return ValueObjectDescriptor(
        type_name="MyId",
        inner_type_name="Guid",
        is_guid_like=True,
    )
