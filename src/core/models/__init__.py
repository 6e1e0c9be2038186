"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from src.core.models import Manifest, ValueObjectDescriptor, GeneratedFile
"""

from src.core.models.descriptor import ValueObjectDescriptor
from src.core.models.manifest import Manifest, ValueObjectEntry
from src.core.models.template import GeneratedFile

__all__ = [
    # template.py
    "GeneratedFile",
    # manifest.py
    "Manifest",
    # descriptor.py
    "ValueObjectDescriptor",
    "ValueObjectEntry",
]
