"""
Generated file model — one rendered value object source file.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A source file produced by the generator.

    Attributes:
        path:      Path relative to the manifest's output directory.
        content:   Full file content.
        type_name: Value object the file was generated for.
        overwrite: Whether to replace an existing, different file.
    """

    path: str
    content: str
    type_name: str = ""
    overwrite: bool = True
