"""
Generate use case — render every manifest entry and write the .g.cs files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from src.core.config.loader import ConfigError, find_manifest_file, load_manifest, output_dir
from src.core.models.manifest import Manifest
from src.core.models.template import GeneratedFile
from src.core.persistence.generated_files import GenerationWriteError, write_generated_file
from src.core.services.generators.source_file import generate
from src.core.services.type_resolution import build_descriptor
from src.core.use_cases.config_check import validate_manifest

logger = logging.getLogger(__name__)


@dataclass
class FileOutcome:
    """What happened to one generated file."""

    type_name: str
    path: str
    status: str = "pending"   # written | unchanged | skipped | planned | failed
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {"type_name": self.type_name, "path": self.path, "status": self.status}
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class GenerateResult:
    """Outcome of a generate run."""

    manifest: Manifest | None = None
    config_path: Path | None = None
    output_dir: Path | None = None
    dry_run: bool = False
    files: list[FileOutcome] = field(default_factory=list)
    generated: list[GeneratedFile] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not any(f.status == "failed" for f in self.files)

    def count(self, status: str) -> int:
        return sum(1 for f in self.files if f.status == status)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "dry_run": self.dry_run,
            "files": [f.to_dict() for f in self.files],
            "summary": {
                "total": len(self.files),
                "written": self.count("written"),
                "unchanged": self.count("unchanged"),
                "skipped": self.count("skipped"),
                "failed": self.count("failed"),
            },
        }


def run_generate(
    config_path: Path | None = None,
    names: list[str] | None = None,
    dry_run: bool = False,
) -> GenerateResult:
    """Generate source files for the value objects in the manifest.

    Args:
        config_path: Optional explicit path to valueobjects.yml.
        names: Only generate these value objects (default: all).
        dry_run: Render but don't write anything.

    Returns:
        GenerateResult with one FileOutcome per value object.
    """
    result = GenerateResult(dry_run=dry_run)

    if config_path is None:
        config_path = find_manifest_file()
    if config_path is None:
        result.error = "No valueobjects.yml found."
        return result

    result.config_path = config_path

    try:
        manifest = load_manifest(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result
    result.manifest = manifest

    errors, _warnings = validate_manifest(manifest)
    if errors:
        result.error = "; ".join(errors)
        return result

    entries = manifest.value_objects
    if names:
        unknown = [n for n in names if manifest.get_value_object(n) is None]
        if unknown:
            result.error = f"Unknown value objects: {', '.join(unknown)}"
            return result
        entries = [e for e in entries if e.name in names]

    root = output_dir(config_path, manifest)
    result.output_dir = root

    for entry in entries:
        descriptor = build_descriptor(entry, manifest.namespace)
        file = generate(descriptor)
        result.generated.append(file)
        outcome = FileOutcome(type_name=entry.name, path=file.path)
        result.files.append(outcome)

        if dry_run:
            outcome.status = "planned"
            continue

        try:
            outcome.status = write_generated_file(root, file)
        except GenerationWriteError as e:
            logger.error("Failed to write %s: %s", file.path, e)
            outcome.status = "failed"
            outcome.error = str(e)

    logger.info(
        "Generated %d value objects into %s (%d written)",
        len(result.files), root, result.count("written"),
    )
    return result
