"""
Config check use case — validate valueobjects.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.core.config.loader import ConfigError, find_manifest_file, load_manifest
from src.core.models.manifest import Manifest
from src.core.services.type_resolution import is_valid_identifier, is_valid_namespace


@dataclass
class ConfigCheckResult:
    """Result of manifest validation."""

    valid: bool = False
    manifest: Manifest | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "value_object_count": len(self.manifest.value_objects) if self.manifest else 0,
            "output": self.manifest.output if self.manifest else None,
        }


def validate_manifest(manifest: Manifest) -> tuple[list[str], list[str]]:
    """Semantic checks that the schema alone can't express.

    Returns:
        (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not manifest.value_objects:
        warnings.append("No value objects defined. Nothing will be generated.")

    if manifest.namespace is not None and not is_valid_namespace(manifest.namespace):
        errors.append(f"Invalid namespace: '{manifest.namespace}'")

    names = manifest.names
    dupes = {n for n in names if names.count(n) > 1}
    if dupes:
        errors.append(f"Duplicate value object names: {', '.join(sorted(dupes))}")

    for entry in manifest.value_objects:
        if not is_valid_identifier(entry.name):
            errors.append(f"Invalid type name: '{entry.name}'")
        if not entry.type.strip():
            errors.append(f"Value object '{entry.name}' has no inner type")
        if entry.namespace is not None and not is_valid_namespace(entry.namespace):
            errors.append(f"Value object '{entry.name}' has an invalid namespace: '{entry.namespace}'")
        if entry.nullable not in (None, "", "?"):
            errors.append(
                f"Value object '{entry.name}' has an invalid nullable marker: '{entry.nullable}'"
            )

    return errors, warnings


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the manifest and report issues.

    Args:
        config_path: Optional explicit path to valueobjects.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_manifest_file()

    if config_path is None:
        result.errors.append("No valueobjects.yml found.")
        return result

    result.config_path = config_path

    try:
        manifest = load_manifest(config_path)
        result.manifest = manifest
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    errors, warnings = validate_manifest(manifest)
    result.errors.extend(errors)
    result.warnings.extend(warnings)

    result.valid = len(result.errors) == 0
    return result
