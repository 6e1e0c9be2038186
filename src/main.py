"""
tvogen — Transparent Value Object generator CLI entrypoint.

Usage:
    python -m src.main --help
    python -m src.main generate
    python -m src.main show UserId
    python -m src.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from src import __version__
from src.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    LOG_LEVEL_ENV,
    setup_logging,
)

_STATUS_STYLE = {
    "written": ("✓", "green"),
    "unchanged": ("=", "white"),
    "planned": ("○", "cyan"),
    "skipped": ("⊘", "yellow"),
    "failed": ("✗", "red"),
}


@click.group()
@click.version_option(version=__version__, prog_name="tvogen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to valueobjects.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """tvogen — generate C# transparent value objects."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
    )


@cli.command()
@click.option("--only", "names", multiple=True, help="Generate only this value object.")
@click.option("--dry-run", is_flag=True, help="Render but don't write files.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    names: tuple[str, ...],
    dry_run: bool,
    as_json: bool,
) -> None:
    """Generate .g.cs files for the value objects in the manifest.

    Examples:

        tvogen generate

        tvogen generate --only UserId --only Email

        tvogen generate --dry-run
    """
    from src.core.use_cases.generate import run_generate

    result = run_generate(
        config_path=ctx.obj.get("config_path"),
        names=list(names) if names else None,
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)
    mode_label = "[dry-run] " if dry_run else ""

    if not quiet:
        click.secho(f"\n⚙️  {mode_label}Generating value objects", fg="cyan", bold=True)
        click.echo(f"   Output: {result.output_dir}")
        click.echo()

    for outcome in result.files:
        icon, color = _STATUS_STYLE.get(outcome.status, ("?", "white"))
        if quiet and outcome.status != "failed":
            continue
        click.secho(f"   {icon} {outcome.type_name} ", fg=color, nl=False)
        click.echo(f"→ {outcome.path} ({outcome.status})")
        if outcome.error:
            click.echo(f"     │ {outcome.error}")

    if not quiet:
        click.echo()
        click.echo(
            f"   Total: {len(result.files)} | "
            f"written: {result.count('written')} | "
            f"unchanged: {result.count('unchanged')} | "
            f"skipped: {result.count('skipped')} | "
            f"failed: {result.count('failed')}"
        )
        click.echo()

    if not result.ok:
        sys.exit(1)


@cli.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print the generated source for one value object."""
    from src.core.config.loader import ConfigError, load_manifest
    from src.core.services.generators.source_file import render_source_file
    from src.core.services.type_resolution import build_descriptor
    from src.core.use_cases.config_check import validate_manifest

    try:
        manifest = load_manifest(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    errors, _warnings = validate_manifest(manifest)
    if errors:
        click.secho("❌ Manifest errors:", fg="red", bold=True)
        for err in errors:
            click.echo(f"   • {err}")
        sys.exit(1)

    entry = manifest.get_value_object(name)
    if entry is None:
        click.secho(f"❌ Unknown value object: {name}", fg="red")
        sys.exit(1)

    descriptor = build_descriptor(entry, manifest.namespace)
    click.echo(render_source_file(descriptor), nl=False)


@cli.group()
def config() -> None:
    """Manifest configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate valueobjects.yml."""
    from src.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.manifest is not None  # guaranteed when valid
        click.secho("✅ Manifest is valid", fg="green", bold=True)
        click.echo(f"   Value objects: {len(result.manifest.value_objects)}")
        click.echo(f"   Output: {result.manifest.output}")
    else:
        click.secho("❌ Manifest errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
