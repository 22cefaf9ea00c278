"""CLI entry point for curprfc."""

import logging
import sys
from pathlib import Path

import click

from .adapters.render import create_renderer
from .adapters.report import BatchFormatError, load_batch, validate_entry, write_report
from .config import OutputFormat, Settings, load_settings
from .domain.models import ValidationResult
from .domain.services import Validator

logger = logging.getLogger(__name__)

FORMAT_CHOICE = click.Choice([f.value for f in OutputFormat])


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_validator(settings: Settings) -> Validator:
    return Validator(min_year=settings.dates.min_year, max_year=settings.dates.max_year)


def emit(ctx: click.Context, result: ValidationResult, fmt: str | None) -> None:
    """Render a result and exit 1 unless it succeeded."""
    settings: Settings = ctx.obj["settings"]
    output = OutputFormat(fmt) if fmt else settings.output.format
    renderer = create_renderer(output, color=settings.output.color)
    click.echo(renderer.render(result))
    if not result.success:
        sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """curprfc - CURP and RFC structural validator."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    settings = load_settings(Path(config) if config else None)
    ctx.obj["settings"] = settings
    ctx.obj["validator"] = build_validator(settings)


@cli.command()
@click.argument("value")
@click.option("--format", "fmt", type=FORMAT_CHOICE, help="Output format")
@click.pass_context
def curp(ctx: click.Context, value: str, fmt: str | None) -> None:
    """Validate a CURP."""
    emit(ctx, ctx.obj["validator"].validate_curp(value), fmt)


@cli.command()
@click.argument("value")
@click.option("--format", "fmt", type=FORMAT_CHOICE, help="Output format")
@click.pass_context
def rfc(ctx: click.Context, value: str, fmt: str | None) -> None:
    """Validate an RFC."""
    emit(ctx, ctx.obj["validator"].validate_rfc(value), fmt)


@cli.command()
@click.argument("curp_value", metavar="CURP")
@click.argument("rfc_value", metavar="RFC")
@click.option("--format", "fmt", type=FORMAT_CHOICE, help="Output format")
@click.pass_context
def match(ctx: click.Context, curp_value: str, rfc_value: str, fmt: str | None) -> None:
    """Check that a CURP and an RFC belong to the same person."""
    emit(ctx, ctx.obj["validator"].validate_match(curp_value, rfc_value), fmt)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Write YAML report here")
@click.pass_context
def batch(ctx: click.Context, file: Path, output: Path | None) -> None:
    """Validate every entry of a YAML batch file."""
    try:
        entries = load_batch(file)
    except BatchFormatError as e:
        raise click.ClickException(str(e)) from e

    validator: Validator = ctx.obj["validator"]
    rows = [validate_entry(validator, entry) for entry in entries]
    text = write_report(rows, output)
    if output is None:
        click.echo(text, nl=False)

    issues = sum(1 for row in rows if not row["ok"])
    click.echo(f"Validated: {len(rows)} entries, {issues} with issues", err=output is None)
    if issues:
        sys.exit(1)


if __name__ == "__main__":
    cli()
