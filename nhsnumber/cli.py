"""
cli.py
------
Command-line interface for the nhsnumber package.

Entry point: ``nhsnumber``

Commands
--------
* ``validate``     — print whether an NHS number is valid.
* ``generate``     — print a count followed by that many generated numbers.
* ``standardise``  — print the canonical form of an NHS number.
* ``describe``     — print the full descriptor of an NHS number.
* ``regions``      — list the known regions, their tags and ranges.

Group options
-------------
* ``--config``     — YAML file overriding :class:`NhsNumberConfig` defaults.
* ``--verbose``    — log at DEBUG level to stderr.
"""

from __future__ import annotations

import json
import logging
import random
import sys
from typing import Optional

import click

from nhsnumber import __version__
from nhsnumber.core.config import DEFAULT_CONFIG, OUTPUT_FORMATS, NhsNumberConfig, load_config
from nhsnumber.core.descriptor import NhsNumber, describe
from nhsnumber.core.errors import ConfigError, UnknownRegionTagError
from nhsnumber.core.ranges import Region
from nhsnumber.core.registry import REGIONS, region_for_tag
from nhsnumber.generation.generator import NhsNumberGenerator
from nhsnumber.validation.normalizer import format_number, standardise_format
from nhsnumber.validation.validator import is_valid


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve_region(tag: Optional[str]) -> Optional[Region]:
    """Map a ``--region`` tag to its Region, as a click usage error if unknown."""
    if tag is None:
        return None
    try:
        return region_for_tag(tag)
    except UnknownRegionTagError as exc:
        raise click.BadParameter(str(exc), param_hint="'--region'") from exc


def _print_description(number: NhsNumber) -> None:
    """Render a human-readable descriptor to stdout."""
    w = 60
    divider = click.style("─" * w, fg="bright_black")

    validity = (
        click.style("VALID", fg="green", bold=True)
        if number.valid else click.style("INVALID", fg="red", bold=True)
    )
    checksum = "n/a" if number.calculated_checksum is None else str(number.calculated_checksum)
    check_digit = "n/a" if number.check_digit is None else str(number.check_digit)

    click.echo(divider)
    click.echo(click.style("  NHS NUMBER", bold=True, fg="bright_white"))
    click.echo(divider)
    click.echo(f"  Number      : {number.nhs_number}")
    click.echo(f"  Identifier  : {number.identifier_digits}")
    click.echo(f"  Check digit : {check_digit}")
    click.echo(f"  Checksum    : {checksum}")
    click.echo(f"  Status      : {validity}")
    click.echo(f"  Region      : {number.region_comment}")
    click.echo(divider)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="nhsnumber", message="%(prog)s %(version)s")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding the default configuration.",
)
@click.option(
    "-v", "--verbose", is_flag=True, default=False,
    help="Log debug output to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool):
    """nhsnumber — validate, standardise, describe and generate NHS numbers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    config: NhsNumberConfig = DEFAULT_CONFIG
    if config_path:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            click.echo(click.style(f"✗  Could not load config: {exc}", fg="red"), err=True)
            sys.exit(1)
    ctx.obj = config


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("number")
@click.option("--region", "region_tag", type=str, help="Region tag the number must belong to.")
def validate(number: str, region_tag: Optional[str]):
    """Validate an NHS number."""
    region = _resolve_region(region_tag)
    click.echo(is_valid(number, region))


# ---------------------------------------------------------------------------
# generate command
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--quantity", type=click.IntRange(min=0), help="No. of NHS numbers to generate.")
@click.option("--valid", type=click.BOOL, help="Whether generated NHS numbers should be valid.")
@click.option("--region", "region_tag", type=str, help="Region to generate NHS numbers for.")
@click.option(
    "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="How to render each number.",
)
@click.option("--seed", type=int, help="Seed for reproducible output.")
@click.pass_obj
def generate(
    config: NhsNumberConfig,
    quantity: Optional[int],
    valid: Optional[bool],
    region_tag: Optional[str],
    output_format: Optional[str],
    seed: Optional[int],
):
    """Generate NHS number(s)."""
    region = _resolve_region(region_tag)
    rng = random.Random(seed if seed is not None else config.seed)
    generator = NhsNumberGenerator(config=config, rng=rng)
    numbers = generator.generate(valid=valid, for_region=region, quantity=quantity)

    style = (output_format or config.output_format).lower()
    click.echo(len(numbers))
    for number in numbers:
        click.echo(format_number(number, style))


# ---------------------------------------------------------------------------
# standardise command
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("number")
def standardise(number: str):
    """Output a given NHS number in a standardised format."""
    click.echo(standardise_format(number))


# ---------------------------------------------------------------------------
# describe command
# ---------------------------------------------------------------------------

@cli.command("describe")
@click.argument("number")
@click.option(
    "--output", "output_format",
    type=click.Choice(["pretty", "json"], case_sensitive=False),
    default="pretty", show_default=True,
    help="Output format: pretty (default) or json.",
)
@click.pass_obj
def describe_command(config: NhsNumberConfig, number: str, output_format: str):
    """Show the parts, checksum, validity and region of an NHS number."""
    description = describe(number, config)
    if output_format == "json":
        click.echo(json.dumps(description.to_dict(), indent=2, ensure_ascii=False))
        return
    _print_description(description)


# ---------------------------------------------------------------------------
# regions command
# ---------------------------------------------------------------------------

@cli.command()
@click.option(
    "--output", "output_format",
    type=click.Choice(["pretty", "json"], case_sensitive=False),
    default="pretty", show_default=True,
    help="Output format: pretty (default) or json.",
)
def regions(output_format: str):
    """List the known regions, their tags and number ranges."""
    if output_format == "json":
        listing = {handle: region.to_dict() for handle, region in REGIONS.items()}
        click.echo(json.dumps(listing, indent=2, ensure_ascii=False))
        return

    for handle, region in REGIONS.items():
        click.echo(click.style(f"{handle}", bold=True) + f"  {region.label}")
        click.echo(f"    tags   : {', '.join(region.tags)}")
        for r in region.ranges:
            click.echo(f"    range  : {r.start:010d} - {r.end:010d}  {r.label}")
