"""Command line interface for bresenham_zip."""

import json
import sys

import click

from .. import __version__
from ..core.axis import Axis
from ..core.config import Config
from ..core.constants import Dimensions, ErrorMessages, OutputFormat
from ..core.error_handling import (
    BresenhamZipError,
    ConfigurationError,
    ValidationError,
    error_context,
)
from ..core.logging_config import LogContext, setup_logging
from ..generators.builder import Builder, Builder3d

VALIDATION_EXIT_CODE = 2


class PointType(click.ParamType):
    """Click parameter for integer points written as ``x,y`` or ``x,y,z``."""

    name = "point"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        try:
            point = tuple(int(part) for part in value.split(","))
        except ValueError:
            self.fail(f"{value!r} is not a point like 10,20 or 10,20,30", param, ctx)
        if len(point) not in (Dimensions.PLANE, Dimensions.SPACE):
            self.fail(
                ErrorMessages.UNSUPPORTED_DIMENSION.format(dimension=len(point)),
                param,
                ctx,
            )
        return point


class AxisType(click.ParamType):
    """Click parameter for case-insensitive axis names."""

    name = "axis"

    def convert(self, value, param, ctx):
        if isinstance(value, Axis):
            return value
        try:
            return Axis.from_string(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


POINT = PointType()
AXIS = AxisType()


def _load_config(config_path):
    try:
        return Config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(e.message)


def _format_pair(pair, output_format: OutputFormat) -> str:
    first, second = pair
    if output_format is OutputFormat.JSON:
        return json.dumps([list(first), list(second)])
    return f"{first}, {second}"


@click.group()
@click.version_option(version=__version__, prog_name="bresenham-zip")
def cli():
    """bresenham-zip - Walk two lattice lines of a triangle in lockstep.

    Both lines start at the same point and must end at the same value along
    the chosen axis. Each output line holds one point of each line, sharing
    that axis value.
    """


@cli.command()
@click.option("--axis", "-a", type=AXIS, required=True, help="Shared axis: x, y or z")
@click.option("--start", "-s", type=POINT, required=True, help="Starting point, e.g. 50,50")
@click.option("--end-a", type=POINT, required=True, help="First ending point")
@click.option("--end-b", type=POINT, required=True, help="Second ending point")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    default=None,
    help="Output format (defaults to the configured one)",
)
@click.option("--count", is_flag=True, help="Print only the number of pairs")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file path",
)
@click.option("--log-level", default=None, help="Override the configured log level")
def pairs(axis, start, end_a, end_b, output_format, count, config_path, log_level):
    """Print the pairs of points of both lines, one pair per line.

    Examples:

        # Scan lines of the triangle (50,50) (0,100) (100,100)
        bresenham-zip pairs -a y -s 50,50 --end-a 0,100 --end-b 100,100

        # Layers of a 3D edge pair, as JSON
        bresenham-zip pairs -a x -s 50,50,50 --end-a 0,0,0 --end-b 0,100,25 --format json
    """
    config = _load_config(config_path)
    setup_logging(level=log_level or config.log_level, log_file=config.log_file)
    fmt = OutputFormat(output_format) if output_format else config.output_format

    for end in (end_a, end_b):
        if len(end) != len(start):
            raise click.BadParameter(
                ErrorMessages.DIMENSION_MISMATCH.format(left=len(start), right=len(end)),
                param_hint="points",
            )

    builder = Builder() if len(start) == Dimensions.PLANE else Builder3d()

    with LogContext("pairs"):
        try:
            with error_context("build", axis=axis.name):
                zip_ = (
                    builder.axis(axis)
                    .start_point(start)
                    .first_ending_point(end_a)
                    .second_ending_point(end_b)
                    .build()
                )
        except ValidationError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(VALIDATION_EXIT_CODE)

        if count:
            click.echo(sum(1 for _ in zip_))
            return

        for pair in zip_:
            click.echo(_format_pair(pair, fmt))


@cli.command("check-config")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file path",
)
def check_config(config_path):
    """Validate the configuration and show the merged values."""
    config = _load_config(config_path)
    source = config.source if config.source else "defaults"
    click.echo(f"Configuration OK ({source})")
    click.echo(json.dumps(config.config, indent=2))


def main():
    """Console script entry point."""
    try:
        cli()
    except BresenhamZipError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
