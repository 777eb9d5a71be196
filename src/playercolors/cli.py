"""Command-line interface for playercolors."""

import sys

import click

from . import __version__
from .color_utils import format_color_output, format_json_output, parse_color
from .colors import generate_colour_set


@click.command()
@click.version_option(version=__version__, prog_name="playercolors")
@click.option(
    "-s",
    "--seed-color",
    required=True,
    help="Seed color in format: #RRGGBB, #RGB, rgb(R,G,B), or hsv(H,S%,V%)",
)
@click.option(
    "-n",
    "--number",
    type=int,
    default=4,
    help="Number of colors to generate, 2 to 10 (default: 4)",
)
@click.option(
    "-f",
    "--format",
    type=click.Choice(["hex", "rgb", "raw"], case_sensitive=False),
    default="hex",
    help="Output format for colors (default: hex)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["list", "json"], case_sensitive=False),
    default="list",
    help="Output format (default: list)",
)
def main(
    seed_color: str,
    number: int,
    format: str,
    output_format: str,
) -> None:
    """Generate a set of distinguishable player colors from one seed color.

    All generated colors have full saturation and brightness. Their hues are
    spread evenly around the color wheel, starting at the hue of the seed.

    Examples:

        playercolors -s "#ff0000"

        playercolors -s "rgb(30, 144, 255)" -n 6 --format rgb

        playercolors -s "hsv(200, 40%, 60%)" -n 8 -F json
    """
    try:
        red, green, blue = parse_color(seed_color)
        colors = generate_colour_set(red, green, blue, number)

        if output_format == "json":
            click.echo(format_json_output(colors, format.lower()))
        else:  # list format
            formatted_colors = format_color_output(colors, format.lower())
            click.echo(
                f"Generated {len(formatted_colors)} colors from seed {seed_color}:"
            )
            click.echo()
            for i, color in enumerate(formatted_colors):
                click.echo(f"  {i:2d}  {color}")

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
