"""
Noise rendering CLI command for pylibnoise.

Command line interface for previewing module graph presets as PNG images.
"""

import logging
import os
import sys

import click

from ..constants import (
    ANGLE_MAX,
    ANGLE_MIN,
    BOTTOM,
    EAST,
    LEFT,
    NORTH,
    RIGHT,
    SOUTH,
    TOP,
    WEST,
)
from ..noise import QualityMode
from ..noisemap import NoiseMap2D
from ..render import Gradient, to_image, to_normal_map
from .presets import PRESETS, build_preset

logger = logging.getLogger(__name__)


def resolve_gradient(name):
    """Gradient for a CLI name: grayscale, terrain or a Matplotlib colormap."""
    if name == "grayscale":
        return Gradient.grayscale()
    if name == "terrain":
        return Gradient.terrain()
    return Gradient.from_colormap(name)


def project(noise_map, projection, seamless):
    """Fill noise_map with the default bounds of the given projection."""
    if seamless and projection != "planar":
        raise ValueError("--seamless only applies to the planar projection")
    if projection == "planar":
        noise_map.generate_planar(LEFT, RIGHT, TOP, BOTTOM, seamless=seamless)
    elif projection == "spherical":
        noise_map.generate_spherical(SOUTH, NORTH, WEST, EAST)
    else:
        noise_map.generate_cylindrical(ANGLE_MIN, ANGLE_MAX, TOP, BOTTOM)


@click.command()
@click.argument("preset", type=click.Choice(sorted(PRESETS)))
@click.option("--size", type=int, default=256, show_default=True, help="Width and height in pixels")
@click.option("--width", type=int, default=None, help="Image width (overrides --size)")
@click.option("--height", type=int, default=None, help="Image height (overrides --size)")
@click.option(
    "--projection",
    type=click.Choice(["planar", "spherical", "cylindrical"]),
    default="planar",
    show_default=True,
    help="Projection used to sample the graph",
)
@click.option("--seamless", is_flag=True, default=False, help="Make a planar map tileable")
@click.option("--seed", type=int, default=0, show_default=True, help="Base random seed")
@click.option("--frequency", type=float, default=1.0, show_default=True, help="Base frequency")
@click.option("--octaves", type=int, default=6, show_default=True, help="Octave count of fractal presets")
@click.option(
    "--quality",
    type=click.Choice(["fast", "standard", "best"]),
    default="standard",
    show_default=True,
    help="Interpolation quality",
)
@click.option(
    "--gradient",
    default="grayscale",
    show_default=True,
    help="Colour gradient: grayscale, terrain or any Matplotlib colormap name",
)
@click.option(
    "--normal-map",
    type=float,
    default=None,
    help="Also write a normal map with this height scale (<output>_normal.png)",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Output PNG filename (default: <preset>.png)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def render(
    preset,
    size,
    width,
    height,
    projection,
    seamless,
    seed,
    frequency,
    octaves,
    quality,
    gradient,
    normal_map,
    output,
    verbose,
):
    """
    Render a noise preset to a PNG image.

    PRESET: One of perlin, ridged, voronoi, spheres, checker, billow-terrain

    Examples:

        # Grayscale Perlin noise, 256x256
        pln-render perlin

        # Tileable terrain-coloured map with a normal map
        pln-render billow-terrain --seamless --gradient terrain --normal-map 4 -o world.png

        # Ridged noise wrapped on a sphere, 512x256
        pln-render ridged --projection spherical --width 512 --height 256 --gradient viridis
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if output is None:
            output = f"{preset}.png"
        width = width if width is not None else size
        height = height if height is not None else size

        module = build_preset(
            preset,
            seed=seed,
            frequency=frequency,
            octaves=octaves,
            quality=QualityMode[quality.upper()],
        )
        colours = resolve_gradient(gradient)
        logger.debug("Rendering %s as %dx%d %s map", preset, width, height, projection)

        noise_map = NoiseMap2D(width, height, generator=module)
        project(noise_map, projection, seamless)

        if verbose:
            data = noise_map.data
            click.echo(f"Value range: {data.min():.4f} to {data.max():.4f}")

        to_image(noise_map, colours).save(output)
        click.echo(f"Rendered '{preset}' -> '{output}'")

        if normal_map is not None:
            root, _ = os.path.splitext(output)
            normal_output = f"{root}_normal.png"
            to_normal_map(noise_map, normal_map).save(normal_output)
            click.echo(f"Normal map -> '{normal_output}'")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    render()
