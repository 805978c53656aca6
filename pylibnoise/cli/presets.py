"""
Ready-made module graphs for the command line renderer.

Each preset is a function taking (seed, frequency, octaves, quality) and
returning the root module of a new graph.
"""

from ..generator import Checker, Perlin, RidgedMultifractal, Spheres, Voronoi
from ..noise import QualityMode
from ..operator import Curve, Select, Turbulence


def perlin(seed, frequency, octaves, quality):
    return Perlin(frequency=frequency, octave_count=octaves, seed=seed, quality=quality)


def ridged(seed, frequency, octaves, quality):
    return RidgedMultifractal(
        frequency=frequency, octave_count=octaves, seed=seed, quality=quality
    )


def voronoi(seed, frequency, octaves, quality):
    return Voronoi(frequency=frequency, seed=seed, use_distance=True)


def spheres(seed, frequency, octaves, quality):
    return Spheres(frequency=frequency)


def checker(seed, frequency, octaves, quality):
    return Checker()


def billow_terrain(seed, frequency, octaves, quality):
    """
    Flat lowlands and ridged mountains mixed by a low-frequency mask.

    The lowlands are a Perlin field flattened through a Curve, the mountains
    a ridged multifractal. A coarse Perlin controller selects between them
    with a soft transition, and the result is warped by Turbulence.
    """
    mountains = RidgedMultifractal(
        frequency=frequency, octave_count=octaves, seed=seed, quality=quality
    )
    lowlands = Curve(
        Perlin(frequency=frequency * 2.0, octave_count=octaves, seed=seed + 1, quality=quality),
        control_points=[(-1.0, -1.0), (-0.25, -0.35), (0.25, -0.2), (1.0, 0.0)],
    )
    mask = Perlin(
        frequency=frequency * 0.5, persistence=0.25, octave_count=4, seed=seed + 2, quality=quality
    )
    terrain = Select(lowlands, mountains, mask, minimum=0.0, maximum=1000.0, fall_off=0.125)
    return Turbulence(terrain, power=0.125, frequency=frequency * 4.0, roughness=2, seed=seed + 3)


PRESETS = {
    "perlin": perlin,
    "ridged": ridged,
    "voronoi": voronoi,
    "spheres": spheres,
    "checker": checker,
    "billow-terrain": billow_terrain,
}


def build_preset(name, seed=0, frequency=1.0, octaves=6, quality=QualityMode.STANDARD):
    """
    Build the graph of a named preset.

    Raises:
        ValueError: If the preset name is unknown
    """
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown preset '{name}', choose from {', '.join(sorted(PRESETS))}"
        ) from None
    return factory(seed, frequency, octaves, quality)
