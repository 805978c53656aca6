"""
Rendering helpers for noise maps.

Gradient colour ramps plus conversion of a NoiseMap2D into an RGBA texture
or an RGB normal map (Pillow images).

Usage:
    import pylibnoise as pln

    img = pln.render.to_image(nmap, pln.render.Gradient.terrain())
    img.save("terrain.png")
"""

from .gradient import Gradient
from .texture import normal_vectors, to_image, to_normal_map

__all__ = ["Gradient", "normal_vectors", "to_image", "to_normal_map"]
