"""
Image conversion of noise maps.

Turns a NoiseMap2D into a colour texture through a Gradient, or into a
tangent-space normal map from its central differences. Both return Pillow
images that can be saved with Image.save().
"""

import numpy as np
from PIL import Image

from .gradient import Gradient


def _to_uint8(values):
    values = np.nan_to_num(values, nan=0.0)
    return np.clip(np.rint(values * 255.0), 0, 255).astype(np.uint8)


def to_image(noise_map, gradient=None):
    """
    Colour a noise map.

    Args:
        noise_map (NoiseMap2D): Source map; its border value is applied to
            the edge cells when set
        gradient (Gradient, optional): Colour ramp (default: a new grayscale
            gradient)

    Returns:
        PIL.Image.Image: RGBA image of size (width, height); image row y is
        map row y
    """
    if gradient is None:
        gradient = Gradient.grayscale()
    rgba = gradient.sample(noise_map.with_border())
    return Image.fromarray(_to_uint8(rgba))


def normal_vectors(data, scale):
    """
    Unit normals of a height buffer.

    Interior cells use half the central difference along each axis times
    scale; edge cells get the flat normal (0, 0, 1).

    Args:
        data (numpy.ndarray): Heights of shape (height, width)
        scale (float): Height scaling

    Returns:
        numpy.ndarray: float64 array of shape (height, width, 3)
    """
    data = np.asarray(data, dtype=np.float64)
    normals = np.zeros(data.shape + (3,))
    normals[..., 2] = 1.0
    if data.shape[0] < 3 or data.shape[1] < 3:
        return normals

    nx = (data[1:-1, :-2] - data[1:-1, 2:]) / 2.0 * scale
    ny = (data[:-2, 1:-1] - data[2:, 1:-1]) / 2.0 * scale
    nz = np.full(nx.shape, 2.0)
    interior = np.stack([nx, ny, nz], axis=-1)
    interior /= np.linalg.norm(interior, axis=-1, keepdims=True)
    normals[1:-1, 1:-1] = interior
    return normals


def to_normal_map(noise_map, scale=1.0):
    """
    Normal map of a noise map.

    Args:
        noise_map (NoiseMap2D): Source map
        scale (float): Height scaling of the differences (default: 1.0)

    Returns:
        PIL.Image.Image: RGB image, each channel (n + 1) / 2 of the normal
    """
    normals = normal_vectors(noise_map.data, scale)
    return Image.fromarray(_to_uint8((normals + 1.0) / 2.0))
