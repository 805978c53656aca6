"""
Colour gradients for turning noise values into colours.

A Gradient is an ordered set of control points (position, RGBA colour).
Sampling a position linearly interpolates between the two surrounding
points and holds the end colours beyond the first and last positions.
Colour channels are floats in [0, 1].

Every factory returns a fresh instance, so gradients can be edited without
affecting any other caller.
"""

import numpy as np


def _as_rgba(colour):
    channels = tuple(float(c) for c in colour)
    if len(channels) == 3:
        channels += (1.0,)
    if len(channels) != 4:
        raise ValueError(f"Colour needs 3 or 4 channels, got {len(channels)}")
    return channels


class Gradient:
    """
    Piecewise linear colour ramp.

    Args:
        points (iterable, optional): (position, colour) pairs; colour is an
            RGB or RGBA tuple of floats in [0, 1]. Defaults to two
            transparent points at -1 and 1.
        inverted (bool): Mirror the blend inside each segment (default: False)

    Raises:
        ValueError: If points is given but empty
    """

    def __init__(self, points=None, inverted=False):
        self._points = []
        if points is None:
            points = [(-1.0, (0.0, 0.0, 0.0, 0.0)), (1.0, (0.0, 0.0, 0.0, 0.0))]
        for position, colour in points:
            self[position] = colour
        if not self._points:
            raise ValueError("Gradient needs at least one control point")
        self.inverted = inverted

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls):
        """Fully transparent gradient over [-1, 1]."""
        return cls()

    @classmethod
    def grayscale(cls):
        """Black at -1 to white at 1."""
        return cls([(-1.0, (0.0, 0.0, 0.0)), (1.0, (1.0, 1.0, 1.0))])

    @classmethod
    def between(cls, start, end):
        """Two-point gradient from start at -1 to end at 1."""
        return cls([(-1.0, start), (1.0, end)])

    @classmethod
    def terrain(cls):
        """Deep water through beach, grass and rock up to snow."""
        steps = [
            (-1.0, (0, 0, 128)),
            (-0.2, (32, 64, 128)),
            (-0.04, (64, 96, 192)),
            (-0.02, (192, 192, 128)),
            (0.0, (0, 192, 0)),
            (0.25, (192, 192, 0)),
            (0.5, (160, 96, 64)),
            (0.75, (128, 255, 255)),
            (1.0, (255, 255, 255)),
        ]
        return cls([(p, tuple(c / 255.0 for c in rgb)) for p, rgb in steps])

    @classmethod
    def from_colormap(cls, name, n=16):
        """
        Sample a Matplotlib colormap into n control points over [-1, 1].

        Args:
            name (str): Registered Matplotlib colormap name
            n (int): Number of control points, >= 2 (default: 16)

        Raises:
            ValueError: If the colormap is unknown or n < 2
        """
        from matplotlib import colormaps

        if n < 2:
            raise ValueError(f"n must be >= 2, got {n}")
        try:
            cmap = colormaps[name]
        except KeyError:
            raise ValueError(f"Unknown colormap '{name}'") from None
        positions = np.linspace(-1.0, 1.0, n)
        colours = cmap(np.linspace(0.0, 1.0, n))
        return cls(zip(positions, colours))

    # ------------------------------------------------------------------
    # Control points
    # ------------------------------------------------------------------

    @property
    def points(self):
        """Tuple of (position, (r, g, b, a)) control points in position order."""
        return tuple(self._points)

    @property
    def inverted(self):
        return self._inverted

    @inverted.setter
    def inverted(self, value):
        self._inverted = bool(value)

    def __len__(self):
        return len(self._points)

    def __setitem__(self, position, colour):
        position = float(position)
        points = [p for p in self._points if p[0] != position]
        points.append((position, _as_rgba(colour)))
        points.sort(key=lambda p: p[0])
        self._points = points

    def __getitem__(self, position):
        return tuple(float(c) for c in self.sample(position))

    def clear(self):
        """Reset to two transparent points at 0 and 1."""
        self._points = [(0.0, (0.0, 0.0, 0.0, 0.0)), (1.0, (0.0, 0.0, 0.0, 0.0))]

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def sample(self, values):
        """
        Colours of an array of positions.

        Args:
            values: Scalar or array of positions

        Returns:
            numpy.ndarray: float64 array of shape values.shape + (4,)
        """
        values = np.asarray(values, dtype=np.float64)
        keys = np.array([p[0] for p in self._points])
        colours = np.array([p[1] for p in self._points])
        last = len(keys) - 1

        i = np.searchsorted(keys, values, side="right")
        i0 = np.clip(i - 1, 0, last)
        i1 = np.clip(i, 0, last)
        same = i0 == i1
        span = np.where(same, 1.0, keys[i1] - keys[i0])
        alpha = np.where(same, 0.0, (values - keys[i0]) / span)
        if self._inverted:
            alpha = np.where(same, 0.0, 1.0 - alpha)
        c0 = colours[i0]
        c1 = colours[i1]
        return c0 + (c1 - c0) * alpha[..., np.newaxis]

    def __repr__(self):
        return f"Gradient(points={len(self._points)}, inverted={self._inverted})"
