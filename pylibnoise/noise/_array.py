import numpy as np


def finish(value):
    """Return a Python float for 0-d results and the array otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return value


def finish_int(value):
    """Integer counterpart of finish()."""
    if np.ndim(value) == 0:
        return int(value)
    return value
