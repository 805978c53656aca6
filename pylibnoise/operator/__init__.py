"""
Operator modules of pylibnoise.

Operators transform the output, or the input coordinates, of one or more
source modules.

Available Operators:
- Curve (1 source): remap through a cubic spline of control points
- Exponent (1 source): exponential remapping of [-1, 1]
- Max (2 sources): larger of two values
- Rotate (1 source): rotate input coordinates around the origin
- Select (3 sources): threshold choice between two sources with fall-off
- Translate (1 source): shift input coordinates
- Turbulence (1 source): Perlin domain warping of input coordinates
"""

from .curve import Curve
from .exponent import Exponent
from .max import Max
from .rotate import Rotate, rotation_matrix
from .select import Select
from .translate import Translate
from .turbulence import Turbulence

__all__ = [
    "Curve",
    "Exponent",
    "Max",
    "Rotate",
    "Select",
    "Translate",
    "Turbulence",
    "rotation_matrix",
]
