"""
Library-wide constants for pylibnoise.

Holds the hashing multipliers shared by every noise kernel, the octave limit
enforced by the fractal generators, the default parameters of each module and
the default bounds of the 2D map projections. Nothing in here is mutated at
runtime; pass explicit values to the module constructors instead.
"""

import math

# --- Noise hashing -----------------------------------------------------------
# Multipliers decorrelating the lattice axes and the seed inside the integer
# hash. These values must stay fixed, every generated field depends on them.
X_NOISE_GEN = 1619
Y_NOISE_GEN = 31337
Z_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 8

# Scale applied to the raw gradient dot product so coherent noise lands in
# roughly [-1, 1].
GRADIENT_NOISE_SCALE = 2.12

# Number of entries of the gradient vector table and the seed it is drawn with
GRADIENT_TABLE_SIZE = 256
GRADIENT_TABLE_SEED = 0

# Half-width of the range make_int32_range folds coordinates into (2^30)
INT32_RANGE_LIMIT = 1073741824.0

# Upper bound of every fractal generator's octave count
OCTAVES_MAXIMUM = 30

SQRT3 = math.sqrt(3.0)
DEG_TO_RAD = math.pi / 180.0

# --- Generator defaults ------------------------------------------------------
DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERSISTENCE = 0.5
DEFAULT_OCTAVE_COUNT = 6
DEFAULT_SEED = 0

DEFAULT_VORONOI_DISPLACEMENT = 1.0

# Ridged multifractal signal shaping
RIDGED_OFFSET = 1.0
RIDGED_GAIN = 2.0
RIDGED_SCALE = 1.25
RIDGED_BIAS = -1.0

# --- Operator defaults -------------------------------------------------------
DEFAULT_EXPONENT = 1.0
DEFAULT_SELECT_MIN = -1.0
DEFAULT_SELECT_MAX = 1.0
DEFAULT_SELECT_FALL_OFF = 0.0
DEFAULT_TRANSLATION = 1.0
DEFAULT_TURBULENCE_POWER = 1.0

# Input offsets of the three turbulence displacement fields
TURBULENCE_OFFSETS = (
    (12414.0 / 65536.0, 65124.0 / 65536.0, 31337.0 / 65536.0),
    (26519.0 / 65536.0, 18128.0 / 65536.0, 60493.0 / 65536.0),
    (53820.0 / 65536.0, 11213.0 / 65536.0, 44845.0 / 65536.0),
)

# Minimum number of control points a Curve needs to be evaluated
CURVE_MIN_CONTROL_POINTS = 4

# --- Projection default bounds -----------------------------------------------
SOUTH = -90.0
NORTH = 90.0
WEST = -180.0
EAST = 180.0
ANGLE_MIN = -180.0
ANGLE_MAX = 180.0
LEFT = -1.0
RIGHT = 1.0
TOP = -1.0
BOTTOM = 1.0
