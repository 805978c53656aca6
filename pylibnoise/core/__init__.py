"""
Module abstraction of pylibnoise.

Every generator and operator derives from ModuleBase and shares one
evaluation contract: get_value(x, y, z) returns the field value at the given
coordinates, for scalars or NumPy arrays.
"""

from ..noise.quality import QualityMode
from .module_base import ModuleBase

__all__ = ["ModuleBase", "QualityMode"]
