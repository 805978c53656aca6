"""
Base class of every noise module.

A module is a node of the composition graph: it evaluates a scalar field at
3D coordinates, optionally pulling values from a fixed number of source
modules. Source slots hold shared references, the same module instance may
feed several parents. Graphs must be acyclic; validate() checks that once
before a projector starts sampling.
"""

import numpy as np


class ModuleBase:
    """
    Common evaluation contract of generators and operators.

    Subclasses declare their arity by passing it to __init__ and implement
    _get_value(x, y, z), which receives float64 arrays of a common shape and
    returns an array of that shape.
    """

    def __init__(self, source_count=0):
        """
        Args:
            source_count (int): Number of source module slots (0 to 3)
        """
        if source_count < 0:
            raise ValueError("source_count must be >= 0")
        self._sources = [None] * int(source_count)

    # ------------------------------------------------------------------
    # Source slots
    # ------------------------------------------------------------------

    @property
    def source_module_count(self):
        return len(self._sources)

    @property
    def sources(self):
        """Tuple of the current source slots (None where unset)."""
        return tuple(self._sources)

    def _check_index(self, index):
        if not 0 <= index < len(self._sources):
            raise IndexError(
                f"{type(self).__name__} has {len(self._sources)} source slot(s), got index {index}"
            )

    def __getitem__(self, index):
        self._check_index(index)
        return self._sources[index]

    def __setitem__(self, index, module):
        self._check_index(index)
        if not isinstance(module, ModuleBase):
            raise TypeError(
                f"Source of {type(self).__name__} must be a ModuleBase, got {type(module).__name__}"
            )
        self._sources[index] = module

    def _check_sources(self):
        for i, source in enumerate(self._sources):
            if source is None:
                raise RuntimeError(f"Source module {i} of {type(self).__name__} is not set")

    def _check_configuration(self):
        """Hook for module-specific preconditions, raises RuntimeError."""

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def get_value(self, x, y, z):
        """
        Evaluate the module.

        Args:
            x, y, z: Input coordinates, scalars or broadcastable arrays

        Returns:
            float for scalar inputs, numpy.ndarray (float64) otherwise

        Raises:
            RuntimeError: If a source slot is empty or the module is
                misconfigured
        """
        self._check_sources()
        self._check_configuration()
        scalar = np.ndim(x) == 0 and np.ndim(y) == 0 and np.ndim(z) == 0
        x, y, z = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )
        value = self._get_value(x, y, z)
        if scalar:
            return float(value)
        return np.asarray(value, dtype=np.float64)

    evaluate = get_value

    def __call__(self, x, y, z):
        return self.get_value(x, y, z)

    def _get_value(self, x, y, z):
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Graph validation
    # ------------------------------------------------------------------

    def validate(self):
        """
        Check the whole graph below this module once.

        Every source slot must be populated, every module correctly
        configured and the graph free of cycles. Shared modules are checked
        once.

        Raises:
            RuntimeError: On the first violation found
        """
        done = set()
        stack = []

        def visit(module):
            key = id(module)
            if key in done:
                return
            if any(m is module for m in stack):
                raise RuntimeError(f"Module graph contains a cycle through {type(module).__name__}")
            module._check_sources()
            module._check_configuration()
            stack.append(module)
            for source in module._sources:
                visit(source)
            stack.pop()
            done.add(key)

        visit(self)

    def __repr__(self):
        return f"{type(self).__name__}(sources={len(self._sources)})"
