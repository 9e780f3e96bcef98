"""
Model abstraction shared by every inference variant.

Each variant owns a flat, ordered parameter vector whose length is fixed by
the construction-time shape, and exposes a pure forward pass over it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple
import logging

import numpy as np

from nn_infer.core.exceptions import DimensionMismatch

logger = logging.getLogger(__name__)


def check_dimension(name: str, value: int) -> int:
    """Validate a construction-time dimension and return it as an int."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return int(value)


def as_vector(values: Sequence[float], what: str, expected: int) -> np.ndarray:
    """
    Copy ``values`` into a fresh float64 vector of length ``expected``.

    Raises:
        DimensionMismatch: If the values do not form a 1-D vector of the
            expected length
        ValueError: If a value cannot be converted to float
    """
    vector = np.array(values, dtype=np.float64)
    if vector.ndim != 1 or vector.shape[0] != expected:
        raise DimensionMismatch(what, expected, int(vector.size))
    return vector


class BaseModel(ABC):
    """
    Abstract base class for all inference models.

    A model is constructed once with a fixed shape, starts with all-zero
    parameters, and may have its parameters replaced any number of times.
    ``forward`` only reads the parameters.

    Thread safety: concurrent ``forward`` calls against a stable parameter
    set are safe. ``set_parameters`` must not run concurrently with
    ``forward`` on the same instance; callers sharing a model across
    threads have to serialize the two themselves (e.g. a read-write lock).
    No locking is done here.
    """

    # Registry identifier, set by each variant
    type_id: str = ""

    def __init__(self, input_size: int):
        self._input_size = check_dimension("input_size", input_size)
        self._parameters = np.zeros(self.expected_parameter_count, dtype=np.float64)

    @property
    def input_size(self) -> int:
        """Length of the input vector accepted by ``forward``."""
        return self._input_size

    @property
    @abstractmethod
    def output_size(self) -> int:
        """Length of the vector returned by ``forward``."""
        pass

    @property
    @abstractmethod
    def expected_parameter_count(self) -> int:
        """Number of values ``set_parameters`` requires."""
        pass

    @property
    @abstractmethod
    def model_type_name(self) -> str:
        """Human-readable model identifier."""
        pass

    @property
    @abstractmethod
    def shape(self) -> Tuple[int, ...]:
        """Construction-time dimensions, in factory order."""
        pass

    @abstractmethod
    def _forward(self, x: np.ndarray, params: np.ndarray) -> np.ndarray:
        """Compute the output for a validated input and parameter vector."""
        pass

    @property
    def parameters(self) -> List[float]:
        """Copy of the current flat parameter vector."""
        return self._parameters.tolist()

    def forward(self, input: Sequence[float]) -> List[float]:
        """
        Run the forward pass for a single input vector.

        Args:
            input: Sequence of ``input_size`` floats

        Returns:
            List of ``output_size`` floats

        Raises:
            DimensionMismatch: If the input length differs from ``input_size``
        """
        x = as_vector(input, "Input", self._input_size)
        # Read the parameter reference once so a single pass sees one full set
        params = self._parameters
        return self._forward(x, params).tolist()

    def set_parameters(self, parameters: Sequence[float]) -> None:
        """
        Replace the full parameter vector.

        The update is all-or-nothing: on a length mismatch the previous
        parameters stay in effect.

        Raises:
            DimensionMismatch: If the length differs from
                ``expected_parameter_count``
        """
        try:
            new_params = as_vector(parameters, "Parameter", self.expected_parameter_count)
        except DimensionMismatch as e:
            logger.warning(f"Rejected parameter update for {self.model_type_name}: {e}")
            raise

        self._parameters = new_params
        logger.debug(f"Parameters set for {self.model_type_name} ({new_params.shape[0]} values)")

    def get_model_info(self) -> Dict[str, Any]:
        """Get metadata describing this model."""
        return {
            "type_id": self.type_id,
            "model_type": self.model_type_name,
            "shape": list(self.shape),
            "input_size": self.input_size,
            "output_size": self.output_size,
            "parameter_count": self.expected_parameter_count
        }

    def __repr__(self) -> str:
        dims = ", ".join(str(d) for d in self.shape)
        return f"{type(self).__name__}({dims})"
