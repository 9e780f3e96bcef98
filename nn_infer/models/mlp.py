"""
Two-Layer MLP: one ReLU hidden layer followed by a linear readout.

Parameter layout (``n`` inputs, ``h`` hidden units, ``m`` outputs):
    W1 (n*h)  weight from input i to hidden j at index i*h + j
    b1 (h)
    W2 (h*m)  weight from hidden j to output o at index j*m + o
    b2 (m)

Both weight blocks are row-major by their *source* unit. This differs from
the multi-class classifier, whose weight rows are indexed by class, so the
two layouts are not interchangeable.
"""

from typing import List, Sequence, Tuple

import numpy as np

from nn_infer.core.base import BaseModel, as_vector, check_dimension


def relu(values: np.ndarray) -> np.ndarray:
    return np.maximum(values, 0.0)


class TwoLayerPerceptron(BaseModel):
    """Multi-layer perceptron with a single hidden layer."""

    type_id = "mlp"

    def __init__(self, input_size: int, hidden_size: int, output_size: int):
        self._hidden_size = check_dimension("hidden_size", hidden_size)
        self._output_size = check_dimension("output_size", output_size)
        super().__init__(input_size)

    @property
    def hidden_size(self) -> int:
        return self._hidden_size

    @property
    def output_size(self) -> int:
        return self._output_size

    @property
    def expected_parameter_count(self) -> int:
        n, h, m = self.shape
        return n * h + h + h * m + m

    @property
    def model_type_name(self) -> str:
        return "Two-Layer MLP"

    @property
    def shape(self) -> Tuple[int, ...]:
        return (self._input_size, self._hidden_size, self._output_size)

    def _unpack(self, params: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Split the flat vector into (W1, b1, W2, b2) views."""
        n, h, m = self.shape
        w1_end = n * h
        b1_end = w1_end + h
        w2_end = b1_end + h * m

        w1 = params[:w1_end].reshape(n, h)
        b1 = params[w1_end:b1_end]
        w2 = params[b1_end:w2_end].reshape(h, m)
        b2 = params[w2_end:]
        return w1, b1, w2, b2

    def hidden_activations(self, input: Sequence[float]) -> List[float]:
        """
        Rectified hidden-layer representation for an input vector.

        Raises:
            DimensionMismatch: If the input length differs from ``input_size``
        """
        x = as_vector(input, "Input", self._input_size)
        w1, b1, _, _ = self._unpack(self._parameters)
        return relu(x @ w1 + b1).tolist()

    def _forward(self, x: np.ndarray, params: np.ndarray) -> np.ndarray:
        w1, b1, w2, b2 = self._unpack(params)
        hidden = relu(x @ w1 + b1)
        return hidden @ w2 + b2
