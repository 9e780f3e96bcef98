"""
Logistic Regression: output = sigmoid(w1*x1 + w2*x2 + ... + bias)

Uses the same parameter layout as linear regression.
"""

from typing import Tuple

import numpy as np

from nn_infer.core.base import BaseModel

# Closest doubles inside the open interval (0, 1)
SIGMOID_FLOOR = float(np.nextafter(0.0, 1.0))
SIGMOID_CEIL = float(np.nextafter(1.0, 0.0))


def sigmoid(z: float) -> float:
    """
    Logistic sigmoid that never overflows and never returns exactly 0 or 1.

    Each branch only exponentiates a non-positive number.
    """
    if z >= 0:
        value = 1.0 / (1.0 + np.exp(-z))
    else:
        exp_z = np.exp(z)
        value = exp_z / (1.0 + exp_z)
    return float(np.clip(value, SIGMOID_FLOOR, SIGMOID_CEIL))


class LogisticRegressor(BaseModel):
    """Binary classifier: linear combination followed by a sigmoid."""

    type_id = "logistic"

    @property
    def output_size(self) -> int:
        return 1

    @property
    def expected_parameter_count(self) -> int:
        return self._input_size + 1

    @property
    def model_type_name(self) -> str:
        return "Logistic Regression"

    @property
    def shape(self) -> Tuple[int, ...]:
        return (self._input_size,)

    def _forward(self, x: np.ndarray, params: np.ndarray) -> np.ndarray:
        weights = params[:self._input_size]
        bias = params[self._input_size]
        return np.array([sigmoid(bias + weights @ x)])
