"""
Linear Regression: output = w1*x1 + w2*x2 + ... + bias

Parameter layout: ``input_size`` weights followed by a single bias.
"""

from typing import Tuple

import numpy as np

from nn_infer.core.base import BaseModel


class LinearRegressor(BaseModel):
    """Linear transformation producing a single regression output."""

    type_id = "linear"

    @property
    def output_size(self) -> int:
        return 1

    @property
    def expected_parameter_count(self) -> int:
        return self._input_size + 1

    @property
    def model_type_name(self) -> str:
        return "Linear Regression"

    @property
    def shape(self) -> Tuple[int, ...]:
        return (self._input_size,)

    def _forward(self, x: np.ndarray, params: np.ndarray) -> np.ndarray:
        weights = params[:self._input_size]
        bias = params[self._input_size]
        return np.array([bias + weights @ x])
