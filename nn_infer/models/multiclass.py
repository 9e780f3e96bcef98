"""
Multi-Class Classifier: per-class linear logits followed by softmax.

Parameter layout (``n`` inputs, ``k`` classes):
    [class 0 weights (n)] ... [class k-1 weights (n)] [k biases]

The biases form a trailing block; they are not interleaved with the
weights.
"""

from typing import List, Sequence, Tuple

import numpy as np

from nn_infer.core.base import BaseModel, as_vector, check_dimension


def softmax(logits: np.ndarray) -> np.ndarray:
    """
    Numerically stable softmax: shift by the max logit before exp.

    Logits that overflowed to infinity are handled without NaN: the mass is
    split evenly across the ``+inf`` entries, and if every logit is ``-inf``
    the result is uniform.
    """
    top = np.max(logits)
    if np.isposinf(top):
        winners = np.isposinf(logits).astype(np.float64)
        return winners / np.sum(winners)
    if np.isneginf(top):
        return np.full(logits.shape, 1.0 / logits.size)

    shifted = logits - top
    exp_logits = np.exp(shifted)
    return exp_logits / np.sum(exp_logits)


class MultiClassClassifier(BaseModel):
    """Softmax classifier over ``num_classes`` classes."""

    type_id = "multiclass"

    def __init__(self, input_size: int, num_classes: int):
        self._num_classes = check_dimension("num_classes", num_classes)
        super().__init__(input_size)

    @property
    def num_classes(self) -> int:
        return self._num_classes

    @property
    def output_size(self) -> int:
        return self._num_classes

    @property
    def expected_parameter_count(self) -> int:
        return self._num_classes * self._input_size + self._num_classes

    @property
    def model_type_name(self) -> str:
        return f"Multi-Class Classifier ({self._num_classes} classes)"

    @property
    def shape(self) -> Tuple[int, ...]:
        return (self._input_size, self._num_classes)

    def logits(self, input: Sequence[float]) -> List[float]:
        """Pre-softmax class scores for an input vector."""
        x = as_vector(input, "Input", self._input_size)
        return self._logits(x, self._parameters).tolist()

    def _logits(self, x: np.ndarray, params: np.ndarray) -> np.ndarray:
        n_weights = self._num_classes * self._input_size
        # Row c holds the weights of class c
        weights = params[:n_weights].reshape(self._num_classes, self._input_size)
        biases = params[n_weights:]
        # Finite but huge products may overflow to inf; softmax handles that
        with np.errstate(over="ignore"):
            return weights @ x + biases

    def _forward(self, x: np.ndarray, params: np.ndarray) -> np.ndarray:
        return softmax(self._logits(x, params))
