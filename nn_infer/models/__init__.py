"""
Inference model variants.

Each variant implements the ``BaseModel`` contract for one fixed
feed-forward transformation.
"""

from .linear import LinearRegressor
from .logistic import LogisticRegressor
from .multiclass import MultiClassClassifier
from .mlp import TwoLayerPerceptron

__all__ = [
    "LinearRegressor",
    "LogisticRegressor",
    "MultiClassClassifier",
    "TwoLayerPerceptron"
]
