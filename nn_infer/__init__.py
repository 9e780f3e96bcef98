"""
nn_infer - Polymorphic feed-forward inference.

This package provides a small set of fixed numeric models (linear and
logistic regression, a softmax classifier and a two-layer perceptron)
behind one interface, created by name through a model registry.
"""

__version__ = "0.1.0"

from nn_infer.core.base import BaseModel
from nn_infer.core.exceptions import DimensionMismatch, NNInferError, UnknownModelType
from nn_infer.core.registry import ModelRegistry

# Global model registry instance
registry = ModelRegistry()

__all__ = [
    "registry",
    "BaseModel",
    "ModelRegistry",
    "NNInferError",
    "DimensionMismatch",
    "UnknownModelType",
    "__version__"
]
