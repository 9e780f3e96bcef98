"""
Core components for nn_infer.

This module contains the model abstraction, the error taxonomy and the
type-keyed model registry.
"""

from .exceptions import NNInferError, DimensionMismatch, UnknownModelType
from .base import BaseModel
from .registry import ModelRegistry, ModelSpec, MODEL_SPECS

__all__ = [
    "BaseModel",
    "ModelRegistry",
    "ModelSpec",
    "MODEL_SPECS",
    "NNInferError",
    "DimensionMismatch",
    "UnknownModelType"
]
