"""
Model Registry - type-keyed factory for inference models

Maps a type identifier plus an ordered list of shape integers to a
constructed model, returned through the ``BaseModel`` interface. The set
of recognized types is a fixed, immutable table; there is no dynamic
registration.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Type
import logging

import numpy as np

from nn_infer.core.base import BaseModel
from nn_infer.core.exceptions import UnknownModelType
from nn_infer.models import (
    LinearRegressor,
    LogisticRegressor,
    MultiClassClassifier,
    TwoLayerPerceptron
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelSpec:
    """Constructor and ordered dimension names for one model type."""
    model_class: Type[BaseModel]
    dimensions: Tuple[str, ...]


# Insertion order is the order reported by list_registered_types()
MODEL_SPECS: Mapping[str, ModelSpec] = MappingProxyType({
    "linear": ModelSpec(LinearRegressor, ("input_size",)),
    "logistic": ModelSpec(LogisticRegressor, ("input_size",)),
    "multiclass": ModelSpec(MultiClassClassifier, ("input_size", "num_classes")),
    "mlp": ModelSpec(TwoLayerPerceptron, ("input_size", "hidden_size", "output_size")),
})


def _is_dimension(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value > 0


class ModelRegistry:
    """
    Stateless lookup from type identifier to model constructor.

    Usage:
        model = registry.create("multiclass", [4, 3])
        model.set_parameters(params)
        probs = model.forward(features)
    """

    def __init__(self, specs: Mapping[str, ModelSpec] = MODEL_SPECS):
        self._specs = specs

    def _get_spec(self, type_id: str, shape: Sequence = ()) -> ModelSpec:
        spec = self._specs.get(type_id) if isinstance(type_id, str) else None
        if spec is None:
            raise UnknownModelType(type_id, shape)
        return spec

    def create(self, type_id: str, shape: Sequence[int]) -> BaseModel:
        """
        Construct a model by type identifier and shape.

        Args:
            type_id: One of the registered identifiers (e.g. "mlp")
            shape: Positive integers in the order the type expects,
                e.g. [input_size, hidden_size, output_size] for "mlp"

        Raises:
            UnknownModelType: If the identifier is unknown, or the shape has
                the wrong length or a non-positive/non-integer entry
        """
        try:
            dims = tuple(shape)
        except TypeError:
            dims = (shape,)

        spec = self._get_spec(type_id, dims)

        if len(dims) != len(spec.dimensions):
            raise UnknownModelType(type_id, dims, spec.dimensions)

        for name, value in zip(spec.dimensions, dims):
            if not _is_dimension(value):
                raise UnknownModelType(
                    type_id, dims, spec.dimensions,
                    reason=f"Model type '{type_id}': {name} must be a positive integer, got {value!r}"
                )

        dims = tuple(int(value) for value in dims)
        model = spec.model_class(*dims)
        logger.debug(f"Created model: {type_id} {list(dims)}")
        return model

    def get_model(self, type_id: str, **dimensions: int) -> BaseModel:
        """
        Construct a model from named dimensions.

        Example:
            registry.get_model("mlp", input_size=2, hidden_size=3, output_size=2)
        """
        spec = self._get_spec(type_id, tuple(dimensions.values()))

        if set(dimensions) != set(spec.dimensions):
            raise UnknownModelType(
                type_id, tuple(dimensions.values()), spec.dimensions,
                reason=(
                    f"Model type '{type_id}' expects dimensions {list(spec.dimensions)}, "
                    f"got {sorted(dimensions)}"
                )
            )

        return self.create(type_id, [dimensions[name] for name in spec.dimensions])

    def is_registered(self, type_id: str) -> bool:
        """Check if a model type identifier is recognized."""
        return isinstance(type_id, str) and type_id in self._specs

    def list_registered_types(self) -> List[str]:
        """Return all registered type identifiers in a stable order."""
        return list(self._specs.keys())

    def expected_shape(self, type_id: str) -> Tuple[str, ...]:
        """Return the ordered dimension names a type identifier expects."""
        return self._get_spec(type_id).dimensions

    def describe_types(self) -> List[Dict[str, Any]]:
        """Registered types with their expected shapes."""
        return [
            {"type_id": type_id, "shape": list(spec.dimensions)}
            for type_id, spec in self._specs.items()
        ]
