"""
Model Inference API Endpoints

Provides HTTP endpoints for single-vector inference through the model
registry: create model by type and shape → set parameters → forward pass.
"""

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
import time
import logging

from nn_infer import registry as global_registry
from nn_infer.core.exceptions import DimensionMismatch, UnknownModelType
from nn_infer.core.registry import ModelRegistry


# Router for model endpoints
router = APIRouter(prefix="/v1/models", tags=["Model Inference"])

# Logger for API operations
logger = logging.getLogger(__name__)


# Upper bound for each shape entry; keeps one request's parameter vector small
MAX_DIMENSION = 1024


# Request/Response Models
class ForwardRequest(BaseModel):
    """Input model for a single forward pass."""

    type_id: str = Field(..., description="Model type: linear|logistic|multiclass|mlp")
    shape: List[int] = Field(..., min_length=1, description="Shape integers in the order the type expects")
    parameters: Optional[List[float]] = Field(
        None, description="Flat parameter vector; omit to use the zero-initialized model"
    )
    input: List[float] = Field(..., min_length=1, description="Input vector")

    @field_validator('type_id')
    @classmethod
    def normalize_type_id(cls, v):
        return v.strip()

    @field_validator('shape')
    @classmethod
    def check_shape_bounds(cls, v):
        if any(d > MAX_DIMENSION for d in v):
            raise ValueError(f"shape entries must not exceed {MAX_DIMENSION}")
        return v


class ForwardResponse(BaseModel):
    """Response model for a forward pass."""

    type_id: str
    model_type: str = Field(..., description="Human-readable model type")
    input_size: int
    output_size: int
    parameter_count: int
    output: List[float]
    inference_time_ms: float = Field(..., description="Model construction and inference time")


class ModelTypeInfo(BaseModel):
    """A registered model type and the shape it expects."""
    type_id: str
    shape: List[str]


# Dependency injection for components
def get_registry() -> ModelRegistry:
    """Get the process-wide model registry."""
    return global_registry


def _unknown_model_error(e: UnknownModelType) -> HTTPException:
    # Unknown identifier is a missing resource; a bad shape is a bad request body
    status_code = 404 if e.expected is None else 422
    return HTTPException(status_code=status_code, detail=str(e))


# API Endpoints
@router.get("", response_model=List[ModelTypeInfo])
async def list_model_types(
    registry: ModelRegistry = Depends(get_registry)
) -> List[ModelTypeInfo]:
    """List registered model types in stable order."""
    return [ModelTypeInfo(**info) for info in registry.describe_types()]


@router.get("/{type_id}", response_model=ModelTypeInfo)
async def get_model_type(
    type_id: str,
    registry: ModelRegistry = Depends(get_registry)
) -> ModelTypeInfo:
    """Get the expected shape for a single model type."""
    try:
        shape = registry.expected_shape(type_id)
    except UnknownModelType as e:
        raise _unknown_model_error(e)

    return ModelTypeInfo(type_id=type_id, shape=list(shape))


@router.post("/forward", response_model=ForwardResponse)
async def forward(
    request: ForwardRequest,
    registry: ModelRegistry = Depends(get_registry)
) -> ForwardResponse:
    """
    Run one forward pass.

    The model is built from ``type_id`` and ``shape``, loaded with
    ``parameters`` when given, and evaluated on ``input``.
    """
    start_time = time.time()

    try:
        model = registry.create(request.type_id, request.shape)
        if request.parameters is not None:
            model.set_parameters(request.parameters)
        output = model.forward(request.input)

    except UnknownModelType as e:
        logger.warning(f"Forward request rejected: {e}")
        raise _unknown_model_error(e)

    except DimensionMismatch as e:
        logger.warning(f"Forward request rejected for {request.type_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    inference_time = (time.time() - start_time) * 1000

    return ForwardResponse(
        type_id=model.type_id,
        model_type=model.model_type_name,
        input_size=model.input_size,
        output_size=model.output_size,
        parameter_count=model.expected_parameter_count,
        output=output,
        inference_time_ms=round(inference_time, 3)
    )

