"""
Evaluate models against loaded test cases.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging

import numpy as np

from nn_infer.core.base import BaseModel
from nn_infer.core.exceptions import DimensionMismatch
from nn_infer.data.test_cases import TestCase

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """Outcome of running one test case through a model."""
    case: TestCase
    output: List[float]
    max_error: float
    passed: bool
    error: Optional[str] = None


def evaluate_case(model: BaseModel, case: TestCase, tolerance: float) -> CaseResult:
    """
    Run a single case through ``model``.

    Parameters carried by the case are loaded for this case only; the model's
    previous parameters are restored afterwards, so two-field cases always
    run against the parameters the caller set.

    Raises:
        DimensionMismatch: If the case does not fit the model's shape
    """
    if case.has_parameters:
        previous = model.parameters
        model.set_parameters(case.parameters)
        try:
            output = model.forward(case.input)
        finally:
            model.set_parameters(previous)
    else:
        output = model.forward(case.input)

    if len(output) != len(case.expected_output):
        logger.warning(
            f"{case.description}: expected {len(case.expected_output)} outputs, got {len(output)}"
        )
        return CaseResult(case=case, output=output, max_error=float("inf"), passed=False)

    max_error = float(np.max(np.abs(np.array(output) - np.array(case.expected_output))))
    return CaseResult(case=case, output=output, max_error=max_error, passed=max_error < tolerance)


def evaluate_cases(model: BaseModel, cases: Sequence[TestCase], tolerance: float) -> List[CaseResult]:
    """
    Run every case through ``model`` and log a pass/fail summary.

    A case that does not fit the model's shape is recorded as a failure and
    the remaining cases still run.
    """
    results = []
    for case in cases:
        try:
            results.append(evaluate_case(model, case, tolerance))
        except DimensionMismatch as e:
            logger.warning(f"{case.description}: {e}")
            results.append(
                CaseResult(case=case, output=[], max_error=float("inf"), passed=False, error=str(e))
            )

    passed = sum(1 for r in results if r.passed)
    logger.info(f"{model.model_type_name}: {passed}/{len(results)} cases passed (tolerance {tolerance})")
    return results
