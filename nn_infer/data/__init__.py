"""
Test-case loading and evaluation for nn_infer models.
"""

from .test_cases import TestCase, load_test_cases, parse_line, parse_float_list, parse_test_cases
from .evaluation import CaseResult, evaluate_case, evaluate_cases

__all__ = [
    "TestCase",
    "load_test_cases",
    "parse_line",
    "parse_float_list",
    "parse_test_cases",
    "CaseResult",
    "evaluate_case",
    "evaluate_cases"
]
