#!/usr/bin/env python3
"""Demonstrate and exercise nn_infer models from the command line.

Usage:
    nn-infer-demo
    nn-infer-demo --list
    nn-infer-demo --model linear --shape 3 --params 0.5,0.3,0.2,0.1 --input 1.0,2.0,-0.5
    nn-infer-demo --model mlp --shape 2 3 2 --cases tests/data/two_layer_mlp_demo.txt

Environment Variables:
    NN_INFER_PRECISION - decimals used when printing vectors (default: 3)
    NN_INFER_TOLERANCE - max abs error for --cases checks (default: 0.01)
    NN_INFER_LOG_LEVEL - logging level (default: INFO)
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from nn_infer import registry
from nn_infer.config import config
from nn_infer.core.base import BaseModel
from nn_infer.core.exceptions import NNInferError
from nn_infer.data import evaluate_cases, load_test_cases, parse_float_list


def format_vector(values: Sequence[float], precision: int) -> str:
    """Format a vector as ``[a, b, c]`` with fixed precision."""
    return "[" + ", ".join(f"{v:.{precision}f}" for v in values) + "]"


def print_vector(values: Sequence[float], label: str, precision: Optional[int] = None) -> None:
    if precision is None:
        precision = config.precision
    print(f"{label}: {format_vector(values, precision)}")


def demonstrate_model(model: BaseModel, title: str, parameters: List[float], input: List[float]) -> None:
    """Show model metadata, load parameters and run one forward pass."""
    print(f"\n=== {title} Demo ===")
    print(f"Model type: {model.model_type_name}")
    print(f"Input size: {model.input_size}")
    print(f"Output size: {model.output_size}")

    model.set_parameters(parameters)
    print(f"✓ Parameters set ({len(parameters)} values)")

    print_vector(input, "Input")
    print_vector(model.forward(input), "Output")


# (type_id, shape, parameters) driving the polymorphic section of the demo
DEMO_CONFIGURATIONS = [
    ("linear", [2], [0.7, 0.3, 0.0]),
    ("logistic", [2], [0.8, -0.4, 0.1]),
    ("multiclass", [2, 3], [0.5, 0.3, 0.1, -0.2, 0.6, -0.1, 0.1, -0.4, 0.2]),
    ("mlp", [2, 4, 2], [0.2] * 22),
]


def run_demo() -> None:
    """Walk through every registered model type."""
    print("=== nn_infer Demo ===")

    print("\n=== Available Models ===")
    for type_id in registry.list_registered_types():
        print(f"  ✓ {type_id}")

    demonstrate_model(
        registry.create("linear", [3]), "Linear Regression",
        [0.5, 0.3, 0.2, 0.1], [1.0, 2.0, -0.5]
    )
    demonstrate_model(
        registry.create("logistic", [2]), "Logistic Regression",
        [1.2, -0.8, 0.5], [0.8, -0.3]
    )
    # Weights for each class, then the trailing bias block
    demonstrate_model(
        registry.create("multiclass", [2, 3]), "Multi-Class Classifier",
        [1.0, 0.5, 0.2, -0.5, 1.2, -0.1, 0.2, -0.8, 0.3], [0.6, -0.4]
    )
    # W1(6) + b1(3) + W2(6) + b2(2) = 17
    demonstrate_model(
        registry.create("mlp", [2, 3, 2]), "Two-Layer MLP",
        [0.1] * 17, [1.5, -0.8]
    )

    print("\n=== Polymorphic Usage ===")
    test_input = [0.5, -0.2]
    for type_id, shape, parameters in DEMO_CONFIGURATIONS:
        print(f"\n--- Processing model type: \"{type_id}\" ---")
        model = registry.create(type_id, shape)
        print(f"Created: {model.model_type_name}")
        print(f"Input size: {model.input_size}, Output size: {model.output_size}")

        model.set_parameters(parameters)
        print_vector(model.forward(test_input), "Result")


def run_single(type_id: str, shape: List[int], params: Optional[str], input: str) -> None:
    model = registry.create(type_id, shape)
    if params:
        model.set_parameters(parse_float_list(params))
    print(f"Model: {model.model_type_name} (Input: {model.input_size}, Output: {model.output_size})")

    values = parse_float_list(input)
    print_vector(values, "Input")
    print_vector(model.forward(values), "Output")


def run_cases(type_id: str, shape: List[int], params: Optional[str], path: str) -> bool:
    """Evaluate a test-case file; returns True when every case passes."""
    model = registry.create(type_id, shape)
    if params:
        model.set_parameters(parse_float_list(params))

    # Bare file names are looked up in the configured test data directory
    case_path = Path(path)
    if not case_path.exists() and (config.test_data_dir / case_path).exists():
        case_path = config.test_data_dir / case_path

    cases = load_test_cases(case_path)
    if not cases:
        print(f"❌ No test cases loaded from {path}")
        return False

    results = evaluate_cases(model, cases, config.tolerance)
    for result in results:
        status = "✅ PASS" if result.passed else "❌ FAIL"
        if result.error:
            print(f"{status} {result.case.description}: {result.error}")
            continue
        print(
            f"{status} {result.case.description}: "
            f"expected {format_vector(result.case.expected_output, config.precision)}, "
            f"got {format_vector(result.output, config.precision)}"
        )

    passed = sum(1 for r in results if r.passed)
    print(f"\n{passed}/{len(results)} cases passed")
    return passed == len(results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run nn_infer models from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--list", action="store_true", help="List registered model types")
    parser.add_argument("--model", help="Model type identifier (e.g. linear, mlp)")
    parser.add_argument("--shape", type=int, nargs="+", help="Shape integers for the model type")
    parser.add_argument("--params", help="Comma-separated parameter vector")
    parser.add_argument("--input", help="Comma-separated input vector")
    parser.add_argument("--cases", help="Test-case file to evaluate")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging()

    if args.list:
        for type_id in registry.list_registered_types():
            dims = ", ".join(registry.expected_shape(type_id))
            print(f"{type_id} ({dims})")
        return 0

    if args.model is None:
        run_demo()
        return 0

    if not args.shape:
        parser.error("--shape is required with --model")
    if not args.input and not args.cases:
        parser.error("--input or --cases is required with --model")

    try:
        if args.cases:
            return 0 if run_cases(args.model, args.shape, args.params, args.cases) else 1
        run_single(args.model, args.shape, args.params, args.input)
    except (NNInferError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
