"""CLI entry point: python -m wdbc_harness"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from wdbc_harness.config import (
    DEFAULT_SEED,
    DEFAULT_THRESHOLD,
    DEFAULT_TRAIN_FRACTION,
    SCALING_METHODS,
    HarnessConfig,
)
from wdbc_harness.data.loader import DATASET_REGISTRY
from wdbc_harness.evaluation import JsonSink, LoggingSink
from wdbc_harness.harness import EvaluationHarness
from wdbc_harness.models import ADAPTERS
from wdbc_harness.utils import set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "WDBC model evaluation harness - "
            "compares classifiers on a seeded train/test split."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m wdbc_harness\n"
            "  python -m wdbc_harness --csv data.csv --models random_forest xgboost\n"
            "  python -m wdbc_harness --train-fraction 0.8 --seed 7 --cv-folds 5\n"
            "  python -m wdbc_harness --config run.json --output results/report.json\n"
        ),
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with harness settings; command-line flags override it",
    )
    parser.add_argument(
        "--dataset",
        type=str,
        default=None,
        choices=list(DATASET_REGISTRY.keys()),
        help="Built-in dataset to analyze (default: wdbc)",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Delimited file with id, diagnosis and the 30 feature columns",
    )
    parser.add_argument(
        "--models",
        type=str,
        nargs="+",
        default=None,
        choices=list(ADAPTERS.keys()),
        help="Models to evaluate (default: all available)",
    )
    parser.add_argument(
        "--train-fraction",
        type=float,
        default=None,
        help=f"Fraction of rows used for training (default: {DEFAULT_TRAIN_FRACTION})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Seed for the train/test partition (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help=f"Decision threshold for the confusion matrix (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "--scaling",
        type=str,
        default=None,
        choices=list(SCALING_METHODS),
        help="Feature scaling method (default: standard)",
    )
    parser.add_argument(
        "--cv-folds",
        type=int,
        default=None,
        help="Cross-validation folds on the train partition, 0 disables (default: 0)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of models fitted concurrently (default: 1)",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Record failing models and keep evaluating the others",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write per-model metrics to this JSON file",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    parser.add_argument(
        "--list-models",
        action="store_true",
        help="List all available models and exit",
    )
    parser.add_argument(
        "--list-datasets",
        action="store_true",
        help="List all available datasets and exit",
    )
    return parser


def build_config(args: argparse.Namespace) -> HarnessConfig:
    """Merge the optional JSON config with explicit command-line flags."""
    base = HarnessConfig.from_json(args.config).model_dump() if args.config else {}
    overrides = {
        "dataset": args.dataset,
        "csv_path": args.csv,
        "models": args.models,
        "train_fraction": args.train_fraction,
        "seed": args.seed,
        "threshold": args.threshold,
        "scaling": args.scaling,
        "cv_folds": args.cv_folds,
        "n_workers": args.workers,
    }
    base.update({k: v for k, v in overrides.items() if v is not None})
    if args.continue_on_error:
        base["continue_on_error"] = True
    return HarnessConfig.model_validate(base)


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.list_models:
        print("Available models:")
        for name, cls in ADAPTERS.items():
            print(f"  {name:<20} {cls.description}")
        return 0

    if args.list_datasets:
        print("Available datasets:")
        for name, info in DATASET_REGISTRY.items():
            print(f"  {name:<20} {info['description']}")
        return 0

    try:
        config = build_config(args)
    except (ValidationError, OSError, json.JSONDecodeError) as e:
        print(f"\nInvalid configuration:\n{e}", file=sys.stderr)
        return 2

    if args.quiet:
        set_level(logging.WARNING)

    sinks = [LoggingSink()]
    if args.output:
        sinks.append(JsonSink(args.output))

    try:
        report = EvaluationHarness(config, sinks=sinks).run()
    except Exception as e:
        print(f"\nHarness failed: {e}", file=sys.stderr)
        return 1

    table = report.comparison()
    if not table.empty:
        columns = ["model", "auc", "accuracy", "sensitivity", "specificity", "tp", "tn", "fp", "fn"]
        print("\n" + table[columns].to_string(index=False))
    for name, message in report.failures.items():
        print(f"FAILED {name}: {message}", file=sys.stderr)
    if report.failures and not report.results:
        print("\nNo model was evaluated successfully", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
