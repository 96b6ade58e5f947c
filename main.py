from __future__ import annotations

"""
CLI entrypoint for the smog-level experiment: synthesize readings, train the
one-vs-all logistic regression, report test metrics and feature importance,
and optionally classify a reading passed on the command line.
"""

import argparse

import numpy as np

from smogcast import (
    FEATURE_COLUMNS,
    SMOG_LEVELS,
    AirQualityReading,
    OneVsAllClassifier,
    evaluate,
    generate_air_quality_data,
    make_train_test_split,
    one_vs_rest_roc,
)
from smogcast.constants import (
    DEFAULT_SAMPLES,
    DEFAULT_TEST_SIZE,
    EPOCHS,
    FEATURE_UNITS,
    L2_PENALTY,
    LEARNING_RATE,
)
from smogcast.data_prep import describe_records
from smogcast.metrics import summarize_importance


def describe_dataset(meta: dict):
    """Print dataset size and class balance."""
    print(f"Total readings: {meta['num_records']}")
    print("Class balance:")
    for label, level in enumerate(SMOG_LEVELS):
        print(f"  {label} {level}: {meta['class_counts'].get(label, 0)}")


def print_report(label: str, report):
    """Nicely format an EvaluationReport."""
    print(
        f"[{label}] Acc {report.accuracy:.3f} | "
        f"Prec {report.precision:.3f} | Rec {report.recall:.3f} | "
        f"F1 {report.f1:.3f} | n={report.n_samples}"
    )
    print("    Confusion matrix (rows actual, columns predicted):")
    for row in report.confusion_matrix.tolist():
        print(f"    {row}")
    print(report.per_class.round(3).to_string())


def parse_reading(text: str) -> AirQualityReading:
    """Comma-separated values in feature order: pm25,temperature,...,pressure."""
    values = [float(v.strip()) for v in text.split(",") if v.strip()]
    if len(values) != len(FEATURE_COLUMNS):
        raise argparse.ArgumentTypeError(
            f"Expected {len(FEATURE_COLUMNS)} values ({','.join(FEATURE_COLUMNS)}), got {len(values)}"
        )
    return AirQualityReading(*values)


def build_arg_parser():
    """CLI parser with knobs for data size, split and model params."""
    parser = argparse.ArgumentParser(
        description="Predict smog levels from synthetic air-quality readings."
    )
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    parser.add_argument("--test-size", type=float, default=DEFAULT_TEST_SIZE)
    parser.add_argument(
        "--split-mode",
        choices=["head", "random"],
        default="head",
        help="head keeps the first readings (newest first) for training.",
    )
    parser.add_argument("--lr", type=float, default=LEARNING_RATE, help="Learning rate for GD.")
    parser.add_argument("--l2", type=float, default=L2_PENALTY, help="L2 regularization for GD.")
    parser.add_argument("--epochs", type=int, default=EPOCHS, help="Full-batch GD epochs per class.")
    parser.add_argument("--top-k", type=int, default=3, help="Features shown in the importance summary.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for data, weight init and split; unseeded when omitted.",
    )
    parser.add_argument(
        "--predict",
        type=parse_reading,
        action="append",
        default=[],
        metavar="PM25,TEMP,HUM,WIND,VIS,PRES",
        help="Reading to classify after training; may be repeated.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print GD loss while training.")
    return parser


def run_experiment(args: argparse.Namespace):
    rng = np.random.default_rng(args.seed)
    records = generate_air_quality_data(args.samples, rng=rng)
    describe_dataset(describe_records(records))

    train, test = make_train_test_split(
        records, test_size=args.test_size, mode=args.split_mode, random_state=args.seed
    )
    print(f"Train size: {len(train)}, Test size: {len(test)}")

    classifier = OneVsAllClassifier(
        lr=args.lr, l2=args.l2, epochs=args.epochs, rng=rng, verbose=args.verbose
    )
    classifier.train(train)

    report = evaluate(classifier, test)
    print_report("One-vs-all GD logistic", report)

    print("\nPer-class ROC-AUC (one-vs-rest):")
    for label, (_, _, auc) in one_vs_rest_roc(classifier, test).items():
        print(f"  {SMOG_LEVELS[label]}: {auc:.3f}")

    importance = summarize_importance(classifier.feature_importance(), top_k=args.top_k)
    print("\nMost important features:")
    print(importance["top"].round(3).to_string())
    print("\nLeast important features:")
    print(importance["bottom"].round(3).to_string())

    for reading in args.predict:
        result = classifier.predict(reading)
        shown = ", ".join(
            f"{getattr(reading, col)} {FEATURE_UNITS[col]}" for col in FEATURE_COLUMNS
        )
        print(f"\nReading: {shown}")
        print(f"Predicted: {result.level} (class {result.prediction}, confidence {result.confidence:.3f})")
        print(f"    {result.description}")
        print(f"    Probabilities: {np.round(result.probabilities, 3).tolist()}")

    return classifier, report


def main(args: argparse.Namespace | None = None):
    args = args or build_arg_parser().parse_args()
    run_experiment(args)


if __name__ == "__main__":
    main()
