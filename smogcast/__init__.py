"""
Smog-level prediction from environmental readings.

This package contains a synthetic air-quality generator, data preparation
helpers, a one-vs-all logistic regression trained with gradient descent, and
evaluation utilities used by main.py.
"""

from .constants import FEATURE_COLUMNS, FEATURE_LABELS, N_CLASSES, SMOG_LEVELS
from .data_prep import (
    FeatureBounds,
    extract_features,
    make_train_test_split,
    normalize_features,
)
from .logreg import BinaryLogisticUnit, BinaryModel
from .metrics import EvaluationReport, evaluate, one_vs_rest_roc
from .multiclass import OneVsAllClassifier, PredictionResult
from .records import AirQualityReading, LabeledRecord
from .synthetic import generate_air_quality_data

__all__ = [
    "FEATURE_COLUMNS",
    "FEATURE_LABELS",
    "N_CLASSES",
    "SMOG_LEVELS",
    "FeatureBounds",
    "extract_features",
    "make_train_test_split",
    "normalize_features",
    "BinaryLogisticUnit",
    "BinaryModel",
    "EvaluationReport",
    "evaluate",
    "one_vs_rest_roc",
    "OneVsAllClassifier",
    "PredictionResult",
    "AirQualityReading",
    "LabeledRecord",
    "generate_air_quality_data",
]
