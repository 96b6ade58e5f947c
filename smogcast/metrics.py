from __future__ import annotations

"""
Evaluation of the one-vs-all classifier on held-out records (confusion matrix,
macro precision/recall/F1, accuracy) and importance summaries.
"""

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import SMOG_LEVELS
from .multiclass import OneVsAllClassifier, pick_class
from .records import LabeledRecord


@dataclass
class EvaluationReport:
    accuracy: float
    precision: float
    recall: float
    f1: float
    confusion_matrix: np.ndarray  # rows = actual, columns = predicted
    roc_curve: list[tuple[float, float]]
    per_class: pd.DataFrame = field(default_factory=pd.DataFrame)
    n_samples: int = 0


def placeholder_roc_curve(rng: np.random.Generator | None = None, points: int = 11):
    """
    Fixed-shape stand-in for a ROC curve: tpr = min(1, fpr + 0.1 + U(0, 0.1)).
    It does not depend on the model; use one_vs_rest_roc for the real curves.
    """
    rng = rng if rng is not None else np.random.default_rng()
    fprs = np.linspace(0.0, 1.0, points)
    return [(float(fpr), float(min(1.0, fpr + 0.1 + rng.random() * 0.1))) for fpr in fprs]


def compute_multiclass_metrics(y_true, y_pred, n_classes: int = len(SMOG_LEVELS)):
    """Confusion matrix, accuracy and macro averages over every class label."""
    labels = list(range(n_classes))
    cm = metrics.confusion_matrix(y_true, y_pred, labels=labels)
    precision, recall, f1, support = metrics.precision_recall_fscore_support(
        y_true, y_pred, labels=labels, average=None, zero_division=0
    )
    per_class = pd.DataFrame(
        {"precision": precision, "recall": recall, "f1": f1, "support": support},
        index=pd.Index(SMOG_LEVELS[:n_classes], name="level"),
    )
    return {
        "accuracy": float(np.trace(cm) / cm.sum()),
        "precision": float(precision.mean()),
        "recall": float(recall.mean()),
        "f1": float(f1.mean()),
        "confusion_matrix": cm,
        "per_class": per_class,
    }


def evaluate(
    classifier: OneVsAllClassifier,
    records: Sequence[LabeledRecord],
    rng: np.random.Generator | None = None,
) -> EvaluationReport:
    """Predict every held-out record and summarize against the true labels."""
    if len(records) == 0:
        raise ValueError("Cannot evaluate on an empty record set.")

    y_true = np.array([r.label for r in records], dtype=int)
    proba = classifier.predict_proba(records)
    y_pred = np.array([pick_class(row).prediction for row in proba], dtype=int)

    summary = compute_multiclass_metrics(y_true, y_pred, classifier.n_classes)
    return EvaluationReport(
        accuracy=summary["accuracy"],
        precision=summary["precision"],
        recall=summary["recall"],
        f1=summary["f1"],
        confusion_matrix=summary["confusion_matrix"],
        roc_curve=placeholder_roc_curve(rng if rng is not None else classifier.rng),
        per_class=summary["per_class"],
        n_samples=len(records),
    )


def one_vs_rest_roc(classifier: OneVsAllClassifier, records: Sequence[LabeledRecord]):
    """
    Per-class ROC curves from the one-vs-all probabilities.
    Classes missing from the records (or covering all of them) get auc = nan.
    """
    if len(records) == 0:
        raise ValueError("Cannot compute ROC curves on an empty record set.")

    y_true = np.array([r.label for r in records], dtype=int)
    proba = classifier.predict_proba(records)

    curves = {}
    for label in range(classifier.n_classes):
        y_bin = (y_true == label).astype(int)
        if y_bin.min() == y_bin.max():
            curves[label] = (np.array([]), np.array([]), float("nan"))
            continue
        fpr, tpr, _ = metrics.roc_curve(y_bin, proba[:, label])
        curves[label] = (fpr, tpr, float(metrics.auc(fpr, tpr)))
    return curves


def summarize_importance(importance: pd.Series, top_k: int = 3) -> dict[str, pd.Series]:
    ranked = importance.sort_values(ascending=False, kind="stable")
    return {
        "top": ranked.head(top_k),
        "bottom": ranked.tail(top_k)[::-1],
    }
