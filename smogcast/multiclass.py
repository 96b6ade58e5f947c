from __future__ import annotations

"""
One-vs-all smog-level classifier: one binary logistic unit per class, trained
against a single shared normalized matrix, combined by highest probability.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .constants import (
    EPOCHS,
    FEATURE_COLUMNS,
    FEATURE_LABELS,
    INIT_SCALE,
    L2_PENALTY,
    LEARNING_RATE,
    N_CLASSES,
    SMOG_DESCRIPTIONS,
    SMOG_LEVELS,
)
from .data_prep import FeatureBounds, extract_features, normalize_features
from .logreg import BinaryLogisticUnit, BinaryModel
from .records import AirQualityReading, LabeledRecord


@dataclass(frozen=True)
class PredictionResult:
    prediction: int
    probabilities: np.ndarray
    confidence: float

    @property
    def level(self) -> str:
        return SMOG_LEVELS[self.prediction]

    @property
    def description(self) -> str:
        return SMOG_DESCRIPTIONS[self.prediction]


def pick_class(probabilities) -> PredictionResult:
    """Argmax over class probabilities; the first maximum wins ties."""
    probabilities = np.asarray(probabilities, dtype=float)
    prediction = int(np.argmax(probabilities))
    return PredictionResult(
        prediction=prediction,
        probabilities=probabilities,
        confidence=float(probabilities[prediction]),
    )


class OneVsAllClassifier:
    """
    Multiclass logistic regression built from independent binary units.

    The six probabilities are not normalized against each other. Bounds are
    frozen at train time and reused for every prediction.
    """

    def __init__(
        self,
        n_classes: int = N_CLASSES,
        lr: float = LEARNING_RATE,
        l2: float = L2_PENALTY,
        epochs: int = EPOCHS,
        init_scale: float = INIT_SCALE,
        rng: np.random.Generator | None = None,
        verbose: bool = False,
    ):
        self.n_classes = n_classes
        self.rng = rng if rng is not None else np.random.default_rng()
        self.verbose = verbose
        self.unit = BinaryLogisticUnit(
            lr=lr,
            l2=l2,
            epochs=epochs,
            init_scale=init_scale,
            rng=self.rng,
            verbose=verbose,
        )
        self._models: list[BinaryModel] = [
            BinaryModel(weights=np.zeros(len(FEATURE_COLUMNS)))
            for _ in range(n_classes)
        ]
        self._bounds: FeatureBounds | None = None

    @property
    def models(self) -> tuple[BinaryModel, ...]:
        return tuple(self._models)

    @property
    def bounds(self) -> FeatureBounds | None:
        return self._bounds

    @property
    def is_trained(self) -> bool:
        return self._bounds is not None and all(m.trained for m in self._models)

    def train(self, records: Sequence[LabeledRecord]) -> "OneVsAllClassifier":
        """Fit one unit per class on the full record set; no internal split."""
        X, y, bounds = extract_features(records)
        X_norm = normalize_features(X, bounds)

        models = []
        for label in range(self.n_classes):
            if self.verbose:
                print(f"Training class {label} ({SMOG_LEVELS[label]}) vs rest")
            models.append(self.unit.fit(X_norm, (y == label).astype(int)))

        self._bounds = bounds
        self._models = models
        return self

    def _class_probabilities(self, X_norm: np.ndarray) -> np.ndarray:
        return np.column_stack([m.predict_proba(X_norm) for m in self._models])

    def predict_proba(self, readings: Sequence[AirQualityReading]) -> np.ndarray:
        """(n, n_classes) matrix of per-class probabilities."""
        if self._bounds is None:
            return np.zeros((len(readings), self.n_classes))
        X = np.array([r.features() for r in readings], dtype=float).reshape(
            len(readings), len(FEATURE_COLUMNS)
        )
        return self._class_probabilities(normalize_features(X, self._bounds))

    def predict(self, reading: AirQualityReading) -> PredictionResult:
        """
        Most likely smog level for one reading. Ties go to the lowest class
        index, so an untrained model answers class 0 with confidence 0.
        """
        return pick_class(self.predict_proba([reading])[0])

    def feature_importance(self) -> pd.Series:
        """
        Mean absolute weight per feature across all units, scaled so the top
        feature scores 1.0, sorted descending.
        """
        if not self.is_trained:
            raise RuntimeError("Model is not fitted.")

        weights = np.vstack([m.weights for m in self._models])
        avg_weight = np.abs(weights).mean(axis=0)
        importance = pd.Series(
            avg_weight / avg_weight.max(),
            index=[FEATURE_LABELS[c] for c in FEATURE_COLUMNS],
            name="importance",
        )
        return importance.sort_values(ascending=False, kind="stable")
