from __future__ import annotations

"""
Data preparation for the smog classifier: records -> design matrix, min-max
bounds, normalization and the train/test split used by the CLI.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from .constants import FEATURE_COLUMNS, LABEL_COLUMN
from .records import AirQualityReading, LabeledRecord


@dataclass(frozen=True)
class FeatureBounds:
    """Per-feature min/max learned once from the training matrix."""

    mins: np.ndarray
    maxs: np.ndarray

    @classmethod
    def from_matrix(cls, X: np.ndarray) -> "FeatureBounds":
        X_arr = np.asarray(X, dtype=float)
        return cls(mins=X_arr.min(axis=0), maxs=X_arr.max(axis=0))

    @property
    def span(self) -> np.ndarray:
        span = self.maxs - self.mins
        # zero-width columns scale by 1; normalize_features zeroes them
        return np.where(span == 0, 1.0, span)

    def denormalize(self, X_norm: np.ndarray) -> np.ndarray:
        """Map normalized values back to raw units."""
        return np.asarray(X_norm, dtype=float) * self.span + self.mins


def records_to_frame(records: Sequence[AirQualityReading]) -> pd.DataFrame:
    """
    One row per record with the six feature columns, plus the label column
    when the records carry one.
    """
    rows = [r.features() for r in records]
    frame = pd.DataFrame(rows, columns=FEATURE_COLUMNS, dtype=float)
    if records and all(isinstance(r, LabeledRecord) for r in records):
        frame[LABEL_COLUMN] = [r.label for r in records]
    return frame


def extract_features(records: Sequence[LabeledRecord]):
    """
    Build the (n, 6) feature matrix, the label vector and the column bounds.
    """
    if len(records) == 0:
        raise ValueError("Cannot extract features from an empty record set.")

    frame = records_to_frame(records)
    X = frame[FEATURE_COLUMNS].to_numpy(dtype=float)
    y = frame[LABEL_COLUMN].to_numpy(dtype=int)
    return X, y, FeatureBounds.from_matrix(X)


def normalize_features(X, bounds: FeatureBounds) -> np.ndarray:
    """
    Min-max scale a matrix or a single feature vector with fixed bounds.
    A column whose training values were all equal maps to 0 for any input.
    """
    X_arr = np.asarray(X, dtype=float)
    if X_arr.shape[-1] != len(bounds.mins):
        raise ValueError(
            f"Expected {len(bounds.mins)} features, got {X_arr.shape[-1]}"
        )
    return np.where(bounds.maxs == bounds.mins, 0.0, (X_arr - bounds.mins) / bounds.span)


def make_train_test_split(
    records: Sequence[LabeledRecord],
    test_size: float = 0.2,
    mode: str = "head",
    random_state: int | None = 42,
):
    """Split records in caller order (head) or randomly with a fixed seed."""
    if not 0.0 < test_size < 1.0:
        raise ValueError(f"test_size must be in (0, 1), got {test_size}")

    records = list(records)
    if mode == "head":
        split_at = int(len(records) * (1 - test_size))
        train, test = records[:split_at], records[split_at:]
    elif mode == "random":
        train, test = train_test_split(
            records, test_size=test_size, random_state=random_state
        )
    else:
        raise ValueError(f"Unknown split mode: {mode}")

    return train, test


def describe_records(records: Sequence[LabeledRecord]) -> dict:
    """Dataset size, class balance and per-feature ranges for the CLI summary."""
    frame = records_to_frame(records)
    return {
        "num_records": len(frame),
        "class_counts": frame[LABEL_COLUMN].value_counts().sort_index().to_dict(),
        "feature_ranges": {
            col: (float(frame[col].min()), float(frame[col].max()))
            for col in FEATURE_COLUMNS
        },
    }
