from __future__ import annotations

"""
Binary logistic unit trained with full-batch gradient descent and an L2
penalty on the weights. One unit per class makes up the one-vs-all model.
"""

from dataclasses import dataclass, field

import numpy as np

from .constants import EPOCHS, INIT_SCALE, L2_PENALTY, LEARNING_RATE, LOSS_EPS, SIGMOID_CLIP


def sigmoid(z):
    z = np.clip(z, -SIGMOID_CLIP, SIGMOID_CLIP)
    return 1.0 / (1.0 + np.exp(-z))


@dataclass
class BinaryModel:
    """Weights, bias and trained flag of a single class-vs-rest separator."""

    weights: np.ndarray
    bias: float = 0.0
    trained: bool = False
    loss_history: list[float] = field(default_factory=list)

    def decision_function(self, X) -> np.ndarray:
        return np.asarray(X, dtype=float) @ self.weights + self.bias

    def predict_proba(self, X) -> np.ndarray:
        """P(class) per row; an untrained model scores 0 everywhere."""
        X_arr = np.asarray(X, dtype=float)
        if not self.trained:
            return np.zeros(X_arr.shape[:-1])
        return sigmoid(self.decision_function(X_arr))


class BinaryLogisticUnit:
    """
    Batch gradient descent for "this class vs. all others".
    Runs a fixed number of epochs; the loss is recorded but never stops training.
    """

    def __init__(
        self,
        lr: float = LEARNING_RATE,
        l2: float = L2_PENALTY,
        epochs: int = EPOCHS,
        init_scale: float = INIT_SCALE,
        rng: np.random.Generator | None = None,
        verbose: bool = False,
    ):
        self.lr = lr
        self.l2 = l2
        self.epochs = epochs
        self.init_scale = init_scale
        self.rng = rng if rng is not None else np.random.default_rng()
        self.verbose = verbose

    def init_model(self, n_features: int) -> BinaryModel:
        weights = (self.rng.random(n_features) - 0.5) * self.init_scale
        return BinaryModel(weights=weights, bias=0.0)

    @staticmethod
    def cross_entropy(y: np.ndarray, preds: np.ndarray) -> float:
        preds = np.clip(preds, LOSS_EPS, 1 - LOSS_EPS)
        return float(-np.mean(y * np.log(preds) + (1 - y) * np.log(1 - preds)))

    def fit(self, X, y) -> BinaryModel:
        """Train on an already-normalized matrix and 0/1 labels."""
        X_arr = np.asarray(X, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        if X_arr.ndim != 2:
            raise ValueError("X must be 2D (n_samples, n_features).")
        if len(X_arr) == 0 or len(X_arr) != len(y_arr):
            raise ValueError(
                f"Need matching non-empty X and y, got {len(X_arr)} and {len(y_arr)} rows"
            )

        model = self.init_model(X_arr.shape[1])
        n = len(y_arr)

        for epoch in range(1, self.epochs + 1):
            preds = sigmoid(X_arr @ model.weights + model.bias)
            error = preds - y_arr
            grad_w = (X_arr.T @ error) / n
            grad_b = float(error.mean())

            model.weights = model.weights - self.lr * (grad_w + self.l2 * model.weights)
            model.bias -= self.lr * grad_b

            loss = self.cross_entropy(y_arr, preds)
            model.loss_history.append(loss)
            if self.verbose and epoch % 500 == 0:
                print(f"[GD] epoch={epoch}, loss={loss:.4f}")

        model.trained = True
        return model
