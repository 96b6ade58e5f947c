"""
Unit tests for smogcast.logreg.
"""

import numpy as np
import pytest

from smogcast.logreg import BinaryLogisticUnit, BinaryModel, sigmoid


class TestSigmoid:
    """Tests for the clipped sigmoid."""

    def test_midpoint(self):
        assert sigmoid(0.0) == 0.5

    def test_extremes_do_not_overflow(self):
        """Scores beyond +-500 are clipped before exp."""
        with np.errstate(over="raise"):
            high, low = sigmoid(np.array([1e6, -1e6]))
        assert high == 1.0
        assert 0.0 < low < 1e-200

    def test_clip_matches_boundary(self):
        assert sigmoid(-1e6) == sigmoid(-500.0)


class TestBinaryLogisticUnit:
    """Tests for gradient descent training."""

    def test_initial_weights_are_small(self, rng):
        """Weights start in (-0.005, 0.005) with a zero bias."""
        model = BinaryLogisticUnit(rng=rng).init_model(6)
        assert model.weights.shape == (6,)
        assert np.all(np.abs(model.weights) < 0.005)
        assert model.bias == 0.0
        assert model.trained is False

    def test_runs_exact_epoch_count(self, rng):
        """No early stopping: one loss entry per epoch."""
        X = rng.random((20, 3))
        y = (X[:, 0] > 0.5).astype(int)
        model = BinaryLogisticUnit(epochs=250, rng=rng).fit(X, y)
        assert len(model.loss_history) == 250
        assert model.trained is True

    def test_single_step_matches_update_rule(self):
        """w <- w - lr * (grad + l2 * w); the bias is not regularized."""
        X = np.array([[1.0, 0.0], [0.0, 1.0]])
        y = np.array([1, 0])
        unit = BinaryLogisticUnit(lr=0.5, l2=0.1, epochs=1, rng=np.random.default_rng(1))
        w0 = unit.init_model(2).weights

        model = BinaryLogisticUnit(lr=0.5, l2=0.1, epochs=1, rng=np.random.default_rng(1)).fit(X, y)

        preds = sigmoid(X @ w0)
        grad_w = X.T @ (preds - y) / 2
        grad_b = np.mean(preds - y)
        np.testing.assert_allclose(model.weights, w0 - 0.5 * (grad_w + 0.1 * w0))
        assert model.bias == pytest.approx(-0.5 * grad_b)

    def test_loss_decreases_on_separable_data(self, rng):
        X = np.linspace(0, 1, 40).reshape(-1, 1)
        y = (X[:, 0] > 0.5).astype(int)
        model = BinaryLogisticUnit(lr=1.0, l2=0.0, epochs=500, rng=rng).fit(X, y)
        assert model.loss_history[-1] < model.loss_history[0]
        assert model.weights[0] > 0

    def test_loss_is_finite_for_confident_predictions(self):
        """Predictions are clamped before the log."""
        loss = BinaryLogisticUnit.cross_entropy(np.array([1.0, 0.0]), np.array([0.0, 1.0]))
        assert np.isfinite(loss)
        assert loss == pytest.approx(-np.log(1e-15), rel=1e-3)

    def test_rejects_mismatched_inputs(self, rng):
        unit = BinaryLogisticUnit(rng=rng)
        with pytest.raises(ValueError):
            unit.fit(np.zeros((3, 2)), np.zeros(2))
        with pytest.raises(ValueError):
            unit.fit(np.zeros(3), np.zeros(3))

    def test_seeded_training_is_reproducible(self):
        X = np.random.default_rng(0).random((30, 6))
        y = (X[:, 0] > 0.4).astype(int)
        a = BinaryLogisticUnit(epochs=50, rng=np.random.default_rng(5)).fit(X, y)
        b = BinaryLogisticUnit(epochs=50, rng=np.random.default_rng(5)).fit(X, y)
        np.testing.assert_array_equal(a.weights, b.weights)
        assert a.bias == b.bias


class TestBinaryModel:
    """Tests for BinaryModel scoring."""

    def test_untrained_model_scores_zero(self):
        model = BinaryModel(weights=np.ones(6))
        np.testing.assert_array_equal(model.predict_proba(np.ones((3, 6))), np.zeros(3))

    def test_trained_model_uses_sigmoid(self):
        model = BinaryModel(weights=np.array([2.0, -1.0]), bias=0.5, trained=True)
        proba = model.predict_proba(np.array([[1.0, 1.0]]))
        assert proba[0] == pytest.approx(1 / (1 + np.exp(-1.5)))
