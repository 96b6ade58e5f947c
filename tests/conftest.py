# tests/conftest.py
"""
Shared pytest fixtures for smogcast tests.
"""

import numpy as np
import pytest

from smogcast import LabeledRecord


def make_pm25_records(n, rng):
    """
    Readings whose only varying feature is PM2.5 in [0, 300]; the label is
    round(pm25 / 60) clamped to [0, 5].
    """
    records = []
    for pm25 in rng.uniform(0, 300, size=n):
        label = min(5, max(0, int(np.floor(pm25 / 60 + 0.5))))
        records.append(
            LabeledRecord(
                pm25=float(pm25),
                temperature=20.0,
                humidity=50.0,
                wind_speed=5.0,
                visibility=10.0,
                pressure=1013.0,
                label=label,
            )
        )
    return records


@pytest.fixture
def rng():
    """Seeded generator so weight init and data are reproducible."""
    return np.random.default_rng(7)


@pytest.fixture
def pm25_factory():
    """Builder for PM2.5 banding scenarios of any size."""
    return make_pm25_records


@pytest.fixture
def pm25_records(rng):
    """100 single-signal records from the PM2.5 banding scenario."""
    return make_pm25_records(100, rng)


@pytest.fixture
def small_records():
    """Hand-written records covering all six classes with varying features."""
    rows = [
        (8.0, 15.0, 40.0, 12.0, 22.0, 1030.0, 0),
        (25.0, 18.0, 45.0, 10.0, 20.0, 1025.0, 1),
        (45.0, 20.0, 55.0, 8.0, 16.0, 1018.0, 2),
        (100.0, 22.0, 60.0, 6.0, 5.0, 1010.0, 3),
        (200.0, 12.0, 70.0, 3.0, 1.0, 1000.0, 4),
        (320.0, 8.0, 85.0, 2.0, 0.5, 985.0, 5),
    ]
    return [LabeledRecord(*row[:6], label=row[6]) for row in rows]
