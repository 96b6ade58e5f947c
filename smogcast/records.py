from __future__ import annotations

"""
Record types exchanged between the data generator, the classifier and callers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .constants import SMOG_LEVELS


@dataclass(frozen=True)
class AirQualityReading:
    """Six environmental readings in fixed units; the prediction input."""

    pm25: float
    temperature: float
    humidity: float
    wind_speed: float
    visibility: float
    pressure: float

    def features(self) -> tuple[float, float, float, float, float, float]:
        return (
            self.pm25,
            self.temperature,
            self.humidity,
            self.wind_speed,
            self.visibility,
            self.pressure,
        )


@dataclass(frozen=True)
class LabeledRecord(AirQualityReading):
    """
    A reading with its smog-level class (0..5), passed by keyword. The metadata
    fields come from the simulator and are ignored by the classifier.
    """

    label: int = field(kw_only=True)
    city: str = ""
    timestamp: Optional[datetime] = None
    pm10: float = 0.0
    aqi: int = 0

    def __post_init__(self):
        if not 0 <= self.label < len(SMOG_LEVELS):
            raise ValueError(f"Label out of range: {self.label}")

    @property
    def level(self) -> str:
        return SMOG_LEVELS[self.label]
