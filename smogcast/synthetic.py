from __future__ import annotations

"""
Synthetic air-quality readings for six polluted cities, with seasonal and
rush-hour patterns. Labels come from the US EPA PM2.5 AQI scale.
"""

import math
from datetime import datetime, timedelta

import numpy as np

from .constants import AQI_BREAKPOINTS, CITIES, DEFAULT_SAMPLES, SMOG_AQI_LIMITS
from .records import LabeledRecord


def round_half_up(value: float) -> int:
    """Nearest integer with exact halves rounded toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def calculate_aqi(pm25: float) -> int:
    """Linear interpolation inside the matching PM2.5 breakpoint band."""
    for conc_low, conc_high, aqi_low, aqi_high in AQI_BREAKPOINTS:
        if conc_low <= pm25 <= conc_high:
            return round_half_up(
                (aqi_high - aqi_low) / (conc_high - conc_low) * (pm25 - conc_low) + aqi_low
            )
    # gaps between bands (e.g. 12.05) and anything past 500 fall through
    return 500


def smog_level(aqi: float) -> int:
    for level, limit in enumerate(SMOG_AQI_LIMITS):
        if aqi <= limit:
            return level
    return len(SMOG_AQI_LIMITS)


def _winter_multiplier(month: int) -> float:
    # month is 1-based; November through March
    return 1.4 if month >= 11 or month <= 3 else 0.8


def _rush_hour_multiplier(hour: int) -> float:
    if 7 <= hour <= 9 or 17 <= hour <= 19:
        return 1.3
    if hour >= 22 or hour <= 6:
        return 0.7
    return 1.0


def _round1(value: float) -> float:
    return round_half_up(value * 10) / 10


def generate_air_quality_data(
    samples: int = DEFAULT_SAMPLES,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
) -> list[LabeledRecord]:
    """
    Simulate `samples` hourly-ish readings over the past year, newest first.
    """
    rng = rng if rng is not None else np.random.default_rng()
    now = now or datetime.now()

    records = []
    for _ in range(samples):
        city = CITIES[int(rng.integers(len(CITIES)))]
        timestamp = now - timedelta(seconds=float(rng.random()) * 365 * 24 * 60 * 60)

        temperature = (
            city["base_temp"]
            + (rng.random() - 0.5) * 20
            + 10 * math.sin((timestamp.month - 7) * math.pi / 6)
        )
        humidity = 30 + rng.random() * 60
        wind_speed = rng.random() * 15 + 2
        pressure = 980 + rng.random() * 60

        pm25 = (
            city["base_pm25"]
            * _winter_multiplier(timestamp.month)
            * _rush_hour_multiplier(timestamp.hour)
        )
        pm25 *= 1 - wind_speed / 25
        pm25 *= 1 + (humidity - 50) / 200
        pm25 *= 1 + (1040 - pressure) / 1000
        pm25 += (rng.random() - 0.5) * 30
        pm25 = max(5.0, pm25)

        pm10 = pm25 * (1.5 + rng.random() * 0.5)
        visibility = max(0.5, 25 - pm25 / 5 + (rng.random() - 0.5) * 5)
        aqi = calculate_aqi(pm25)

        records.append(
            LabeledRecord(
                pm25=_round1(pm25),
                temperature=_round1(temperature),
                humidity=_round1(humidity),
                wind_speed=_round1(wind_speed),
                visibility=_round1(visibility),
                pressure=_round1(pressure),
                label=smog_level(aqi),
                city=city["name"],
                timestamp=timestamp,
                pm10=_round1(pm10),
                aqi=aqi,
            )
        )

    records.sort(key=lambda r: r.timestamp, reverse=True)
    return records
