"""Placeholder air quality data.

Every payload here comes from ``data/airquality.yaml``. There is no sensor
ingestion and no forecasting model behind these endpoints; the requested
coordinates are only echoed back.
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
import logging
from pathlib import Path

import yaml

from app.config import get_settings

logger = logging.getLogger(__name__)

FORECAST_POINTS = 6

# US EPA AQI bands: (upper bound inclusive, category)
AQI_CATEGORIES = [
    (50, "Good"),
    (100, "Moderate"),
    (150, "Unhealthy for Sensitive Groups"),
    (200, "Unhealthy"),
    (300, "Very Unhealthy"),
]


def aqi_category(aqi: int) -> str:
    """Map an AQI value to its EPA category name."""
    if aqi < 0:
        raise ValueError(f"AQI cannot be negative: {aqi}")
    for upper, category in AQI_CATEGORIES:
        if aqi <= upper:
            return category
    return "Hazardous"


@lru_cache
def load_placeholder_data(path: Path | None = None) -> dict:
    """Load and cache the placeholder data file."""
    path = path or get_settings().data_dir / "airquality.yaml"
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if len(data.get("forecast", [])) != FORECAST_POINTS:
        raise ValueError(f"{path} must define exactly {FORECAST_POINTS} forecast values")

    logger.info(f"Loaded placeholder air quality data from {path}")
    return data


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)


def get_current(lat: float, lng: float) -> dict:
    data = load_placeholder_data()
    current = data["current"]
    return {
        "location": {"lat": lat, "lng": lng},
        "aqi": current["aqi"],
        "category": aqi_category(current["aqi"]),
        "dominant_pollutant": current["dominant_pollutant"],
        "pollutants": current["pollutants"],
        "source": data.get("source", "placeholder"),
        "observed_at": _now().isoformat(),
    }


def get_forecast(lat: float, lng: float) -> dict:
    """Six hourly points starting one hour from now."""
    start = _now()
    points = [
        {
            "time": (start + timedelta(hours=offset)).isoformat(),
            "aqi": aqi,
            "category": aqi_category(aqi),
        }
        for offset, aqi in enumerate(load_placeholder_data()["forecast"], start=1)
    ]
    return {"location": {"lat": lat, "lng": lng}, "points": points}


def get_map_pins(lat: float, lng: float) -> dict:
    pins = [
        {**pin, "category": aqi_category(pin["aqi"])}
        for pin in load_placeholder_data().get("map_pins", [])
    ]
    return {"center": {"lat": lat, "lng": lng}, "pins": pins}


def get_alerts(lat: float, lng: float) -> dict:
    return {
        "location": {"lat": lat, "lng": lng},
        "alerts": list(load_placeholder_data().get("alerts", [])),
    }
