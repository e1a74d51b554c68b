"""Air quality endpoints.

These serve fixed placeholder data; see ``app.services.airquality``.
"""
from fastapi import APIRouter, Depends, Query

from app.config import Settings, get_settings
from app.schemas.airquality import Alerts, CurrentReading, Forecast, MapPins
from app.services import airquality

router = APIRouter(prefix="/airquality", tags=["airquality"])


class Coordinates:
    """Optional ``lat``/``lng`` query parameters with settings defaults."""

    def __init__(
        self,
        lat: float | None = Query(None, ge=-90, le=90),
        lng: float | None = Query(None, ge=-180, le=180),
        settings: Settings = Depends(get_settings),
    ):
        self.lat = settings.default_lat if lat is None else lat
        self.lng = settings.default_lng if lng is None else lng


@router.get("/current", response_model=CurrentReading)
def get_current(coords: Coordinates = Depends()):
    """Current reading (placeholder)."""
    return airquality.get_current(coords.lat, coords.lng)


@router.get("/forecast", response_model=Forecast)
def get_forecast(coords: Coordinates = Depends()):
    """Six-hour forecast (placeholder)."""
    return airquality.get_forecast(coords.lat, coords.lng)


@router.get("/map", response_model=MapPins)
def get_map(coords: Coordinates = Depends()):
    """Monitor pins for the map (placeholder)."""
    return airquality.get_map_pins(coords.lat, coords.lng)


@router.get("/alerts", response_model=Alerts)
def get_alerts(coords: Coordinates = Depends()):
    """Active alerts (placeholder)."""
    return airquality.get_alerts(coords.lat, coords.lng)
