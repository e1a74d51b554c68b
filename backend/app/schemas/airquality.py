"""Placeholder air quality schemas."""
from pydantic import BaseModel


class QueryLocation(BaseModel):
    """The coordinates a request asked about, echoed back."""

    lat: float
    lng: float


class Pollutants(BaseModel):
    pm25: float
    pm10: float
    o3: float
    no2: float
    co: float
    so2: float


class CurrentReading(BaseModel):
    """Current conditions at a location."""

    placeholder: bool = True
    location: QueryLocation
    aqi: int
    category: str
    dominant_pollutant: str
    pollutants: Pollutants
    source: str
    observed_at: str


class ForecastPoint(BaseModel):
    time: str
    aqi: int
    category: str


class Forecast(BaseModel):
    """Hourly forecast, always six points."""

    placeholder: bool = True
    location: QueryLocation
    points: list[ForecastPoint]


class MapPin(BaseModel):
    id: str
    name: str
    lat: float
    lng: float
    aqi: int
    category: str


class MapPins(BaseModel):
    placeholder: bool = True
    center: QueryLocation
    pins: list[MapPin]


class Alert(BaseModel):
    id: str
    severity: str
    title: str
    message: str


class Alerts(BaseModel):
    placeholder: bool = True
    location: QueryLocation
    alerts: list[Alert]
