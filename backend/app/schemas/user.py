"""User profile schemas."""
import json
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


def to_json_column(model: BaseModel | None) -> str | None:
    """Serialize an optional model for a JSON text column."""
    if model is None:
        return None
    return json.dumps(model.model_dump())


class HealthProfile(BaseModel):
    """Optional health information used to tailor alerts."""

    age: int | None = Field(None, ge=0, le=130)
    conditions: list[str] = []
    sensitivity: Literal["low", "moderate", "high"] = "moderate"


class AlertSettings(BaseModel):
    """Alert delivery preferences."""

    enabled: bool = True
    aqi_threshold: int = Field(100, ge=0, le=500)
    email: bool = False


class Location(BaseModel):
    """A saved location: coordinates plus place names."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    city: str | None = None
    state: str | None = None
    country: str | None = None


class Preferences(BaseModel):
    """User preferences."""

    alerts: AlertSettings = AlertSettings()
    location: Location | None = None


class ProfileUpdate(BaseModel):
    """Profile update request. Only fields that are sent get applied."""

    name: str | None = Field(None, max_length=100)
    health_profile: HealthProfile | None = None
    preferences: Preferences | None = None


class UserResponse(BaseModel):
    """User info response. Never carries the password hash."""

    id: str
    email: str
    name: str | None = None
    health_profile: HealthProfile | None = None
    preferences: Preferences | None = None
    created_at: str
    last_login: str | None = None

    @field_validator("health_profile", "preferences", mode="before")
    @classmethod
    def parse_json_column(cls, v: Any) -> Any:
        if isinstance(v, str):
            return json.loads(v) if v else None
        return v

    class Config:
        from_attributes = True


class UserEnvelope(BaseModel):
    """Single-user response body."""

    user: UserResponse


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
