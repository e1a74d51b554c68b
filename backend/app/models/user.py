"""User model."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text

from app.database import Base


def utcnow_iso() -> str:
    """Naive UTC timestamp in ISO-8601, the format every timestamp column uses."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat()


class User(Base):
    """User account with health profile and alert preferences."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)  # always lower-cased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100))
    health_profile = Column(Text)  # JSON: age, conditions, sensitivity
    preferences = Column(Text)  # JSON: alert settings and location
    created_at = Column(String(26), default=utcnow_iso)
    updated_at = Column(String(26), default=utcnow_iso, onupdate=utcnow_iso)
    last_login = Column(String(26))
