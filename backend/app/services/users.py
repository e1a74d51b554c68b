"""Profile and account operations for an authenticated user."""
import logging

from sqlalchemy.orm import Session

from app.models.user import User, utcnow_iso
from app.schemas.user import ProfileUpdate, to_json_column

logger = logging.getLogger(__name__)


def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    """Apply the fields present in ``data`` to the user's profile."""
    changes = data.model_dump(exclude_unset=True)

    if "name" in changes:
        user.name = data.name
    if "health_profile" in changes:
        user.health_profile = to_json_column(data.health_profile)
    if "preferences" in changes:
        user.preferences = to_json_column(data.preferences)
    user.updated_at = utcnow_iso()

    db.commit()
    db.refresh(user)
    logger.info(f"Updated profile for user {user.id}: {sorted(changes)}")
    return user


def delete_account(db: Session, user: User) -> None:
    """Permanently delete the user record."""
    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info(f"Deleted account {user_id}")
