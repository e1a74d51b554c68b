"""Signup, login and token-to-user resolution."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import DuplicateEmail, InvalidCredentials, Unauthenticated
from app.models.user import User, utcnow_iso
from app.schemas.auth import UserSignup
from app.schemas.user import to_json_column
from app.services.security import PasswordHasher, TokenIssuer

logger = logging.getLogger(__name__)


class AuthService:
    """Orchestrates the credential store, password hasher and token issuer."""

    def __init__(self, db: Session, hasher: PasswordHasher, tokens: TokenIssuer):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    def _find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email.strip().lower()).first()

    def signup(self, data: UserSignup) -> tuple[User, str]:
        """Create a user and issue its first token."""
        email = data.email.strip().lower()
        if self._find_by_email(email):
            logger.info(f"Signup rejected, email already registered: {email}")
            raise DuplicateEmail()

        user = User(
            email=email,
            password_hash=self.hasher.hash(data.password),
            name=data.name,
            health_profile=to_json_column(data.health_profile),
            preferences=to_json_column(data.preferences),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            logger.info(f"Signup rejected at commit, email already registered: {email}")
            raise DuplicateEmail()
        self.db.refresh(user)

        logger.info(f"Created user {user.id}")
        return user, self.tokens.issue(user.id)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials, record the login and issue a token."""
        user = self._find_by_email(email)
        if user is None:
            self.hasher.burn(password)
            logger.info("Login failed")
            raise InvalidCredentials()
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed")
            raise InvalidCredentials()

        user.last_login = utcnow_iso()
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"User {user.id} logged in")
        return user, self.tokens.issue(user.id)

    def get_user(self, user_id: str) -> User:
        """Load the user a validated token points at."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise Unauthenticated()
        return user

    def get_current_user(self, token: str) -> User:
        """Resolve a bearer token to its user."""
        user_id = self.tokens.validate(token)
        if user_id is None:
            raise Unauthenticated()
        return self.get_user(user_id)
