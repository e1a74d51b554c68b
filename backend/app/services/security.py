"""Password hashing and session token issuance."""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
import logging
import uuid

import bcrypt
from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode

from app.config import Settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _has_canonical_signature(token: str) -> bool:
    """Reject signatures whose unused base64url bits were altered.

    The decoder ignores the trailing padding bits of the last character, so
    several strings decode to the same signature. Only the one that
    re-encodes to itself is accepted.
    """
    try:
        signature = token.rsplit(".", 1)[1].encode("ascii")
        return base64url_encode(base64url_decode(signature)) == signature
    except (IndexError, ValueError):
        return False


@lru_cache
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"airwatch-dummy-password", bcrypt.gensalt(rounds=rounds))


class PasswordHasher:
    """Salted bcrypt hashing of user passwords."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(rounds=settings.bcrypt_rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        return bcrypt.hashpw(
            _encode_password(password),
            bcrypt.gensalt(rounds=self.rounds),
        ).decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash. A malformed hash never matches."""
        try:
            return bcrypt.checkpw(_encode_password(password), hashed_password.encode("utf-8"))
        except ValueError:
            return False

    def burn(self, password: str) -> None:
        """Spend one verification's worth of work without a real hash.

        Keeps a login for an unknown email as slow as a wrong password.
        """
        bcrypt.checkpw(_encode_password(password), _dummy_hash(self.rounds))


class TokenIssuer:
    """Issues and validates signed, time-limited access tokens (JWT)."""

    token_type = "access"

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_days: int = 7):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_delta = timedelta(days=expire_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expire_days=settings.access_token_expire_days,
        )

    def issue(self, user_id: str, expires_delta: timedelta | None = None) -> str:
        """Create a signed token for ``user_id``."""
        issued_at = datetime.now(timezone.utc)
        claims = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self.expire_delta),
            "jti": str(uuid.uuid4()),
            "type": self.token_type,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def validate(self, token: str) -> str | None:
        """Return the user id a token was issued for, or None if it is not valid.

        Every failure (bad format, bad signature, expiry, wrong claims) looks
        the same to the caller.
        """
        if not _has_canonical_signature(token):
            logger.debug("Rejected token: non-canonical signature encoding")
            return None

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            return None

        if payload.get("type") != self.token_type:
            logger.debug("Rejected token: wrong type")
            return None

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            logger.debug("Rejected token: missing subject")
            return None

        return user_id
