"""Credential & Token Service: bcrypt password hashes and signed bearer tokens.

Invariants:
    - Stored hashes never equal the plaintext; bcrypt salts every hash
    - Passwords are UTF-8 encoded and cut to bcrypt's 72-byte limit, identically
      when hashing and verifying
    - Tokens expire exactly TOKEN_TTL after issuance
    - verify_token never raises: expired, tampered, malformed and foreign
      tokens all yield None

Design Decisions:
    - bcrypt directly (no passlib wrapper); rounds come from settings
    - PyJWT HS256 with the user id in both `userId` and `sub` claims
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache

import bcrypt
import jwt

from taskboard.config import get_settings

logger = logging.getLogger(__name__)

TOKEN_TTL = timedelta(days=7)
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class CredentialService:
    """Hashes passwords and issues/verifies tokens with a server-held secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", rounds: int = 10):
        self._secret = secret
        self._algorithm = algorithm
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        hashed = bcrypt.hashpw(
            _password_bytes(password), bcrypt.gensalt(rounds=self._rounds),
        )
        return hashed.decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def issue_token(self, user_id: str, issued_at: datetime | None = None) -> str:
        """Signed token for `user_id`, valid for TOKEN_TTL from `issued_at`."""
        now = issued_at or datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + TOKEN_TTL).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> str | None:
        """User id encoded in a valid, unexpired token, else None."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except jwt.InvalidTokenError:
            logger.debug("Rejected invalid token")
            return None
        user_id = payload.get("userId")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id


@lru_cache
def get_credential_service() -> CredentialService:
    settings = get_settings()
    return CredentialService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        rounds=settings.bcrypt_rounds,
    )
