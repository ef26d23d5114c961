"""Issuing and verifying signed access tokens."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from fastapi import status
from jose import ExpiredSignatureError, JWTError, jwt

from yardtrack.api.core.constants import JWT_ALGORITHM
from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.core.context import AuthenticatedUserContext
from yardtrack.database.models.users import User
from yardtrack.utils.logger import get_logger
from yardtrack.utils.settings.auth import AuthSettings

logger = get_logger(__name__)


@dataclass
class IssuedToken:
    access_token: str
    expires_at: datetime
    token_type: str = "bearer"


class TokenService:
    """HS256 token issuer bound to the configured issuer and audience."""

    def __init__(self, settings: AuthSettings | None = None):
        self.settings = settings or AuthSettings()

    @property
    def _key(self) -> str:
        return self.settings.JWT_PRIVATE_KEY.get_secret_value()

    def issue(self, user: User, now: datetime | None = None) -> IssuedToken:
        now = now or datetime.now(timezone.utc)
        expires_at = now + timedelta(hours=self.settings.JWT_EXPIRATION_HOURS)
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "role": user.role,
            "status": user.status,
            "yard_id": user.yard_id,
            "iss": self.settings.JWT_ISSUER,
            "aud": self.settings.JWT_AUDIENCE,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._key, algorithm=JWT_ALGORITHM)
        return IssuedToken(access_token=token, expires_at=expires_at)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(
                token,
                self._key,
                algorithms=[JWT_ALGORITHM],
                audience=self.settings.JWT_AUDIENCE,
                issuer=self.settings.JWT_ISSUER,
                options={"leeway": self.settings.JWT_LEEWAY_SECONDS},
            )
        except ExpiredSignatureError:
            raise YardTrackException(
                MessageCode.INVALID_TOKEN,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Authentication token has expired"},
            )
        except JWTError as e:
            logger.warning(f"JWT decoding failed: {e}")
            raise YardTrackException(
                MessageCode.INVALID_TOKEN,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Invalid authentication token"},
            )

    def authenticate(self, token: str) -> AuthenticatedUserContext:
        """Verify a token and build the request identity from its claims."""
        payload = self.decode(token)
        try:
            return AuthenticatedUserContext(
                user_id=int(payload["sub"]),
                email=payload.get("email", ""),
                name=payload.get("name", ""),
                role=payload.get("role", ""),
                status=payload.get("status", ""),
                yard_id=payload.get("yard_id"),
            )
        except (KeyError, TypeError, ValueError):
            raise YardTrackException(
                MessageCode.INVALID_TOKEN,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Authentication token is missing required claims"},
            )
