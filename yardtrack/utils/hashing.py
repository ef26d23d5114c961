import hashlib
from passlib.context import CryptContext

BCRYPT_ROUNDS: int = 12

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS
)


def _prepare(secret: str) -> str:
    # bcrypt truncates inputs at 72 bytes, so pre-hash long secrets
    if len(secret.encode("utf-8")) > 72:
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()
    return secret


class HashingService:
    """Service for secure hashing and verification of user passwords."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt with salt.

        Args:
            password: The plain text password to hash

        Returns:
            The hashed password as a string
        """
        return pwd_context.hash(_prepare(password))

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against its hash.

        Args:
            password: The plain text password to verify
            hashed_password: The stored hash to check against

        Returns:
            True if the password matches, False otherwise
        """
        try:
            return pwd_context.verify(_prepare(password), hashed_password)
        except (ValueError, TypeError):
            return False

    @staticmethod
    def needs_rehash(hashed_password: str) -> bool:
        """Whether a stored hash was produced with outdated parameters."""
        try:
            return pwd_context.needs_update(hashed_password)
        except (ValueError, TypeError):
            return True
