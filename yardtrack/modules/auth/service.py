"""User registration and login."""

from fastapi import status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.database.models import User, UserRole, UserStatus
from yardtrack.modules.auth.tokens import IssuedToken, TokenService
from yardtrack.utils.hashing import HashingService


class AuthService(BaseService):
    """Registers users and exchanges credentials for access tokens."""

    def __init__(self, db: AsyncSession, token_service: TokenService | None = None):
        super().__init__(db)
        self.token_service = token_service or TokenService()

    async def _find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        yard_id: int | None = None,
    ) -> tuple[User, IssuedToken]:
        email = email.strip()
        if await self._find_by_email(email) is not None:
            raise YardTrackException(
                MessageCode.EMAIL_ALREADY_REGISTERED,
                status.HTTP_409_CONFLICT,
                {"email": email},
            )

        user = User(
            name=name.strip(),
            email=email,
            password_hash=HashingService.hash_password(password),
            status=UserStatus.ACTIVE.value,
            role=UserRole(role).value,
            yard_id=yard_id,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)

        self.logger.info("Registered user", user_id=user.id, role=user.role)
        return user, self.token_service.issue(user)

    async def login(self, email: str, password: str) -> tuple[User, IssuedToken]:
        user = await self._find_by_email(email.strip())
        if user is None or not HashingService.verify_password(
            password, user.password_hash
        ):
            self.logger.info("Rejected login attempt")
            raise YardTrackException(
                MessageCode.INVALID_CREDENTIALS, status.HTTP_401_UNAUTHORIZED
            )

        if HashingService.needs_rehash(user.password_hash):
            user.password_hash = HashingService.hash_password(password)
            await self.db.commit()
            await self.db.refresh(user)
            self.logger.info("Upgraded password hash", user_id=user.id)

        self.logger.info("User logged in", user_id=user.id)
        return user, self.token_service.issue(user)
