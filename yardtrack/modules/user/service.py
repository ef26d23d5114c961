"""User management service."""

from fastapi import status
from sqlalchemy import func, select

from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.core.pagination import Page, PageRequest, paginate
from yardtrack.database.models import User, UserRole, UserStatus, Yard
from yardtrack.utils.hashing import HashingService


class UserService(BaseService):
    """CRUD operations for users. Passwords are always stored hashed."""

    async def list_users(self, page_request: PageRequest) -> Page:
        stmt = select(User).order_by(User.id)
        return await paginate(self.db, stmt, page_request)

    async def get_user(self, user_id: int) -> User:
        return await self.get_or_404(User, user_id, MessageCode.USER_NOT_FOUND)

    async def get_user_by_email(self, email: str) -> User:
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        user = (await self.db.execute(stmt)).scalar_one_or_none()
        if user is None:
            raise YardTrackException(
                MessageCode.USER_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"email": email},
            )
        return user

    async def _ensure_email_available(
        self, email: str, exclude_user_id: int | None = None
    ) -> None:
        stmt = select(User.id).where(func.lower(User.email) == email.lower())
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        if (await self.db.execute(stmt)).first() is not None:
            raise YardTrackException(
                MessageCode.EMAIL_ALREADY_REGISTERED,
                status.HTTP_409_CONFLICT,
                {"email": email},
            )

    async def _ensure_yard_exists(self, yard_id: int | None) -> None:
        if yard_id is not None:
            await self.get_or_404(Yard, yard_id, MessageCode.YARD_NOT_FOUND)

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        status: str = UserStatus.ACTIVE.value,
        yard_id: int | None = None,
    ) -> User:
        email = email.strip()
        await self._ensure_email_available(email)
        await self._ensure_yard_exists(yard_id)

        user = await self.save(
            User(
                name=name,
                email=email,
                password_hash=HashingService.hash_password(password),
                role=UserRole(role).value,
                status=status,
                yard_id=yard_id,
            )
        )
        self.logger.info("Created user", user_id=user.id)
        return user

    async def update_user(
        self,
        user_id: int,
        name: str,
        email: str,
        password: str,
        role: UserRole,
        status: str,
        yard_id: int | None,
    ) -> User:
        user = await self.get_user(user_id)
        email = email.strip()
        await self._ensure_email_available(email, exclude_user_id=user_id)
        await self._ensure_yard_exists(yard_id)

        user.name = name
        user.email = email
        user.password_hash = HashingService.hash_password(password)
        user.role = UserRole(role).value
        user.status = status
        user.yard_id = yard_id
        await self.save(user)

        self.logger.info("Updated user", user_id=user.id)
        return user

    async def delete_user(self, user_id: int) -> None:
        user = await self.get_user(user_id)
        await self.remove(user)
        self.logger.info("Deleted user", user_id=user_id)
