"""Tests for registration and login."""

import pytest

from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.database.models import UserRole, UserStatus
from yardtrack.modules.auth.service import AuthService
from yardtrack.utils.hashing import HashingService

from tests.factories import DEFAULT_PASSWORD
from tests.utils.assertions import assert_yardtrack_exception


@pytest.mark.asyncio
async def test_register_stores_hashed_password_and_issues_token(db_session):
    service = AuthService(db_session)

    user, token = await service.register(
        "Bruno Lima", " bruno@yardtrack.io ", "s3cret-pass"
    )

    assert user.id is not None
    assert user.email == "bruno@yardtrack.io"
    assert user.password_hash != "s3cret-pass"
    assert HashingService.verify_password("s3cret-pass", user.password_hash)
    assert user.role == UserRole.USER.value
    assert user.status == UserStatus.ACTIVE.value
    assert service.token_service.authenticate(token.access_token).user_id == user.id


@pytest.mark.asyncio
async def test_register_rejects_duplicate_email_case_insensitively(
    db_session, test_user
):
    service = AuthService(db_session)

    with pytest.raises(YardTrackException) as exc_info:
        await service.register("Other", test_user.email.upper(), "password1")

    assert_yardtrack_exception(
        exc_info.value, MessageCode.EMAIL_ALREADY_REGISTERED, 409
    )


@pytest.mark.asyncio
async def test_login_with_valid_credentials(db_session, test_user):
    user, token = await AuthService(db_session).login(
        test_user.email, DEFAULT_PASSWORD
    )

    assert user.id == test_user.id
    assert token.access_token


@pytest.mark.asyncio
async def test_login_with_wrong_password(db_session, test_user):
    with pytest.raises(YardTrackException) as exc_info:
        await AuthService(db_session).login(test_user.email, "not-the-password")

    assert_yardtrack_exception(exc_info.value, MessageCode.INVALID_CREDENTIALS, 401)


@pytest.mark.asyncio
async def test_login_with_unknown_email(db_session):
    with pytest.raises(YardTrackException) as exc_info:
        await AuthService(db_session).login("nobody@yardtrack.io", "whatever")

    assert_yardtrack_exception(exc_info.value, MessageCode.INVALID_CREDENTIALS, 401)
