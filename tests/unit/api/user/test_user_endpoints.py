"""User management endpoint tests."""

import pytest
from httpx import AsyncClient
from fastapi import status

from yardtrack.api.core.messages import MessageCode
from yardtrack.modules.auth.service import AuthService
from tests.utils.assertions import (
    ResponseHelper,
    assert_error_response,
    assert_not_found_error,
    assert_success_response,
)


@pytest.mark.asyncio
async def test_list_users_requires_authentication(app, public_client: AsyncClient):
    response = await public_client.get("/v1/users/")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_list_users(app, admin_client: AsyncClient, test_user, test_admin_user):
    items = ResponseHelper.assert_paginated_response(
        await admin_client.get("/v1/users/"), expected_total=2
    )

    assert {u["email"] for u in items} == {test_user.email, test_admin_user.email}
    assert all("password_hash" not in u for u in items)


@pytest.mark.asyncio
async def test_get_user_by_email(app, authorized_client: AsyncClient, test_user):
    response = await authorized_client.get(
        f"/v1/users/email/{test_user.email.upper()}"
    )

    assert_success_response(response, data_assertions={"id": test_user.id})


@pytest.mark.asyncio
async def test_get_missing_user(app, authorized_client: AsyncClient):
    response = await authorized_client.get("/v1/users/4040")

    assert_not_found_error(response, MessageCode.USER_NOT_FOUND)


@pytest.mark.asyncio
async def test_create_user_with_yard(
    app, admin_client: AsyncClient, db_session, yard_factory
):
    yard = await yard_factory.create_async(db_session)

    response = await admin_client.post(
        "/v1/users/",
        json={
            "name": "Elisa Prado",
            "email": "elisa@yardtrack.io",
            "password": "operator-pass",
            "role": "ADMIN",
            "yard_id": yard.id,
        },
    )

    assert_success_response(
        response,
        MessageCode.USER_CREATED,
        status.HTTP_201_CREATED,
        {"role": "ADMIN", "yard_id": yard.id, "status": "active"},
    )


@pytest.mark.asyncio
async def test_create_user_with_taken_email(
    app, admin_client: AsyncClient, test_user
):
    response = await admin_client.post(
        "/v1/users/",
        json={"name": "Dup", "email": test_user.email, "password": "another-pass"},
    )

    assert_error_response(
        response, MessageCode.EMAIL_ALREADY_REGISTERED, status.HTTP_409_CONFLICT
    )


@pytest.mark.asyncio
async def test_create_user_rejects_unknown_role(app, admin_client: AsyncClient):
    response = await admin_client.post(
        "/v1/users/",
        json={
            "name": "Bad",
            "email": "bad@yardtrack.io",
            "password": "another-pass",
            "role": "ROOT",
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_user_rehashes_password(
    app, admin_client: AsyncClient, db_session, test_user
):
    response = await admin_client.put(
        f"/v1/users/{test_user.id}",
        json={
            "name": "Renamed User",
            "email": test_user.email,
            "password": "brand-new-pass",
        },
    )
    assert_success_response(
        response, MessageCode.USER_UPDATED, data_assertions={"name": "Renamed User"}
    )

    user, _ = await AuthService(db_session).login(test_user.email, "brand-new-pass")
    assert user.password_hash != "brand-new-pass"


@pytest.mark.asyncio
async def test_delete_user(app, admin_client: AsyncClient, db_session, user_factory):
    user = await user_factory.create_async(db_session)

    deleted = await admin_client.delete(f"/v1/users/{user.id}")
    assert_success_response(deleted, MessageCode.USER_DELETED)

    missing = await admin_client.get(f"/v1/users/{user.id}")
    assert_not_found_error(missing, MessageCode.USER_NOT_FOUND)
