"""Yard endpoint tests."""

import pytest
from httpx import AsyncClient
from fastapi import status

from yardtrack.api.core.messages import MessageCode
from tests.utils.assertions import (
    ResponseHelper,
    assert_not_found_error,
    assert_success_response,
    assert_validation_error,
)


@pytest.mark.asyncio
async def test_create_and_get_yard(app, authorized_client: AsyncClient):
    created = await authorized_client.post(
        "/v1/yards/",
        json={"name": "South Yard", "location": "Curitiba", "description": "Covered"},
    )
    data = assert_success_response(
        created,
        MessageCode.YARD_CREATED,
        status.HTTP_201_CREATED,
        {"name": "South Yard", "location": "Curitiba"},
    )

    fetched = await authorized_client.get(f"/v1/yards/{data['id']}")

    assert_success_response(fetched, data_assertions={"description": "Covered"})


@pytest.mark.asyncio
async def test_create_yard_requires_location(app, authorized_client: AsyncClient):
    response = await authorized_client.post("/v1/yards/", json={"name": "No place"})

    assert_validation_error(response)


@pytest.mark.asyncio
async def test_list_yards_paginates(
    app, authorized_client: AsyncClient, db_session, yard_factory
):
    await yard_factory.create_batch_async(db_session, 7)

    response = await authorized_client.get("/v1/yards/", params={"page": 2, "size": 5})

    items = ResponseHelper.assert_paginated_response(
        response, expected_total=7, expected_page=2, expected_size=5
    )
    assert len(items) == 2
    assert response.json()["data"]["pagination"]["has_more"] is False


@pytest.mark.asyncio
async def test_yards_with_relations_skips_empty_yards(
    app, authorized_client: AsyncClient, db_session, yard_factory, fixed_marker_factory
):
    busy = await yard_factory.create_async(db_session)
    await yard_factory.create_async(db_session)
    await fixed_marker_factory.create_async(db_session, yard_id=busy.id)

    items = ResponseHelper.assert_paginated_response(
        await authorized_client.get("/v1/yards/with-relations"), expected_total=1
    )

    assert items[0]["id"] == busy.id


@pytest.mark.asyncio
async def test_motorcycles_in_yard_are_distinct(
    app,
    authorized_client: AsyncClient,
    db_session,
    yard_factory,
    motorcycle_factory,
    position_factory,
):
    yard = await yard_factory.create_async(db_session)
    motorcycle = await motorcycle_factory.create_async(db_session)
    await motorcycle_factory.create_async(db_session)
    await position_factory.create_batch_async(
        db_session, 3, motorcycle_id=motorcycle.id, yard_id=yard.id
    )

    response = await authorized_client.get(f"/v1/yards/{yard.id}/motorcycles")

    data = assert_success_response(response)
    assert [m["id"] for m in data] == [motorcycle.id]


@pytest.mark.asyncio
async def test_update_and_delete_yard(
    app, authorized_client: AsyncClient, db_session, yard_factory
):
    yard = await yard_factory.create_async(db_session)

    updated = await authorized_client.put(
        f"/v1/yards/{yard.id}", json={"name": "Renamed", "location": "Recife"}
    )
    assert_success_response(
        updated, MessageCode.YARD_UPDATED, data_assertions={"name": "Renamed"}
    )

    deleted = await authorized_client.delete(f"/v1/yards/{yard.id}")
    assert_success_response(deleted, MessageCode.YARD_DELETED)

    missing = await authorized_client.get(f"/v1/yards/{yard.id}")
    assert_not_found_error(missing, MessageCode.YARD_NOT_FOUND)
