"""Fixed and mobile marker endpoint tests."""

import pytest
from httpx import AsyncClient
from fastapi import status

from yardtrack.api.core.messages import MessageCode
from tests.utils.assertions import (
    ResponseHelper,
    assert_not_found_error,
    assert_success_response,
)


@pytest.mark.asyncio
async def test_create_fixed_marker(
    app, authorized_client: AsyncClient, db_session, yard_factory
):
    yard = await yard_factory.create_async(db_session)

    response = await authorized_client.post(
        "/v1/fixed-markers/",
        json={"aruco_code": "ARUCO-17", "x": 0.0, "y": 10.0, "yard_id": yard.id},
    )

    assert_success_response(
        response,
        MessageCode.FIXED_MARKER_CREATED,
        status.HTTP_201_CREATED,
        {"aruco_code": "ARUCO-17", "yard_id": yard.id},
    )


@pytest.mark.asyncio
async def test_create_fixed_marker_in_missing_yard(
    app, authorized_client: AsyncClient
):
    response = await authorized_client.post(
        "/v1/fixed-markers/",
        json={"aruco_code": "ARUCO-18", "x": 1.0, "y": 1.0, "yard_id": 404},
    )

    assert_not_found_error(response, MessageCode.YARD_NOT_FOUND)


@pytest.mark.asyncio
async def test_search_fixed_marker_by_code_ignores_case(
    app, authorized_client: AsyncClient, db_session, fixed_marker_factory
):
    marker = await fixed_marker_factory.create_async(db_session, aruco_code="Gate-A")
    await fixed_marker_factory.create_async(db_session, aruco_code="Gate-B")

    response = await authorized_client.get(
        "/v1/fixed-markers/search", params={"code": "gate-a"}
    )

    data = assert_success_response(response)
    assert [m["id"] for m in data] == [marker.id]


@pytest.mark.asyncio
async def test_list_fixed_markers_by_yard(
    app, authorized_client: AsyncClient, db_session, yard_factory, fixed_marker_factory
):
    yard = await yard_factory.create_async(db_session)
    await fixed_marker_factory.create_batch_async(db_session, 3, yard_id=yard.id)
    await fixed_marker_factory.create_async(db_session)

    ResponseHelper.assert_paginated_response(
        await authorized_client.get(f"/v1/fixed-markers/yard/{yard.id}"),
        expected_total=3,
    )


@pytest.mark.asyncio
async def test_delete_fixed_marker(
    app, authorized_client: AsyncClient, db_session, fixed_marker_factory
):
    marker = await fixed_marker_factory.create_async(db_session)

    deleted = await authorized_client.delete(f"/v1/fixed-markers/{marker.id}")
    assert_success_response(deleted, MessageCode.FIXED_MARKER_DELETED)

    missing = await authorized_client.get(f"/v1/fixed-markers/{marker.id}")
    assert_not_found_error(missing, MessageCode.FIXED_MARKER_NOT_FOUND)


@pytest.mark.asyncio
async def test_mobile_marker_lifecycle(
    app, authorized_client: AsyncClient, db_session, motorcycle_factory
):
    motorcycle = await motorcycle_factory.create_async(db_session)

    created = await authorized_client.post(
        "/v1/mobile-markers/",
        json={"aruco_code": "BIKE-1", "motorcycle_id": motorcycle.id},
    )
    data = assert_success_response(
        created,
        MessageCode.MOBILE_MARKER_CREATED,
        status.HTTP_201_CREATED,
        {"motorcycle_id": motorcycle.id},
    )
    assert data["installed_at"]

    by_motorcycle = await authorized_client.get(
        f"/v1/mobile-markers/motorcycle/{motorcycle.id}"
    )
    assert [m["id"] for m in assert_success_response(by_motorcycle)] == [data["id"]]

    updated = await authorized_client.put(
        f"/v1/mobile-markers/{data['id']}",
        json={"aruco_code": "BIKE-2", "motorcycle_id": motorcycle.id},
    )
    assert_success_response(
        updated,
        MessageCode.MOBILE_MARKER_UPDATED,
        data_assertions={"aruco_code": "BIKE-2"},
    )

    found = await authorized_client.get(
        "/v1/mobile-markers/search", params={"code": "bike-2"}
    )
    assert len(assert_success_response(found)) == 1

    deleted = await authorized_client.delete(f"/v1/mobile-markers/{data['id']}")
    assert_success_response(deleted, MessageCode.MOBILE_MARKER_DELETED)


@pytest.mark.asyncio
async def test_mobile_marker_for_missing_motorcycle(
    app, authorized_client: AsyncClient
):
    response = await authorized_client.post(
        "/v1/mobile-markers/", json={"aruco_code": "BIKE-9", "motorcycle_id": 404}
    )

    assert_not_found_error(response, MessageCode.MOTORCYCLE_NOT_FOUND)
