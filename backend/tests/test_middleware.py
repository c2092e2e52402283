"""
StaffDesk Backend — Middleware Tests
======================================
"""

import logging

import pytest

from app.middleware.logging import level_for_status


@pytest.mark.parametrize(
    "status, level",
    [(200, logging.INFO), (304, logging.INFO), (400, logging.WARNING),
     (404, logging.WARNING), (500, logging.ERROR), (503, logging.ERROR)],
)
def test_access_log_level_follows_status(status, level):
    assert level_for_status(status) == level


@pytest.mark.asyncio
async def test_request_id_generated_when_absent(test_client):
    response = await test_client.get("/category")

    rid = response.headers["X-Request-ID"]
    assert len(rid) == 8


@pytest.mark.asyncio
async def test_error_body_carries_request_id(test_client):
    response = await test_client.post("/add-category", json={}, headers={"X-Request-ID": "trace-1"})

    assert response.status_code == 400
    assert response.json()["request_id"] == "trace-1"


@pytest.mark.asyncio
async def test_access_line_logged_for_client_error(test_client, caplog):
    with caplog.at_level(logging.INFO, logger="staffdesk.access"):
        await test_client.delete("/employee/77", headers={"X-Request-ID": "trace-2"})

    [record] = [r for r in caplog.records if r.name == "staffdesk.access"]
    assert record.levelno == logging.WARNING
    assert record.status == 404
    assert record.path == "/employee/77"
    assert "trace-2" in record.getMessage()


@pytest.mark.asyncio
async def test_health_is_not_access_logged(test_client, caplog):
    with caplog.at_level(logging.INFO, logger="staffdesk.access"):
        await test_client.get("/health")

    assert not [r for r in caplog.records if r.name == "staffdesk.access"]


@pytest.mark.asyncio
async def test_unhandled_error_logged_as_500(test_app, test_client, caplog):
    @test_app.get("/fail")
    async def fail():
        raise RuntimeError("unmapped")

    with caplog.at_level(logging.INFO, logger="staffdesk.access"):
        response = await test_client.get("/fail", headers={"X-Request-ID": "trace-3"})

    assert response.status_code == 500
    [record] = [r for r in caplog.records if r.name == "staffdesk.access"]
    assert record.levelno == logging.ERROR
    assert record.status == 500
    assert record.request_id == "trace-3"
