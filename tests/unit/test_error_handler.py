"""Unit tests for the storage failure handler."""

import logging

import pytest
from libs.common.error_handler import storage_error_handler
from libs.common.logging import clear_request_context, set_request_context
from sqlalchemy.exc import OperationalError
from starlette.requests import Request


def _request(path="/api/orders"):
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "headers": [],
            "query_string": b"",
        }
    )


@pytest.mark.asyncio
@pytest.mark.unit
async def test_storage_failure_is_503_and_logs_request_id(caplog):
    set_request_context(request_id="req-123", path="/api/orders", method="GET")
    try:
        with caplog.at_level(logging.ERROR, logger="libs.common.error_handler"):
            response = await storage_error_handler(
                _request(), OperationalError("SELECT 1", {}, Exception("db down"))
            )
    finally:
        clear_request_context()

    assert response.status_code == 503
    assert "req-123" in caplog.text
