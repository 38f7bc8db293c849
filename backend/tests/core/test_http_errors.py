"""Tests for mapping errors to HTTP responses."""

import pytest
from fastapi import HTTPException

from app.core.exceptions import ExternalServiceError, NotFoundError, ValidationError
from app.core.http_errors import to_http_exception
from app.core.riot_api.errors import (
    NotFoundError as RiotNotFoundError,
    RiotAPIError,
    ServiceUnavailableError,
)


@pytest.mark.parametrize(
    "error,status",
    [
        (ValidationError("Invalid PUUID format", field="puuid"), 400),
        (NotFoundError("Summoner not found."), 404),
        (RiotNotFoundError("Resource not found", status_code=404), 404),
        (ServiceUnavailableError("Service unavailable", status_code=503), 502),
        (RiotAPIError("Request failed"), 502),
        (ExternalServiceError("match id list is not a JSON array"), 502),
        (RuntimeError("boom"), 500),
    ],
)
def test_status_mapping(error, status):
    assert to_http_exception(error, "test_operation").status_code == status


def test_http_exceptions_pass_through():
    original = HTTPException(status_code=404, detail="No matches found")

    assert to_http_exception(original, "test_operation") is original


def test_unexpected_errors_hide_details():
    mapped = to_http_exception(RuntimeError("secret stack detail"), "test_operation")

    assert mapped.detail == "Internal server error"


def test_validation_message_is_detail():
    mapped = to_http_exception(
        ValidationError("Invalid tagline format", field="tagline"), "test_operation"
    )

    assert mapped.detail == "Invalid tagline format"


def test_unusable_upstream_body_detail():
    error = ExternalServiceError(
        "match id list is not a JSON array",
        operation="get_match_summaries",
        body_excerpt='{"ids": []}',
    )

    mapped = to_http_exception(error, "test_operation")

    assert mapped.detail == "Unusable upstream response: match id list is not a JSON array"
    assert error.context == {"body_excerpt": '{"ids": []}'}
