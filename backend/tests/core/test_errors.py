"""Error Hierarchy tests — codes, statuses and REST envelope shape."""

from timeincity.core.errors import (
    CatalogUnavailableError, DatasetLoadError, ErrorCategory, ErrorContext,
    InvalidSearchLimitError, ResourceNotFoundError, TimeInCityError,
)


def test_all_errors_share_base():
    for exc in (
        InvalidSearchLimitError(0),
        ResourceNotFoundError("City", "atlantis"),
        CatalogUnavailableError(),
        DatasetLoadError("boom", "/tmp/x.json"),
    ):
        assert isinstance(exc, TimeInCityError)


def test_http_statuses():
    assert InvalidSearchLimitError(0).http_status == 400
    assert ResourceNotFoundError("City", "x").http_status == 404
    assert CatalogUnavailableError().http_status == 503
    assert DatasetLoadError("boom", "p").http_status == 500


def test_not_found_response_envelope():
    exc = ResourceNotFoundError("City", "atlantis", ErrorContext(slug="atlantis"))
    body = exc.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "City 'atlantis' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["slug"] == "atlantis"
    assert "timestamp" in body
