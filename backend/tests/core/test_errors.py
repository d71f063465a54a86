"""Error Hierarchy — status codes and response envelope."""

from app.core.errors import (
    BadRequestError, ConflictError, DatabaseError, ErrorCategory,
    NotFoundError, UnsupportedMediaTypeError,
)


def test_bad_request_maps_to_400():
    err = BadRequestError("Email already exists", "email", ErrorCategory.BUSINESS_RULE)
    assert err.http_status == 400
    assert err.code == "BAD_REQUEST"
    assert err.category is ErrorCategory.BUSINESS_RULE


def test_not_found_message_names_resource_and_id():
    err = NotFoundError("Product", 999)
    assert err.http_status == 404
    assert err.message == "Product not found with id: 999"


def test_response_envelope_has_top_level_message():
    body = BadRequestError("Invalid email format", "email").to_response()
    assert body["message"] == "Invalid email format"
    assert body["error"]["code"] == "BAD_REQUEST"
    assert body["error"]["field"] == "email"
    assert body["error"]["category"] == "validation"


def test_infrastructure_errors():
    assert ConflictError().http_status == 409
    assert DatabaseError("boom", "commit").http_status == 503
    assert UnsupportedMediaTypeError("text/plain").http_status == 415
