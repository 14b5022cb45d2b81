"""
Error handling tests.

Covers the exception hierarchy and the JSON error envelope produced by the
API exception handlers:
- service errors carry their HTTP status and machine-readable code
- request validation errors are reported as VALIDATION_ERROR
- unknown routes go through the HTTP exception handler
- gateway errors render with their HTTP status
"""

from fastapi import APIRouter

from app.exceptions import (
    ForbiddenError,
    GatewayError,
    NetworkError,
    NotFoundError,
    ServiceValidationError,
)
from main import app

from test_fixtures import USER_ID, client

# Throwaway routes that raise each service error
_router = APIRouter(prefix="/_errors")


@_router.get("/invalid")
def _raise_invalid():
    raise ServiceValidationError("Servings must be positive", details={"servings": -1}, code="BAD_SERVINGS")


@_router.get("/missing")
def _raise_missing():
    raise NotFoundError("Recipe not found")


@_router.get("/forbidden")
def _raise_forbidden():
    raise ForbiddenError()


app.include_router(_router)


def test_service_error_statuses():
    assert ServiceValidationError.http_status == 400
    assert NotFoundError.http_status == 404
    assert ForbiddenError.http_status == 403
    assert isinstance(NotFoundError(), ServiceValidationError)


def test_service_error_to_dict():
    err = ServiceValidationError("Invalid range", details={"start_date": "2024-06-09"}, code="BAD_RANGE")
    assert err.to_dict() == {
        "message": "Invalid range",
        "code": "BAD_RANGE",
        "details": {"start_date": "2024-06-09"},
    }
    assert NotFoundError("Recipe not found").to_dict() == {"message": "Recipe not found"}


def test_gateway_error_str():
    assert str(GatewayError("Meal plan not found", 404)) == "Meal plan not found (HTTP 404)"
    assert str(NetworkError("connection refused")) == "connection refused"


def test_envelope_for_custom_code():
    resp = client.get("/_errors/invalid")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == {
        "code": "BAD_SERVINGS",
        "message": "Servings must be positive",
        "details": {"servings": -1},
    }
    assert "timestamp" in body


def test_envelope_for_not_found_and_forbidden():
    missing = client.get("/_errors/missing")
    assert missing.status_code == 404
    assert missing.json()["error"] == {"code": "NOT_FOUND", "message": "Recipe not found"}

    forbidden = client.get("/_errors/forbidden")
    assert forbidden.status_code == 403
    assert forbidden.json()["error"] == {"code": "FORBIDDEN", "message": "Access denied"}


def test_unknown_route():
    resp = client.get("/no-such-route")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "HTTP_404"


def test_validation_error_details():
    resp = client.post(
        "/meal-plans",
        params={"user_id": str(USER_ID)},
        json={"plan_date": "not-a-date", "meal_type": "dinner", "custom_meal": "Takeout"},
    )
    assert resp.status_code == 422
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["loc"][-1] == "plan_date" for d in error["details"])
