"""
Error handling and edge case tests.

Covers:
- Envelope -> HTTP exception translation (404 / 409 / 500)
- Exception payloads and the standard error body
- Exception handlers wired into the app
- Helpers used by the validation handler
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from test_fixtures import client, engine
from api.dependencies import get_meal_plan_service
from api.middleware import make_serializable
from api.responses import error_response, raise_for_envelope
from app.exceptions import (
    ConflictError,
    MealPlannerError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
)
from domain.enums import ServiceStatus
from domain.schemas import ServiceResponse


# =============================================================================
# ENVELOPE TRANSLATION
# =============================================================================


@pytest.mark.parametrize(
    "envelope",
    [
        ServiceResponse.created(7),
        ServiceResponse.updated(),
        ServiceResponse.deleted(),
        ServiceResponse.success(),
    ],
)
def test_ok_envelopes_pass_through(envelope):
    assert envelope.ok
    assert raise_for_envelope(envelope) is envelope


def test_not_found_envelope_raises_not_found():
    with pytest.raises(NotFoundError) as exc_info:
        raise_for_envelope(ServiceResponse.not_found("Recipe not found."))

    assert exc_info.value.http_status == 404
    assert exc_info.value.message == "Recipe not found."
    assert exc_info.value.details == {"messages": ["Recipe not found."]}


def test_duplicate_envelope_raises_conflict():
    with pytest.raises(ConflictError) as exc_info:
        raise_for_envelope(ServiceResponse.duplicate("This ingredient is already linked to the recipe."))

    assert exc_info.value.http_status == 409
    assert exc_info.value.code == "DUPLICATE_LINK"


def test_error_envelope_raises_service_error():
    with pytest.raises(ServiceError) as exc_info:
        raise_for_envelope(ServiceResponse.error("An error occurred while deleting the recipe."))

    assert exc_info.value.http_status == 500
    assert str(exc_info.value) == "An error occurred while deleting the recipe."


def test_envelope_without_messages_uses_defaults():
    with pytest.raises(NotFoundError) as exc_info:
        raise_for_envelope(ServiceResponse(status=ServiceStatus.NOT_FOUND))

    assert exc_info.value.message == "Not found"
    assert exc_info.value.details is None


def test_rejecting_envelopes_are_not_ok():
    assert not ServiceResponse.not_found("x").ok
    assert not ServiceResponse.duplicate("x").ok
    assert not ServiceResponse.error("x").ok
    assert ServiceResponse.created(1).created_id == 1
    assert ServiceResponse.updated().created_id is None


# =============================================================================
# EXCEPTIONS AND ERROR BODIES
# =============================================================================


def test_exception_hierarchy():
    for exc_type in (NotFoundError, ConflictError):
        assert issubclass(exc_type, ServiceValidationError)
    assert issubclass(ServiceError, MealPlannerError)
    assert not issubclass(ServiceError, ServiceValidationError)
    assert ServiceValidationError.http_status == 400
    assert ServiceError.http_status == 500


def test_exception_to_dict():
    exc = ConflictError("Already linked", details={"recipe_id": 1}, code="DUPLICATE_LINK")

    assert exc.to_dict() == {
        "message": "Already linked",
        "code": "DUPLICATE_LINK",
        "details": {"recipe_id": 1},
    }
    assert NotFoundError().to_dict() == {"message": "Not found"}


def test_error_response_shape():
    body = error_response("NOT_FOUND", "Recipe 3 not found")

    assert body["success"] is False
    assert body["error"] == {"code": "NOT_FOUND", "message": "Recipe 3 not found"}
    assert "timestamp" in body

    with_details = error_response("CONFLICT", "dup", {"messages": ["dup"]})
    assert with_details["error"]["details"] == {"messages": ["dup"]}


def test_make_serializable_converts_nested_values():
    value = {
        "quantity": Decimal("1.5"),
        "items": (Decimal("2"), "cups"),
        "error": ValueError("bad"),
    }

    assert make_serializable(value) == {
        "quantity": 1.5,
        "items": [2.0, "cups"],
        "error": "bad",
    }


# =============================================================================
# HANDLERS
# =============================================================================


class _FailingMealPlanService:
    """Stands in for a service whose store reports a write failure."""

    def delete(self, meal_plan_id):
        return ServiceResponse.error("An error occurred while deleting the meal plan.")

    def update(self, data):
        return ServiceResponse.error("An error occurred while updating the meal plan.")


def test_service_error_maps_to_500(client: TestClient):
    from main import app

    app.dependency_overrides[get_meal_plan_service] = lambda: _FailingMealPlanService()

    response = client.delete("/meal-plans/1")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "SERVICE_ERROR"
    assert error["message"] == "An error occurred while deleting the meal plan."
    assert error["details"] == {"messages": ["An error occurred while deleting the meal plan."]}


def test_unknown_route_uses_standard_error_body(client: TestClient):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"


def test_non_integer_id_is_422(client: TestClient):
    response = client.get("/recipes/not-a-number")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_link_quantity_must_be_numeric(client: TestClient):
    response = client.post(
        "/recipes/1/ingredients", json={"ingredient_id": 1, "quantity": "lots", "unit": "cups"}
    )

    assert response.status_code == 422


def test_empty_meal_plan_name_rejected(client: TestClient):
    response = client.post("/meal-plans", json={"name": "", "date": "2025-02-01"})

    assert response.status_code == 422
