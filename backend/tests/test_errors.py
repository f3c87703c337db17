"""
Testes para os erros de domínio e o handler HTTP.
"""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from app.core.errors import (
    ActivePlanAlreadyCancelled,
    ActivePlanAlreadyFinished,
    DateInPast,
    LoanAlreadyFinished,
    LoanReturnDateExceedsMaxAllowedDays,
    ObjectAlreadyExists,
    ObjectInvalidQueryFilters,
    ObjectMissingParameters,
    ObjectNotAvailable,
    ObjectNotFound,
    ReservationLongerThanAuthorized,
    RoomPeopleUnauthorized,
    register_error_handlers,
    to_camel_case,
)


def test_to_camel_case():
    assert to_camel_case("room_location") == "RoomLocation"
    assert to_camel_case("plan") == "Plan"


class TestObjectErrors:

    def test_not_found(self):
        error = ObjectNotFound("room_location")
        assert error.message == "RoomLocation not found"
        assert error.name == "RoomLocationNotFound"
        assert error.status_code == 404

    def test_already_exists(self):
        error = ObjectAlreadyExists("reservation")
        assert error.message == "Reservation already exists"
        assert error.name == "ReservationAlreadyExists"
        assert error.status_code == 409

    def test_missing_parameters(self):
        error = ObjectMissingParameters("active_plan")
        assert error.message == "ActivePlan is missing parameters"
        assert error.status_code == 400

    def test_invalid_query_filters(self):
        error = ObjectInvalidQueryFilters("plan")
        assert error.message == "Plan's query is missing or contains invalid data"
        assert error.name == "PlanInvalidQueryFilters"
        assert error.status_code == 400

    def test_not_available(self):
        error = ObjectNotAvailable("book")
        assert error.message == "Book is not available"
        assert error.name == "BookNotAvailable"
        assert error.status_code == 409


class TestDomainErrors:

    def test_reservation_longer_than_authorized_uses_configured_hours(self):
        assert "4 hours" in ReservationLongerThanAuthorized().message

    def test_business_rules_are_bad_requests(self):
        assert DateInPast().status_code == 400
        assert RoomPeopleUnauthorized().status_code == 400

    def test_terminal_active_plan_errors_are_conflicts(self):
        assert ActivePlanAlreadyFinished().status_code == 409
        assert ActivePlanAlreadyCancelled().status_code == 409
        assert ActivePlanAlreadyCancelled().name == "ActivePlanAlreadyCancelled"

    def test_loan_errors(self):
        assert LoanReturnDateExceedsMaxAllowedDays(21).message == "The return date must be within 21 days"
        assert LoanReturnDateExceedsMaxAllowedDays(21).status_code == 400
        assert LoanAlreadyFinished().status_code == 409


@pytest.fixture
def error_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise ObjectNotFound("room")

    @app.get("/past")
    async def past():
        raise DateInPast()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


@pytest.fixture
async def error_client(error_app):
    transport = ASGITransport(app=error_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestErrorHandlers:

    @pytest.mark.anyio
    async def test_domain_error_becomes_json(self, error_client):
        response = await error_client.get("/not-found")
        assert response.status_code == 404
        assert response.json() == {"message": "Room not found", "error": "RoomNotFound"}

    @pytest.mark.anyio
    async def test_business_rule_is_400(self, error_client):
        response = await error_client.get("/past")
        assert response.status_code == 400
        assert response.json()["error"] == "DateInPast"

    @pytest.mark.anyio
    async def test_unhandled_error_is_500(self, error_client):
        response = await error_client.get("/boom")
        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"
