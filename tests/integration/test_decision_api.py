"""
Integration tests for the Decision API endpoints.

These tests verify:
1. POST /v1/decision - approvals, counter-offers and rejections
2. Error responses for applicants without any valid loan
3. Request body validation and request tracing
4. Health and documentation endpoints
"""

import pytest
from httpx import ASGITransport, AsyncClient

from loan_decision.core.config import Settings
from loan_decision.main import create_app


# =============================================================================
# POST /v1/decision Tests
# =============================================================================

class TestCreateDecision:
    """Tests for POST /v1/decision endpoint."""

    @pytest.mark.asyncio
    async def test_period_extended_until_affordable(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        """
        Modifier 100 cannot cover 4000 over 12 months, so the period grows in
        steps of six months until 42 months allow 4200.
        """
        response = await client.post("/v1/decision", json=segment_1_request)

        assert response.status_code == 200

        data = response.json()
        assert data == {
            "outcome": "approved",
            "loan_amount": 4200,
            "loan_period": 42,
            "error_message": None,
        }

    @pytest.mark.asyncio
    async def test_maximum_amount_capped(
        self,
        client: AsyncClient,
        segment_3_code: str,
    ):
        """Modifier 1000 allows 12000 over 12 months, capped at 10000."""
        response = await client.post("/v1/decision", json={
            "personal_code": segment_3_code,
            "loan_amount": 10000,
            "loan_period": 12,
        })

        assert response.status_code == 200

        data = response.json()
        assert data["outcome"] == "approved"
        assert data["loan_amount"] == 10000
        assert data["loan_period"] == 12

    @pytest.mark.asyncio
    async def test_counter_offer(
        self,
        client: AsyncClient,
        segment_1_code: str,
    ):
        """8000 is out of reach for modifier 100; the 60 month maximum is offered."""
        response = await client.post("/v1/decision", json={
            "personal_code": segment_1_code,
            "loan_amount": 8000,
            "loan_period": 24,
        })

        assert response.status_code == 200

        data = response.json()
        assert data["outcome"] == "counter_offer"
        assert data["loan_amount"] == 6000
        assert data["loan_period"] == 60
        assert "8000" in data["error_message"]

    @pytest.mark.asyncio
    async def test_personal_code_whitespace_stripped(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        segment_1_request["personal_code"] = f"  {segment_1_request['personal_code']} "

        response = await client.post("/v1/decision", json=segment_1_request)

        assert response.status_code == 200
        assert response.json()["outcome"] == "approved"

    @pytest.mark.asyncio
    async def test_personal_code_with_internal_space(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        code = segment_1_request["personal_code"]
        segment_1_request["personal_code"] = f"{code[:9]} {code[9:]}"

        response = await client.post("/v1/decision", json=segment_1_request)

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "approved"
        assert data["loan_amount"] == 4200
        assert data["loan_period"] == 42


class TestRejectedDecision:
    """Rule violations are answered with a rejected decision, not an error."""

    @pytest.mark.asyncio
    async def test_invalid_personal_code(self, client: AsyncClient):
        response = await client.post("/v1/decision", json={
            "personal_code": "12345678901",
            "loan_amount": 4000,
            "loan_period": 12,
        })

        assert response.status_code == 200
        assert response.json() == {
            "outcome": "rejected",
            "loan_amount": None,
            "loan_period": None,
            "error_message": "Invalid personal ID code!",
        }

    @pytest.mark.asyncio
    async def test_invalid_loan_amount(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        segment_1_request["loan_amount"] = 10001

        response = await client.post("/v1/decision", json=segment_1_request)

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "rejected"
        assert data["error_message"] == "Invalid loan amount!"

    @pytest.mark.asyncio
    async def test_invalid_loan_period(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        segment_1_request["loan_period"] = 61

        response = await client.post("/v1/decision", json=segment_1_request)

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "rejected"
        assert data["error_message"] == "Invalid loan period!"

    @pytest.mark.asyncio
    async def test_underage_applicant(
        self,
        client: AsyncClient,
        underage_code: str,
    ):
        response = await client.post("/v1/decision", json={
            "personal_code": underage_code,
            "loan_amount": 4000,
            "loan_period": 12,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "rejected"
        assert data["error_message"] == "You must be of legal age to apply for a loan!"

    @pytest.mark.asyncio
    async def test_applicant_past_age_limit(
        self,
        client: AsyncClient,
        elderly_code: str,
    ):
        response = await client.post("/v1/decision", json={
            "personal_code": elderly_code,
            "loan_amount": 4000,
            "loan_period": 12,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "rejected"
        assert data["error_message"] == "Loan application age limit exceeded!"


class TestNoValidLoan:
    """Applicants who cannot get any loan receive a 404 error response."""

    @pytest.mark.asyncio
    async def test_debt_segment_returns_404(
        self,
        client: AsyncClient,
        debt_code: str,
    ):
        response = await client.post("/v1/decision", json={
            "personal_code": debt_code,
            "loan_amount": 4000,
            "loan_period": 12,
        })

        assert response.status_code == 404

        data = response.json()
        assert data["error"] == "NO_VALID_LOAN"
        assert data["message"] == "No valid loan found!"
        assert data["request_id"] == response.headers["X-Request-ID"]


class TestRequestValidation:
    """Malformed request bodies are rejected by FastAPI."""

    @pytest.mark.asyncio
    async def test_missing_field(self, client: AsyncClient, segment_1_code: str):
        response = await client.post("/v1/decision", json={
            "personal_code": segment_1_code,
            "loan_amount": 4000,
        })

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_non_numeric_amount(self, client: AsyncClient, segment_1_code: str):
        response = await client.post("/v1/decision", json={
            "personal_code": segment_1_code,
            "loan_amount": "a lot",
            "loan_period": 12,
        })

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_personal_code(self, client: AsyncClient):
        response = await client.post("/v1/decision", json={
            "personal_code": "",
            "loan_amount": 4000,
            "loan_period": 12,
        })

        assert response.status_code == 422


# =============================================================================
# Tracing and Service Endpoints
# =============================================================================

class TestRequestTracing:
    """Request IDs are echoed back or generated."""

    @pytest.mark.asyncio
    async def test_request_id_echoed(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        response = await client.post(
            "/v1/decision",
            json=segment_1_request,
            headers={"X-Request-ID": "trace-123"},
        )

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.headers.get("X-Request-ID")


class TestServiceEndpoints:
    """Tests for health and documentation endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "loan-decision-gateway"
        assert data["version"]
        assert data["limits"] == {
            "min_loan_amount": 2000,
            "max_loan_amount": 10000,
            "min_loan_period": 12,
            "max_loan_period": 60,
        }

    @pytest.mark.asyncio
    async def test_root_redirects_to_docs(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code in (302, 307)
        assert response.headers["location"] == "/docs"

    @pytest.mark.asyncio
    async def test_openapi_lists_decision_endpoint(self, client: AsyncClient):
        response = await client.get("/openapi.json")

        assert response.status_code == 200
        assert "/v1/decision" in response.json()["paths"]

    @pytest.mark.asyncio
    async def test_version_from_settings(self):
        app = create_app(Settings(app_version="2.3.4"))

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            health = await ac.get("/v1/health")
            schema = await ac.get("/openapi.json")

        assert health.json()["version"] == "2.3.4"
        assert schema.json()["info"]["version"] == "2.3.4"
