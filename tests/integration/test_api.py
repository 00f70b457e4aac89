"""Integration tests for API endpoints"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from lentera_gateway.domain.models import LenderVerification
from lentera_gateway.domain.exceptions import RegistryAPIError


@pytest.fixture
def payday_payload() -> dict:
    """Loan request using the camelCase field names of the web form"""
    return {
        "amount": 1_000_000,
        "interestRate": 1,
        "interestType": "daily",
        "tenor": 30,
        "tenorUnit": "days",
        "adminFee": 50_000,
        "monthlyIncome": 5_000_000,
        "lenderName": "Pinjam Kilat",
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "lentera_calculation_total" in response.text


def test_request_id_header(client: TestClient):
    """Test request ID is generated, or echoed when supplied"""
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


def test_loan_metrics_unregistered_from_registry(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test POST /v1/loan/metrics with an illegal lender reported by the registry"""
    registry_client.verify_lender.return_value = LenderVerification(
        is_registered=False,
        lender_name="Pinjam Kilat",
        is_illegal=True,
        message="Lender declared illegal",
    )

    response = client.post("/v1/loan/metrics", json=payday_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["total_repayment"] == 1_350_000
    assert data["total_interest"] == 300_000
    assert data["monthly_installment"] == 1_350_000
    assert data["effective_apr"] == 365
    assert data["dti_ratio"] == 27
    assert data["risk_score"] == 80
    assert data["risk_level"] == "Sangat Berbahaya"
    assert data["affordability_band"] == "healthy"
    assert data["is_registered"] is False
    assert data["registry_status"] == "illegal"
    assert data["registry_message"] == "Lender declared illegal"
    registry_client.verify_lender.assert_awaited_once_with("Pinjam Kilat")


def test_loan_metrics_registered_from_registry(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test registered lender skips the legality penalty"""
    response = client.post("/v1/loan/metrics", json=payday_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["is_registered"] is True
    assert data["registry_status"] == "registered"
    assert data["risk_score"] == 30
    assert data["risk_level"] == "Sedang"


def test_loan_metrics_unknown_lender(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test lender missing from the registry counts as unregistered"""
    registry_client.verify_lender.return_value = LenderVerification(
        is_registered=False,
        lender_name="Pinjam Kilat",
    )

    data = client.post("/v1/loan/metrics", json=payday_payload).json()

    assert data["registry_status"] == "unregistered"
    assert data["risk_score"] == 80


def test_loan_metrics_registry_unavailable_fails_closed(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test registry outage treats the lender as unregistered instead of failing"""
    registry_client.verify_lender.side_effect = RegistryAPIError("Registry API timeout after 10.0s")

    response = client.post("/v1/loan/metrics", json=payday_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["is_registered"] is False
    assert data["registry_status"] == "unavailable"
    assert data["risk_score"] == 80


def test_loan_metrics_flag_supplied_skips_registry(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test caller-supplied is_registered bypasses the lookup"""
    payday_payload["isRegistered"] = False

    data = client.post("/v1/loan/metrics", json=payday_payload).json()

    assert data["registry_status"] == "provided"
    assert data["is_registered"] is False
    registry_client.verify_lender.assert_not_awaited()


def test_loan_metrics_blank_lender_skips_registry(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test blank lender name is unregistered without a lookup"""
    payday_payload["lenderName"] = "   "

    data = client.post("/v1/loan/metrics", json=payday_payload).json()

    assert data["registry_status"] == "skipped"
    assert data["is_registered"] is False
    registry_client.verify_lender.assert_not_awaited()


def test_loan_metrics_snake_case_payload(client: TestClient):
    """Test snake_case field names are accepted too"""
    response = client.post(
        "/v1/loan/metrics",
        json={
            "amount": 10_000_000,
            "interest_rate": 2,
            "interest_type": "reducing_balance",
            "tenor": 12,
            "tenor_unit": "months",
            "monthly_income": 8_000_000,
            "is_registered": True,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_installment"] == 945_595.97
    assert data["dti_ratio"] == 11.82
    assert data["risk_score"] == 10
    assert data["risk_level"] == "Rendah"


def test_loan_metrics_validation_error(
    client: TestClient,
    registry_client: AsyncMock,
    payday_payload: dict,
):
    """Test invalid input returns the first violated field before any lookup"""
    payday_payload["amount"] = 0
    payday_payload["monthlyIncome"] = 0

    response = client.post("/v1/loan/metrics", json=payday_payload)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["field"] == "amount"
    assert detail["message"]
    registry_client.verify_lender.assert_not_awaited()


def test_loan_metrics_negative_admin_fee(client: TestClient, payday_payload: dict):
    payday_payload["adminFee"] = -1

    response = client.post("/v1/loan/metrics", json=payday_payload)

    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "admin_fee"


def test_loan_metrics_unknown_interest_type(client: TestClient, payday_payload: dict):
    """Test unsupported interest convention is rejected by the schema"""
    payday_payload["interestType"] = "weekly"

    response = client.post("/v1/loan/metrics", json=payday_payload)

    assert response.status_code == 422


def test_loan_metrics_band_matches_score_near_threshold(client: TestClient):
    """Test DTI just above 30 shows 30.0 but is banded caution, consistent with its 15 points"""
    response = client.post(
        "/v1/loan/metrics",
        json={
            "amount": 1_000_000,
            "interestRate": 1,
            "interestType": "monthly_flat",
            "tenor": 1,
            "tenorUnit": "months",
            "adminFee": 490_200,
            "monthlyIncome": 5_000_000,
            "isRegistered": True,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["dti_ratio"] == 30
    assert data["risk_score"] == 15
    assert data["affordability_band"] == "caution"


def test_loan_metrics_extreme_amortizing_loan(client: TestClient):
    """Test very high rate over a very long tenor is calculated, not a 500"""
    response = client.post(
        "/v1/loan/metrics",
        json={
            "amount": 1_000_000,
            "interest_rate": 100,
            "interest_type": "reducing_balance",
            "tenor": 1100,
            "tenor_unit": "months",
            "monthly_income": 5_000_000,
            "is_registered": True,
        },
    )

    assert response.status_code == 200
    assert response.json()["monthly_installment"] == 1_000_000


def test_openapi_documents_validation_error(client: TestClient):
    """Test the 422 body shape is published in the OpenAPI schema"""
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/v1/loan/metrics"]["post"]["responses"]
    assert responses["422"]["content"]["application/json"]["schema"]["$ref"].endswith("ValidationErrorResponse")
    assert "ValidationErrorDetail" in schema["components"]["schemas"]
