"""Pytest fixtures for testing"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from lentera_gateway.api.main import create_app
from lentera_gateway.api.dependencies import get_registry_client
from lentera_gateway.domain.models import LoanInput, InterestType, TenorUnit, LenderVerification


@pytest.fixture
def registry_client() -> AsyncMock:
    """Registry collaborator that reports every lender as registered"""
    mock = AsyncMock()
    mock.verify_lender.return_value = LenderVerification(
        is_registered=True,
        lender_name="Kredit Resmi",
        message="Lender is registered",
    )
    return mock


@pytest.fixture
def client(registry_client: AsyncMock) -> TestClient:
    """Create FastAPI test client with a mocked registry"""
    app = create_app()
    app.dependency_overrides[get_registry_client] = lambda: registry_client
    return TestClient(app)


@pytest.fixture
def payday_loan() -> LoanInput:
    """Short daily-rate loan typical of unregistered online lenders"""
    return LoanInput(
        amount=1_000_000,
        interest_rate=1,
        interest_type=InterestType.DAILY,
        tenor=30,
        tenor_unit=TenorUnit.DAYS,
        admin_fee=50_000,
        monthly_income=5_000_000,
        lender_name="Pinjam Kilat",
    )


@pytest.fixture
def amortizing_loan() -> LoanInput:
    """Twelve-month reducing balance loan at 2% a month"""
    return LoanInput(
        amount=10_000_000,
        interest_rate=2,
        interest_type=InterestType.REDUCING_BALANCE,
        tenor=12,
        tenor_unit=TenorUnit.MONTHS,
        admin_fee=0,
        monthly_income=8_000_000,
        lender_name="Kredit Resmi",
    )
