"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional

from lentera_gateway.domain.models import InterestType, TenorUnit, RiskLevel, LoanInput


class LoanMetricsRequest(BaseModel):
    """
    Request body for POST /v1/loan/metrics

    Numeric ranges are checked by the domain validator so that only the first
    violated field is reported. Field names are accepted in snake_case or
    camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    amount: float = Field(..., description="Principal borrowed")
    interest_rate: float = Field(..., description="Quoted rate in percent, per day or per month")
    interest_type: InterestType
    tenor: float = Field(..., description="Loan duration magnitude")
    tenor_unit: TenorUnit
    admin_fee: float = Field(0.0, description="One-time fee")
    monthly_income: float = Field(..., description="Borrower's monthly income")
    lender_name: str = Field("", description="Lender to check against the registry")
    is_registered: Optional[bool] = Field(None, description="Skip the registry lookup when provided")

    def to_domain(self) -> LoanInput:
        return LoanInput(
            amount=self.amount,
            interest_rate=self.interest_rate,
            interest_type=self.interest_type,
            tenor=self.tenor,
            tenor_unit=self.tenor_unit,
            admin_fee=self.admin_fee,
            monthly_income=self.monthly_income,
            lender_name=self.lender_name,
        )


class LoanMetricsResponse(BaseModel):
    """Response for POST /v1/loan/metrics"""

    total_repayment: float
    monthly_installment: float
    effective_apr: float
    dti_ratio: float
    risk_score: int
    risk_level: RiskLevel
    total_interest: float
    affordability_band: str
    is_registered: bool
    registry_status: str
    registry_message: Optional[str] = None


class ValidationErrorDetail(BaseModel):
    """Error detail for rejected loan parameters"""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """422 body returned when a loan parameter is rejected"""

    detail: ValidationErrorDetail
