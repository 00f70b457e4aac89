"""Domain models - pure Python dataclasses representing loan calculation entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class InterestType(str, Enum):
    """How the quoted interest rate accrues"""

    DAILY = "daily"
    MONTHLY_FLAT = "monthly_flat"
    REDUCING_BALANCE = "reducing_balance"


class TenorUnit(str, Enum):
    """Unit the loan tenor is expressed in"""

    DAYS = "days"
    MONTHS = "months"


class RiskLevel(str, Enum):
    """Risk tiers shown to the borrower"""

    RENDAH = "Rendah"
    SEDANG = "Sedang"
    TINGGI = "Tinggi"
    SANGAT_BERBAHAYA = "Sangat Berbahaya"


@dataclass(frozen=True)
class LoanInput:
    """Proposed loan terms plus the borrower's income"""

    amount: float
    interest_rate: float  # percentage, meaning depends on interest_type
    interest_type: InterestType
    tenor: float
    tenor_unit: TenorUnit
    monthly_income: float
    admin_fee: float = 0.0
    lender_name: str = ""


@dataclass(frozen=True)
class InterestBreakdown:
    """Unrounded intermediate figures shared between calculation stages"""

    tenor_in_months: float
    total_interest: float
    effective_apr: float
    monthly_installment: float


@dataclass(frozen=True)
class RiskAssessment:
    """Score, tier and the points each factor contributed"""

    score: int
    level: RiskLevel
    factors: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class LoanMetrics:
    """Output of a loan calculation, rounded for display"""

    total_repayment: float
    monthly_installment: float
    effective_apr: float
    dti_ratio: float
    risk_score: int
    risk_level: RiskLevel
    total_interest: float
    affordability_band: str  # healthy | caution | danger, from the unrounded DTI


@dataclass(frozen=True)
class LenderVerification:
    """Registry lookup result for a lender name"""

    is_registered: bool
    lender_name: str
    is_illegal: bool = False
    message: Optional[str] = None
