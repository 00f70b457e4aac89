"""Risk scoring engine - core business logic for loan risk assessment"""

from lentera_gateway.domain.models import (
    LoanInput,
    LoanMetrics,
    RiskAssessment,
    RiskLevel,
)
from lentera_gateway.domain.validation import validate_loan_input
from lentera_gateway.domain.installments import calculate_repayment
from lentera_gateway.domain.affordability import (
    calculate_dti_ratio,
    affordability_band,
    DTI_CAUTION_THRESHOLD,
    DTI_DANGER_THRESHOLD,
)
from lentera_gateway.utils.rounding import round_half_up

MAX_RISK_SCORE = 100

# Points per factor
UNREGISTERED_PENALTY = 50
DTI_DANGER_POINTS = 30
DTI_CAUTION_POINTS = 15
APR_SEVERE_POINTS = 30
APR_ELEVATED_POINTS = 10

# Effective APR thresholds (percent)
APR_SEVERE_THRESHOLD = 36.0
APR_ELEVATED_THRESHOLD = 20.0


def _legality_points(is_registered: bool) -> int:
    return 0 if is_registered else UNREGISTERED_PENALTY


def _affordability_points(dti_ratio: float) -> int:
    if dti_ratio > DTI_DANGER_THRESHOLD:
        return DTI_DANGER_POINTS
    elif dti_ratio > DTI_CAUTION_THRESHOLD:
        return DTI_CAUTION_POINTS
    return 0


def _rate_points(effective_apr: float) -> int:
    if effective_apr > APR_SEVERE_THRESHOLD:
        return APR_SEVERE_POINTS
    elif effective_apr > APR_ELEVATED_THRESHOLD:
        return APR_ELEVATED_POINTS
    return 0


def determine_risk_level(score: int) -> RiskLevel:
    """
    Map risk score to a tier, evaluated high to low.

    Score bands:
    - 75+:   Sangat Berbahaya (unregistered plus at least one severe financial factor)
    - 50-74: Tinggi
    - 25-49: Sedang
    - 0-24:  Rendah
    """
    if score >= 75:
        return RiskLevel.SANGAT_BERBAHAYA
    elif score >= 50:
        return RiskLevel.TINGGI
    elif score >= 25:
        return RiskLevel.SEDANG
    else:
        return RiskLevel.RENDAH


def calculate_risk_score(effective_apr: float, dti_ratio: float, is_registered: bool) -> RiskAssessment:
    """
    Calculate additive risk score from 0 (lowest risk) to 100 (highest risk).

    Scoring weights:
    - 50: Lender not registered with the regulator
    - 30: DTI above 40% (15 above 30%)
    - 30: Effective APR above 36% (10 above 20%)

    Registration outweighs either financial factor, so a registered lender
    alone can never reach the top tier however expensive the loan is.
    The three factors can add up to 110; the score is capped at 100 while
    factors keeps the raw points.
    """
    factors = {
        "legality": _legality_points(is_registered),
        "affordability": _affordability_points(dti_ratio),
        "rate_burden": _rate_points(effective_apr),
    }
    score = min(sum(factors.values()), MAX_RISK_SCORE)

    return RiskAssessment(score=score, level=determine_risk_level(score), factors=factors)


def compute_loan_metrics(loan: LoanInput, is_registered: bool) -> LoanMetrics:
    """
    Main entry point: validate a loan, normalize its cost and score its risk.

    Validate -> normalize interest -> installment -> DTI -> score.
    Scoring and the affordability band use unrounded figures; only the
    returned numbers are rounded.

    Raises:
        ValidationError: on the first invalid loan parameter
    """
    validate_loan_input(loan)

    breakdown = calculate_repayment(loan)
    total_repayment = loan.amount + breakdown.total_interest + loan.admin_fee
    dti_ratio = calculate_dti_ratio(breakdown.monthly_installment, loan.monthly_income)
    assessment = calculate_risk_score(breakdown.effective_apr, dti_ratio, is_registered)

    return LoanMetrics(
        total_repayment=round_half_up(total_repayment),
        monthly_installment=round_half_up(breakdown.monthly_installment),
        effective_apr=round_half_up(breakdown.effective_apr),
        dti_ratio=round_half_up(dti_ratio),
        risk_score=assessment.score,
        risk_level=assessment.level,
        total_interest=round_half_up(breakdown.total_interest),
        affordability_band=affordability_band(dti_ratio),
    )
