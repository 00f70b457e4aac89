"""Interest normalization - turn quoted rates into comparable totals and APRs"""

from typing import Dict

from lentera_gateway.domain.models import LoanInput, InterestType, TenorUnit

# Calendar approximation used for every day/month conversion
DAYS_PER_MONTH = 30

# Periods per year for each quoting convention
ANNUALIZATION_FACTORS: Dict[InterestType, int] = {
    InterestType.DAILY: 365,
    InterestType.MONTHLY_FLAT: 12,
    InterestType.REDUCING_BALANCE: 12,
}


def tenor_in_months(loan: LoanInput) -> float:
    """Loan duration in (30-day) months"""
    if loan.tenor_unit == TenorUnit.MONTHS:
        return loan.tenor
    return loan.tenor / DAYS_PER_MONTH


def tenor_in_days(loan: LoanInput) -> float:
    """Loan duration in days, counting a month as 30 days"""
    if loan.tenor_unit == TenorUnit.DAYS:
        return loan.tenor
    return loan.tenor * DAYS_PER_MONTH


def effective_apr(interest_type: InterestType, interest_rate: float) -> float:
    """
    Annualize a periodic rate by simple multiplication.

    No compounding is applied: a 1% daily rate becomes 365% a year and a 2%
    monthly rate becomes 24%. This is how small-looking periodic quotes are
    made comparable to an annual figure.
    """
    return (interest_rate / 100) * ANNUALIZATION_FACTORS[interest_type] * 100


def flat_total_interest(loan: LoanInput) -> float:
    """
    Total interest for the simple-interest conventions.

    - daily:        amount x rate x tenor in days
    - monthly_flat: amount x rate x tenor in months

    Interest is charged on the original principal for the whole tenor,
    regardless of how much has been repaid.
    """
    rate = loan.interest_rate / 100

    if loan.interest_type == InterestType.DAILY:
        return loan.amount * rate * tenor_in_days(loan)
    if loan.interest_type == InterestType.MONTHLY_FLAT:
        return loan.amount * rate * tenor_in_months(loan)

    raise ValueError(f"{loan.interest_type.value} is not a flat interest convention")


def amortized_total_interest(principal_portion: float, months: float, amount: float) -> float:
    """Interest paid over an amortizing loan: all principal-and-interest payments minus principal"""
    return principal_portion * months - amount
