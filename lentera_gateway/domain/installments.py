"""Installment calculation for each interest convention"""

from typing import Callable, Dict

from lentera_gateway.domain.models import LoanInput, InterestType, InterestBreakdown
from lentera_gateway.domain.interest import (
    tenor_in_months,
    effective_apr,
    flat_total_interest,
    amortized_total_interest,
)


def amortized_payment(principal: float, monthly_rate: float, months: float) -> float:
    """
    Fixed payment that repays principal plus interest on the outstanding balance.

    Standard annuity formula, in the equivalent form
        P x r / (1 - (1 + r)^-n)
    which cannot overflow: for very high rates or long tenors (1 + r)^-n
    underflows to 0 and the payment tends to the interest-only P x r.

    A zero rate (or one too small to move (1 + r)^-n off 1.0) degrades to an
    even split of the principal.
    """
    if monthly_rate == 0:
        return principal / months

    discount = 1 - (1 + monthly_rate) ** -months
    if discount == 0:
        return principal / months

    return principal * monthly_rate / discount


def flat_installment(total_due: float, months: float) -> float:
    """
    Even split of everything owed across the tenor.

    A zero month count is treated as a single payment.
    """
    return total_due / (months or 1)


def _flat_breakdown(loan: LoanInput) -> InterestBreakdown:
    months = tenor_in_months(loan)
    total_interest = flat_total_interest(loan)

    return InterestBreakdown(
        tenor_in_months=months,
        total_interest=total_interest,
        effective_apr=effective_apr(loan.interest_type, loan.interest_rate),
        monthly_installment=flat_installment(loan.amount + total_interest + loan.admin_fee, months),
    )


def _reducing_balance_breakdown(loan: LoanInput) -> InterestBreakdown:
    months = tenor_in_months(loan)
    monthly_rate = loan.interest_rate / 100

    principal_portion = amortized_payment(loan.amount, monthly_rate, months)

    if monthly_rate == 0:
        total_interest = 0.0
    else:
        total_interest = amortized_total_interest(principal_portion, months, loan.amount)

    # Admin fee is spread evenly on top, never compounded
    return InterestBreakdown(
        tenor_in_months=months,
        total_interest=total_interest,
        effective_apr=effective_apr(loan.interest_type, loan.interest_rate),
        monthly_installment=principal_portion + loan.admin_fee / months,
    )


_CALCULATORS: Dict[InterestType, Callable[[LoanInput], InterestBreakdown]] = {
    InterestType.DAILY: _flat_breakdown,
    InterestType.MONTHLY_FLAT: _flat_breakdown,
    InterestType.REDUCING_BALANCE: _reducing_balance_breakdown,
}


def calculate_repayment(loan: LoanInput) -> InterestBreakdown:
    """
    Derive total interest, APR and periodic installment for a validated loan.

    Returns unrounded figures; rounding happens once when metrics are assembled.
    """
    return _CALCULATORS[loan.interest_type](loan)
