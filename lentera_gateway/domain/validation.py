"""Input validation for loan parameters"""

import math

from lentera_gateway.domain.models import LoanInput
from lentera_gateway.domain.exceptions import ValidationError


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def validate_loan_input(loan: LoanInput) -> None:
    """
    Reject loans that cannot be calculated.

    Checks run in a fixed order and only the first violation is reported:
    amount, interest_rate, tenor, monthly_income, admin_fee.

    Raises:
        ValidationError: naming the offending field
    """
    if not _is_positive(loan.amount):
        raise ValidationError("amount", "Loan amount must be greater than 0")
    if not _is_positive(loan.interest_rate):
        raise ValidationError("interest_rate", "Interest rate must be greater than 0")
    if not _is_positive(loan.tenor):
        raise ValidationError("tenor", "Tenor must be greater than 0")
    if not _is_positive(loan.monthly_income):
        raise ValidationError("monthly_income", "Monthly income must be greater than 0")
    if not (math.isfinite(loan.admin_fee) and loan.admin_fee >= 0):
        raise ValidationError("admin_fee", "Admin fee cannot be negative")
