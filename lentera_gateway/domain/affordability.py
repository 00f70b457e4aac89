"""Affordability - how much of monthly income the installment consumes"""

# DTI thresholds (percent) shared with the risk scorer
DTI_CAUTION_THRESHOLD = 30.0
DTI_DANGER_THRESHOLD = 40.0


def calculate_dti_ratio(monthly_installment: float, monthly_income: float) -> float:
    """
    Debt-to-income ratio as a percentage.

    Not clamped: a ratio above 100 means the installment exceeds income.
    Multiplies before dividing so whole-number ratios come out exact.
    """
    return monthly_installment * 100 / monthly_income


def affordability_band(dti_ratio: float) -> str:
    """Display band for a DTI ratio: healthy, caution or danger"""
    if dti_ratio <= DTI_CAUTION_THRESHOLD:
        return "healthy"
    elif dti_ratio <= DTI_DANGER_THRESHOLD:
        return "caution"
    else:
        return "danger"
