"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Loan parameters violate a structural constraint"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class RegistryAPIError(DomainException):
    """Lender registry service returned an error or is unavailable"""

    pass
