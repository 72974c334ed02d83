"""Domain-specific exceptions"""


class CreditEvaluationError(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanTermsError(CreditEvaluationError):
    """Loan terms rejected by the opt-in strict validation"""

    pass
