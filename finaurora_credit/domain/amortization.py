"""French (annuity) amortization: rate conversion, installment and schedule"""

import math
from typing import List
from finaurora_credit.domain.exceptions import InvalidLoanTermsError
from finaurora_credit.domain.models import ScheduledPayment
from finaurora_credit.utils.float_math import compound_growth, ieee_divide


def monthly_rate(nominal_annual_rate_percent: float) -> float:
    """
    Convert a nominal annual rate in percent to a fractional monthly rate.

    12.0 (12% a year) -> 0.01 (1% a month). Any number is accepted,
    including zero and negative rates.
    """
    return nominal_annual_rate_percent / 12 / 100


def monthly_installment(
    principal: float,
    nominal_annual_rate_percent: float,
    term_months: int,
) -> float:
    """
    Fixed monthly installment for a loan repaid over term_months.

    Formula:
        installment = (P * (im * (1+im)^n)) / ((1+im)^n - 1)

    A monthly rate of exactly zero falls back to straight-line P / n.

    Nothing is validated: term_months == 0 divides by zero and yields
    +/-inf or NaN, and a growth factor too large for a float yields NaN.
    Callers are expected to pass term_months >= 1.
    """
    im = monthly_rate(nominal_annual_rate_percent)
    if im == 0:
        return ieee_divide(principal, term_months)

    growth = compound_growth(im, term_months)
    return ieee_divide(principal * (im * growth), growth - 1)


def validate_loan_terms(nominal_annual_rate_percent: float, term_months: int) -> None:
    """Opt-in check of loan terms; the default evaluation path never calls this"""
    if not math.isfinite(nominal_annual_rate_percent):
        raise InvalidLoanTermsError(
            f"Nominal annual rate must be finite, got {nominal_annual_rate_percent}"
        )
    if term_months < 1:
        raise InvalidLoanTermsError(f"Term must be at least 1 month, got {term_months}")


def amortization_schedule(
    principal: float,
    nominal_annual_rate_percent: float,
    term_months: int,
) -> List[ScheduledPayment]:
    """
    Generate the month-by-month French amortization table.

    Every row pays the same installment; interest is charged on the
    outstanding balance and the rest of the payment reduces principal.
    The last row absorbs floating-point drift so the closing balance is 0.

    Example:
        1000 at 12% over 2 months -> installment 507.51
        [(1, 507.51, 10.00, 497.51, 502.49), (2, 507.51, 5.02, 502.49, 0.0)]
    """
    if term_months < 1:
        return []

    im = monthly_rate(nominal_annual_rate_percent)
    payment = monthly_installment(principal, nominal_annual_rate_percent, term_months)

    schedule = []
    balance = principal
    for period in range(1, term_months + 1):
        interest = balance * im

        if period == term_months:
            # Last payment settles whatever is left
            principal_part = balance
            schedule.append(
                ScheduledPayment(
                    period=period,
                    payment=interest + principal_part,
                    interest=interest,
                    principal=principal_part,
                    balance=0.0,
                )
            )
            break

        principal_part = payment - interest
        balance -= principal_part
        schedule.append(
            ScheduledPayment(
                period=period,
                payment=payment,
                interest=interest,
                principal=principal_part,
                balance=balance,
            )
        )

    return schedule
