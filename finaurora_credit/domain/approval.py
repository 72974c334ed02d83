"""Approval rules - the fixed three-tier credit decision table"""

from typing import Optional, Tuple
from finaurora_credit.domain.models import ProfileTier

# Score thresholds
LOW_PROFILE_SCORE_CEILING = 500  # below this: automatic rejection
MEDIUM_PROFILE_SCORE_CEILING = 700  # inclusive upper bound of the medium tier

# Share of monthly income the installment may take
MEDIUM_PROFILE_INCOME_RATIO = 0.25
HIGH_PROFILE_INCOME_RATIO = 0.30

# High-profile applicants must hold fewer active credits than this
HIGH_PROFILE_MAX_ACTIVE_CREDITS = 2


def classify_profile(credit_score: int) -> ProfileTier:
    """
    Map a credit score to its tier.

    - score < 500:          low
    - 500 <= score <= 700:  medium
    - score > 700:          high
    """
    if credit_score < LOW_PROFILE_SCORE_CEILING:
        return ProfileTier.LOW
    elif credit_score <= MEDIUM_PROFILE_SCORE_CEILING:
        return ProfileTier.MEDIUM
    else:
        return ProfileTier.HIGH


def decide_approval(
    credit_score: int,
    active_credit_count: int,
    has_co_signer: bool,
    monthly_income: float,
    installment: float,
) -> Tuple[bool, Optional[float], str]:
    """
    Apply the decision table, first match wins.

    Rules:
    - Low profile: reject, installment is not consulted
    - Medium profile: co-signer required and installment <= 25% of income
    - High profile with fewer than 2 active credits: installment <= 30% of income
    - Anything else (high profile, 2+ active credits): reject

    Comparisons are inclusive. A NaN installment fails them and rejects.

    Returns: (approved, max_installment, reason)
    """
    tier = classify_profile(credit_score)

    if tier is ProfileTier.LOW:
        return False, None, "low_credit_score"

    if tier is ProfileTier.MEDIUM:
        max_installment = monthly_income * MEDIUM_PROFILE_INCOME_RATIO
        if not has_co_signer:
            return False, max_installment, "missing_co_signer"
        if installment <= max_installment:
            return True, max_installment, "approved"
        return False, max_installment, "installment_exceeds_limit"

    if active_credit_count < HIGH_PROFILE_MAX_ACTIVE_CREDITS:
        max_installment = monthly_income * HIGH_PROFILE_INCOME_RATIO
        if installment <= max_installment:
            return True, max_installment, "approved"
        return False, max_installment, "installment_exceeds_limit"

    return False, None, "too_many_active_credits"
