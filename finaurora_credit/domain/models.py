"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProfileTier(str, Enum):
    """Credit-score tier of an applicant"""

    LOW = "low"  # score < 500
    MEDIUM = "medium"  # 500 <= score <= 700
    HIGH = "high"  # score > 700


@dataclass
class ApprovalAssessment:
    """Output of an approval evaluation, with the numbers behind it"""

    approved: bool
    profile_tier: ProfileTier
    monthly_rate: float
    installment: float
    max_installment: Optional[float]  # None when no affordability check applies
    reason: str


@dataclass
class ScheduledPayment:
    """Single payment in a French amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float
