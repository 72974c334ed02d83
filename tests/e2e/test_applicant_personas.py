"""
E2E tests for applicant personas through the observed assessment flow.

Applicant personas:
- prime: High score, no other credits, comfortable income
- leveraged: High score but already carrying two credits
- guaranteed: Medium score backed by a co-signer
- unguaranteed: Medium score without a co-signer
- subprime: Score under 500 with otherwise perfect numbers
- stretched: High score, installment above 30% of income
"""

import pytest
from finaurora_credit.domain.evaluation import CreditEvaluation
from finaurora_credit.domain.models import ProfileTier
from finaurora_credit.services.assessment import assess_credit

# 18.5% nominal annual over three years
RATE = 18.5
TERM = 36


@pytest.mark.integration
def test_prime_applicant_approved():
    """
    prime: Strong profile
    Expected: Approve, installment well under 30% of income
    """
    applicant = CreditEvaluation("Valentina Ruiz", 6_000_000, 0, 780, 20_000_000, False)

    assessment = assess_credit(applicant, RATE, TERM)

    assert assessment.approved is True, "prime applicant should be approved"
    assert assessment.profile_tier is ProfileTier.HIGH
    assert assessment.installment < assessment.max_installment


@pytest.mark.integration
def test_leveraged_applicant_declined():
    """
    leveraged: High score with two active credits
    Expected: Decline regardless of affordability
    """
    applicant = CreditEvaluation("Jorge Pineda", 50_000_000, 2, 820, 1_000_000, True)

    assessment = assess_credit(applicant, RATE, TERM)

    assert assessment.approved is False
    assert assessment.reason == "too_many_active_credits"


@pytest.mark.integration
def test_guaranteed_applicant_approved():
    """
    guaranteed: Medium score with co-signer
    Expected: Approve while installment <= 25% of income
    """
    applicant = CreditEvaluation("Camila Herrera", 3_500_000, 3, 620, 10_000_000, True)

    assessment = assess_credit(applicant, RATE, TERM)

    assert assessment.approved is True
    assert assessment.profile_tier is ProfileTier.MEDIUM
    assert assessment.max_installment == pytest.approx(875_000)


@pytest.mark.integration
def test_unguaranteed_applicant_declined():
    """
    unguaranteed: Same profile as guaranteed, co-signer withdrawn
    Expected: Decline
    """
    applicant = CreditEvaluation("Camila Herrera", 3_500_000, 3, 620, 10_000_000, True)
    applicant.has_co_signer = False

    assessment = assess_credit(applicant, RATE, TERM)

    assert assessment.approved is False
    assert assessment.reason == "missing_co_signer"


@pytest.mark.integration
def test_subprime_applicant_declined():
    """
    subprime: Score 499
    Expected: Automatic decline, no affordability cap reported
    """
    applicant = CreditEvaluation("Diego Salazar", 100_000_000, 0, 499, 1_000, True)

    assessment = assess_credit(applicant, RATE, TERM)

    assert assessment.approved is False
    assert assessment.profile_tier is ProfileTier.LOW
    assert assessment.max_installment is None


@pytest.mark.integration
def test_stretched_applicant_declined_then_approved_with_longer_term():
    """
    stretched: Installment too high over 12 months
    Expected: Decline at 12 months, approve once spread over 60
    """
    applicant = CreditEvaluation("Sofía Méndez", 2_000_000, 1, 710, 10_000_000, False)

    short = assess_credit(applicant, RATE, 12)
    long = assess_credit(applicant, RATE, 60)

    assert short.approved is False
    assert short.reason == "installment_exceeds_limit"
    assert long.approved is True
    assert long.installment < short.installment
