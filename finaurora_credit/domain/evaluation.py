"""Credit evaluation entity - applicant profile plus loan calculations"""

from dataclasses import dataclass
from typing import List
from finaurora_credit.domain import amortization
from finaurora_credit.domain.approval import classify_profile, decide_approval
from finaurora_credit.domain.models import ApprovalAssessment, ProfileTier, ScheduledPayment


@dataclass
class CreditEvaluation:
    """
    One applicant's profile and loan request.

    Fields are plain mutable attributes with no validation. Every
    calculation re-reads them, so results always reflect the current
    values; nothing is cached. Loan terms (nominal annual rate in percent,
    term in months) are supplied per call.
    """

    applicant_name: str
    monthly_income: float
    active_credit_count: int
    credit_score: int
    requested_amount: float
    has_co_signer: bool

    def monthly_rate(self, nominal_annual_rate_percent: float) -> float:
        """Nominal annual percent -> fractional monthly rate"""
        return amortization.monthly_rate(nominal_annual_rate_percent)

    def monthly_installment(self, nominal_annual_rate_percent: float, term_months: int) -> float:
        """French-amortization installment for the requested amount"""
        return amortization.monthly_installment(
            self.requested_amount, nominal_annual_rate_percent, term_months
        )

    def evaluate_approval(self, nominal_annual_rate_percent: float, term_months: int) -> bool:
        """True when the loan passes the tier rules for the current profile"""
        return self.assess(nominal_annual_rate_percent, term_months).approved

    def assess(
        self,
        nominal_annual_rate_percent: float,
        term_months: int,
        strict: bool = False,
    ) -> ApprovalAssessment:
        """
        Evaluate approval and report why.

        The installment is always computed first, even for low-profile
        applicants whose rejection does not depend on it.

        With strict=True the loan terms are validated beforehand and
        InvalidLoanTermsError is raised for a term under one month or a
        non-finite rate.
        """
        if strict:
            amortization.validate_loan_terms(nominal_annual_rate_percent, term_months)

        rate = self.monthly_rate(nominal_annual_rate_percent)
        installment = self.monthly_installment(nominal_annual_rate_percent, term_months)

        approved, max_installment, reason = decide_approval(
            credit_score=self.credit_score,
            active_credit_count=self.active_credit_count,
            has_co_signer=self.has_co_signer,
            monthly_income=self.monthly_income,
            installment=installment,
        )

        return ApprovalAssessment(
            approved=approved,
            profile_tier=self.profile_tier(),
            monthly_rate=rate,
            installment=installment,
            max_installment=max_installment,
            reason=reason,
        )

    def profile_tier(self) -> ProfileTier:
        return classify_profile(self.credit_score)

    def amortization_schedule(
        self, nominal_annual_rate_percent: float, term_months: int
    ) -> List[ScheduledPayment]:
        return amortization.amortization_schedule(
            self.requested_amount, nominal_annual_rate_percent, term_months
        )

    def total_repayment(self, nominal_annual_rate_percent: float, term_months: int) -> float:
        """Sum of all installments over the term"""
        return self.monthly_installment(nominal_annual_rate_percent, term_months) * term_months

    def total_interest(self, nominal_annual_rate_percent: float, term_months: int) -> float:
        return self.total_repayment(nominal_annual_rate_percent, term_months) - self.requested_amount
