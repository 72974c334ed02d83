"""Prometheus metrics for monitoring approval rates and installment affordability"""

import math
from prometheus_client import Counter, Histogram
from finaurora_credit.domain.models import ApprovalAssessment

# Assessment metrics
assessment_counter = Counter(
    "finaurora_assessment_total",
    "Total credit assessments made",
    ["tier", "outcome"],  # low | medium | high, approved | declined
)

installment_to_income_histogram = Histogram(
    "finaurora_installment_to_income_ratio",
    "Monthly installment as a share of monthly income",
    buckets=[0.05, 0.1, 0.15, 0.2, 0.25, 0.3, 0.4, 0.5, 0.75, 1.0],
)


def record_assessment(assessment: ApprovalAssessment, monthly_income: float) -> None:
    """Record assessment metrics for monitoring approval rates per tier"""
    outcome = "approved" if assessment.approved else "declined"
    assessment_counter.labels(tier=assessment.profile_tier.value, outcome=outcome).inc()

    # Degenerate loans (inf/NaN installment, no income) carry no ratio
    if monthly_income > 0 and math.isfinite(assessment.installment):
        installment_to_income_histogram.observe(assessment.installment / monthly_income)
