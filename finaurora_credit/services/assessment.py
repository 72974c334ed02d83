"""Observed assessment entry point - domain evaluation plus logging and metrics"""

import time
import uuid
from typing import Optional

from finaurora_credit.config import settings
from finaurora_credit.domain.evaluation import CreditEvaluation
from finaurora_credit.domain.exceptions import InvalidLoanTermsError
from finaurora_credit.domain.models import ApprovalAssessment
from finaurora_credit.infrastructure.observability.metrics import record_assessment
from finaurora_credit.infrastructure.observability.logging import log_assessment, setup_logging

# Structured JSON output on the package logger
logger = setup_logging(settings.log_level)


def assess_credit(
    evaluation: CreditEvaluation,
    nominal_annual_rate_percent: float,
    term_months: int,
    strict: bool = False,
    request_id: Optional[str] = None,
) -> ApprovalAssessment:
    """
    Assess one applicant and emit the outcome to logs and metrics.

    Flow:
    1. Optionally validate loan terms (strict=True)
    2. Compute installment and apply the tier rules
    3. Record Prometheus metrics
    4. Log the structured outcome

    The domain result is returned unchanged. Validation failures are
    logged and re-raised.
    """
    start_time = time.time()
    request_id = request_id or str(uuid.uuid4())

    try:
        assessment = evaluation.assess(nominal_annual_rate_percent, term_months, strict=strict)
    except InvalidLoanTermsError as e:
        logger.warning(f"Invalid loan terms: {e}", extra={"request_id": request_id})
        raise

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(assessment, evaluation.monthly_income)
    log_assessment(
        request_id,
        evaluation.applicant_name,
        assessment.profile_tier.value,
        assessment.approved,
        assessment.reason,
        assessment.installment,
        duration_ms,
    )

    return assessment
