"""Pytest fixtures for testing"""

import logging
import pytest
from typing import Callable, Generator
from finaurora_credit.domain.evaluation import CreditEvaluation


@pytest.fixture
def make_evaluation() -> Callable[..., CreditEvaluation]:
    """Factory for evaluations with a solid default profile, overridable per field"""

    def _make(**overrides) -> CreditEvaluation:
        fields = {
            "applicant_name": "Ana Torres",
            "monthly_income": 4_000_000.0,
            "active_credit_count": 0,
            "credit_score": 750,
            "requested_amount": 1_000_000.0,
            "has_co_signer": False,
        }
        fields.update(overrides)
        return CreditEvaluation(**fields)

    return _make


@pytest.fixture
def sample_evaluation(make_evaluation) -> CreditEvaluation:
    """High-profile applicant with one active credit"""
    return make_evaluation(active_credit_count=1)


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Package logger whose handlers and level are restored after the test"""
    logger = logging.getLogger("finaurora_credit")
    handlers = list(logger.handlers)
    level = logger.level
    try:
        yield logger
    finally:
        logger.handlers[:] = handlers
        logger.setLevel(level)
