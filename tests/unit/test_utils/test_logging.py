"""Tests for structured logging helpers."""

import logging
import pytest
from src.utils.logging import (
    correlation_context,
    get_correlation_id,
    get_structured_logger,
    mask_sensitive_data,
    mask_email,
    sanitize_text,
    log_timing,
    timed,
)


@pytest.mark.unit
def test_correlation_context_sets_and_restores():
    assert get_correlation_id() is None
    with correlation_context("req_abc") as cid:
        assert cid == "req_abc"
        assert get_correlation_id() == "req_abc"
    assert get_correlation_id() is None


@pytest.mark.unit
def test_correlation_context_generates_id():
    with correlation_context() as cid:
        assert cid.startswith("req_")


@pytest.mark.unit
def test_structured_logger_adds_fields(caplog):
    logger = get_structured_logger("tests.structured")
    with caplog.at_level(logging.INFO, logger="tests.structured"):
        with correlation_context("req_123"):
            logger.info("Property rated", property_id=7)

    record = caplog.records[-1]
    assert record.getMessage() == "Property rated"
    assert record.property_id == 7
    assert record.correlation_id == "req_123"


@pytest.mark.unit
def test_mask_sensitive_data():
    text = "contact jane@example.com password=hunter2"
    masked = mask_sensitive_data(text)

    assert "jane@example.com" not in masked
    assert "hunter2" not in masked
    assert "[REDACTED_EMAIL]" in masked


@pytest.mark.unit
def test_mask_email_is_stable():
    assert mask_email("Jane@Example.com") == mask_email("jane@example.com")
    assert mask_email(None) is None


@pytest.mark.unit
def test_sanitize_text_truncates():
    assert sanitize_text("x" * 300, max_length=10) == "x" * 10 + "..."
    assert sanitize_text("") is None


@pytest.mark.unit
def test_log_timing_logs_completion(caplog):
    logger = get_structured_logger("tests.timing")
    with caplog.at_level(logging.DEBUG, logger="tests.timing"):
        with log_timing("unit_op", logger=logger):
            pass

    completed = [r for r in caplog.records if r.getMessage() == "Completed unit_op"]
    assert completed
    assert completed[0].operation == "unit_op"


@pytest.mark.unit
def test_timed_wraps_and_logs(caplog):
    logger = get_structured_logger("tests.timed")

    @timed("double_op", logger=logger)
    def double(value):
        """Double a value."""
        return value * 2

    with caplog.at_level(logging.DEBUG, logger="tests.timed"):
        assert double(21) == 42

    assert double.__name__ == "double"
    assert any(r.getMessage() == "Completed double_op" for r in caplog.records)
