"""
Test suite for logging helpers.

System role: Verification of log field rendering and correlation tagging
"""

import logging
import uuid
from datetime import datetime, timezone

from course_catalog.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from course_catalog.observability.log_utils import log_with_context, safe_log_value
from course_catalog.observability.logger import CorrelationIdFilter


class TestSafeLogValue:
    def test_none(self) -> None:
        assert safe_log_value(None) == "-"

    def test_uuid_and_datetime(self) -> None:
        uid = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert safe_log_value(uid) == str(uid)
        stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert safe_log_value(stamp) == "2024-01-01T00:00:00+00:00"

    def test_short_field_list_is_joined(self) -> None:
        assert safe_log_value(["price", "title"]) == "price,title"

    def test_long_list_is_counted(self) -> None:
        ids = [str(uuid.uuid4()) for _ in range(10)]
        assert safe_log_value(ids) == "list(10 items)"

    def test_truncation(self) -> None:
        result = safe_log_value("x" * 300, max_length=10)
        assert result == "xxxxxxxxxx... (truncated, 300 total)"


def test_log_with_context_renders_extra(caplog) -> None:
    logger = logging.getLogger("course_catalog.test")

    with caplog.at_level(logging.INFO, logger="course_catalog.test"):
        log_with_context(logger, logging.INFO, "Updating course", fields=["title"], course_id=None)

    record = caplog.records[-1]
    assert record.fields == "title"
    assert record.course_id == "-"


def test_correlation_filter_tags_records() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    set_correlation_id("abc-123")
    CorrelationIdFilter().filter(record)
    assert record.correlation_id == "abc-123"

    clear_correlation_id()
    assert get_correlation_id() == ""
    CorrelationIdFilter().filter(record)
    assert record.correlation_id == "-"
