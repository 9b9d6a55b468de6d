import logging

from thumbnail_studio.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from thumbnail_studio.observability.logger import CorrelationIdFilter
from thumbnail_studio.observability.log_utils import safe_log_value


def test_set_and_clear_correlation_id():
    assert set_correlation_id("abc-123") == "abc-123"
    assert get_correlation_id() == "abc-123"

    clear_correlation_id()
    assert get_correlation_id() == ""


def test_generates_id_when_none_given():
    value = set_correlation_id()
    assert len(value) == 36
    clear_correlation_id()


def test_filter_attaches_correlation_id():
    set_correlation_id("req-1")
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

    assert CorrelationIdFilter().filter(record)
    assert record.correlation_id == "req-1"
    clear_correlation_id()


def test_safe_log_value_summarizes_bytes():
    assert safe_log_value(b"\x00" * 10) == "<10 bytes>"
    assert safe_log_value("x" * 600).endswith("(truncated, 600 total)")
