"""
Unit tests for the shared logging helpers.
"""

import json
import logging

import pytest

from app.core.shared.logger import (
    ColoredFormatter,
    JSONFormatter,
    RequestContextFilter,
    configure_logging,
    get_service_logger,
)
from app.core.tenancy import TenantContext, set_tenant_context


def _record(message: str = "hello", extra_data: dict | None = None) -> logging.LogRecord:
    record = logging.LogRecord("service.test", logging.INFO, __file__, 10, message, None, None)
    if extra_data is not None:
        record.extra_data = extra_data
    return record


@pytest.mark.unit
def test_json_formatter_includes_context():
    output = JSONFormatter().format(_record(extra_data={"tenant_id": "store-42"}))

    payload = json.loads(output)
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["extra"] == {"tenant_id": "store-42"}


@pytest.mark.unit
def test_colored_formatter_appends_context_without_mutating_record():
    record = _record(extra_data={"applied": 2})

    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert "applied=2" in output
    assert record.levelname == "INFO"


@pytest.mark.unit
def test_service_logger_binds_context(caplog):
    logger = get_service_logger("discount_evaluation").with_context(tenant_id="store-42")

    with caplog.at_level(logging.INFO, logger="service.discount_evaluation"):
        logger.info("Discount rules evaluated", applied=1)

    record = caplog.records[-1]
    assert record.extra_data == {
        "component": "service",
        "service": "discount_evaluation",
        "tenant_id": "store-42",
        "applied": 1,
    }


@pytest.mark.unit
def test_configure_logging_json_handler():
    root = logging.getLogger()
    previous_handlers, previous_level = list(root.handlers), root.level
    try:
        configure_logging(level="DEBUG", format_type="json")

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, JSONFormatter)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


@pytest.mark.unit
def test_request_context_filter_stamps_tenant():
    record = _record()
    set_tenant_context(TenantContext(tenant_id="store-42", correlation_id="abc123"))
    try:
        assert RequestContextFilter().filter(record) is True
    finally:
        set_tenant_context(None)

    payload = json.loads(JSONFormatter().format(record))
    assert payload["tenant_id"] == "store-42"
    assert payload["correlation_id"] == "abc123"


@pytest.mark.unit
def test_request_context_filter_without_request():
    record = _record()

    RequestContextFilter().filter(record)

    assert record.tenant_id is None
    assert record.correlation_id == "-"
