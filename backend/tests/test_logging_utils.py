import logging

import pytest

from utils.logging_utils import (
    StructuredLogger,
    clear_logging_context,
    get_logging_context,
    log_operation,
    new_request_id,
    set_logging_context,
)


@pytest.fixture(autouse=True)
def _clean_context():
    clear_logging_context()
    yield
    clear_logging_context()


def test_context_is_merged_into_records(caplog):
    set_logging_context(request_id="abc")
    set_logging_context(method="GET")
    assert get_logging_context() == {"request_id": "abc", "method": "GET"}

    with caplog.at_level(logging.INFO):
        StructuredLogger("citronix.test").info("hello", extra={"farm_id": 4})

    record = caplog.records[-1]
    assert record.request_id == "abc"
    assert record.method == "GET"
    assert record.farm_id == 4


def test_clear_logging_context():
    set_logging_context(request_id="abc")
    clear_logging_context()
    assert get_logging_context() == {}


def test_new_request_id_is_unique():
    assert new_request_id() != new_request_id()
    assert len(new_request_id()) == 12


class _Service:
    @log_operation("update_farm")
    def update(self, farm_id, payload):
        return payload

    @log_operation("delete_farm")
    def delete(self, farm_id):
        raise LookupError(f"no farm {farm_id}")


def test_log_operation_records_completion_with_farm_id(caplog):
    with caplog.at_level(logging.INFO):
        assert _Service().update(5, "payload") == "payload"

    record = caplog.records[-1]
    assert record.getMessage() == "Completed update_farm"
    assert record.operation == "update_farm"
    assert record.farm_id == 5


def test_log_operation_records_failure_and_reraises(caplog):
    with caplog.at_level(logging.INFO):
        with pytest.raises(LookupError):
            _Service().delete(farm_id=9)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.error_type == "LookupError"
    assert record.farm_id == 9
