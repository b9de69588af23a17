import logging

from ddlforge.utils.logging import (
    CorrelationIdFilter,
    correlation_scope,
    current_correlation_id,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("0001_initial")
    assert token == "0001_initial"
    assert get_correlation_id() == "0001_initial"


def test_generated_correlation_id():
    token = set_correlation_id()
    assert token
    assert get_correlation_id() == token


def test_get_logger_is_namespaced_and_configured():
    logger = get_logger("tests.logging")
    assert logger.name == "ddlforge.tests.logging"
    root = logging.getLogger("ddlforge")
    assert len(root.handlers) == 1
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
    get_logger("tests.again")
    assert len(root.handlers) == 1


def test_filter_sets_correlation_id_on_records():
    set_correlation_id("filter-test")
    record = logging.LogRecord("ddlforge.x", logging.INFO, __file__, 1, "msg", None, None)
    assert CorrelationIdFilter().filter(record)
    assert record.correlation_id == "filter-test"


def test_correlation_scope_restores_previous_id():
    set_correlation_id("outer")
    with correlation_scope("0002_add_labels") as value:
        assert value == "0002_add_labels"
        assert current_correlation_id() == "0002_add_labels"
    assert current_correlation_id() == "outer"


def test_correlation_scope_can_clear_the_id():
    set_correlation_id("outer")
    with correlation_scope(None):
        assert current_correlation_id() is None
    assert current_correlation_id() == "outer"
