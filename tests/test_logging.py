import logging

from thinknote.core.logging import ContextInjectionFilter, SmartContextFormatter, get_log_context, log_context


def test_log_context_is_scoped():
    with log_context(request_id="abc"):
        with log_context(path="/summarize"):
            assert get_log_context() == {"request_id": "abc", "path": "/summarize"}
        assert get_log_context() == {"request_id": "abc"}
    assert get_log_context() == {}


def test_formatter_appends_extra_fields():
    formatter = SmartContextFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("thinknote.test", logging.INFO, __file__, 1, "trimmed", None, None)
    record.hard_cap = 35

    assert formatter.format(record) == "INFO trimmed [hard_cap=35]"


def test_context_filter_injects_fields():
    record = logging.LogRecord("thinknote.test", logging.INFO, __file__, 1, "hello", None, None)

    with log_context(request_id="req-1", path="/summarize"):
        ContextInjectionFilter().filter(record)

    assert record.request_id == "req-1"
    assert record.path == "/summarize"
