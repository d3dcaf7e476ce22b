"""Unit tests for the shared structlog / stdlib logging pipeline."""

import io
import json
import logging

import pytest
from structlog.contextvars import bound_contextvars

from app.utils.logging import HANDLER_NAME, get_logger, setup_logging


def _our_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


@pytest.fixture()
def json_output():
    """Configure JSON logging and capture the rendered lines."""
    setup_logging("INFO", "json")
    stream = io.StringIO()
    _our_handlers()[0].setStream(stream)
    yield lambda: [json.loads(line) for line in stream.getvalue().splitlines()]
    setup_logging("INFO", "console")


class TestSetupLogging:
    def test_stdlib_records_carry_request_context(self, json_output):
        with bound_contextvars(request_id="req-42"):
            logging.getLogger("app.main").info("Environment: %s", "staging")

        [record] = json_output()
        assert record["event"] == "Environment: staging"
        assert record["request_id"] == "req-42"
        assert record["logger"] == "app.main"
        assert record["level"] == "info"
        assert record["service"] == "building-dashboard-api"

    def test_structlog_events_keep_their_fields(self, json_output):
        get_logger("app.services.test").info("building_config_saved", created=True)

        [record] = json_output()
        assert record["event"] == "building_config_saved"
        assert record["created"] is True
        assert record["logger"] == "app.services.test"
        assert "timestamp" in record

    def test_below_level_is_dropped(self, json_output):
        logging.getLogger("app.dependencies").debug("Pool checkout")

        assert json_output() == []

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("INFO", "console")
        setup_logging("DEBUG", "console")

        assert len(_our_handlers()) == 1
        assert logging.getLogger().level == logging.DEBUG
        setup_logging("INFO", "console")

    def test_third_party_loggers_are_quieted(self):
        setup_logging("DEBUG", "console")

        assert logging.getLogger("asyncpg").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        setup_logging("INFO", "console")
