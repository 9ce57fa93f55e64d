import io
import json
import logging

from app.core.logging import get_logger, setup_logging


def test_setup_logging_sets_root_level():
    setup_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING

    setup_logging("not-a-level")
    assert logging.getLogger().level == logging.INFO


def test_json_logs_carry_event_and_context():
    setup_logging("INFO", json_logs=True)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    root = logging.getLogger()
    root.addHandler(handler)
    try:
        get_logger("tests.logging").info("alien saved", alien_id=1)
        get_logger("tests.logging").debug("filtered out")
    finally:
        root.removeHandler(handler)
        setup_logging("INFO")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "alien saved"
    assert record["alien_id"] == 1
    assert record["level"] == "info"
    assert record["logger"] == "tests.logging"


def test_reconfiguring_reaches_loggers_already_in_use():
    logger = get_logger("tests.reconfigure")
    setup_logging("INFO")
    logger.info("console output")

    setup_logging("INFO", json_logs=True)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    root = logging.getLogger()
    root.addHandler(handler)
    try:
        logger.info("json output", alien_id=2)
    finally:
        root.removeHandler(handler)
        setup_logging("INFO")

    record = json.loads(stream.getvalue().splitlines()[-1])
    assert record["event"] == "json output"
    assert record["alien_id"] == 2
