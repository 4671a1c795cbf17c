import logging
import uuid

import pytest


class ListHandler(logging.Handler):
    """Collects emitted records in memory."""

    def __init__(self):
        super().__init__(logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def captured() -> ListHandler:
    return ListHandler()


@pytest.fixture
def wrapped_logger(captured: ListHandler):
    logger = logging.getLogger(f"test.extlog.{uuid.uuid4().hex}")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(captured)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
