"""
Tests for structured JSON logging.
"""

import logging
import sys

import numpy as np
import orjson
import pytest

from pixelkit.core.logging import (
    StructuredFormatter,
    get_logger,
    get_operation_id,
    set_operation_id,
    setup_logging,
)
from pixelkit.processing.image import make_image
from pixelkit.processing.resample import bilinear_resize


def make_record(msg="hello", **extra):
    record = logging.LogRecord("pixelkit.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestOperationId:
    """Correlation ID context variable."""

    def test_generated_when_missing(self):
        oid = set_operation_id()
        assert len(oid) == 36
        assert get_operation_id() == oid

    def test_explicit(self):
        set_operation_id("batch-7")
        assert get_operation_id() == "batch-7"


class TestStructuredFormatter:
    """JSON rendering of log records."""

    def test_core_fields(self):
        set_operation_id("op-1")
        payload = orjson.loads(StructuredFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "pixelkit.test"
        assert payload["message"] == "hello"
        assert payload["operation_id"] == "op-1"
        assert "timestamp" in payload

    def test_extra_fields(self):
        record = make_record(source_size=(4, 3), channels=np.int64(3))
        payload = orjson.loads(StructuredFormatter().format(record))

        assert payload["source_size"] == [4, 3]
        assert payload["channels"] == 3

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        payload = orjson.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in payload["exception"]


class TestSetupLogging:
    """Root logger configuration."""

    def test_single_handler(self):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        root = logging.getLogger()

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert root.level == logging.DEBUG

    def test_leaves_other_loggers_alone(self):
        pil_logger = logging.getLogger("PIL")
        before = pil_logger.level
        setup_logging("INFO")

        assert pil_logger.level == before

    def test_resize_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pixelkit.processing.resample"):
            bilinear_resize(make_image(2, 2, 1), 4, 4)

        record = next(r for r in caplog.records if r.getMessage() == "Resized image")
        assert record.target_size == (4, 4)
        assert record.sampler == "bilinear_interpolate"

    def test_get_logger(self):
        assert get_logger("pixelkit.x").name == "pixelkit.x"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
