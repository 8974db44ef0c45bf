"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import structlog

from tsgen.log import bind_definition, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("tsgen").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("tsgen").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("tsgen.test").warning("json test", property="items")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["property"] == "items"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tsgen.test"
        assert "timestamp" in parsed

    def test_info_hidden_without_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        structlog.get_logger("tsgen.generator").info("Wrote declarations")
        assert stream.getvalue() == ""


class TestBindDefinition:
    def test_binds_definition_inside_block_only(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        log = structlog.get_logger("tsgen.test")
        with bind_definition("SearchRequest"):
            log.warning("inside")
        log.warning("outside")
        inside, outside = (json.loads(line) for line in stream.getvalue().splitlines())
        assert inside["definition"] == "SearchRequest"
        assert "definition" not in outside
