"""Unit tests for the contextual logger."""

import logging

from poolgauge.core.logging import logger


class TestContextualLogger:
    def test_plain_message_without_context(self, caplog):
        with caplog.at_level(logging.INFO, logger="poolgauge"):
            logger.info("hello")

        assert caplog.records[-1].getMessage() == "hello"

    def test_context_prefix(self, caplog):
        log = logger.with_context(pool="primary").with_context(metric="pool_min_total")

        with caplog.at_level(logging.INFO, logger="poolgauge"):
            log.info("sampled")

        assert caplog.records[-1].getMessage() == "[pool=primary metric=pool_min_total] sampled"

    def test_with_context_does_not_mutate_parent(self):
        child = logger.with_context(pool="a")

        assert child.extra == {"pool": "a"}
        assert logger.extra == {}
