import logging

import pytest

from docdraft.logging.logger import Log


class TestLog:
    def test_renders_context_after_message(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="docdraft"):
            Log.info("Processing large document in chunks", filename="a.txt", chunk_count=4)
        assert caplog.messages == [
            "Processing large document in chunks | filename='a.txt' chunk_count=4"
        ]

    def test_plain_message_without_context(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="docdraft"):
            Log.warning("careful")
        assert caplog.messages == ["careful"]

    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("docdraft").level == logging.DEBUG
        Log.configure("INFO")
