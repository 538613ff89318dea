from __future__ import annotations

import logging

from config import configure_logging
from config.logging_config import LOG_FORMAT


def test_configure_logging_adds_stream_handler() -> None:
    configure_logging("debug")
    root = logging.getLogger()

    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)
    assert root.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_writes_file(tmp_path) -> None:
    log_path = tmp_path / "logs" / "aura.log"
    configure_logging(logging.INFO, log_path=log_path)

    logging.getLogger("aura.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "aura.test | hello" in log_path.read_text(encoding="utf-8")
    configure_logging()
