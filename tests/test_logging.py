"""
Tests for the loguru setup.
"""
import logging

from loguru import logger

from app.core.config import settings
from app.core.logging import setup_logging


def test_file_sink_records_request_id(tmp_path, monkeypatch):
    log_file = tmp_path / "summarizer.log"
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))

    setup_logging()
    with logger.contextualize(request_id="req-1"):
        logger.info("inside request")
    logger.info("outside request")
    logging.getLogger("httpx").warning("from httpx")
    logger.complete()
    logger.remove()

    text = log_file.read_text()
    assert "[req-1]" in text
    assert "inside request" in text
    assert "[-]" in text
    assert "outside request" in text
    assert "from httpx" in text
