"""
Tests for the Loguru logging setup.
"""
import logging

import pytest
from loguru import logger

from yt_transcript.core.logging import setup_logging


@pytest.fixture
def captured():
    setup_logging(level="DEBUG")
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(sink_id)


def test_stdlib_records_are_forwarded(captured):
    logging.getLogger("youtube_transcript_api").warning("blocked by upstream")

    assert any(r["message"] == "blocked by upstream" for r in captured)


def test_video_id_defaults_and_context(captured):
    logger.info("outside")
    with logger.contextualize(video_id="abc123"):
        logger.info("inside")

    by_message = {r["message"]: r for r in captured}
    assert by_message["outside"]["extra"]["video_id"] == "-"
    assert by_message["inside"]["extra"]["video_id"] == "abc123"


def test_file_sink(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level="INFO", log_file=str(log_file))
    logger.info("written to file")
    logger.complete()
    logger.remove()

    assert "written to file" in log_file.read_text()
