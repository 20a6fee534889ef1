import io
import json

from storefront_media.core.config import MediaConfig
from storefront_media.logging import log_context, logger, new_request_id, setup_logging
from storefront_media.media.cdn import build_cdn_url


def test_log_context_injects_ids_into_json_records():
    sink = io.StringIO()
    setup_logging(level="DEBUG", fmt="json", sink=sink)

    with log_context(request_id="req-1", entity_id=99):
        logger.debug("inside")
    logger.debug("outside")

    records = [json.loads(line)["record"] for line in sink.getvalue().splitlines()]
    assert records[0]["extra"]["request_id"] == "req-1"
    assert records[0]["extra"]["entity_id"] == 99
    assert records[1]["extra"]["request_id"] is None
    assert records[1]["extra"]["entity_id"] is None


def test_text_format_shows_entity_id():
    sink = io.StringIO()
    setup_logging(level="DEBUG", fmt="text", sink=sink)

    with log_context(entity_id="{odd}"):
        logger.debug("hello")

    assert "ent={odd}" in sink.getvalue()
    assert "hello" in sink.getvalue()


def test_missing_cloud_is_logged_at_debug_only():
    sink = io.StringIO()
    setup_logging(level="DEBUG", fmt="text", sink=sink)

    assert build_cdn_url({"public_id": "p/1"}, config=MediaConfig()) is None
    output = sink.getvalue()
    assert "DEBUG" in output
    assert "public_id=p/1" in output


def test_new_request_id_is_unique():
    assert new_request_id() != new_request_id()
    assert len(new_request_id()) == 32
