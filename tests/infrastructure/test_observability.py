"""Structured Logging — JSONFormatter output shape."""

import json
import logging

from marketplace.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "marketplace.services", logging.INFO, __file__, 1,
        "Replaying cached %s", ("SellerResult",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "marketplace.services"
    assert out["message"] == "Replaying cached SellerResult"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(idempotency_key="abc", entity_kind="Seller", unrelated="x"),
    ))
    assert out["idempotency_key"] == "abc"
    assert out["entity_kind"] == "Seller"
    assert "unrelated" not in out
