import json
import logging

from navietta.config import ObservabilityConfig
from navietta.monitoring import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields():
    logger = logging.getLogger("navietta.test")
    record = logger.makeRecord(
        "navietta.test", logging.INFO, __file__, 1, "Journey checked", None, None,
        extra={"distance_km": 343.5, "plausible": True},
    )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["msg"] == "Journey checked"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "navietta.test"
    assert payload["distance_km"] == 343.5
    assert payload["plausible"] is True


def test_configure_logging_replaces_its_own_handler():
    root = logging.getLogger()
    before = len(root.handlers)
    level = root.level
    try:
        configure_logging(ObservabilityConfig(level="debug", structured=True))
        configure_logging(ObservabilityConfig(level="debug", structured=True))

        ours = [h for h in root.handlers if getattr(h, "_navietta", False)]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        for handler in [h for h in root.handlers if getattr(h, "_navietta", False)]:
            root.removeHandler(handler)
        root.setLevel(level)
    assert len(root.handlers) == before
