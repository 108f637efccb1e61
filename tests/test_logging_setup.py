import json
import logging

from touch_joystick.logging_setup import setup_logging


def test_setup_logging_merges_file_and_level(tmp_path):
    cfg = tmp_path / "log_config.json"
    cfg.write_text(json.dumps({"root": {"handlers": ["console"], "level": "WARNING"}}))

    setup_logging.__wrapped__(str(cfg), console_level="ERROR")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(h.level == logging.ERROR for h in root.handlers)


def test_setup_logging_without_file():
    setup_logging.__wrapped__(None)
    assert logging.getLogger().level == logging.INFO
