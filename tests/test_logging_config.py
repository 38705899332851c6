import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from personal_plugin.config import Settings, default_data_file
from personal_plugin.logging import configure_logging
from personal_plugin.metrics import Counter, Timer


def test_json_logging_structure(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_logging()
    logging.getLogger(__name__).info(
        "sample",
        extra={
            "event_type": "action",
            "intent": "intent_imperative_praise",
            "bot_serial": "0dd1",
            "guid": "g1",
            "target": "t1",
            "category": "storage",
        },
    )
    captured = capsys.readouterr().err.strip().splitlines()[-1]
    data = json.loads(captured)
    assert data["event_type"] == "action"
    for key in ["intent", "bot_serial", "guid", "target", "category", "latency_ms"]:
        assert key in data


def test_settings_defaults_and_env(monkeypatch):
    monkeypatch.delenv("PERSONAL_INTENT_TAG", raising=False)
    settings = Settings()
    assert settings.intent_tag == "intent_imperative_praise"
    assert settings.data_file == default_data_file()
    assert settings.data_file.parent.name == "data"
    assert "hey vector" in settings.trigger_words

    monkeypatch.setenv("PERSONAL_INTENT_TAG", "intent_custom")
    monkeypatch.setenv("PERSONAL_TRIGGER_WORDS", '["hey robot"]')
    settings = Settings()
    assert settings.intent_tag == "intent_custom"
    assert settings.trigger_words == ["hey robot"]


def test_counter_and_timer_update():
    counter = Counter()
    counter.inc()
    counter.inc(2)
    assert counter.value == 3
    timer = Timer()
    with timer.time():
        pass
    assert timer.last_ms is not None and timer.last_ms >= 0
    assert timer.stop() is None
