import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from personal_plugin.redaction import Redactor


def test_redacts_patterns_and_terms():
    redactor = Redactor(enabled=True)
    text = redactor.redact("mail a@example.com or 123-456-7890, I am alice", "Alice")
    assert "a@example.com" not in text
    assert "123-456-7890" not in text
    assert "alice" not in text
    assert text.count("[REDACTED]") == 3


def test_disabled_redactor_passes_through():
    redactor = Redactor(enabled=False)
    assert redactor.redact("a@example.com Alice", "Alice") == "a@example.com Alice"


def test_blank_terms_are_ignored():
    assert Redactor().redact("hello", "", "  ") == "hello"


def test_longer_terms_redacted_before_their_prefixes():
    assert Redactor().redact("set my name Alice", "Al", "Alice") == "set my name [REDACTED]"
