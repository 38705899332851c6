"""Simple PII redaction utilities."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Basic patterns for emails and US phone numbers
EMAIL_RE = re.compile(r"[\w.\-]+@[\w.\-]+")
PHONE_RE = re.compile(r"\b(?:\d{3}[ -]?){2}\d{4}\b")


@dataclass
class Redactor:
    """Redact configured PII patterns, and any known personal terms, from text."""

    enabled: bool = True
    patterns: Iterable[re.Pattern[str]] = (EMAIL_RE, PHONE_RE)
    replacement: str = "[REDACTED]"

    def redact(self, text: str, *terms: str) -> str:
        """Return ``text`` with PII patterns and each non-empty ``terms`` entry removed.

        Terms are matched literally and case-insensitively, so a stored name
        never reaches the logs verbatim.
        """
        if not self.enabled:
            return text
        redacted = text
        for pattern in self.patterns:
            redacted = pattern.sub(self.replacement, redacted)
        # Longest first, so a shorter term cannot split a longer one.
        cleaned = {(term or "").strip() for term in terms}
        for term in sorted(cleaned, key=len, reverse=True):
            if term:
                redacted = re.sub(re.escape(term), self.replacement, redacted, flags=re.IGNORECASE)
        return redacted
