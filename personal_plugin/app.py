from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Callable, Iterable

from .config import Settings, get_settings
from .logging import configure_logging

EXIT_WORDS = {"quit", "exit"}


def run(
    settings: Settings | None = None,
    lines: Iterable[str] | None = None,
    echo: Callable[[str], object] = print,
) -> None:
    """Run an interactive session, answering one utterance per input line."""

    configure_logging()
    settings = settings or get_settings()

    # Lazy import so configuration errors surface before the store is touched.
    from .plugin import PersonalPlugin

    log = logging.getLogger(__name__)
    plugin = PersonalPlugin.from_settings(settings)
    guid = uuid.uuid4().hex

    log.info(
        "personal plugin starting",
        extra={"event_type": "session_start", "guid": guid, "target": "console"},
    )

    for line in lines if lines is not None else sys.stdin:
        text = line.strip()
        if not text:
            continue
        if text.lower() in EXIT_WORDS:
            break
        _, response = plugin.action(text, bot_serial="console", guid=guid, target="console")
        echo(response)

    log.info("personal plugin stopped", extra={"event_type": "session_end", "guid": guid})


def main() -> None:
    run()
