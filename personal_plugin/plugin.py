"""Host-facing entry point of the personal information plugin."""

from __future__ import annotations

import logging

from .config import Settings, get_settings
from .handlers.dispatcher import Dispatcher, strip_trigger_words
from .handlers.personal import ERR_INVALID_INPUT, build_dispatcher
from .metrics import Timer, utterances_total
from .redaction import Redactor
from .state.store import PersonalStore

logger = logging.getLogger(__name__)

NAME = "Personal Information"

UTTERANCES = [
    "what's my name",
    "who am i",
    "what are my preferences",
    "set my name",
    "update my preferences",
    "remember my name",
    "set preference",
    "get preference",
    "delete preference",
]


class PersonalPlugin:
    """Routes utterances to the personal handlers over an owned store."""

    def __init__(
        self,
        store: PersonalStore,
        settings: Settings | None = None,
        redactor: Redactor | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or get_settings()
        self.redactor = redactor or Redactor(enabled=self.settings.redact_pii)
        self.dispatcher: Dispatcher = build_dispatcher(store)
        self.dispatch_timer = Timer()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> PersonalPlugin:
        """Build a plugin over the configured data file and load it."""

        settings = settings or get_settings()
        store = PersonalStore(settings.data_file)
        store.load()
        return cls(store, settings=settings)

    def normalize(self, text: str) -> str:
        return strip_trigger_words(text, self.settings.trigger_words)

    def action(
        self,
        transcribed_text: str,
        bot_serial: str = "",
        guid: str = "",
        target: str = "",
    ) -> tuple[str, str]:
        """Answer ``transcribed_text``; returns ``(intent_tag, response)`` and never raises.

        The caller identifiers are only logged.
        """

        utterances_total.inc()
        intent = self.settings.intent_tag
        # One utterance at a time against the shared record.
        with self.store.lock, self.dispatch_timer.time():
            previous_name = self.store.name
            text = self.normalize(transcribed_text)
            try:
                response = self.dispatcher.dispatch(text)
            except Exception:
                logger.exception(
                    "handler failed", extra={"event_type": "handler_failed", "guid": guid}
                )
                response = ERR_INVALID_INPUT
            # Logged after dispatch so a name set by this utterance is redacted too.
            logger.debug(
                "action: %s",
                self.redactor.redact(text, previous_name, self.store.name),
                extra={
                    "event_type": "action",
                    "bot_serial": bot_serial,
                    "guid": guid,
                    "target": target,
                },
            )
        logger.info(
            "action handled",
            extra={
                "event_type": "action_done",
                "intent": intent,
                "guid": guid,
                "latency_ms": self.dispatch_timer.last_ms,
            },
        )
        return intent, response or ERR_INVALID_INPUT


_default_plugin: PersonalPlugin | None = None


def get_plugin() -> PersonalPlugin:
    """Return the process-wide plugin, creating and loading it on first use."""

    global _default_plugin
    if _default_plugin is None:
        _default_plugin = PersonalPlugin.from_settings()
    return _default_plugin


def action(transcribed_text: str, bot_serial: str, guid: str, target: str) -> tuple[str, str]:
    return get_plugin().action(transcribed_text, bot_serial, guid, target)
