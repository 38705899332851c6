"""Intent handlers for the personal information plugin.

Each handler takes the routed :class:`~.dispatcher.Match` and the owning
:class:`~..state.store.PersonalStore` and returns the response text. Input
problems become fixed user-facing messages and leave the store untouched.
"""

from __future__ import annotations

import logging
import re

from ..errors import ErrorCategory
from ..metrics import save_failures_total, unmatched_total
from ..state.store import PersonalStore
from .dispatcher import Dispatcher, Match

logger = logging.getLogger(__name__)

ERR_NO_NAME_SET = (
    "I don't know your name yet. You can tell me your name by saying "
    "'set my name' followed by your name."
)
ERR_NO_PREFERENCES = "You haven't set any preferences yet."
ERR_INVALID_INPUT = "I didn't catch that. Could you please repeat it?"
ERR_SAVE_NAME = "I had trouble saving your name. Please try again."
ERR_SAVE_PREFERENCE = "I had trouble saving your preference. Please try again."
USAGE_SET_PREFERENCE = (
    "Please specify a preference in the format 'set preference [key] to [value]'"
)
USAGE_GET_PREFERENCE = "Please tell me which preference, for example 'get preference volume'"
USAGE_DELETE_PREFERENCE = (
    "Please tell me which preference to remove, for example 'delete preference volume'"
)
FALLBACK = (
    "I'm not sure how to help with that. You can ask me about your name or preferences."
)

SET_PREFERENCE = "set preference"
_SET_PREFERENCE_RE = re.compile(re.escape(SET_PREFERENCE), re.IGNORECASE)
_TO_RE = re.compile(" to ", re.IGNORECASE)


def _input_error(message: str, match: Match) -> str:
    logger.info(
        "rejected utterance shape",
        extra={"event_type": "input_rejected", "category": ErrorCategory.INPUT, "phrase": match.phrase},
    )
    return message


def _preference_key(raw: str) -> str:
    return raw.strip().lower()


def handle_name_query(match: Match, store: PersonalStore) -> str:
    name = store.name
    if not name:
        return ERR_NO_NAME_SET
    return f"Your name is {name}"


def handle_name_update(match: Match, store: PersonalStore) -> str:
    name = match.remainder
    if not name:
        return _input_error(ERR_INVALID_INPUT, match)
    if not store.set_name(name):
        save_failures_total.inc()
        return ERR_SAVE_NAME
    return f"I'll remember that your name is {name}"


def handle_preferences_query(match: Match, store: PersonalStore) -> str:
    preferences = store.preferences
    if not preferences:
        return ERR_NO_PREFERENCES
    listed = ", ".join(f"{key} is set to {value}" for key, value in preferences.items())
    return f"Here are your preferences: {listed}"


def handle_preferences_update_help(match: Match, store: PersonalStore) -> str:
    return USAGE_SET_PREFERENCE


def handle_preference_update(match: Match, store: PersonalStore) -> str:
    """Parse ``set preference <key> to <value>`` and upsert the entry."""

    parts = _SET_PREFERENCE_RE.split(match.text)
    if len(parts) != 2:
        return _input_error(USAGE_SET_PREFERENCE, match)

    pref_parts = _TO_RE.split(parts[1].strip())
    if len(pref_parts) != 2:
        return _input_error(USAGE_SET_PREFERENCE, match)

    key = _preference_key(pref_parts[0])
    value = pref_parts[1].strip()
    if not key or not value:
        return _input_error(ERR_INVALID_INPUT, match)

    if not store.set_preference(key, value):
        save_failures_total.inc()
        return ERR_SAVE_PREFERENCE
    return f"I've set {key} to {value}"


def handle_preference_query(match: Match, store: PersonalStore) -> str:
    key = _preference_key(match.remainder)
    if not key:
        return _input_error(USAGE_GET_PREFERENCE, match)
    value = store.get_preference(key)
    if value is None:
        return f"You haven't set a preference for {key}."
    return f"{key} is set to {value}"


def handle_preference_delete(match: Match, store: PersonalStore) -> str:
    key = _preference_key(match.remainder)
    if not key:
        return _input_error(USAGE_DELETE_PREFERENCE, match)
    removed = store.delete_preference(key)
    if removed is None:
        return f"You haven't set a preference for {key}."
    if not removed:
        save_failures_total.inc()
        return ERR_SAVE_PREFERENCE
    return f"I've removed your {key} preference"


def handle_unmatched(match: Match) -> str:
    unmatched_total.inc()
    return FALLBACK


def build_dispatcher(store: PersonalStore) -> Dispatcher:
    """Return a dispatcher with the personal routes registered in priority order."""

    dispatcher = Dispatcher(fallback=handle_unmatched)
    dispatcher.on(["what's my name", "who am i"], lambda m: handle_name_query(m, store))
    dispatcher.on(
        ["set my name", "remember my name"], lambda m: handle_name_update(m, store)
    )
    dispatcher.on("what are my preferences", lambda m: handle_preferences_query(m, store))
    dispatcher.on("update my preferences", lambda m: handle_preferences_update_help(m, store))
    dispatcher.on(SET_PREFERENCE, lambda m: handle_preference_update(m, store))
    dispatcher.on("get preference", lambda m: handle_preference_query(m, store))
    dispatcher.on("delete preference", lambda m: handle_preference_delete(m, store))
    return dispatcher
