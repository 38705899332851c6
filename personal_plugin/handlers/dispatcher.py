from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

# Transcripts often carry typographic apostrophes ("what’s my name").
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})


@dataclass(frozen=True)
class Match:
    """The normalized utterance and the phrase that selected a route."""

    text: str
    phrase: str = ""
    start: int = 0
    end: int = 0

    @property
    def remainder(self) -> str:
        """Text following the matched phrase, trimmed."""
        return self.text[self.end :].strip()


Handler = Callable[[Match], str]


@dataclass
class Route:
    phrases: tuple[str, ...]
    handler: Handler

    def __post_init__(self) -> None:
        self._patterns = [re.compile(re.escape(p), re.IGNORECASE) for p in self.phrases]

    def match(self, text: str) -> Match | None:
        for phrase, pattern in zip(self.phrases, self._patterns):
            found = pattern.search(text)
            if found:
                return Match(text=text, phrase=phrase, start=found.start(), end=found.end())
        return None


def strip_trigger_words(text: str, trigger_words: Iterable[str]) -> str:
    """Remove the first occurrence of each trigger phrase, ignoring case, and trim."""

    result = (text or "").translate(_APOSTROPHES)
    for word in trigger_words:
        if word:
            result = re.sub(re.escape(word), "", result, count=1, flags=re.IGNORECASE)
    return result.strip()


class Dispatcher:
    """Ordered phrase router.

    Routes are tried in registration order and the first route whose phrase
    occurs in the text wins. There is no scoring. The :meth:`on` method can
    be used either as a decorator::

        dispatcher = Dispatcher()


        @dispatcher.on("who am i")
        def handler(match): ...

    or called directly::

        dispatcher.on(["set my name", "remember my name"], handler)

    """

    def __init__(self, fallback: Handler | None = None) -> None:
        self._routes: list[Route] = []
        self.fallback = fallback

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def on(
        self, phrases: str | Sequence[str], handler: Handler | None = None
    ) -> Handler | Callable[[Handler], Handler]:
        """Register ``handler`` for ``phrases``.

        If ``handler`` is ``None`` this functions as a decorator factory.
        """

        key = (phrases,) if isinstance(phrases, str) else tuple(phrases)
        if not key:
            raise ValueError("a route needs at least one phrase")

        if handler is not None:
            self._routes.append(Route(key, handler))
            return handler

        def decorator(func: Handler) -> Handler:
            self._routes.append(Route(key, func))
            return func

        return decorator

    register = on

    def match(self, text: str) -> tuple[Route, Match] | None:
        for route in self._routes:
            found = route.match(text)
            if found is not None:
                return route, found
        return None

    def dispatch(self, text: str) -> str | None:
        """Run the first matching handler, or the fallback when nothing matches."""

        hit = self.match(text)
        if hit is not None:
            route, found = hit
            return route.handler(found)
        if self.fallback is not None:
            return self.fallback(Match(text=text))
        return None
