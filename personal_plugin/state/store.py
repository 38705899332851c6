from __future__ import annotations

import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from ..errors import ErrorCategory, StoreError
from .record import PersonalRecord

logger = logging.getLogger(__name__)


class PersonalStore:
    """JSON-file backed owner of a single :class:`PersonalRecord`.

    Storage failures never propagate: ``load`` keeps the in-memory record and
    ``save`` reports ``False``, both after logging the cause. Every public
    operation holds ``lock`` so callers on different threads are serialized;
    callers that need several operations to be atomic may hold it themselves.
    """

    def __init__(self, path: Path | str, record: PersonalRecord | None = None) -> None:
        self.path = Path(path)
        self.record = record if record is not None else PersonalRecord()
        self.lock = threading.RLock()

    # Low-level I/O ---------------------------------------------------------

    def _read(self) -> PersonalRecord:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"failed to read personal data file: {exc}") from exc
        try:
            return PersonalRecord.model_validate_json(text)
        except ValidationError as exc:
            raise StoreError(f"failed to parse personal data: {exc}") from exc

    def _write(self) -> None:
        payload = self.record.to_json()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"failed to write personal data file: {exc}") from exc

    # Persistence -----------------------------------------------------------

    def load(self) -> bool:
        """Load the record from ``path``, creating the file if it is absent."""

        with self.lock:
            if not self.path.exists():
                logger.debug(
                    "personal data file missing, creating it",
                    extra={"event_type": "store_create"},
                )
                return self.save()
            try:
                self.record = self._read()
            except StoreError as exc:
                logger.error(
                    "%s",
                    exc,
                    extra={"event_type": "store_load_failed", "category": ErrorCategory.STORAGE},
                )
                return False
            logger.debug(
                "loaded personal data",
                extra={"event_type": "store_loaded", "preferences": len(self.record.preferences)},
            )
            return True

    def save(self) -> bool:
        with self.lock:
            try:
                self._write()
            except StoreError as exc:
                logger.error(
                    "%s",
                    exc,
                    extra={"event_type": "store_save_failed", "category": ErrorCategory.STORAGE},
                )
                return False
            logger.debug("saved personal data", extra={"event_type": "store_saved"})
            return True

    # Accessors -------------------------------------------------------------

    @property
    def name(self) -> str:
        with self.lock:
            return self.record.name

    @property
    def preferences(self) -> dict[str, str]:
        with self.lock:
            return dict(self.record.preferences)

    def get_preference(self, key: str) -> str | None:
        with self.lock:
            return self.record.preferences.get(key)

    def snapshot(self) -> PersonalRecord:
        with self.lock:
            return self.record.model_copy(deep=True)

    # Mutators (each persists) ---------------------------------------------

    def set_name(self, name: str) -> bool:
        with self.lock:
            self.record.name = name.strip()
            return self.save()

    def set_preference(self, key: str, value: str) -> bool:
        with self.lock:
            self.record.preferences[key] = value
            return self.save()

    def delete_preference(self, key: str) -> bool | None:
        """Remove ``key``; ``None`` when it was never set (nothing is written)."""

        with self.lock:
            if key not in self.record.preferences:
                return None
            del self.record.preferences[key]
            return self.save()
