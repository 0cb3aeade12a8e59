import json
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from .config import settings, logger
from .exceptions import HistoryError
from ..models.model_history import HistoryEntry


class HistoryStore:
    """
    Evaluation history kept in a JSON key-value file.

    The file holds a single JSON object; the history list lives under a
    versioned key so that a format change can start a fresh list without
    touching older data.
    """

    def __init__(self, path: str, key: str, limit: int):
        self.path = Path(path)
        self.key = key
        self.limit = limit
        self._lock = threading.Lock()

    def load(self) -> List[HistoryEntry]:
        """Return stored entries, newest first. Unreadable data yields an empty list."""
        with self._lock:
            return self._load_entries(self._read())

    def add(self, expr: str, result: float) -> HistoryEntry:
        """
        Record an evaluation at the head of the history.

        Args:
            expr: The expression as evaluated
            result: Its numeric result

        Returns:
            The stored entry

        Raises:
            HistoryError: If the history file cannot be written
        """
        entry = HistoryEntry(expr=expr, result=result, ts=int(time.time() * 1000))
        with self._lock:
            data = self._read()
            entries = [entry] + self._load_entries(data)
            data[self.key] = [e.model_dump() for e in entries[: self.limit]]
            self._write(data)
        logger.info(f"Saved {expr!r} = {result} to history")
        return entry

    def clear(self) -> int:
        """Remove the history key. Returns the number of entries dropped."""
        with self._lock:
            data = self._read()
            removed = data.pop(self.key, None)
            self._write(data)
        count = len(removed) if isinstance(removed, list) else 0
        logger.info(f"History cleared ({count} entries)")
        return count

    def _load_entries(self, data: Dict[str, Any]) -> List[HistoryEntry]:
        raw = data.get(self.key, [])
        if not isinstance(raw, list):
            logger.warning(f"History under {self.key} is not a list, ignoring it")
            return []

        entries = []
        for item in raw:
            try:
                entries.append(HistoryEntry.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed history entry {item!r}: {str(e)}")
        return entries

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read history file {self.path}: {str(e)}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"History file {self.path} does not hold an object, ignoring it")
            return {}
        return data

    def _write(self, data: Dict[str, Any]):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                json.dump(data, temp_file, ensure_ascii=False)
            os.replace(temp_file.name, self.path)
        except OSError as e:
            logger.error(f"Error writing history file: {str(e)}", exc_info=True)
            raise HistoryError(f"Failed to save history: {str(e)}")


# Global history instance
history_store = HistoryStore(
    path=settings.history_file,
    key=settings.history_key,
    limit=settings.history_limit,
)
