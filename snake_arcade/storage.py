"""High score persistence.

Stores expose ``get(key)`` returning an ``int`` or ``None`` and
``set(key, value)`` returning whether the write succeeded. Neither raises for
ordinary I/O problems: a missing or unreadable store simply has no value, and
a failed write is logged and reported as ``False``.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)


def _as_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class MemoryStore:
    """Dict-backed store; lives as long as the process."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key):
        return _as_int(self._data.get(key))

    def set(self, key, value):
        self._data[key] = int(value)
        return True


class JsonFileStore:
    """Key/int pairs kept in a small JSON object on disk."""

    def __init__(self, path):
        self.path = os.path.abspath(path)

    def _read(self):
        """Load the JSON object from disk, empty dict if not found or on error."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return data

    def _discard(self, tmp_path):
        if not os.path.exists(tmp_path):
            return
        try:
            os.remove(tmp_path)
        except OSError as exc:
            logger.warning("Could not remove %s: %s", tmp_path, exc)

    def get(self, key):
        return _as_int(self._read().get(key))

    def set(self, key, value):
        data = self._read()
        data[key] = int(value)
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Could not save %s=%s to %s: %s", key, value, self.path, exc)
            self._discard(tmp_path)
            return False
        return True
