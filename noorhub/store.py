"""Flat JSON key-value store for bookmarks, completed adhkar and dhikr history."""
import json
import logging
import threading
from pathlib import Path

log = logging.getLogger(__name__)

BOOKMARKS_KEY = "quran_bookmarks"
COMPLETED_AZKAR_KEY = "completed_azkar"
TASBEEH_HISTORY_KEY = "tasbeeh_history"


class LocalStore:
    """Keeps all keys in memory and writes the whole file on every save"""

    def __init__(self, path):
        self.path = Path(path)
        self._data = {}
        self._lock = threading.Lock()

    def load(self):
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            data = {}
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Ignoring unreadable store %s: %s", self.path, e)
            data = {}
        if not isinstance(data, dict):
            log.warning("Ignoring store %s with non-object root", self.path)
            data = {}
        with self._lock:
            self._data = data
        return dict(data)

    def get(self, key, default=None):
        with self._lock:
            return self._data.get(key, default)

    def save(self, key, value):
        with self._lock:
            data = dict(self._data)
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                tmp_path.replace(self.path)
            except (OSError, TypeError, ValueError):
                tmp_path.unlink(missing_ok=True)
                raise
            # memory only changes once the file on disk has
            self._data = data


def toggle_id(store, key, item_id):
    """Add or remove an id from a stored list, returning the new list"""
    items = list(store.get(key, []))
    if item_id in items:
        items = [item for item in items if item != item_id]
    else:
        items.append(item_id)
    store.save(key, items)
    return items
