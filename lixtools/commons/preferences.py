import json
import os
import threading
from typing import Dict, Optional

from loguru import logger

from lixtools.pipeline.config import PREFERENCES_PATH


class PreferenceStore:
    """Small JSON-file key/value store for user preferences such as the UI language."""

    def __init__(self, path: str = PREFERENCES_PATH):
        self.path = path
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"[Preferences] Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"[Preferences] Ignoring non-object preferences file {self.path}")
            return {}
        return data

    def _save(self, data: Dict[str, str]):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._load().get(key)
        return value if value else None

    def set_item(self, key: str, value: str):
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)
        logger.info(f"[Preferences] Stored '{key}'")

    def remove_item(self, key: str):
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)


_preference_store: Optional[PreferenceStore] = None


def get_preference_store() -> PreferenceStore:
    global _preference_store
    if _preference_store is None:
        _preference_store = PreferenceStore()
    return _preference_store
