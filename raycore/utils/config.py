"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл создаётся только явным вызовом ``save()``).
"""

import copy
import json
from pathlib import Path
from raycore.utils.logger import get_logger

_log = get_logger("config")

DEFAULT_CONFIG = {
    "ppm": {"line_width": 60, "max_value": 255},
    "canvas": {"width": 900, "height": 550},
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "raycore.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить singleton (нужно в тестах)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                _log.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                _log.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            _log.debug("[Config] No config file – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        _log.info(f"[Config] Configuration saved to {self.path}.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
