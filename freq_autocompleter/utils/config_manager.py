# config_manager.py - JSON config manager

import json
import os

FLOAT_FORMATS = ("single", "double")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(ValueError):
    """Bad config file, unknown key or invalid value."""


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = {
            "max_suggestions": 5,
            "float_format": "single",  # single precision output, e.g. 0.6666667
            "log_level": "WARNING",
        }
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"cannot read config {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for k, v in loaded.items():
            self.set(k, v, persist=False)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val, persist=True):
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        try:
            val = type(self.data[key])(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad value for {key}: {val!r}") from e
        self._check(key, val)
        self.data[key] = val
        if persist:
            self.save()

    @staticmethod
    def _check(key, val):
        if key == "max_suggestions" and val < 0:
            raise ConfigError("max_suggestions must be >= 0")
        if key == "float_format" and val not in FLOAT_FORMATS:
            raise ConfigError(f"float_format must be one of {FLOAT_FORMATS}")
        if key == "log_level" and val.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}")
