# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "default_order": "ASC",       # ASC | DESC
    "mismatch": "fallback",       # fallback | strict
    "max_results": 0,             # 0 = unlimited
    "log_path": os.path.join("logs", "weighted_trie.log"),
}


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("could not read %s, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("%s is not a JSON object, using defaults", self.path)
                return
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    logger.debug("ignoring unknown config key %r", k)
                    continue
                try:
                    self.data[k] = type(DEFAULTS[k])(v)
                except (TypeError, ValueError):
                    logger.warning("bad value %r for %r in %s, keeping %r", v, k, self.path, DEFAULTS[k])
        elif self.autosave:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        """Set an option, coercing to the default's type. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = type(DEFAULTS[key])(val)
        if self.autosave:
            self.save()
