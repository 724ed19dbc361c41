"""
Configuration handling for meshdata.

The defaults ship with the package in ``bin/config.yaml``. A user file can be layered
on top of them by setting the ``MESHDATA_CONFIG`` environment variable to its path.
Values are looked up with dotted keys::

    >>> from meshdata.utils.config import meshdata_params
    >>> meshdata_params["logging.mylog.level"]
    'INFO'
"""
import os
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

config_directory = Path(__file__).parents[1] / "bin"
default_config_path = config_directory / "config.yaml"


def _merge(base: dict, update: dict) -> dict:
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigParams:
    """
    Nested configuration values read from one or more yaml files.

    Later files override earlier ones key by key, so a user file only needs to
    carry the values it changes.
    """

    def __init__(self, *paths):
        self.paths = [Path(p) for p in paths]
        self.config = {}
        self.reload()

    def reload(self):
        yaml = YAML(typ="safe")
        self.config = {}
        for path in self.paths:
            with open(path, "r", encoding="utf-8") as fio:
                data = yaml.load(fio) or {}
            _merge(self.config, data)

    def __getitem__(self, key: str) -> Any:
        value = self.config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                raise KeyError(f"Key '{key}' not found in configuration")
            value = value[part]
        return value

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def __contains__(self, key: str) -> bool:
        try:
            self[key]
        except KeyError:
            return False
        return True


def _config_paths():
    paths = [default_config_path]
    user_path = os.environ.get("MESHDATA_CONFIG")
    if user_path:
        paths.append(user_path)
    return paths


meshdata_params = ConfigParams(*_config_paths())
""":py:class:`ConfigParams`: the active configuration of the package."""
