"""
Configuration Module for the Document Generator.

Settings live in YAML. The bundled config/settings.yaml holds every key
with its default; a custom file passed with --config only needs the keys
it changes and is merged over the bundled defaults section by section.

Access is by dot notation:

    >>> from config import get_config
    >>> get_config("export.page.margin_mm")
    10
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_SETTINGS = Path(__file__).parent / "settings.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    """
    Read one settings file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the top level is not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base; nested sections merge key by key."""
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


class ConfigurationManager:
    """
    Process-wide settings of the document generator.

    The first instantiation decides which custom file (if any) is layered
    over the defaults; later instantiations return the same object until
    reset() is called.

    Attributes:
        config_path (Optional[Path]): Custom settings file, None for defaults only.

    Example:
        >>> config = ConfigurationManager("my-company.yaml")
        >>> config.get("company.name")
        "PT Maju Jaya"
        >>> config.get("export.page.width_mm")
        210
    """

    _instance: Optional['ConfigurationManager'] = None

    def __new__(cls, config_path: Optional[Union[str, Path]] = None) -> 'ConfigurationManager':
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        if self._initialized:
            return

        self.config_path = Path(config_path) if config_path else None
        self._settings: Dict[str, Any] = {}
        self._load()
        self._initialized = True

    def _load(self) -> None:
        settings = _read_yaml(DEFAULT_SETTINGS)
        if self.config_path is not None:
            settings = _deep_merge(settings, _read_yaml(self.config_path))

        # Relative output locations are anchored at the project root
        paths = settings.get('paths') or {}
        for name, location in paths.items():
            if location and not Path(location).is_absolute():
                paths[name] = str(PROJECT_ROOT / location)

        self._settings = settings

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted key.

        Args:
            key: Dotted path such as "stamp.defaults.color".
            default: Returned when any part of the path is missing.

        Example:
            >>> config.get("capture.browser")
            "chromium"
            >>> config.get("capture.timeout", 30)
            30
        """
        node: Any = self._settings
        for part in key.split('.'):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node

    def get_all(self) -> Dict[str, Any]:
        return deepcopy(self._settings)

    def reload(self) -> None:
        """Read the settings files again."""
        self._load()

    @classmethod
    def reset(cls) -> None:
        """Forget the current instance so the next one reads the files again."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ConfigurationManager().get(key, default)."""
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config', 'DEFAULT_SETTINGS']
