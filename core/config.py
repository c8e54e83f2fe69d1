#!/usr/bin/env python3
"""
Configuration Management for the Duden lookup tool
Supports environment variables, an optional config.json and built-in defaults
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off', '')


def parse_bool(value: Any, name: str) -> bool:
    """Accept real booleans and the usual on/off spellings"""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got '{value}'")

# Environment variable -> config field
ENV_VARS = {
    'DUDEN_BASE_URL': 'base_url',
    'DUDEN_TIMEOUT': 'timeout',
    'DUDEN_USER_AGENT': 'user_agent',
    'DUDEN_PAGER': 'pager',
    'DUDEN_LOG_LEVEL': 'log_level',
}


@dataclass
class LookupConfig:
    """Lookup configuration with validation"""
    base_url: str = 'https://www.duden.de'
    search_path: str = '/suchen/dudenonline/'
    timeout: float = 15.0
    user_agent: str = DEFAULT_UA
    pager: str = 'less'
    use_pager: bool = True
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """Validate configuration after initialization"""
        for name in ('base_url', 'search_path', 'user_agent', 'pager', 'log_level', 'log_format'):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if not self.base_url.startswith(('http://', 'https://')):
            raise ValueError(f"Base URL must be http(s), got '{self.base_url}'")
        self.base_url = self.base_url.rstrip('/')
        if not self.search_path.startswith('/'):
            raise ValueError("Search path must start with '/'")
        if not self.search_path.endswith('/'):
            self.search_path += '/'
        try:
            self.timeout = float(self.timeout)
        except TypeError:
            raise ValueError(f"Timeout must be a number, got {self.timeout!r}")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        self.use_pager = parse_bool(self.use_pager, 'use_pager')
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigManager:
    """Configuration loader with environment variable support"""

    def __init__(self, config_file: Optional[Path] = None, environ=None):
        self._config: Optional[LookupConfig] = None
        self._config_file = config_file or Path(__file__).parent / 'config.json'
        self._environ = os.environ if environ is None else environ

    def get_config(self) -> LookupConfig:
        """
        Get configuration from multiple sources in priority order:
        1. Environment variables
        2. config.json file
        3. Built-in defaults
        """
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> LookupConfig:
        values: Dict[str, Any] = {}

        if self._config_file.exists():
            logger.info(f"Loading lookup config from {self._config_file}")
            values.update(self._load_from_file())

        env_values = self._load_from_environment()
        if env_values:
            logger.info(f"Overriding {', '.join(sorted(env_values))} from environment")
            values.update(env_values)

        return LookupConfig(**values)

    def _load_from_file(self) -> Dict[str, Any]:
        with open(self._config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{self._config_file} must contain a JSON object")

        known = {item.name for item in fields(LookupConfig)}
        section = data.get('lookup', data)
        if not isinstance(section, dict):
            raise ValueError(f"'lookup' section in {self._config_file} must be a JSON object")
        unknown = set(section) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")
        return {key: value for key, value in section.items() if key in known}

    def _load_from_environment(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for var, name in ENV_VARS.items():
            if self._environ.get(var):
                values[name] = self._environ[var]

        if 'pager' not in values and self._environ.get('PAGER'):
            values['pager'] = self._environ['PAGER']
        if self._environ.get('DUDEN_NO_PAGER'):
            values['use_pager'] = not parse_bool(self._environ['DUDEN_NO_PAGER'], 'DUDEN_NO_PAGER')
        return values

    def reset(self):
        """Forget the cached configuration so the next call reloads it"""
        self._config = None


# Global configuration manager instance
config_manager = ConfigManager()


def get_config() -> LookupConfig:
    return config_manager.get_config()
