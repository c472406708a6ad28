# src/vitebo/config.py
import configparser
import os
from pathlib import Path
from typing import Any, Optional

from .locales import LocaleTable, build_locale_table

_LIST_KEYS = {('i18n', 'locales')}
_BOOL_KEYS = {('i18n', 'show_default_locale')}


class Config:
    """Configuration manager for the Vitebo site"""

    def __init__(self, config_path: Optional[str] = None):
        self.config = configparser.ConfigParser()
        path = config_path or os.environ.get('VITEBO_CONFIG')
        self.config_path = Path(path) if path else Path(__file__).parent.parent / "config.ini"

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path, encoding='utf-8')

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('site')
        self.config.set('site', 'url', 'https://vitebo.github.io')
        self.config.set('site', 'base', 'vitebo.github.io')
        self.config.set('site', 'trailing_slash', 'never')

        self.config.add_section('i18n')
        self.config.set('i18n', 'default_locale', 'pt-br')
        self.config.set('i18n', 'locales', 'pt-br, en')
        self.config.set('i18n', 'show_default_locale', 'false')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'INFO')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            value = self.config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

        if (section, key) in _LIST_KEYS:
            return [item.strip() for item in value.split(',') if item.strip()]
        if (section, key) in _BOOL_KEYS:
            lowered = value.strip().lower()
            if lowered not in ('true', 'false'):
                raise ValueError(f"[{section}] {key} must be true or false, got {value!r}")
            return lowered == 'true'
        return value

    def locale_table(self) -> LocaleTable:
        """Build the locale table described by the [i18n] section"""
        return build_locale_table(
            self.get('i18n', 'locales'),
            default_locale=self.get('i18n', 'default_locale'),
            show_default_locale=self.get('i18n', 'show_default_locale'),
        )
