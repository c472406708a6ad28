# src/vitebo/__init__.py
"""
Vitebo - personal site locale and metadata helpers.

This package provides the locale table, translation lookup and
locale-aware path rewriting used when rendering the Vitebo site, along
with the site's metadata constants.

Main Components:
- locales: Immutable locale table and the bundled string tables
- i18n: Locale extraction, translation lookup and path translation
- lang: Per-language string tables
- site: Site metadata and social links
- config: Configuration management
- main: Command-line interface
"""

__version__ = "1.0.0"
__author__ = "Vitebo"
__description__ = "Locale and translation helpers for the Vitebo site"
