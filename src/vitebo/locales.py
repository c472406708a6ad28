# src/vitebo/locales.py
"""
Locale table for the Vitebo site.

A :class:`LocaleTable` bundles the supported locales, the default locale,
the default-locale visibility flag and the translation tables.  It is
immutable once built and is passed explicitly to every function in
:mod:`vitebo.i18n`.

Usage::

    from vitebo.locales import DEFAULT_TABLE, build_locale_table

    table = build_locale_table(["pt-br", "en"], default_locale="pt-br")
    table.keys()             # canonical key set (default locale)
    table.missing_keys("en")  # keys English still lacks
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .lang.en import STRINGS as _EN
from .lang.pt_br import STRINGS as _PT_BR

logger = logging.getLogger(__name__)

# Bundled string tables, keyed by locale identifier
BUNDLED_STRINGS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "pt-br": _PT_BR,
    "en": _EN,
})


@dataclass(frozen=True)
class LocaleTable:
    """
    Immutable set of locales and their translations.

    Attributes:
        locales (tuple[str, ...]): Supported locale identifiers, in order
        default_locale (str): Fallback locale; always a member of ``locales``
        show_default_locale (bool): Whether the default locale appears as a
            path prefix
        translations (Mapping[str, Mapping[str, str]]): Read-only mapping of
            locale to key to localized text
    """
    locales: tuple[str, ...]
    default_locale: str
    show_default_locale: bool
    translations: Mapping[str, Mapping[str, str]]

    def __post_init__(self):
        if not self.locales:
            raise ValueError("At least one locale is required")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale {self.default_locale!r} is not one of {list(self.locales)}"
            )
        missing = [lang for lang in self.locales if lang not in self.translations]
        if missing:
            raise ValueError(f"No translations for locale(s): {', '.join(missing)}")

    def keys(self) -> frozenset[str]:
        """Return the canonical key set (the default locale's keys)."""
        return frozenset(self.translations[self.default_locale])

    def missing_keys(self, locale: str) -> list[str]:
        """Return canonical keys that *locale* has no text for, sorted."""
        table = self.translations.get(locale, {})
        return sorted(key for key in self.keys() if not table.get(key))


def build_locale_table(
    locales: Iterable[str],
    default_locale: str,
    show_default_locale: bool = False,
    translations: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> LocaleTable:
    """
    Build a frozen :class:`LocaleTable`.

    Copies every string table into a read-only mapping so later changes to
    the source dicts do not leak into the table.

    Args:
        locales: Supported locale identifiers, in order.
        default_locale: Fallback locale.
        show_default_locale: Prefix the default locale in paths too.
        translations: Locale to string-table mapping.  Defaults to the
            bundled tables.

    Returns:
        LocaleTable: The validated table.

    Raises:
        ValueError: If the default locale is not listed, or a listed locale
            has no string table.
    """
    source = BUNDLED_STRINGS if translations is None else translations
    ordered = tuple(locales)
    frozen = MappingProxyType({
        lang: MappingProxyType(dict(source[lang]))
        for lang in ordered if lang in source
    })
    table = LocaleTable(
        locales=ordered,
        default_locale=default_locale,
        show_default_locale=bool(show_default_locale),
        translations=frozen,
    )
    logger.debug(
        "Built locale table: locales=%s default=%s show_default=%s",
        ordered, default_locale, table.show_default_locale,
    )
    return table


DEFAULT_TABLE = build_locale_table(["pt-br", "en"], default_locale="pt-br")
