# src/vitebo/i18n.py
"""
Internationalisation (i18n) helpers for the Vitebo site.

Pure functions over an explicit :class:`~vitebo.locales.LocaleTable`:

- :func:`get_locale_from_url` reads the locale from the first path segment
- :func:`translate` looks a key up, falling back to the default locale
- :func:`translate_path` rewrites a path for another locale
- :func:`locale_static_path` decides whether a locale gets its own segment

Usage::

    from vitebo.i18n import get_locale_from_url, use_translations
    from vitebo.locales import DEFAULT_TABLE

    lang = get_locale_from_url(DEFAULT_TABLE, "https://vitebo.github.io/en/blog")
    t = use_translations(DEFAULT_TABLE, lang)
    print(t("nav.blog"))  # → "Blog"

Keys use dotted notation: ``page.context.identifier``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from .locales import LocaleTable

logger = logging.getLogger(__name__)


def _pathname(url: Any) -> str:
    """Return the path component of a URL string or URL-like object."""
    if isinstance(url, str):
        return urlsplit(url).path
    for attr in ("pathname", "path"):
        value = getattr(url, attr, None)
        if isinstance(value, str):
            return value
    return ""


def get_locale_from_url(table: LocaleTable, url: Any) -> str:
    """
    Extract the locale from the first segment of *url*'s path.

    Args:
        table: Locale table to check the segment against.
        url: URL string, or any object with a ``pathname`` or ``path``
            attribute.

    Returns:
        The segment when it names a known locale, otherwise the default
        locale.  Never raises.
    """
    segments = _pathname(url).split("/")
    lang = segments[1] if len(segments) > 1 else None
    if lang in table.locales:
        return lang
    logger.debug("No locale segment in %r, using %s", url, table.default_locale)
    return table.default_locale


def translate(table: LocaleTable, locale: str, key: str) -> Optional[str]:
    """
    Look up *key* for *locale*.

    Empty or missing text falls back to the default locale's text.  When
    neither locale has the key, ``None`` is returned; callers decide what
    to render in that case.
    """
    text = table.translations.get(locale, {}).get(key)
    if text:
        return text
    text = table.translations[table.default_locale].get(key)
    if text is None:
        logger.debug("Translation key %r missing for %s and default locale", key, locale)
    return text


def use_translations(table: LocaleTable, locale: str) -> Callable[[str], Optional[str]]:
    """Return a one-argument lookup ``t(key)`` bound to *locale*."""
    def t(key: str) -> Optional[str]:
        return translate(table, locale, key)
    return t


def translate_path(
    table: LocaleTable,
    path: str,
    locale: str,
    current_locale: str,
) -> str:
    """
    Rewrite *path* so it points at the *locale* version of the page.

    Rules, first match wins:

    1. Default locale shown in paths: replace the leading segment with
       *locale*.
    2. Target and current locale are both the default: the path carries
       no prefix, so only the leading slash piece is dropped.
    3. Target is the default, current is not: drop the current prefix.
    4. Otherwise prefix *path* with *locale* as-is.

    Args:
        table: Locale table providing the routing flags.
        path: Path starting with ``/``.
        locale: Target locale.
        current_locale: Locale of the page the link is rendered on.

    Returns:
        The rewritten path, always starting with ``/``.
    """
    default = table.default_locale
    if table.show_default_locale:
        rest = path.split("/")[2:]
        return f"/{locale}/{'/'.join(rest)}"
    if locale == default and current_locale == default:
        rest = path.split("/")[1:]
        return f"/{'/'.join(rest)}"
    if locale == default:
        rest = path.split("/")[2:]
        return f"/{'/'.join(rest)}"
    return f"/{locale}{path}"


def use_translated_path(
    table: LocaleTable,
    locale: str,
    url: Any,
) -> Callable[..., str]:
    """
    Return ``translate_path_fn(path, l=locale)`` for templates.

    The current locale is read from *url* once, here, and reused for every
    call of the returned function.
    """
    current_locale = get_locale_from_url(table, url)

    def translate_path_fn(path: str, l: Optional[str] = None) -> str:
        return translate_path(table, path, locale if l is None else l, current_locale)
    return translate_path_fn


def locale_static_path(table: LocaleTable, locale: str) -> Optional[str]:
    """
    Return the path segment *locale* needs during route generation.

    ``None`` means the locale is served without a segment (the default
    locale when it is hidden from paths).
    """
    if table.show_default_locale:
        return locale
    if locale == table.default_locale:
        return None
    return locale


def static_paths(table: LocaleTable) -> list[dict[str, Optional[str]]]:
    """Return route params ``{"lang": segment}`` for every locale, in order."""
    return [{"lang": locale_static_path(table, lang)} for lang in table.locales]
