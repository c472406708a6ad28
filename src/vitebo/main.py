# src/vitebo/main.py
"""
Command-line interface for the Vitebo site i18n helpers.

Subcommands:
    lang URL                      Print the locale a URL is served in
    t KEY [--lang L]              Print a translated string
    path PATH --to L [--from-url] Rewrite a path for another locale
    static-paths                  Print the path segment of every locale
    check                         List translation keys missing per locale
    site                          Print site metadata and social links
"""
import argparse
import logging
import sys
from typing import List, Optional

from vitebo.config import Config
from vitebo.i18n import (
    get_locale_from_url,
    locale_static_path,
    translate,
    translate_path,
)
from vitebo.site import SITE, SOCIALS

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vitebo",
        description="Vitebo site - locale and translation helpers",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=(
            "Path rewriting:\n"
            "- The default locale has no prefix unless show_default_locale is set.\n"
            "  vitebo path /blog --to en              -> /en/blog\n"
            "  vitebo path /en/blog --to pt-br --from-url /en/blog -> /blog"
        ),
    )
    parser.add_argument("--config", metavar="FILE",
                        help="Path to a config.ini overriding the built-in settings")

    sub = parser.add_subparsers(dest="command", required=True)

    p_lang = sub.add_parser("lang", help="Print the locale of a URL")
    p_lang.add_argument("url", help="URL or path, e.g. https://vitebo.github.io/en/blog")

    p_t = sub.add_parser("t", help="Print the translation of a key")
    p_t.add_argument("key", help="Dotted translation key, e.g. home.title")
    p_t.add_argument("--lang", metavar="LOCALE",
                     help="Locale to translate into (default: the default locale)")

    p_path = sub.add_parser("path", help="Rewrite a path for another locale")
    p_path.add_argument("path", help="Path starting with '/'")
    p_path.add_argument("--to", dest="target", metavar="LOCALE", required=True,
                        help="Target locale")
    p_path.add_argument("--from-url", metavar="URL", default="/",
                        help="URL of the page the link is rendered on (default: /)")

    sub.add_parser("static-paths", help="Print the path segment of every locale")
    sub.add_parser("check", help="List translation keys missing per locale")
    sub.add_parser("site", help="Print site metadata and social links")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``vitebo`` command.

    Returns:
        int: Process exit status (0 on success, 1 when a lookup or check
        fails).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    log_level = str(cfg.get('logging', 'log_level', 'INFO')).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"invalid [logging] log_level: {log_level!r}")
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        table = cfg.locale_table()
    except ValueError as e:
        parser.error(f"invalid [i18n] configuration: {e}")

    if args.command == "lang":
        print(get_locale_from_url(table, args.url))
        return 0

    if args.command == "t":
        lang = args.lang or table.default_locale
        if lang not in table.locales:
            parser.error(f"unknown locale {lang!r} (choose from {', '.join(table.locales)})")
        text = translate(table, lang, args.key)
        if text is None:
            print(f"Error: no translation for key '{args.key}'", file=sys.stderr)
            return 1
        print(text)
        return 0

    if args.command == "path":
        if args.target not in table.locales:
            parser.error(f"unknown locale {args.target!r} (choose from {', '.join(table.locales)})")
        if not args.path.startswith("/"):
            parser.error("path must start with '/'")
        current = get_locale_from_url(table, args.from_url)
        print(translate_path(table, args.path, args.target, current))
        return 0

    if args.command == "static-paths":
        for lang in table.locales:
            segment = locale_static_path(table, lang)
            print(f"{lang}\t{segment if segment is not None else '-'}")
        return 0

    if args.command == "check":
        status = 0
        for lang in table.locales:
            missing = table.missing_keys(lang)
            if missing:
                status = 1
                print(f"{lang}: {len(missing)} missing")
                for key in missing:
                    print(f"  {key}")
            else:
                print(f"{lang}: ok")
        return status

    # site
    print(f"Name: {SITE.name}")
    print(f"Email: {SITE.email}")
    print(f"URL: {cfg.get('site', 'url')}")
    print(f"Base: {cfg.get('site', 'base')}")
    print(f"Trailing slash: {cfg.get('site', 'trailing_slash')}")
    print(f"Posts on homepage: {SITE.num_posts_on_homepage}")
    print(f"Works on homepage: {SITE.num_works_on_homepage}")
    print(f"Projects on homepage: {SITE.num_projects_on_homepage}")
    for social in SOCIALS:
        print(f"{social.name}: {social.href}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
