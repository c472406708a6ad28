"""
Tests for configuration loading and type conversion.
"""
import pytest

from vitebo.config import Config


def test_defaults_and_fallback(tmp_path):
    config = Config(str(tmp_path / "absent.ini"))

    assert config.get('site', 'url') == 'https://vitebo.github.io'
    assert config.get('i18n', 'locales') == ['pt-br', 'en']
    assert config.get('i18n', 'show_default_locale') is False
    assert config.get('logging', 'log_level') == 'INFO'

    # Missing keys fall back cleanly
    assert config.get('missing', 'key', fallback=123) == 123
    assert config.get('site', 'missing', fallback='x') == 'x'


def test_default_locale_table(tmp_path):
    table = Config(str(tmp_path / "absent.ini")).locale_table()

    assert table.locales == ('pt-br', 'en')
    assert table.default_locale == 'pt-br'
    assert table.show_default_locale is False


def test_file_overrides_defaults(tmp_path):
    ini = tmp_path / "config.ini"
    ini.write_text(
        "[i18n]\n"
        "default_locale = en\n"
        "locales = en, pt-br\n"
        "show_default_locale = True\n",
        encoding="utf-8",
    )
    table = Config(str(ini)).locale_table()

    assert table.locales == ('en', 'pt-br')
    assert table.default_locale == 'en'
    assert table.show_default_locale is True


def test_env_var_selects_file(tmp_path, monkeypatch):
    ini = tmp_path / "site.ini"
    ini.write_text("[logging]\nlog_level = DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("VITEBO_CONFIG", str(ini))

    assert Config().get('logging', 'log_level') == 'DEBUG'


def test_invalid_bool_raises(tmp_path):
    ini = tmp_path / "config.ini"
    ini.write_text("[i18n]\nshow_default_locale = maybe\n", encoding="utf-8")

    with pytest.raises(ValueError):
        Config(str(ini)).get('i18n', 'show_default_locale')


def test_unknown_locale_rejected(tmp_path):
    ini = tmp_path / "config.ini"
    ini.write_text("[i18n]\nlocales = pt-br, de\n", encoding="utf-8")

    with pytest.raises(ValueError):
        Config(str(ini)).locale_table()
