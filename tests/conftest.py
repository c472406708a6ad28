"""Pytest configuration and shared fixtures."""
import pytest

from vitebo.locales import DEFAULT_TABLE, build_locale_table


@pytest.fixture
def table():
    """The bundled pt-br/en table with the default locale hidden from paths."""
    return DEFAULT_TABLE


@pytest.fixture
def shown_table():
    """Same locales, but every path carries its locale prefix."""
    return build_locale_table(["pt-br", "en"], default_locale="pt-br", show_default_locale=True)


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's VITEBO_CONFIG from leaking into tests."""
    monkeypatch.delenv("VITEBO_CONFIG", raising=False)
