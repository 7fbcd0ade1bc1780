"""
Tests for catalog loading and validation.
"""
import pytest

from langcolor.config import (
    Config, LANGUAGE_CATALOG, MAX_ATTEMPTS, REVEAL_SECONDS, WIN_THRESHOLD,
    get_catalog_statistics, validate_catalog_integrity
)
from langcolor.models.game import GameRules, LanguageColorEntry


def test_catalog_loaded_in_order():
    assert len(LANGUAGE_CATALOG) == 23
    assert LANGUAGE_CATALOG[0] == LanguageColorEntry('JavaScript', '#F0DB4F')
    assert LANGUAGE_CATALOG[-1] == LanguageColorEntry('Elixir', '#6E4A7E')
    assert validate_catalog_integrity(LANGUAGE_CATALOG) is True


def test_rule_constants():
    assert REVEAL_SECONDS == 4
    assert MAX_ATTEMPTS == 20
    assert WIN_THRESHOLD == 15


def test_rules_from_config():
    rules = GameRules.from_config(Config)
    assert rules == GameRules(reveal_seconds=Config.REVEAL_SECONDS, max_attempts=Config.MAX_ATTEMPTS,
                              failure_check_attempt=Config.FAILURE_CHECK_ATTEMPT,
                              win_threshold=Config.WIN_THRESHOLD)


@pytest.mark.parametrize("catalog, message", [
    ([], "cannot be empty"),
    ([LanguageColorEntry('Go', '#00ADD8'), LanguageColorEntry('GO', '#000000')], "Duplicate"),
    ([LanguageColorEntry('Go', '00ADD8')], "invalid color"),
    ([LanguageColorEntry('Go', '#0AD')], "invalid color"),
    ([LanguageColorEntry('  ', '#000000')], "blank name"),
])
def test_invalid_catalogs(catalog, message):
    with pytest.raises(ValueError, match=message):
        validate_catalog_integrity(catalog)


def test_statistics():
    stats = get_catalog_statistics()
    assert stats['total_languages'] == 23
    assert stats['color_families']['gray'] == 2  # Rust and Groovy
    assert stats['color_families']['red'] >= 1
    assert get_catalog_statistics([]) == {"error": "Language catalog is empty"}
