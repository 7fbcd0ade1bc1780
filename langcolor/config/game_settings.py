"""
Game Configuration Constants Module

Defines the language/color catalog and the scoring rule constants.
The catalog is loaded once from languages.json at import and never mutated.
"""

import json
import os
import re
from typing import Dict, Final, Tuple

from ..models.game import GameRules, LanguageColorEntry

# Core Game Configuration Constants
DEFAULT_RULES: Final[GameRules] = GameRules()

REVEAL_SECONDS: Final[float] = DEFAULT_RULES.reveal_seconds
"""Seconds the catalog stays visible before guessing starts."""

MAX_ATTEMPTS: Final[int] = DEFAULT_RULES.max_attempts
"""Hard cap on recorded attempts per game."""

FAILURE_CHECK_ATTEMPT: Final[int] = DEFAULT_RULES.failure_check_attempt
"""A failed attempt at or after this attempt number ends the game."""

WIN_THRESHOLD: Final[int] = DEFAULT_RULES.win_threshold
"""Successful attempts needed to win."""

HEX_COLOR_PATTERN: Final = re.compile(r'^#[0-9A-Fa-f]{6}$')


def _load_language_catalog() -> Tuple[LanguageColorEntry, ...]:
    """
    Load the language catalog from languages.json.

    Returns:
        Tuple[LanguageColorEntry, ...]: Catalog entries in file order

    Raises:
        FileNotFoundError: If languages.json is not found
        ValueError: If the JSON is malformed or the catalog is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'languages.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw_entries = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Language catalog file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in languages.json: {e}")

    if not isinstance(raw_entries, list):
        raise ValueError("JSON file must contain an array of language entries")

    catalog = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict) or 'name' not in raw or 'color' not in raw:
            raise ValueError(f"Entry at index {index} must be an object with 'name' and 'color'")
        catalog.append(LanguageColorEntry(name=str(raw['name']), color=str(raw['color'])))

    validate_catalog_integrity(catalog)
    return tuple(catalog)


def validate_catalog_integrity(catalog) -> bool:
    """
    Validates a language catalog.

    Checks that the catalog is non-empty, every name is non-blank,
    every color is a six digit hex code with a leading '#', and names
    are unique ignoring case.

    Returns:
        bool: True if the catalog passes all checks

    Raises:
        ValueError: If any check fails, with a detailed message
    """
    if not catalog:
        raise ValueError("Language catalog cannot be empty")

    for index, entry in enumerate(catalog):
        if not entry.name.strip():
            raise ValueError(f"Entry at index {index} has a blank name")

        if not HEX_COLOR_PATTERN.match(entry.color):
            raise ValueError(f"Entry at index {index} '{entry.name}' has invalid color '{entry.color}'")

    lowered = [entry.name.lower() for entry in catalog]
    if len(lowered) != len(set(lowered)):
        duplicates = sorted({name for name in lowered if lowered.count(name) > 1})
        raise ValueError(f"Duplicate languages found in catalog: {duplicates}")

    return True


def _dominant_channel(color: str) -> str:
    red, green, blue = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    if red == green == blue:
        return 'gray'
    channels = {'red': red, 'green': green, 'blue': blue}
    return max(channels, key=channels.get)


def get_catalog_statistics(catalog=None) -> Dict:
    """
    Summarises the catalog without exposing any color codes.

    Returns:
        dict: Statistical information including:
            - total_languages: Number of catalog entries
            - avg_name_length: Average language name length
            - color_families: Count of entries per dominant RGB channel
    """
    if catalog is None:
        catalog = LANGUAGE_CATALOG
    if not catalog:
        return {"error": "Language catalog is empty"}

    color_families: Dict[str, int] = {}
    for entry in catalog:
        family = _dominant_channel(entry.color)
        color_families[family] = color_families.get(family, 0) + 1

    return {
        "total_languages": len(catalog),
        "avg_name_length": round(sum(len(entry.name) for entry in catalog) / len(catalog), 2),
        "color_families": color_families
    }


# Curated language catalog loaded from JSON file
LANGUAGE_CATALOG: Final[Tuple[LanguageColorEntry, ...]] = _load_language_catalog()

