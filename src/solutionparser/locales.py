# -------------------------------------
# Locale table - supported locales
# -------------------------------------
"""
Loading and querying of the locale table.

The table is a YAML file with a list of locales under the 'locales' key:

    locales:
      - {code: en, name: English}
      - {code: ja, name: Japanese, separators: false}

'separators' tells whether the script of the locale puts separators
(spaces, punctuation) between words. It defaults to true.

The packaged table (locales.yml) is used unless another one is activated
with use_locales().
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


DEFAULT_PATH = Path(__file__).resolve().with_name("locales.yml")

# Languages where the dotted and dotless i are distinct letters.
TURKIC = {"tr", "az"}


class LocaleError(ValueError):
    pass


@dataclass(frozen=True)
class Locale:
    code: str
    name: str
    separators: bool = True


# Module-level cache for loaded locale tables, keyed by resolved path
_LOCALES_CACHE: dict[str, dict[str, Locale]] = {}

# Table used by the module-level helpers
_ACTIVE_PATH: Path = DEFAULT_PATH


def _parse_entry(entry: Any, path: Path) -> Locale:
    if not isinstance(entry, dict) or "code" not in entry:
        raise LocaleError(f"invalid locale entry in '{path}': {entry!r}")
    code = str(entry["code"]).strip()
    if not code:
        raise LocaleError(f"empty locale code in '{path}'")
    name = str(entry.get("name", code))
    separators = entry.get("separators", True)
    if not isinstance(separators, bool):
        raise LocaleError(f"'separators' must be a boolean for locale '{code}' in '{path}'")
    return Locale(code=code, name=name, separators=separators)


def load_locales(path: str | Path | None = None) -> dict[str, Locale]:
    """
    Load a locale table and return it as a dict keyed by locale code.

    Args:
        path: Path to the YAML file (defaults to the active table)

    Returns:
        Dict of code -> Locale, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is not valid YAML
        LocaleError: If the file does not describe a locale table
    """
    path = Path(path) if path is not None else _ACTIVE_PATH
    path_str = str(path.resolve())

    if path_str in _LOCALES_CACHE:
        return _LOCALES_CACHE[path_str]

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("locales"), list):
        raise LocaleError(f"'{path}' has no 'locales' list")

    table: dict[str, Locale] = {}
    for entry in data["locales"]:
        loc = _parse_entry(entry, path)
        if loc.code in table:
            raise LocaleError(f"duplicate locale code '{loc.code}' in '{path}'")
        table[loc.code] = loc

    _LOCALES_CACHE[path_str] = table
    return table


def clear_cache() -> None:
    """Clear the locale table cache."""
    _LOCALES_CACHE.clear()


def use_locales(path: str | Path | None = None) -> Path:
    """
    Activate a locale table for the module-level helpers.
    None restores the packaged table. Returns the active path.
    """
    global _ACTIVE_PATH
    new_path = Path(path) if path is not None else DEFAULT_PATH
    load_locales(new_path)
    _ACTIVE_PATH = new_path
    return _ACTIVE_PATH


def list_locales() -> list[Locale]:
    return list(load_locales().values())


def is_supported(code: str) -> bool:
    return code in load_locales()


def get_locale(code: str) -> Locale:
    """Return the locale with the given code, raising LocaleError if unknown."""
    table = load_locales()
    try:
        return table[code]
    except KeyError:
        raise LocaleError(f"unsupported locale: '{code}'") from None


def uses_word_separators(code: str) -> bool:
    """Whether words are separated in the script of the locale. Unknown locales are assumed to be."""
    loc = load_locales().get(code)
    return True if loc is None else loc.separators


def language(code: str) -> str:
    """Primary language subtag: 'pt-BR' -> 'pt'."""
    return code.split("-", 1)[0].split("_", 1)[0].lower()
