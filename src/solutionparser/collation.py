# -------------------------------------
# Collation - locale-aware string ordering
# -------------------------------------
"""
Ordering used to sort alternatives.

The comparison:
  - ignores punctuation and whitespace,
  - compares digit runs by numeric value ("2" < "10"),
  - compares base letters case-insensitively,
  - then accents,
  - then case, uppercase first.

Collator memoizes comparisons for one locale. A collator is meant to live for
one parse call (or to be owned by the caller), and clear() releases its memo.
"""
from __future__ import annotations

import threading
import unicodedata
from functools import cmp_to_key
from typing import Iterable

from .locales import TURKIC, language


CollationKey = tuple[tuple, tuple, tuple]


# Turkic i: dotless I and dotted İ are the case pairs of ı and i.
_TURKIC_FOLD = {"I": "ı", "İ": "i"}


def collation_key(s: str, locale: str) -> CollationKey:
    """
    Build a sort key (primary, secondary, tertiary) for s.

    primary:   runs of (0, number) for digits and (1, folded letters) for letters;
               spacing vowel signs (Devanagari "ि") count as letters
    secondary: combining marks attached to each letter
    tertiary:  0 for uppercase letters, 1 otherwise
    """
    turkic = language(locale) in TURKIC

    primary: list[tuple] = []
    secondary: list[str] = []
    tertiary: list[int] = []

    letters: list[str] = []
    digits: list[str] = []

    def flush_letters() -> None:
        if letters:
            primary.append((1, "".join(letters)))
            letters.clear()

    def flush_digits() -> None:
        if digits:
            primary.append((0, int("".join(digits))))
            digits.clear()

    for composed in unicodedata.normalize("NFC", s):
        # case is read before the Turkic fold, which lower-cases I and İ
        case = 0 if composed.isupper() else 1
        if turkic:
            composed = _TURKIC_FOLD.get(composed, composed)

        for ch in unicodedata.normalize("NFD", composed):
            if unicodedata.combining(ch):
                if secondary:
                    secondary[-1] += ch
                continue
            if ch.isdecimal():
                flush_letters()
                digits.append(str(unicodedata.decimal(ch)))
                secondary.append("")
                tertiary.append(1)
            elif ch.isalnum() or unicodedata.category(ch).startswith("M"):
                flush_digits()
                letters.append(ch.casefold())
                secondary.append("")
                tertiary.append(case)
            else:
                # ignorable, but digit runs do not continue across it
                flush_digits()

    flush_letters()
    flush_digits()
    return tuple(primary), tuple(secondary), tuple(tertiary)


def compare_strings_ci(x: str, y: str, locale: str) -> int:
    """Return -1, 0 or 1 as x sorts before, with, or after y."""
    kx = collation_key(x, locale)
    ky = collation_key(y, locale)
    return (kx > ky) - (kx < ky)


class Collator:
    """Memoized compare_strings_ci for one locale."""

    def __init__(self, locale: str):
        self.locale = locale
        self._cache: dict[tuple[str, str], int] = {}
        self._lock = threading.Lock()

    def compare(self, x: str, y: str) -> int:
        key = (x, y)
        with self._lock:
            result = self._cache.get(key)
        if result is None:
            result = compare_strings_ci(x, y, self.locale)
            with self._lock:
                self._cache[key] = result
        return result

    def sort(self, items: Iterable[str]) -> list[str]:
        """Stable sort in collation order."""
        return sorted(items, key=cmp_to_key(self.compare))

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"Collator({self.locale!r}, cached={len(self)})"
