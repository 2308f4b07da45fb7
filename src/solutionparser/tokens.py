# -------------------------------------
# Tokenizer - locale-aware atomic tokens
# -------------------------------------
"""
Split sentences into tokens.

For locales whose script separates words, a sentence is split into runs of
letters/numbers and runs of anything else (spaces, punctuation), so that
joining the tokens gives back the (NFC-normalized) sentence:

    "I eat an apple." -> ["I", " ", "eat", " ", "an", " ", "apple", "."]

For locales without separators (Japanese, Chinese) the whole sentence is one
token.
"""
from __future__ import annotations

import re
import unicodedata

from .locales import TURKIC, language, uses_word_separators


# ============================================================
# regexes
# ============================================================

# Runs of characters that are neither letters nor numbers.
_SEPARATOR_RE = re.compile(r"([\W_]+)")

# Characters ending a sentence: Unicode Sentence_Terminal, Basic Multilingual Plane.
_SENTENCE_TERMINALS = (
    ".!?"
    "\u0589"                                      # Armenian
    "\u061d-\u061f\u06d4"                         # Arabic
    "\u0700-\u0702"                               # Syriac
    "\u07f9"                                      # NKo
    "\u0837\u0839\u083d\u083e"                    # Samaritan
    "\u0964\u0965"                                # Devanagari
    "\u104a\u104b"                                # Myanmar
    "\u1362\u1367\u1368"                          # Ethiopic
    "\u166e"                                      # Canadian syllabics
    "\u1735\u1736"                                # Hanunoo
    "\u1803\u1809"                                # Mongolian
    "\u1944\u1945"                                # Limbu
    "\u1aa8-\u1aab"                               # Tai Tham
    "\u1b5a\u1b5b\u1b5e\u1b5f\u1b7d\u1b7e"        # Balinese
    "\u1c3b\u1c3c\u1c7e\u1c7f"                    # Lepcha, Ol Chiki
    "\u203c\u203d\u2047-\u2049"
    "\u2e2e\u2e3c\u2e53\u2e54"
    "\u3002"                                      # ideographic full stop
    "\ua4ff\ua60e\ua60f\ua6f3\ua6f7"              # Lisu, Vai, Bamum
    "\ua876\ua877\ua8ce\ua8cf\ua92f"              # Phags-pa, Saurashtra, Kayah Li
    "\ua9c8\ua9c9\uaa5d-\uaa5f"                   # Javanese, Cham
    "\uaaf0\uaaf1\uabeb"                          # Meetei Mayek
    "\ufe12\ufe52\ufe56\ufe57"
    "\uff01\uff0e\uff1f\uff61"
)
_SENTENCE_END_RE = re.compile(rf"[{_SENTENCE_TERMINALS}]\s*$")


# ============================================================
# Tokenization
# ============================================================

def normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def tokenize(text: str, locale: str) -> list[str]:
    """Split text into non-empty tokens, keeping separator runs as tokens."""
    text = normalize(text)
    if not uses_word_separators(locale):
        return [text] if text else []
    return [t for t in _SEPARATOR_RE.split(text) if t]


def is_word_char(ch: str) -> bool:
    """Letters and numbers."""
    return ch.isalnum()


def starts_with_capital(token: str) -> bool:
    """Whether the token starts (after spaces) with an uppercase letter or a number."""
    s = token.lstrip()
    if not s:
        return False
    return s[0].isupper() or s[0].isnumeric()


def is_sentence_start(shared_tokens: list[str]) -> bool:
    """Whether the next token starts a new sentence."""
    if not shared_tokens:
        return True
    return bool(_SENTENCE_END_RE.search(shared_tokens[-1]))


# ============================================================
# Casing
# ============================================================

def upper(ch: str, locale: str) -> str:
    if ch == "i" and language(locale) in TURKIC:
        return "İ"
    return ch.upper()


def title_case(token: str, locale: str) -> str:
    """Upper-case the first letter or number of a token."""
    for i, ch in enumerate(token):
        if is_word_char(ch):
            return token[:i] + upper(ch, locale) + token[i + 1:]
    return token
