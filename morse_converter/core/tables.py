"""Morse symbol tables for Latin and Hangul jamo, forward and inverse.

WHY: Encoding and decoding are pure table lookups. Keeping the tables as
plain data in one module makes them easy to audit against a Morse chart
and guarantees every caller sees the same, unmodified mapping.

HOW: Forward tables map one lower-case character (or compatibility jamo)
to its pattern. Inverse tables are derived once at import time. All four
are wrapped in MappingProxyType so they cannot be edited at runtime.

RULES:
- Patterns use only "." and "-" (ㅖ and ㅒ are two-letter patterns
  containing a single space and decode as their component vowels)
- Within one script no two characters share a pattern
- Unknown language selectors resolve to an empty read-only table
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

LANG_ENGLISH = "EN"
LANG_KOREAN = "KR"

LANGUAGE_CHOICES: Mapping[str, str] = MappingProxyType({
    LANG_ENGLISH: "English",
    LANG_KOREAN: "한글",
})
"""Decode language selectors and their display names."""

# ---------------------------------------------------------------------------
# Latin: international Morse, lower-case letters, digits, punctuation
# ---------------------------------------------------------------------------

ENGLISH_TO_MORSE: Mapping[str, str] = MappingProxyType({
    "a": ".-",
    "b": "-...",
    "c": "-.-.",
    "d": "-..",
    "e": ".",
    "f": "..-.",
    "g": "--.",
    "h": "....",
    "i": "..",
    "j": ".---",
    "k": "-.-",
    "l": ".-..",
    "m": "--",
    "n": "-.",
    "o": "---",
    "p": ".--.",
    "q": "--.-",
    "r": ".-.",
    "s": "...",
    "t": "-",
    "u": "..-",
    "v": "...-",
    "w": ".--",
    "x": "-..-",
    "y": "-.--",
    "z": "--..",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    "0": "-----",
    "?": "..--..",
    "!": "-.-.--",
    ".": ".-.-.-",
    ",": "--..--",
    ";": "-.-.-.",
    ":": "---...",
    "+": ".-.-.",
    "-": "-....-",
    "/": "-..-.",
    "=": "-...-",
})

# ---------------------------------------------------------------------------
# Hangul: SKATS-style Korean Morse over compatibility jamo
# ---------------------------------------------------------------------------

KOREAN_TO_MORSE: Mapping[str, str] = MappingProxyType({
    "ㄱ": ".-..",
    "ㄴ": "..-.",
    "ㄷ": "-...",
    "ㄹ": "...-",
    "ㅁ": "--",
    "ㅂ": ".--",
    "ㅅ": "--.",
    "ㅇ": "-.-",
    "ㅈ": ".--.",
    "ㅊ": "-.-.",
    "ㅋ": "-..-",
    "ㅌ": "--..",
    "ㅍ": "---",
    "ㅎ": ".---",
    "ㅏ": ".",
    "ㅑ": "..",
    "ㅓ": "-",
    "ㅕ": "...",
    "ㅗ": ".-",
    "ㅛ": "-.",
    "ㅜ": "....",
    "ㅠ": ".-.",
    "ㅡ": "-..",
    "ㅣ": "..-",
    "ㅔ": "-.--",
    "ㅐ": "--.-",
    "ㅖ": "... ..-",
    "ㅒ": ".. ..-",
})


def _invert(table: Mapping[str, str]) -> Mapping[str, str]:
    inverse = {pattern: char for char, pattern in table.items()}
    if len(inverse) != len(table):
        raise ValueError("Morse table maps two characters to the same pattern")
    return MappingProxyType(inverse)


MORSE_TO_ENGLISH = _invert(ENGLISH_TO_MORSE)
MORSE_TO_KOREAN = _invert(KOREAN_TO_MORSE)

_INVERSE_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    LANG_ENGLISH: MORSE_TO_ENGLISH,
    LANG_KOREAN: MORSE_TO_KOREAN,
})

_EMPTY: Mapping[str, str] = MappingProxyType({})


def get_inverse_table(language: str) -> Mapping[str, str]:
    """Return the pattern → character table for a language selector.

    Unknown selectors get an empty table, which makes decode() emit only
    word-boundary spaces.
    """
    return _INVERSE_TABLES.get(language, _EMPTY)
