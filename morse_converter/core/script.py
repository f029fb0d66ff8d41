"""Script classification and Hangul syllable decomposition.

WHY: Korean Morse code assigns patterns to individual jamo, not to the
11,172 precomposed syllable blocks. Before encoding, every syllable has to
be split into its lead consonant, vowel and optional tail consonant, and
every character needs to be routed to the right symbol table.

HOW: Precomposed syllables live in the contiguous block U+AC00–U+D7A3 and
are built arithmetically from (lead, vowel, tail) indices. The jamo library
performs that decomposition (h2j) and maps the resulting conjoining jamo to
Hangul Compatibility Jamo (j2hcj), which is what the symbol table is keyed
on. classify() returns a plain enum tag so callers dispatch on a value.

RULES:
- Syllable blocks and compatibility jamo classify as Script.HANGUL
- Everything else classifies as Script.OTHER and passes through unchanged
- decompose() yields 2 or 3 compatibility jamo for a syllable, (char,) otherwise
- No function here raises for any input character
"""

from __future__ import annotations

import enum

from jamo import h2j, is_hcj, j2hcj

# First and last precomposed Hangul syllables.
SYLLABLE_FIRST = 0xAC00
SYLLABLE_LAST = 0xD7A3


class Script(enum.Enum):
    """Script tag reported by classify()."""

    HANGUL = "hangul"
    OTHER = "other"


def is_syllable(char: str) -> bool:
    """True if *char* is a precomposed Hangul syllable block."""
    return len(char) == 1 and SYLLABLE_FIRST <= ord(char) <= SYLLABLE_LAST


def is_hangul(char: str) -> bool:
    """True for syllable blocks and standalone compatibility jamo."""
    if len(char) != 1:
        return False
    return is_syllable(char) or is_hcj(char)


def classify(char: str) -> Script:
    """Tag a single character with the script it belongs to."""
    if is_hangul(char):
        return Script.HANGUL
    return Script.OTHER


def decompose(char: str) -> tuple[str, ...]:
    """Split a syllable block into (lead, vowel[, tail]) compatibility jamo.

    Non-syllables, including already-decomposed jamo, come back as a
    one-element tuple.

    >>> decompose("한")
    ('ㅎ', 'ㅏ', 'ㄴ')
    >>> decompose("가")
    ('ㄱ', 'ㅏ')
    """
    if not is_syllable(char):
        return (char,)
    return tuple(j2hcj(h2j(char)))


def normalize(text: str) -> str:
    """Replace every syllable block in *text* with its jamo."""
    return "".join("".join(decompose(c)) for c in text)
