"""Text ↔ Morse code encoding and decoding.

WHY: This is the heart of the converter. Everything else (CLI, formatters,
sound planning) is a thin layer over encode() and decode().

HOW: encode() decomposes Hangul syllables, lower-cases the text and maps
each character through the table chosen by the script classifier. decode()
is a two-state scanner (IDLE / ACCUMULATING) that collects dots and dashes
into a pending pattern and resolves it against one inverse table.

RULES:
- Both functions are total: they never raise for any str input
- encode(): space → "/" word boundary; unmapped characters are dropped
  without a placeholder; letter tokens separated by a single space
- decode(): space resolves the pending pattern (miss = discard); "/" emits
  a space and abandons the pending pattern without a lookup; other
  characters are ignored; the pattern is flushed at end of input
- decode() output is upper-cased and never recomposes jamo into syllables
- Dropped characters and discarded patterns are logged at DEBUG only
"""

from __future__ import annotations

import logging
from typing import List, Optional

from morse_converter.core.script import Script, classify, normalize
from morse_converter.core.tables import (
    ENGLISH_TO_MORSE,
    KOREAN_TO_MORSE,
    get_inverse_table,
)

logger = logging.getLogger(__name__)

WORD_BOUNDARY = "/"
LETTER_SEPARATOR = " "


def char_to_morse(char: str) -> Optional[str]:
    """Look up the pattern for one lower-case character or jamo.

    The table is picked by script: Hangul characters use the jamo table,
    everything else the Latin table. Returns None when unmapped.
    """
    if classify(char) is Script.HANGUL:
        return KOREAN_TO_MORSE.get(char)
    return ENGLISH_TO_MORSE.get(char)


def encode(text: str) -> str:
    """Encode text into a Morse code sequence.

    >>> encode("a b")
    '.- / -...'
    >>> encode("a@b")
    '.- -...'
    """
    normalized = normalize(text).lower()
    last_index = len(normalized) - 1

    parts: List[str] = []
    for index, char in enumerate(normalized):
        if char == " ":
            parts.append(WORD_BOUNDARY)
            parts.append(LETTER_SEPARATOR)
            continue

        pattern = char_to_morse(char)
        if pattern is None:
            logger.debug("Dropping unmapped character %r", char)
            continue

        parts.append(pattern)
        if index < last_index:
            parts.append(LETTER_SEPARATOR)

    code = "".join(parts)
    if code.endswith(LETTER_SEPARATOR):
        code = code[: -len(LETTER_SEPARATOR)]
    return code


def decode(code: str, language: str) -> str:
    """Decode a Morse code sequence using one language's inverse table.

    >>> decode(".- / -...", "EN")
    'A B'
    """
    table = get_inverse_table(language)
    if not table:
        logger.debug("No symbol table for language %r", language)

    out: List[str] = []
    pending = ""

    def _resolve() -> None:
        char = table.get(pending)
        if char is not None:
            out.append(char)
        elif pending:
            logger.debug("Discarding unknown pattern %r", pending)

    for symbol in code:
        if symbol in (".", "-"):
            pending += symbol
        elif symbol == " ":
            _resolve()
            pending = ""
        elif symbol == WORD_BOUNDARY:
            out.append(" ")
            pending = ""

    _resolve()
    return "".join(out).upper()


def split_tokens(code: str) -> List[str]:
    """Split a code sequence into its letter and word-boundary tokens."""
    return code.split()
