"""Sound sequence planning for code playback.

WHY: Playing Morse code means concatenating short clips (dot, dash and
three lengths of silence) in the right order. Working out that order is
plain text processing and is independent of whatever mixes or plays the
clips, so it lives here next to the codec.

HOW: The encoder writes a word boundary as " / ". That is first collapsed
to a single "/" so a word gap is not surrounded by letter gaps. Each
remaining symbol is then mapped to one or two SoundToken values. Resolving
tokens to file paths is a separate step driven by a SoundFiles record.

RULES:
- "." → DOT, SYMBOL_GAP; "-" → DASH, SYMBOL_GAP
- " " → LETTER_GAP; "/" → WORD_GAP
- Any other character is ignored
- The resolved list contains exactly one path per token
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List


class SoundToken(enum.Enum):
    """One clip in a playback sequence."""

    DOT = "dot"
    DASH = "dash"
    SYMBOL_GAP = "symbol_gap"
    LETTER_GAP = "letter_gap"
    WORD_GAP = "word_gap"


_SYMBOL_TOKENS: Dict[str, List[SoundToken]] = {
    ".": [SoundToken.DOT, SoundToken.SYMBOL_GAP],
    "-": [SoundToken.DASH, SoundToken.SYMBOL_GAP],
    " ": [SoundToken.LETTER_GAP],
    "/": [SoundToken.WORD_GAP],
}


@dataclass
class SoundFiles:
    """Clip file paths, one per SoundToken kind."""

    dot: str
    dash: str
    symbol_gap: str
    letter_gap: str
    word_gap: str

    def path_for(self, token: SoundToken) -> str:
        return getattr(self, token.value)


def plan_sound_tokens(code: str) -> List[SoundToken]:
    """Turn a code sequence into an ordered list of sound tokens.

    >>> [t.value for t in plan_sound_tokens(".- / -")]
    ['dot', 'symbol_gap', 'dash', 'symbol_gap', 'word_gap', 'dash', 'symbol_gap']
    """
    collapsed = code.replace(" / ", "/")
    tokens: List[SoundToken] = []
    for symbol in collapsed:
        tokens.extend(_SYMBOL_TOKENS.get(symbol, ()))
    return tokens


def resolve_sound_files(tokens: List[SoundToken], sound_files: SoundFiles) -> List[str]:
    """Map each token to its configured clip path, preserving order."""
    return [sound_files.path_for(token) for token in tokens]
