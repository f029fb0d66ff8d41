"""Result container passed from the codec to the formatters.

WHY: Formatters need more than the output string: the JSON report wants
the source text and language, and the sound sequence formatter must know
whether the result is code or plain text. One small dataclass carries all
of it so formatters stay independent of how the result was produced.

RULES:
- direction is "encode" or "decode"
- language is the decode selector, or None for encode (auto-detected)
- code is whichever of source/result holds the Morse sequence
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from morse_converter.core.codec import decode, encode

ENCODE = "encode"
DECODE = "decode"


@dataclass
class Transcoding:
    """One completed encode or decode call."""

    direction: str
    source: str
    result: str
    language: Optional[str] = None

    @property
    def code(self) -> str:
        """The Morse side of the transcoding."""
        return self.result if self.direction == ENCODE else self.source


def encode_text(text: str) -> Transcoding:
    """Encode *text* and wrap the result."""
    return Transcoding(direction=ENCODE, source=text, result=encode(text))


def decode_code(code: str, language: str) -> Transcoding:
    """Decode *code* with *language* and wrap the result."""
    return Transcoding(
        direction=DECODE,
        source=code,
        result=decode(code, language),
        language=language,
    )
