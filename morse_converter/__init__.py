"""Morse converter: text ↔ Morse code for English and Korean.

WHY: Morse code is usually charted for Latin letters only. This package
covers English alphanumerics and punctuation as well as Korean Hangul,
encoded jamo by jamo.

HOW: Two-stage pipeline: transcode (core codec over static tables), then
format (pluggable formatters for plain text, JSON and sound sequences).

RULES:
- encode() auto-detects the script of each character
- decode() uses the single table picked by the language selector
- The core never raises; unmapped input is silently dropped
"""

from morse_converter.core.codec import decode, encode

__version__ = "0.1.0"

__all__ = ["decode", "encode"]
