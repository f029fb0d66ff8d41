"""Core codec, symbol tables and script classification.

WHY: The core package holds the pure, stateless parts of the converter:
the symbol tables, the Hangul classifier, encode/decode and sound
sequence planning. None of it does I/O.

HOW: script.py classifies and decomposes characters, tables.py holds the
read-only symbol tables, codec.py implements encode/decode, sequence.py
plans playback clips and ir.py wraps results for the formatters.

RULES:
- Nothing in core raises for malformed input; misses are dropped
- Tables are built once at import and never mutated
"""

from morse_converter.core.codec import decode, encode

__all__ = ["decode", "encode"]
