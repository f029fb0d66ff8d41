"""Plain text formatter: the bare result string.

RULES:
- Content is the result followed by a single newline
- Empty results produce an empty file (no newline)
- Output suffix: "-morse.txt"
"""

from __future__ import annotations

from typing import List

from morse_converter.core.ir import Transcoding
from morse_converter.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that writes the transcoded string as-is."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, transcoding: Transcoding) -> List[FormatterOutput]:
        content = transcoding.result
        if content:
            content += "\n"
        return [
            FormatterOutput(
                suffix="-morse.txt",
                content=content,
            )
        ]
