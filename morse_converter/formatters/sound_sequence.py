"""Sound sequence formatter: one playback clip name per line.

WHY: A mixer or player needs the ordered list of clips for the Morse side
of a conversion. Writing token names (not paths) keeps the output usable
with any clip set.

HOW: Plans sound tokens from ``transcoding.code`` and writes each token's
value on its own line.

RULES:
- Always uses the Morse side (the result for encode, the source for decode)
- Empty code produces an empty file
- Output suffix: "-sound.txt"
"""

from __future__ import annotations

from typing import List

from morse_converter.core.ir import Transcoding
from morse_converter.core.sequence import plan_sound_tokens
from morse_converter.formatters.base import BaseFormatter, FormatterOutput


class SoundSequenceFormatter(BaseFormatter):
    """Formatter that lists the playback clips for the code sequence."""

    @property
    def name(self) -> str:
        return "Sound Sequence"

    def format(self, transcoding: Transcoding) -> List[FormatterOutput]:
        tokens = plan_sound_tokens(transcoding.code)
        lines = [token.value for token in tokens]
        content = "\n".join(lines)
        if content:
            content += "\n"
        return [
            FormatterOutput(
                suffix="-sound.txt",
                content=content,
            )
        ]
