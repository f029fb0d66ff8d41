"""JSON report formatter: result plus its inputs and tokenization.

WHY: Callers that post-process conversions (bots, scripts, tests) want
the source, the language and the individual tokens without re-parsing
the code sequence themselves.

HOW: Builds a flat dict and serializes it with ``ensure_ascii=False`` so
Hangul stays readable.

RULES:
- Keys: direction, language, source, result, tokens
- language is null for encode (scripts are auto-detected)
- tokens: code tokens ("/" included) for encode, result characters for decode
- Output suffix: "-morse.json"
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from morse_converter.core.codec import split_tokens
from morse_converter.core.ir import ENCODE, Transcoding
from morse_converter.formatters.base import BaseFormatter, FormatterOutput


def build_report(transcoding: Transcoding) -> Dict[str, Any]:
    """Build the JSON-serializable report dict for one transcoding."""
    if transcoding.direction == ENCODE:
        tokens = split_tokens(transcoding.result)
    else:
        tokens = list(transcoding.result)

    return {
        "direction": transcoding.direction,
        "language": transcoding.language,
        "source": transcoding.source,
        "result": transcoding.result,
        "tokens": tokens,
    }


class JSONReportFormatter(BaseFormatter):
    """Formatter that writes a JSON report of the conversion."""

    @property
    def name(self) -> str:
        return "JSON Report"

    def format(self, transcoding: Transcoding) -> List[FormatterOutput]:
        report = build_report(transcoding)
        return [
            FormatterOutput(
                suffix="-morse.json",
                content=json.dumps(report, ensure_ascii=False, indent=2) + "\n",
            )
        ]
