"""Output formatter registry.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json_report"]()``.

RULES:
- Keys are snake_case identifiers (used in the --formats flag)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from morse_converter.formatters.json_report import JSONReportFormatter
from morse_converter.formatters.plain_text import PlainTextFormatter
from morse_converter.formatters.sound_sequence import SoundSequenceFormatter

if TYPE_CHECKING:
    from morse_converter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "json_report": JSONReportFormatter,
    "sound_sequence": SoundSequenceFormatter,
}

DEFAULT_FORMATS = ["plain_text"]
