"""Formatter interface shared by every output format.

WHY: The CLI prints or saves whatever the chosen formatters produce and
should not care which format it is handling.

RULES:
- ``format()`` returns a list of outputs; most formatters return one
- ``suffix`` starts with a hyphen and is appended to the --name stem
- Content is always text; the CLI writes it as UTF-8
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from morse_converter.core.ir import Transcoding


@dataclass
class FormatterOutput:
    """Text for one output file plus the suffix it is saved under."""

    suffix: str
    content: str


class BaseFormatter(ABC):
    """A named conversion from a Transcoding to output files.

    New formats subclass this and get a key in ``FORMATTERS``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used in log messages."""

    @abstractmethod
    def format(self, transcoding: Transcoding) -> list[FormatterOutput]:
        """Render *transcoding*."""
