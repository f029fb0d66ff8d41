"""Shared test fixtures for the morse_converter test suite.

WHY: Several test modules need the same known-good conversions and a fully
configured set of playback clip paths. Centralizing them here keeps the
expected values in one place.

HOW: Fixtures that wrap reference conversions in Transcoding results and
populate or clear the sound file environment.

RULES:
- Sound file fixtures only touch the environment through monkeypatch
"""

from typing import Dict

import pytest

from morse_converter.core.ir import Transcoding, decode_code, encode_text

SOUND_ENV: Dict[str, str] = {
    "DOT_SOUND_FILE": "clips/dot.wav",
    "DASH_SOUND_FILE": "clips/dash.wav",
    "DOT_DASH_BREAK_SOUND_FILE": "clips/symbol_gap.wav",
    "LETTER_BREAK_SOUND_FILE": "clips/letter_gap.wav",
    "WORD_BREAK_SOUND_FILE": "clips/word_gap.wav",
}


@pytest.fixture
def encoded_greeting() -> Transcoding:
    """Encode result for "hi 한"."""
    return encode_text("hi 한")


@pytest.fixture
def decoded_greeting() -> Transcoding:
    """Decode result for ".... .. / -..." in English."""
    return decode_code(".... .. / -...", "EN")


@pytest.fixture
def sound_env(monkeypatch) -> Dict[str, str]:
    """Populate every playback clip variable."""
    for name, value in SOUND_ENV.items():
        monkeypatch.setenv(name, value)
    return dict(SOUND_ENV)


@pytest.fixture
def no_sound_env(monkeypatch) -> None:
    """Clear every playback clip variable."""
    for name in SOUND_ENV:
        monkeypatch.delenv(name, raising=False)
