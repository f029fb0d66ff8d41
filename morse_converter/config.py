"""Configuration constants and .env loading.

WHY: Centralizes the few configurable values (default decode language and
the playback clip paths) so they are easy to find and override without
touching code.

HOW: python-dotenv loads the .env file on import. The loader functions read
the environment at call time and give a clear error when a value is
missing or invalid.

RULES:
- DEFAULT_DECODE_LANGUAGE falls back to "EN" and must be one of
  LANGUAGE_CHOICES (case-insensitive)
- Clip paths come from DOT_SOUND_FILE, DASH_SOUND_FILE,
  DOT_DASH_BREAK_SOUND_FILE, LETTER_BREAK_SOUND_FILE, WORD_BREAK_SOUND_FILE
- Loaders raise ValueError for bad configuration, never return placeholders
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from morse_converter.core.sequence import SoundFiles
from morse_converter.core.tables import LANG_ENGLISH, LANGUAGE_CHOICES

# Load .env from the project root (where the script is run from)
load_dotenv()

DEFAULT_LANGUAGE_ENV_VAR = "DEFAULT_DECODE_LANGUAGE"


def load_default_language() -> str:
    """Load the default decode language selector from the environment.

    RULES:
    - Unset or blank falls back to "EN"
    - Raises ValueError when the value is not a known selector
    """
    value = os.getenv(DEFAULT_LANGUAGE_ENV_VAR, "").strip().upper() or LANG_ENGLISH
    if value not in LANGUAGE_CHOICES:
        raise ValueError(
            "{} is set to '{}'. Supported languages: {}".format(
                DEFAULT_LANGUAGE_ENV_VAR, value, ", ".join(sorted(LANGUAGE_CHOICES))
            )
        )
    return value


# SoundFiles field → environment variable holding its clip path.
SOUND_FILE_ENV_VARS: dict[str, str] = {
    "dot": "DOT_SOUND_FILE",
    "dash": "DASH_SOUND_FILE",
    "symbol_gap": "DOT_DASH_BREAK_SOUND_FILE",
    "letter_gap": "LETTER_BREAK_SOUND_FILE",
    "word_gap": "WORD_BREAK_SOUND_FILE",
}


def load_sound_files() -> SoundFiles:
    """Load playback clip paths from the environment.

    RULES:
    - Raises ValueError listing every unset or empty variable
    - Never returns a placeholder path
    """
    paths: dict[str, str] = {}
    missing: list[str] = []
    for field_name, env_var in SOUND_FILE_ENV_VARS.items():
        value = os.getenv(env_var, "").strip()
        if not value:
            missing.append(env_var)
        paths[field_name] = value

    if missing:
        raise ValueError(
            "Sound files not configured. "
            "Set {} in the environment or the .env file.".format(", ".join(missing))
        )
    return SoundFiles(**paths)
