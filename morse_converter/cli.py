"""Command-line interface for the Morse converter.

WHY: Users need a simple way to convert text to Morse code and back from
the terminal, and to get the playback clip order for a code sequence.
The CLI wires the core codec, the sound planner and the pluggable
formatters behind one command.

HOW: argparse with three subcommands — ``encode``, ``decode`` and
``sequence``. encode/decode run the selected formatters and either print
their content to stdout or save files to --output-dir. sequence prints
sound token names, or the configured clip paths with --files.

RULES:
- Positional words are joined with single spaces
- decode --lang is one of LANGUAGE_CHOICES (default: $DEFAULT_DECODE_LANGUAGE, then EN)
- --formats: comma-separated formatter keys (default: plain_text)
- Output naming: {name}{suffix}, numeric suffix for conflicts (-morse-2.txt)
- Status output goes to stderr; results go to stdout
- Configuration errors print "Error: ..." to stderr and exit 1
- -v/--verbose turns on DEBUG logging (dropped characters, unknown patterns)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from morse_converter.config import load_default_language, load_sound_files
from morse_converter.core.ir import Transcoding, decode_code, encode_text
from morse_converter.core.sequence import plan_sound_tokens, resolve_sound_files
from morse_converter.core.tables import LANGUAGE_CHOICES
from morse_converter.formatters import DEFAULT_FORMATS, FORMATTERS
from morse_converter.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _parse_formats(formats: Optional[str]) -> List[str]:
    """Split and validate the --formats value.

    RULES:
    - None means DEFAULT_FORMATS
    - Unknown keys exit with an error listing the available formats
    """
    if not formats:
        return list(DEFAULT_FORMATS)

    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. morse-morse.txt)
    - Conflict: insert a counter before the extension (morse-morse-2.txt)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _emit(transcoding: Transcoding, args: argparse.Namespace) -> None:
    """Run the selected formatters and print or save their output."""
    format_keys = _parse_formats(args.formats)

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        logger.debug("Running %s formatter", formatter.name)
        for output in formatter.format(transcoding):
            if output_dir is None:
                sys.stdout.write(output.content)
                continue
            saved_path = _save_output(output, args.name, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    if output_dir is not None:
        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def _run_encode(args: argparse.Namespace) -> None:
    text = " ".join(args.text)
    _emit(encode_text(text), args)


def _run_decode(args: argparse.Namespace) -> None:
    code = " ".join(args.code)
    language = args.lang
    if language is None:
        try:
            language = load_default_language()
        except ValueError as e:
            _fail(str(e))
    _emit(decode_code(code, language), args)


def _run_sequence(args: argparse.Namespace) -> None:
    code = " ".join(args.code)
    tokens = plan_sound_tokens(code)

    if args.files:
        try:
            sound_files = load_sound_files()
        except ValueError as e:
            _fail(str(e))
        lines = resolve_sound_files(tokens, sound_files)
    else:
        lines = [token.value for token in tokens]

    for line in lines:
        print(line)


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), ", ".join(DEFAULT_FORMATS)
             ),
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: print to stdout).",
    )
    parser.add_argument(
        "--name",
        default="morse",
        help="File name stem for saved output (default: %(default)s).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separated from main() so tests can inspect the parser without running
    a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="morse_converter",
        description="Convert English or Korean text to Morse code and back.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log dropped characters and unknown patterns.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Text to Morse code.")
    encode_parser.add_argument("text", nargs="+", help="Text to encode.")
    _add_output_options(encode_parser)
    encode_parser.set_defaults(handler=_run_encode)

    decode_parser = subparsers.add_parser("decode", help="Morse code to text.")
    decode_parser.add_argument("code", nargs="+", help="Morse code to decode.")
    decode_parser.add_argument(
        "--lang",
        choices=sorted(LANGUAGE_CHOICES.keys()),
        default=None,
        help="Language to decode into (default: $DEFAULT_DECODE_LANGUAGE, else EN).",
    )
    _add_output_options(decode_parser)
    decode_parser.set_defaults(handler=_run_decode)

    sequence_parser = subparsers.add_parser(
        "sequence", help="Playback clip order for Morse code.",
    )
    sequence_parser.add_argument("code", nargs="+", help="Morse code to plan.")
    sequence_parser.add_argument(
        "--files",
        action="store_true",
        help="Print configured clip paths instead of token names.",
    )
    sequence_parser.set_defaults(handler=_run_sequence)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args.handler(args)


if __name__ == "__main__":
    main()
