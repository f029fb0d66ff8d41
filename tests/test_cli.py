"""Unit tests for the command-line interface.

WHY: The CLI is the only user-facing surface. Broken argument handling or
output routing makes the converter unusable from scripts.

HOW: main() is called with explicit argv lists; capsys captures stdout and
stderr; tmp_path holds saved output files.

RULES:
- Results go to stdout, status and errors go to stderr
- Configuration and usage errors exit with code 1
"""

import json

import pytest

from morse_converter.cli import build_parser, main


class TestEncodeCommand:

    def test_prints_code(self, capsys):
        main(["encode", "hello", "world"])
        out = capsys.readouterr().out
        assert out == ".... . .-.. .-.. --- / .-- --- .-. .-.. -..\n"

    def test_hangul(self, capsys):
        main(["encode", "한글"])
        assert capsys.readouterr().out == ".--- . ..-. .-.. -.. ...-\n"

    def test_unmapped_only_prints_nothing(self, capsys):
        main(["encode", "@"])
        assert capsys.readouterr().out == ""

    def test_json_format(self, capsys):
        main(["encode", "--formats", "json_report", "sos"])
        report = json.loads(capsys.readouterr().out)
        assert report["result"] == "... --- ..."
        assert report["direction"] == "encode"


class TestDecodeCommand:

    def test_default_language_is_english(self, monkeypatch, capsys):
        monkeypatch.delenv("DEFAULT_DECODE_LANGUAGE", raising=False)
        main(["decode", ".- / -..."])
        assert capsys.readouterr().out == "A B\n"

    def test_default_language_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("DEFAULT_DECODE_LANGUAGE", "KR")
        main(["decode", ".-.."])
        assert capsys.readouterr().out == "ㄱ\n"

    def test_invalid_default_language_fails(self, monkeypatch, capsys):
        monkeypatch.setenv("DEFAULT_DECODE_LANGUAGE", "JP")
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", ".- / -..."])
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: DEFAULT_DECODE_LANGUAGE" in captured.err

    def test_explicit_lang_ignores_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("DEFAULT_DECODE_LANGUAGE", "JP")
        main(["decode", "--lang", "EN", ".-"])
        assert capsys.readouterr().out == "A\n"

    def test_korean(self, capsys):
        main(["decode", "--lang", "KR", ".--- . ..-. .-.. -.. ...-"])
        assert capsys.readouterr().out == "ㅎㅏㄴㄱㅡㄹ\n"

    def test_unknown_language_rejected(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "--lang", "JP", ".-"])
        assert excinfo.value.code == 2


class TestOutputFiles:

    def test_saves_to_output_dir(self, tmp_path, capsys):
        main([
            "encode", "--output-dir", str(tmp_path), "--name", "greeting",
            "--formats", "plain_text,json_report", "hi",
        ])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved: greeting-morse.txt" in captured.err
        assert (tmp_path / "greeting-morse.txt").read_text(encoding="utf-8") == ".... ..\n"
        assert (tmp_path / "greeting-morse.json").is_file()

    def test_conflict_gets_numeric_suffix(self, tmp_path):
        main(["encode", "--output-dir", str(tmp_path), "a"])
        main(["encode", "--output-dir", str(tmp_path), "b"])
        assert (tmp_path / "morse-morse.txt").read_text(encoding="utf-8") == ".-\n"
        assert (tmp_path / "morse-morse-2.txt").read_text(encoding="utf-8") == "-...\n"

    def test_missing_output_dir(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "--output-dir", str(tmp_path / "nope"), "a"])
        assert excinfo.value.code == 1
        assert "Output directory does not exist" in capsys.readouterr().err

    def test_unknown_format(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "--formats", "wav", "a"])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Unknown format 'wav'" in err
        assert "plain_text" in err


class TestSequenceCommand:

    def test_token_names(self, capsys):
        main(["sequence", ". / -"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["dot", "symbol_gap", "word_gap", "dash", "symbol_gap"]

    def test_files(self, sound_env, capsys):
        main(["sequence", "--files", ". ."])
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "clips/dot.wav",
            "clips/symbol_gap.wav",
            "clips/letter_gap.wav",
            "clips/dot.wav",
            "clips/symbol_gap.wav",
        ]

    def test_files_without_config(self, no_sound_env, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["sequence", "--files", "."])
        assert excinfo.value.code == 1
        assert "DOT_SOUND_FILE" in capsys.readouterr().err


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_decode_language_choices(self):
        args = build_parser().parse_args(["decode", "--lang", "KR", ".-"])
        assert args.lang == "KR"
        assert args.code == [".-"]
