"""Tests for the solutionparser command line."""

import io
import sys

import pytest

from solutionparser.__main__ import _main
from solutionparser.locales import clear_cache, use_locales


@pytest.fixture(autouse=True)
def restore_locales():
    yield
    use_locales(None)
    clear_cache()


class TestExpand:
    """Expanding patterns from arguments, files and stdin."""

    def test_arguments(self, capsys):
        assert _main(["I eat [an apple/a banana].", "--locale", "en"]) == 0
        assert capsys.readouterr().out == "I eat a banana.\nI eat an apple.\n"

    def test_default_locale(self, capsys):
        assert _main(["[a/b] c"]) == 0
        assert capsys.readouterr().out == "a c\nb c\n"

    def test_file(self, capsys, tmp_path):
        path = tmp_path / "patterns.txt"
        path.write_text("Ich sehe [den/diesen] Karton.\n\nHallo.\n", encoding="utf-8")
        assert _main(["--file", str(path), "-l", "de"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Ich sehe den Karton.",
            "Ich sehe diesen Karton.",
            "Hallo.",
        ]

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("[私/僕]は学生です。\n"))
        assert _main(["--locale", "ja"]) == 0
        assert capsys.readouterr().out.splitlines() == ["僕は学生です。", "私は学生です。"]

    def test_empty_input(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        assert _main([]) == 0
        assert capsys.readouterr().out == ""

    def test_limit(self, capsys):
        assert _main(["[a/b/c] x", "--limit", "2"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a x", "b x"]

    def test_negative_limit_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc:
            _main(["[a/b/c] x", "--limit", "-1"])
        assert exc.value.code == 2
        assert "--limit must be >= 0" in capsys.readouterr().err

    def test_csv(self, capsys):
        assert _main(["[a/b] x", "--csv"]) == 0
        assert capsys.readouterr().out == '"a x"\n"b x"\n'

    def test_output_file(self, capsys, tmp_path):
        path = tmp_path / "out.csv"
        assert _main(["[a/b] x", "--output", str(path)]) == 0
        assert path.read_text(encoding="utf-8") == '"a x"\n"b x"\n'
        assert capsys.readouterr().out == ""


class TestInspect:
    """Counting, references and structure."""

    def test_count(self, capsys):
        assert _main(["I eat [an apple/a banana].", "[a/b] c", "--count"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "patterns:  2",
            "solutions: 3",
            "sentences: 4",
        ]

    def test_references(self, capsys):
        assert _main(["[a/b] x", "Hello.", "--references"]) == 0
        assert capsys.readouterr().out.splitlines() == ["* a x", "  Hello."]

    def test_structure(self, capsys):
        assert _main(["[a b/c d] x", "--structure"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "PATTERN size=2",
            "  SET position=0 branch_size=1",
            "    BRANCH 'a' ' ' 'b'",
            "    BRANCH 'c' ' ' 'd'",
            "  TOK ' '",
            "  TOK 'x'",
        ]

    def test_verbose(self, capsys):
        assert _main(["[a/b] x", "-v"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "a x\nb x\n"
        assert "patterns=1 solutions=1 lines=2" in captured.err


class TestLocales:
    """Locale selection and errors."""

    def test_list_locales(self, capsys):
        assert _main(["--list-locales"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "en\tEnglish" in lines
        assert "ja\tJapanese\t(no word separators)" in lines

    def test_unsupported_locale(self, capsys):
        assert _main(["a", "--locale", "xx"]) == 1
        assert "Error: unsupported locale: 'xx'" in capsys.readouterr().err

    def test_custom_table(self, capsys, tmp_path):
        path = tmp_path / "locales.yml"
        path.write_text("locales:\n  - {code: xx, name: Test}\n", encoding="utf-8")
        assert _main(["[a/b] c", "--locales", str(path), "--locale", "xx"]) == 0
        assert capsys.readouterr().out == "a c\nb c\n"

    def test_missing_table(self, capsys, tmp_path):
        assert _main(["a", "--locales", str(tmp_path / "missing.yml")]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_missing_file(self, capsys, tmp_path):
        assert _main(["--file", str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestSelftest:
    def test_selftest(self, capsys):
        assert _main(["--selftest"]) == 0
        assert "selftest: OK" in capsys.readouterr().out
