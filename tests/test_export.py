"""Tests for solutionparser.export module."""

import pytest

from solutionparser.export import guess_format, to_csv, to_text, write_output


class TestFormats:
    """Tests for to_text and to_csv."""

    def test_text(self):
        assert to_text(["a b.", "c d."]) == "a b.\nc d."

    def test_text_empty(self):
        assert to_text([]) == ""

    def test_csv_quotes_every_line(self):
        assert to_csv(["I eat an apple.", "I eat a banana."]) == '"I eat an apple."\n"I eat a banana."\n'

    def test_csv_inner_quotes_doubled(self):
        assert to_csv(['He said "hi".']) == '"He said ""hi""."\n'

    def test_csv_comma(self):
        assert to_csv(["Yes, I do."]) == '"Yes, I do."\n'

    def test_csv_unicode(self):
        assert to_csv(["私は学生です。"]) == '"私は学生です。"\n'


class TestWriteOutput:
    """Tests for guess_format and write_output."""

    def test_guess_format(self):
        assert guess_format("out.csv") == "csv"
        assert guess_format("OUT.CSV") == "csv"
        assert guess_format("out.txt") == "text"
        assert guess_format("out") == "text"

    def test_write_text(self, tmp_path):
        path = write_output(["a.", "b."], tmp_path / "out.txt")
        assert path.read_text(encoding="utf-8") == "a.\nb.\n"

    def test_write_csv(self, tmp_path):
        path = write_output(["a.", "b."], tmp_path / "out.csv")
        assert path.read_text(encoding="utf-8") == '"a."\n"b."\n'

    def test_explicit_format(self, tmp_path):
        path = write_output(["a."], tmp_path / "out.txt", fmt="csv")
        assert path.read_text(encoding="utf-8") == '"a."\n'

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError, match="unknown output format"):
            write_output(["a."], tmp_path / "out.txt", fmt="json")
