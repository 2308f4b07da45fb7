"""Tests for solutionparser.collation module."""

import threading

from solutionparser.collation import (
    Collator,
    collation_key,
    compare_strings_ci,
)


class TestCompareStringsCi:
    """Tests for compare_strings_ci ordering."""

    def test_basic_order(self):
        assert compare_strings_ci("a", "b", "en") == -1
        assert compare_strings_ci("b", "a", "en") == 1
        assert compare_strings_ci("a", "a", "en") == 0

    def test_uppercase_first_on_ties(self):
        assert compare_strings_ci("A", "a", "en") == -1
        assert compare_strings_ci("a", "A", "en") == 1

    def test_case_is_not_primary(self):
        assert compare_strings_ci("a", "B", "en") == -1
        assert compare_strings_ci("B", "c", "en") == -1

    def test_numeric(self):
        assert compare_strings_ci("item 2", "item 10", "en") == -1
        assert compare_strings_ci("2", "10", "en") == -1

    def test_digits_before_letters(self):
        assert compare_strings_ci("1", "a", "en") == -1

    def test_punctuation_ignored(self):
        assert compare_strings_ci("don't", "dont", "en") == 0

    def test_whitespace_ignored(self):
        assert compare_strings_ci("a banana", "an apple", "en") == -1

    def test_accent_after_base_letter(self):
        assert compare_strings_ci("e", "é", "fr") == -1
        assert compare_strings_ci("é", "f", "fr") == -1

    def test_accent_before_case(self):
        assert compare_strings_ci("é", "E", "fr") == 1

    def test_turkish_dotless_i(self):
        assert compare_strings_ci("Istanbul", "istanbul", "en") == -1
        assert compare_strings_ci("Istanbul", "istanbul", "tr") == 1

    def test_turkish_uppercase_first(self):
        assert compare_strings_ci("Ilık", "ılık", "tr") == -1
        assert compare_strings_ci("ılık", "Ilık", "tr") == 1
        assert compare_strings_ci("İzmir", "izmir", "tr") == -1

    def test_devanagari_vowel_signs(self):
        assert compare_strings_ci("का", "कि", "hi") == -1
        assert compare_strings_ci("कि", "कु", "hi") == -1
        assert compare_strings_ci("का", "का", "hi") == 0

    def test_key_shape(self):
        primary, secondary, tertiary = collation_key("Ab1", "en")
        assert primary == ((1, "ab"), (0, 1))
        assert secondary == ("", "", "")
        assert tertiary == (0, 1, 1)


class TestCollator:
    """Tests for the memoized Collator."""

    def test_sort(self):
        c = Collator("en")
        assert c.sort(["b", "a", "B", "A"]) == ["A", "a", "B", "b"]

    def test_sort_devanagari(self):
        c = Collator("hi")
        assert c.sort(["कु", "का", "कि"]) == ["का", "कि", "कु"]
        assert c.sort(["कि", "का", "कु"]) == ["का", "कि", "कु"]

    def test_sort_numeric(self):
        c = Collator("en")
        assert c.sort(["item 10", "item 2", "item 1"]) == ["item 1", "item 2", "item 10"]

    def test_sort_is_stable(self):
        c = Collator("en")
        assert c.sort(["a.", "a"]) == ["a.", "a"]
        assert c.sort(["a", "a."]) == ["a", "a."]

    def test_memo(self):
        c = Collator("en")
        assert c.compare("a", "b") == -1
        assert len(c) == 1
        assert c.compare("a", "b") == -1
        assert len(c) == 1
        assert c.compare("b", "a") == 1
        assert len(c) == 2

    def test_clear(self):
        c = Collator("en")
        c.sort(["c", "b", "a"])
        assert len(c) > 0
        c.clear()
        assert len(c) == 0

    def test_empty_collator_is_usable(self):
        c = Collator("en")
        assert len(c) == 0
        assert c.sort([]) == []

    def test_shared_between_threads(self):
        c = Collator("en")
        words = [f"w{i}" for i in range(50)]
        results = []

        def work():
            results.append(c.sort(reversed(words)))

        threads = [threading.Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r == words for r in results)
        assert len(results) == 4
