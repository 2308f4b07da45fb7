# -------------------------------------
# Solutions - indexing and unfolding
# -------------------------------------
"""
Generate the solutions of a pattern set, one index at a time.

Solutions are numbered contiguously across the patterns of a set. Within a
pattern, an index is decomposed in mixed radix over the branch sets: the
branch taken in a branch set is index // branch_size, the rest of the index
selects the branches of the following sets.

A Solution may still hold several alternatives at some positions (a choice
between tokens). Unfolding expands them into literal sentences.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from itertools import product
from typing import Iterable, Iterator

from .collation import Collator
from .patterns import Pattern, PatternSet, parse_patterns
from .tokens import title_case


@dataclass(frozen=True)
class Solution:
    # language of the solution
    locale: str
    # first variation of the solution, usable as a reference and for sorting
    reference: str
    # one group of alternatives per position
    tokens: tuple[tuple[str, ...], ...]
    # whether at least one position has several alternatives
    is_complex: bool

    @property
    def size(self) -> int:
        """Number of sentences the solution unfolds to."""
        return math.prod(len(group) for group in self.tokens)


# ============================================================
# Indexing
# ============================================================

def get_pattern_solution(pattern: Pattern, index: int, locale: str) -> Solution:
    """Build the solution at index (0 <= index < pattern.size) of a pattern."""
    tokens: list[tuple[str, ...]] = []
    reference: list[str] = []
    is_complex = False
    title_case_next = False

    def append_choice(choice: list[str]) -> None:
        nonlocal title_case_next
        # choices never consist only of whitespace
        if title_case_next:
            title_case_next = False
            choice = [title_case(c, locale) for c in choice]
        tokens.append(tuple(choice))
        reference.append(choice[0])

    def append_token(token: str) -> None:
        nonlocal title_case_next
        if title_case_next and token.strip():
            title_case_next = False
            token = title_case(token, locale)
        tokens.append((token,))
        reference.append(token)

    position = 0
    for branch_set in pattern.branch_sets:
        for token in pattern.shared_tokens[position:branch_set.token_position]:
            append_token(token)

        branch = branch_set.branches[index // branch_set.branch_size]

        if branch.first_choice:
            is_complex = True
            append_choice(branch.first_choice)

        for token in branch.shared_tokens:
            append_token(token)

        if branch.last_choice:
            is_complex = True
            append_choice(branch.last_choice)

        position = branch_set.token_position
        index %= branch_set.branch_size
        title_case_next = title_case_next or branch.title_case_next_token

    for token in pattern.shared_tokens[position:]:
        append_token(token)

    return Solution(
        locale=locale,
        reference="".join(reference),
        tokens=tuple(tokens),
        is_complex=is_complex,
    )


def get_solution(pattern_set: PatternSet, index: int) -> Solution | None:
    """Return the solution at index, or None if index is out of range."""
    if index < 0:
        return None
    for pattern in pattern_set.patterns:
        if index >= pattern.size:
            index -= pattern.size
        else:
            return get_pattern_solution(pattern, index, pattern_set.locale)
    return None


def iter_solutions(pattern_set: PatternSet) -> Iterator[Solution]:
    """Yield every solution of a pattern set, in index order."""
    for i in range(pattern_set.size):
        solution = get_solution(pattern_set, i)
        if solution is None:
            raise IndexError(f"solution {i} not found in pattern set of size {pattern_set.size}")
        yield solution


def parse_solutions(
    lines: Iterable[str] | str,
    locale: str,
    collator: Collator | None = None,
) -> list[Solution]:
    """
    Parse patterns and generate all their solutions.

    A collator passed by the caller keeps its memo; otherwise one is used for
    this call only.
    """
    owned = collator is None
    if owned:
        collator = Collator(locale)
    try:
        pattern_set = parse_patterns(lines, locale, collator)
        # generating solutions one by one is cheap: no combination is built twice
        return list(iter_solutions(pattern_set))
    finally:
        if owned:
            collator.clear()


# ============================================================
# Unfolding
# ============================================================

_REPEATED_SPACE_RE = re.compile(r"(\s)\1+")


def clean_sentence(sentence: str) -> str:
    """Trim, and collapse runs of the same whitespace character."""
    return _REPEATED_SPACE_RE.sub(r"\1", sentence.strip())


def unfold_solution(solution: Solution) -> list[str]:
    """All the literal sentences of a solution."""
    return [clean_sentence("".join(picks)) for picks in product(*solution.tokens)]


def unfold_solutions(solutions: Iterable[Solution]) -> list[str]:
    out: list[str] = []
    for solution in solutions:
        out.extend(unfold_solution(solution))
    return out


def expand_patterns(lines: Iterable[str] | str, locale: str) -> list[str]:
    """
    Expand patterns (one per line) into every literal sentence they denote,
    in pattern then solution order. Blank lines are skipped.
    Identical sentences from different patterns are all kept.
    """
    return unfold_solutions(parse_solutions(lines, locale))


# ============================================================
# Selftest
# ============================================================

def _selftest() -> None:
    assert expand_patterns("I eat [an apple/a banana].", "en") == [
        "I eat a banana.",
        "I eat an apple.",
    ]
    assert expand_patterns("[diesen Karton/den Karton/diesen Kasten/den Kasten]", "de") == [
        "den Karton",
        "den Kasten",
        "diesen Karton",
        "diesen Kasten",
    ]
    assert len(parse_solutions("[diesen Karton/den Karton/diesen Kasten/den Kasten]", "de")) == 1
    assert expand_patterns("[/Then] he left.", "en") == ["He left.", "Then he left."]
    assert expand_patterns("[a/b]s [c/d]", "en") == ["as c", "as d", "bs c", "bs d"]
    assert expand_patterns("a  b", "en") == ["a b"]
    assert expand_patterns("[私/僕]は学生です。", "ja") == ["僕は学生です。", "私は学生です。"]

    pattern_set = parse_patterns(["[a b/c d] x", "[c d/e f/g h] y"], "en")
    assert pattern_set.size == 5
    assert get_solution(pattern_set, 5) is None
    assert get_solution(pattern_set, 2).reference == "c d y"

    print("selftest: OK")
