# -------------------------------------
# Pattern builder
# -------------------------------------
"""
Parse solution patterns into a structural form.

A pattern is a sentence with bracketed choices, alternatives separated by "/":

    "I eat [an apple/a banana]."

Stage 1 (scan_segments) splits the sentence into:
  - Lit(text)                  shared text
  - ChoiceSet("REGION", raw)   separator locales: a run of [...] groups glued to
                               non-space text, e.g. "[a/b]s" or "x[a/b][c/d]"
  - ChoiceSet("GROUP", raw)    other locales: the inner text of one [...] group

Stage 2 (build_choices) turns a choice set into the list of its full
alternatives.

Stage 3 (build_branches) factors the alternatives into branches. Alternatives
with the same number of tokens that only differ by their first and/or last
token share a single branch, so that:

    "[diesen Karton/den Karton/diesen Kasten/den Kasten]"

yields one branch "[den/diesen] [Karton/Kasten]" instead of four.

A Pattern is the list of shared tokens, interleaved with branch sets. Each
solution of a pattern takes exactly one branch from every branch set.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Hashable, Iterable, Literal

from .collation import Collator
from .locales import uses_word_separators
from .tokens import is_sentence_start, normalize, starts_with_capital, tokenize


# ============================================================
# Segments (scanner output)
# ============================================================

ChoiceKind = Literal["REGION", "GROUP"]

@dataclass(frozen=True)
class Lit:
    text: str

@dataclass(frozen=True)
class ChoiceSet:
    kind: ChoiceKind
    raw: str  # REGION: full region text, brackets included; GROUP: inner text

Segment = Lit | ChoiceSet


# ============================================================
# Pattern structure
# ============================================================

@dataclass
class PatternBranch:
    """One path through a choice set."""
    shared_tokens: list[str] = field(default_factory=list)
    first_choice: list[str] = field(default_factory=list)
    last_choice: list[str] = field(default_factory=list)
    # set on an empty alternative starting a sentence: the next non-space token must be title-cased
    title_case_next_token: bool = False

    def fold_single_choices(self) -> None:
        """A choice between one token is no choice."""
        if len(self.first_choice) == 1:
            self.shared_tokens.insert(0, self.first_choice.pop())
        if len(self.last_choice) == 1:
            self.shared_tokens.append(self.last_choice.pop())


@dataclass
class PatternBranchSet:
    branches: list[PatternBranch]
    # position of the branches relative to the shared tokens of the pattern
    token_position: int
    # number of solutions stemming from each branch
    branch_size: int = 0


@dataclass
class Pattern:
    size: int
    shared_tokens: list[str]
    branch_sets: list[PatternBranchSet]


@dataclass
class PatternSet:
    locale: str
    size: int = 0
    patterns: list[Pattern] = field(default_factory=list)


# ============================================================
# regexes
# ============================================================

# separator locales: adjacent [...] groups, with the non-space text glued to them
_REGION_RE = re.compile(r"(?:[^\s\[]*\[[^\[]+\][^\s\[]*)+")
# [...] groups inside a region
_SUBSET_RE = re.compile(r"\[([^\[]+)\]")
# other locales: one [...] group
_GROUP_RE = re.compile(r"\[([^\]]+)\]")
# text after the last group of a region: (kept text)(punctuation)
_TRAILING_RE = re.compile(r"(.*?)([\W_]*)", re.S)

CHOICE_SEP = "/"


# ============================================================
# Stage 1: scanner
# ============================================================

def _strip_trailing_punctuation(region: str) -> str:
    """Drop the punctuation ending a region, so that it is not repeated in every alternative."""
    last_end = 0
    for m in _SUBSET_RE.finditer(region):
        last_end = m.end()
    punctuation = _TRAILING_RE.fullmatch(region[last_end:]).group(2)
    return region[: len(region) - len(punctuation)] if punctuation else region


def scan_segments(sentence: str, locale: str) -> list[Segment]:
    """
    Split a sentence into Lit and ChoiceSet segments.
    Unmatched brackets are kept as literal text.
    """
    separators = uses_word_separators(locale)
    segs: list[Segment] = []
    index = 0

    for m in (_REGION_RE if separators else _GROUP_RE).finditer(sentence):
        if m.start() > index:
            segs.append(Lit(sentence[index:m.start()]))
        if separators:
            region = _strip_trailing_punctuation(m.group(0))
            segs.append(ChoiceSet("REGION", region))
            # the punctuation goes with the next literal
            index = m.start() + len(region)
        else:
            segs.append(ChoiceSet("GROUP", m.group(1)))
            index = m.end()

    if index < len(sentence):
        segs.append(Lit(sentence[index:]))
    return segs


# ============================================================
# Stage 2: full alternatives of a choice set
# ============================================================

def build_choices(choice_set: ChoiceSet) -> list[str]:
    """
    Expand a choice set into its alternatives:
      "[a/b]x[c/d]" -> ["axc", "bxc", "axd", "bxd"]
    """
    if choice_set.kind == "GROUP":
        return choice_set.raw.split(CHOICE_SEP)

    raw = choice_set.raw
    choices = [""]
    sub_index = 0

    for m in _SUBSET_RE.finditer(raw):
        if m.start() > sub_index:
            common = raw[sub_index:m.start()]
            choices = [c + common for c in choices]
        subs = m.group(1).split(CHOICE_SEP)
        choices = [c + sub for sub in subs for c in choices]
        sub_index = m.end()

    if sub_index < len(raw):
        common = raw[sub_index:]
        choices = [c + common for c in choices]

    return choices


# ============================================================
# Stage 3: branch minimization
# ============================================================

def _group_by(keys: Iterable[int], key_fn: Callable[[int], Hashable]) -> list[list[int]]:
    groups: dict[Hashable, list[int]] = {}
    for k in keys:
        groups.setdefault(key_fn(k), []).append(k)
    return list(groups.values())


def _repeated(groups: list[list[int]]) -> list[list[int]]:
    return [g for g in groups if len(g) > 1]


def _infix_branches(
    choices: list[list[str]],
    collator: Collator,
    handled: set[int],
) -> list[PatternBranch]:
    """
    Branches for alternatives sharing their inner tokens, where every
    combination of first and last token is present:

        "[diesen Karton/den Karton/diesen Kasten/den Kasten]" -> "[den/diesen] [Karton/Kasten]"

    The first token must be a separate word (followed by whitespace).
    """
    branches: list[PatternBranch] = []

    for infix_group in _repeated(_group_by(range(len(choices)), lambda ix: tuple(choices[ix][1:-1]))):
        suffix_groups = _repeated(_group_by(infix_group, lambda ix: tuple(choices[ix][1:])))

        prefix_keys: list[tuple | None] = []
        for group in suffix_groups:
            if all(re.search(r"\s", choices[ix][1]) for ix in group):
                prefix_keys.append(tuple(sorted(choices[ix][0] for ix in group)))
            else:
                prefix_keys.append(None)

        for same_affixes in _repeated(_group_by(range(len(suffix_groups)), lambda j: prefix_keys[j])):
            if prefix_keys[same_affixes[0]] is None:
                continue
            first_group = suffix_groups[same_affixes[0]]
            branches.append(
                PatternBranch(
                    shared_tokens=list(choices[first_group[0]][1:-1]),
                    first_choice=collator.sort(choices[ix][0] for ix in first_group),
                    last_choice=collator.sort(choices[suffix_groups[j][0]][-1] for j in same_affixes),
                )
            )
            for j in same_affixes:
                handled.update(suffix_groups[j])

    return branches


def minimize_branches(
    choices: list[list[str]],
    collator: Collator,
    separators: bool = True,
) -> list[PatternBranch]:
    """
    Factor tokenized alternatives of the same length (>= 2 tokens) into branches.

    Order: infix groups (separator locales, >= 3 tokens), then groups differing
    by their first token, then groups differing by their last token, then the
    remaining alternatives as they are.
    """
    keys = range(len(choices))
    length = len(choices[0]) if choices else 0

    # only the first token varies
    same_suffix_groups = _repeated(_group_by(keys, lambda ix: tuple(choices[ix][1:])))
    # only the last token varies
    same_prefix_groups = _repeated(_group_by(keys, lambda ix: tuple(choices[ix][:-1])))

    handled: set[int] = set()
    branches: list[PatternBranch] = []

    if separators and length >= 3:
        branches.extend(_infix_branches(choices, collator, handled))

    for group in same_suffix_groups:
        group = [ix for ix in group if ix not in handled]
        if len(group) > 1:
            branches.append(
                PatternBranch(
                    shared_tokens=list(choices[group[0]][1:]),
                    first_choice=collator.sort(choices[ix][0] for ix in group),
                )
            )
            handled.update(group)

    for group in same_prefix_groups:
        group = [ix for ix in group if ix not in handled]
        if len(group) > 1:
            branches.append(
                PatternBranch(
                    shared_tokens=list(choices[group[0]][:-1]),
                    last_choice=collator.sort(choices[ix][-1] for ix in group),
                )
            )
            handled.update(group)

    for ix in keys:
        if ix not in handled:
            branches.append(PatternBranch(shared_tokens=list(choices[ix])))

    return branches


def build_branches(
    choices: list[str],
    locale: str,
    collator: Collator,
    is_new_sentence: bool = False,
) -> list[PatternBranch]:
    """Tokenize alternatives, group them by token count, and build the branches of each group."""
    separators = uses_word_separators(locale)

    by_length: dict[int, list[list[str]]] = {}
    for choice in choices:
        tokens = tokenize(choice, locale)
        by_length.setdefault(len(tokens), []).append(tokens)

    branches: list[PatternBranch] = []

    for length in sorted(by_length):
        group = by_length[length]

        if length > 1:
            branches.extend(minimize_branches(group, collator, separators))
            continue

        # An empty alternative at the start of a sentence makes the next token start the
        # sentence. Title-case it if the other alternatives seem to be title-cased.
        title_case = (
            is_new_sentence
            and length == 0
            and all(
                other == length or any(starts_with_capital(c[0]) for c in others)
                for other, others in by_length.items()
            )
        )
        branches.append(
            PatternBranch(
                first_choice=collator.sort(tok for c in group for tok in c),
                title_case_next_token=title_case,
            )
        )

    return branches


# ============================================================
# Patterns
# ============================================================

def build_pattern(sentence: str, locale: str, collator: Collator | None = None) -> Pattern:
    """Parse one sentence into a Pattern."""
    if collator is None:
        collator = Collator(locale)
    separators = uses_word_separators(locale)
    sentence = normalize(sentence)

    shared_tokens: list[str] = []
    branch_sets: list[PatternBranchSet] = []

    for seg in scan_segments(sentence, locale):
        if isinstance(seg, Lit):
            shared_tokens.extend(tokenize(seg.text, locale))
            continue

        choices = build_choices(seg)
        if separators:
            choices = collator.sort(choices)

        branches = build_branches(
            choices,
            locale,
            collator,
            is_new_sentence=separators and is_sentence_start(shared_tokens),
        )
        branch_sets.append(PatternBranchSet(branches=branches, token_position=len(shared_tokens)))

    size = 1
    for branch_set in reversed(branch_sets):
        branch_set.branch_size = size
        size *= len(branch_set.branches)
        for branch in branch_set.branches:
            branch.fold_single_choices()

    return Pattern(size=size, shared_tokens=shared_tokens, branch_sets=branch_sets)


def parse_patterns(
    lines: Iterable[str] | str,
    locale: str,
    collator: Collator | None = None,
) -> PatternSet:
    """Parse every non-blank line into a pattern."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    if collator is None:
        collator = Collator(locale)

    pattern_set = PatternSet(locale=locale)
    for line in lines:
        if not line.strip():
            continue
        pattern_set.patterns.append(build_pattern(line, locale, collator))

    pattern_set.size = sum(p.size for p in pattern_set.patterns)
    return pattern_set


def describe_pattern(pattern: Pattern) -> list[str]:
    """Human-readable lines describing a pattern (shared tokens and branches)."""

    def choice(xs: list[str]) -> str:
        return "[" + CHOICE_SEP.join(xs) + "]"

    out = [f"PATTERN size={pattern.size}"]
    position = 0
    for branch_set in pattern.branch_sets:
        for tok in pattern.shared_tokens[position:branch_set.token_position]:
            out.append(f"  TOK {tok!r}")
        out.append(f"  SET position={branch_set.token_position} branch_size={branch_set.branch_size}")
        for branch in branch_set.branches:
            parts = []
            if branch.first_choice:
                parts.append(choice(branch.first_choice))
            parts.extend(repr(t) for t in branch.shared_tokens)
            if branch.last_choice:
                parts.append(choice(branch.last_choice))
            flag = " (title case next)" if branch.title_case_next_token else ""
            out.append("    BRANCH " + " ".join(parts) + flag)
        position = branch_set.token_position
    for tok in pattern.shared_tokens[position:]:
        out.append(f"  TOK {tok!r}")
    return out
