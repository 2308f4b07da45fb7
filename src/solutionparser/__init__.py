# -------------------------------------
# solutionparser
# -------------------------------------
"""
Expand solution patterns into literal sentences.

    >>> from solutionparser import expand_patterns
    >>> expand_patterns(["I eat [an apple/a banana]."], "en")
    ['I eat a banana.', 'I eat an apple.']

This package provides:
- Tokenization and collation (tokens, collation)
- Pattern parsing and branch minimization (patterns)
- Solution indexing and unfolding (solutions)
- The locale table (locales) and output formats (export)

Imports are lazy to avoid RuntimeWarning when running submodules as scripts.
"""

__all__ = [
    # tokens
    "tokenize",
    "title_case",
    # collation
    "compare_strings_ci",
    "collation_key",
    "Collator",
    # patterns
    "scan_segments",
    "build_choices",
    "build_branches",
    "minimize_branches",
    "build_pattern",
    "parse_patterns",
    "describe_pattern",
    "Lit",
    "ChoiceSet",
    "PatternBranch",
    "PatternBranchSet",
    "Pattern",
    "PatternSet",
    # solutions
    "Solution",
    "get_pattern_solution",
    "get_solution",
    "iter_solutions",
    "parse_solutions",
    "unfold_solution",
    "unfold_solutions",
    "expand_patterns",
    # locales
    "Locale",
    "LocaleError",
    "load_locales",
    "use_locales",
    "list_locales",
    "get_locale",
    "is_supported",
    "uses_word_separators",
    # export
    "to_text",
    "to_csv",
    "write_output",
]

# Lazy import mapping: attribute -> (module, name)
_LAZY_IMPORTS = {
    # tokens
    "tokenize": (".tokens", "tokenize"),
    "title_case": (".tokens", "title_case"),
    # collation
    "compare_strings_ci": (".collation", "compare_strings_ci"),
    "collation_key": (".collation", "collation_key"),
    "Collator": (".collation", "Collator"),
    # patterns
    "scan_segments": (".patterns", "scan_segments"),
    "build_choices": (".patterns", "build_choices"),
    "build_branches": (".patterns", "build_branches"),
    "minimize_branches": (".patterns", "minimize_branches"),
    "build_pattern": (".patterns", "build_pattern"),
    "parse_patterns": (".patterns", "parse_patterns"),
    "describe_pattern": (".patterns", "describe_pattern"),
    "Lit": (".patterns", "Lit"),
    "ChoiceSet": (".patterns", "ChoiceSet"),
    "PatternBranch": (".patterns", "PatternBranch"),
    "PatternBranchSet": (".patterns", "PatternBranchSet"),
    "Pattern": (".patterns", "Pattern"),
    "PatternSet": (".patterns", "PatternSet"),
    # solutions
    "Solution": (".solutions", "Solution"),
    "get_pattern_solution": (".solutions", "get_pattern_solution"),
    "get_solution": (".solutions", "get_solution"),
    "iter_solutions": (".solutions", "iter_solutions"),
    "parse_solutions": (".solutions", "parse_solutions"),
    "unfold_solution": (".solutions", "unfold_solution"),
    "unfold_solutions": (".solutions", "unfold_solutions"),
    "expand_patterns": (".solutions", "expand_patterns"),
    # locales
    "Locale": (".locales", "Locale"),
    "LocaleError": (".locales", "LocaleError"),
    "load_locales": (".locales", "load_locales"),
    "use_locales": (".locales", "use_locales"),
    "list_locales": (".locales", "list_locales"),
    "get_locale": (".locales", "get_locale"),
    "is_supported": (".locales", "is_supported"),
    "uses_word_separators": (".locales", "uses_word_separators"),
    # export
    "to_text": (".export", "to_text"),
    "to_csv": (".export", "to_csv"),
    "write_output": (".export", "write_output"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_name, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_name, __package__)
        return getattr(module, attr_name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
