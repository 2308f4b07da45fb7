# -------------------------------------
# Export - text and CSV output
# -------------------------------------
"""
Output formats for expanded sentences:
  - text: one sentence per line
  - csv:  one quoted sentence per line
"""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, Literal

OutputFormat = Literal["text", "csv"]


def to_text(sentences: Iterable[str]) -> str:
    return "\n".join(sentences)


def to_csv(sentences: Iterable[str]) -> str:
    """One row per sentence, always quoted: "I eat an apple."."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for s in sentences:
        writer.writerow([s])
    return buf.getvalue()


def guess_format(path: str | Path) -> OutputFormat:
    return "csv" if Path(path).suffix.lower() == ".csv" else "text"


def write_output(sentences: Iterable[str], path: str | Path, fmt: OutputFormat | None = None) -> Path:
    """Write sentences to path; the format defaults to the one matching the file suffix."""
    path = Path(path)
    fmt = fmt or guess_format(path)
    if fmt == "csv":
        content = to_csv(sentences)
    elif fmt == "text":
        content = to_text(sentences) + "\n"
    else:
        raise ValueError(f"unknown output format: {fmt!r}")
    path.write_text(content, encoding="utf-8")
    return path
