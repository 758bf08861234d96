# cfr/comparator.py
from __future__ import annotations

from typing import List, Optional

from .render import Renderer
from .types import ComparisonResult, DiffRow, Verdict


def split_lines(text: str) -> List[str]:
    # "a\nb\n" -> ["a", "b", ""]
    return text.split("\n")


def diff_rows(expected: str, actual: str) -> List[DiffRow]:
    exp = split_lines(expected)
    got = split_lines(actual)
    rows = []
    for i in range(max(len(exp), len(got))):
        e = exp[i] if i < len(exp) else ""
        a = got[i] if i < len(got) else ""
        rows.append(DiffRow(index=i, expected=e, actual=a))
    return rows


def compare(expected: str, actual: str, renderer: Optional[Renderer] = None) -> ComparisonResult:
    """
    Compare two captured outputs.

    Surrounding whitespace of each whole blob is ignored; everything inside
    (blank lines, indentation, line order) counts. On a mismatch the rows of
    the trimmed blobs are handed to `renderer`, if given.
    """
    exp = expected.strip()
    got = actual.strip()
    if exp == got:
        return ComparisonResult(verdict=Verdict.MATCH)

    rows = diff_rows(exp, got)
    if renderer is not None:
        renderer.render(rows)
    return ComparisonResult(verdict=Verdict.DIFF, rows=rows)
