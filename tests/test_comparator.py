import pytest

from cfr.comparator import compare, diff_rows, split_lines
from cfr.render import CaptureRenderer
from cfr.types import Verdict


@pytest.mark.parametrize("text", ["", "5", "1\n2\n3\n", "  a  b \n\n c\t\n", "x" * 500])
def test_identical_texts_match(text):
    assert compare(text, text).verdict is Verdict.MATCH


def test_trailing_newline_is_ignored():
    result = compare("5\n", "5")
    assert result.matched
    assert result.rows == []


@pytest.mark.parametrize("a,b", [
    ("1\n2\n", "\n\n1\n2"),
    ("  hello", "hello  \n"),
    ("1\n2\n3", "1\n9\n3\n\n"),
    ("a\n\nb", "a\nb"),
])
def test_verdict_unchanged_by_outer_trim(a, b):
    assert compare(a, b) == compare(a.strip(), b.strip())


def test_single_differing_row():
    renderer = CaptureRenderer()
    result = compare("1\n2\n3", "1\n9\n3", renderer=renderer)

    assert result.verdict is Verdict.DIFF
    assert [r.index for r in result.differing_rows] == [1]
    assert (result.rows[1].expected, result.rows[1].actual) == ("2", "9")
    assert not result.rows[0].differing and not result.rows[2].differing
    assert renderer.rows == result.rows


def test_ragged_lengths_compare_against_empty():
    result = compare("a\nb", "a\nb\nc\nd")
    assert len(result.rows) == 4
    assert [(r.expected, r.actual) for r in result.rows[2:]] == [("", "c"), ("", "d")]
    assert [r.index for r in result.differing_rows] == [2, 3]


def test_ragged_rows_equal_when_other_side_blank():
    rows = diff_rows("a", "a\n")
    assert len(rows) == 2
    assert not rows[1].differing


def test_reordered_lines_are_two_differences():
    result = compare("first\nsecond", "second\nfirst")
    assert not result.matched
    assert [r.index for r in result.differing_rows] == [0, 1]


def test_internal_whitespace_is_significant():
    assert not compare("a b", "a  b").matched
    assert not compare("a\n\nb", "a\nb").matched


def test_split_keeps_trailing_empty_fragment():
    assert split_lines("a\nb\n") == ["a", "b", ""]


def test_match_does_not_render():
    renderer = CaptureRenderer()
    compare("ok\n", "ok", renderer=renderer)
    assert renderer.calls == []
