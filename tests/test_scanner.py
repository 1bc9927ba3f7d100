import io
import os

import pytest

from minigrep.config import GrepConfig
from minigrep.errors import LineTooLongError
from minigrep.matcher import Match
from minigrep.scanner import (
    HIGHLIGHT, RESET, iter_lines, process_file, process_stream, render, scan, walk_dir,
)


def plain():
    return GrepConfig(color="never")


def test_iter_lines_strips_line_endings():
    lines = list(iter_lines(io.StringIO("one\ntwo\r\nthree"), 100))
    assert lines == ["one", "two", "three"]


def test_iter_lines_strips_only_one_line_ending():
    lines = list(iter_lines(io.StringIO("a\r\r\nb\n\nc\r"), 100))
    assert lines == ["a\r", "b", "", "c\r"]


def test_iter_lines_empty_source():
    assert list(iter_lines(io.StringIO(""), 100)) == []


def test_iter_lines_rejects_oversized_line():
    stream = io.StringIO("short\n" + "x" * 11 + "\n")
    with pytest.raises(LineTooLongError) as exc:
        list(iter_lines(stream, 10, "f.txt"))
    assert exc.value.lineno == 2
    assert exc.value.limit == 10
    assert "f.txt:2" in str(exc.value)


def test_line_at_the_limit_is_fine():
    assert list(iter_lines(io.StringIO("x" * 10 + "\n"), 10)) == ["x" * 10]


def test_scan_drops_unmatched_lines():
    hits = list(scan(["apple", "banana", "grape"], "ap+"))
    assert hits == [(1, "apple", Match(0, 3)), (3, "grape", Match(2, 2))]


def test_scan_honors_shortest_policy():
    hits = list(scan(["aaa"], "a+", GrepConfig(longest=False)))
    assert hits == [(1, "aaa", Match(0, 1))]


def test_render_highlights_span():
    assert render("apple pie", Match(0, 5)) == HIGHLIGHT + "apple" + RESET + " pie"
    assert render("a pie!", Match(2, 3)) == "a " + HIGHLIGHT + "pie" + RESET + "!"


def test_render_zero_width_and_plain():
    assert render("abc", Match(3, 0)) == "abc" + HIGHLIGHT + RESET
    assert render("abc", Match(1, 1), color=False) == "abc"


def test_process_stream_prints_matches():
    out = io.StringIO()
    assert process_stream(io.StringIO("apple\nbanana\npineapple\n"), "apple$", plain(), out=out)
    assert out.getvalue() == "apple\npineapple\n"


def test_process_stream_no_match():
    out = io.StringIO()
    assert not process_stream(io.StringIO("banana\n"), "^x", plain(), out=out)
    assert out.getvalue() == ""


def test_process_stream_color_always():
    out = io.StringIO()
    process_stream(io.StringIO("banana\n"), "n.n", GrepConfig(color="always"), out=out)
    assert out.getvalue() == "ba" + HIGHLIGHT + "nan" + RESET + "a\n"


def test_process_file_with_prefix(fruit_file):
    out = io.StringIO()
    assert process_file(str(fruit_file), "err", plain(), prefix="f:", out=out)
    assert out.getvalue() == "f:cherry\n"


def test_process_file_missing(tmp_path):
    out = io.StringIO()
    assert not process_file(str(tmp_path / "nope.txt"), "a", plain(), out=out)
    assert out.getvalue() == ""


def test_walk_dir_prefixes_paths(fruit_tree):
    out = io.StringIO()
    assert walk_dir(str(fruit_tree), "ap+le", plain(), out=out)
    base = os.path.normpath(str(fruit_tree))
    assert out.getvalue().splitlines() == [
        f"{os.path.join(base, 'a.txt')}:apple",
        f"{os.path.join(base, 'sub', 'b.txt')}:pineapple",
    ]
