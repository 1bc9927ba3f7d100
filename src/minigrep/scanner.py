import os
import sys

from minigrep.config import GrepConfig
from minigrep.errors import LineTooLongError
from minigrep.logging_config import get_logger
from minigrep.matcher import search

logger = get_logger("scanner")

HIGHLIGHT = "\x1b[31m"
RESET = "\x1b[m"


def iter_lines(stream, max_line, source="(standard input)"):
    """
    Lazily yield the lines of a text stream without their line endings.
    A line longer than max_line characters is fatal: LineTooLongError.
    Running out of lines is just the end, not an error.
    """
    for lineno, raw in enumerate(stream, 1):
        if raw.endswith("\r\n"):
            line = raw[:-2]
        elif raw.endswith("\n"):
            line = raw[:-1]
        else:
            line = raw
        if len(line) > max_line:
            raise LineTooLongError(source, lineno, max_line)
        yield line


def scan(lines, pattern, config=None):
    """Yield (lineno, line, match) for every line the pattern matches."""
    cfg = config or GrepConfig()
    for lineno, line in enumerate(lines, 1):
        m = search(pattern, line, longest=cfg.longest)
        if m is not None:
            yield lineno, line, m


def render(line, match, color=True):
    """The line with its matched span wrapped in red, or the plain line."""
    if not color:
        return line
    return line[:match.start] + HIGHLIGHT + match.span_of(line) + RESET + line[match.end:]


def _emit(s, out):
    """Write one line to `out` with a trailing newline."""
    out.write(s + "\n")


def process_stream(stream, pattern, config, prefix="", source="(standard input)", out=None):
    """
    Print every matching line of `stream`, as 'prefix+line' when a prefix is given.
    Returns True if at least one line matched.
    """
    out = out or sys.stdout
    color = config.use_color(out)
    matched = False
    for lineno, line, m in scan(iter_lines(stream, config.max_line, source), pattern, config):
        logger.debug("%s:%d: match at %d, length %d", source, lineno, m.start, m.length)
        _emit(prefix + render(line, m, color), out)
        matched = True
    return matched


def process_file(path, pattern, config, prefix="", out=None):
    """
    Open a file, feed it to process_stream. Returns True if any line matched.
    A file that cannot be opened is logged and counts as no match.
    """
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error("%s: %s", path, e.strerror or e)
        return False
    with f:
        return process_stream(f, pattern, config, prefix, source=path, out=out)


def walk_dir(base_dir, pattern, config, out=None):
    """
    Scan every file below `base_dir` with the settings in `config`.

    Directories and files are visited in sorted order so the output is the
    same from run to run. Each matching line is printed behind its file's
    path, normalized against `base_dir`, as 'path:line'.
    Returns True if any file had a match.
    """
    any_match = False
    top = os.path.normpath(base_dir)
    for root, dirs, files in os.walk(base_dir):
        dirs.sort()
        for name in sorted(files):
            path = os.path.join(root, name)
            shown = os.path.normpath(os.path.join(top, os.path.relpath(path, start=base_dir)))
            any_match |= process_file(path, pattern, config, prefix=f"{shown}:", out=out)
    return any_match
