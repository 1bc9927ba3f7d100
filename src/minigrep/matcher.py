# ------------------------------------------------------------
# Tiny backtracking regex engine.
#
# What you can write in patterns:
#   Literals:           a b c
#   Any char:           .
#   Quantifiers:        *  (zero or more),  +  (one or more),  ?  (zero or one)
#   Anchors:            ^  start of string (first char only)
#                       $  end of string   (last char only)
#
# What this does NOT support (on purpose, to stay tiny):
#   groups  alternation  classes [...]  escapes  {m,n}
#
# Anything outside that grammar is read literally ("a$b" looks for a '$'),
# unless strict mode is asked for, in which case validate() rejects it.
#
# '*' and '+' are greedy by default: the longest repetition that lets the
# rest of the pattern match wins. Pass longest=False for shortest-first.
# '?' takes its char whenever it can and never gives it back.
# ------------------------------------------------------------
from dataclasses import dataclass

from minigrep.errors import InvalidPatternError

ANY = "."
QUANTIFIERS = "*+?"


@dataclass(frozen=True)
class Match:
    """Where a pattern matched: offset of the first char and span length."""
    start: int
    length: int

    @property
    def end(self):
        return self.start + self.length

    def span_of(self, text):
        """Slice the matched substring out of the text it was found in."""
        return text[self.start:self.end]


def _accepts(c, ch):
    return c == ANY or c == ch


def validate(pattern):
    """
    Reject patterns that only "work" because of the permissive literal rules.

    Walk the pattern once and complain about:
      - a quantifier with nothing to repeat ("*a", "^+a", "a**")
      - '^' that is not the very first char
      - '$' that is not the very last char

    Raises InvalidPatternError pointing at the offending position.
    """
    can_repeat = False
    for i, c in enumerate(pattern):
        if c in QUANTIFIERS:
            if not can_repeat:
                raise InvalidPatternError(pattern, i, "nothing to repeat")
            can_repeat = False
        elif c == "^":
            if i != 0:
                raise InvalidPatternError(pattern, i, "'^' is only an anchor at the start")
            can_repeat = False
        elif c == "$":
            if i != len(pattern) - 1:
                raise InvalidPatternError(pattern, i, "'$' is only an anchor at the end")
            can_repeat = False
        else:
            can_repeat = True




def _star_frame(c, pattern, text, pos, longest):
    """
    Backtrack frame for 'c*' followed by `pattern` at `pos`.

    Run forward over every char `c` accepts. Longest first resumes at the
    end of that run and backs off one repetition at a time down to zero;
    shortest first walks the same offsets the other way round.
    """
    run = pos
    while run < len(text) and _accepts(c, text[run]):
        run += 1
    if longest:
        return pattern, run, pos, -1
    return pattern, pos, run, 1


def _run(frames, text, longest, seen):
    """
    Drive a match from an explicit list of backtrack frames.

    A frame is (pattern, pos, last, step): the pattern left to match, the
    text offset to resume at, the last offset worth trying and which way to
    walk there. Popping the top frame resumes the latest choice, in the
    same order plain recursion would, but the Python stack stays flat no
    matter how many quantifiers the pattern has.

    `seen` holds the (pattern length, offset) states already started. The
    first success ends the search, so a state met twice already failed.
    That keeps chained quantifiers polynomial instead of exponential.
    """
    while frames:
        pattern, pos, last, step = frames.pop()
        if pos != last:
            frames.append((pattern, pos + step, last, step))
        state = (len(pattern), pos)
        if state in seen:
            continue
        seen.add(state)

        while True:
            if not pattern:
                return pos
            if pattern[0] == "?":
                pattern = pattern[1:]
                continue
            if pattern == "$":
                if pos == len(text):
                    return pos
                break

            c = pattern[0]
            q = pattern[1] if len(pattern) > 1 else ""
            if q == "+":
                if pos >= len(text) or not _accepts(c, text[pos]):
                    break
                pos += 1
            if q == "*" or q == "+":
                frames.append(_star_frame(c, pattern[2:], text, pos, longest))
                break
            if q == "?":
                # one-symbol lookahead, never undone
                if pos < len(text) and _accepts(c, text[pos]):
                    pos += 1
                pattern = pattern[2:]
                continue

            if pos < len(text) and _accepts(c, text[pos]):
                pattern = pattern[1:]
                pos += 1
                continue
            break
    return None


def match_here(pattern, text, pos=0, longest=True):
    """
    Does `pattern` match `text` starting exactly at `pos`?
    Returns the offset just past the match, or None.

    Rules, first one that applies wins:
      1. empty pattern    -> success right here (zero width is fine)
      2. stray '?'        -> its base symbol was already handled, skip it
      3. pattern is '$'   -> success only at the end of text
      4. 'c*' / 'c+'      -> backtracking repetition, see _star_frame()
      5. 'c?'             -> eat the char if `c` accepts it, then go on
      6. '.' or literal   -> eat one char of both and keep going
    """
    return _run([(pattern, pos, pos, 1)], text, longest, set())


def match_star(c, pattern, text, pos, longest=True):
    """Match 'c*' followed by `pattern`, starting at `pos`."""
    return _run([_star_frame(c, pattern, text, pos, longest)], text, longest, set())


def match_plus(c, pattern, text, pos, longest=True):
    """'c+' is one mandatory 'c' followed by 'c*'."""
    if pos < len(text) and _accepts(c, text[pos]):
        return match_star(c, pattern, text, pos + 1, longest)
    return None


def match_optional(c, pattern, text, pos, longest=True):
    """
    Match 'c?' followed by `pattern`.

    Plain lookahead under either policy: the char is taken if `c` accepts
    it and that choice is never revisited. A skipped optional consumes
    nothing.
    """
    if pos < len(text) and _accepts(c, text[pos]):
        pos += 1
    return match_here(pattern, text, pos, longest)


def search(pattern, text, longest=True, strict=False):
    """
    High-level entry: find the leftmost match of `pattern` in `text`.

      - '^...' is tried once, at offset 0.
      - anything else is tried at 0, 1, ..., len(text); the last try is
        against the empty tail so zero-width patterns still match "".

    Returns Match(start, length) or None. With strict=True the pattern is
    run through validate() first and may raise InvalidPatternError.
    """
    if strict:
        validate(pattern)

    if pattern.startswith("^"):
        end = match_here(pattern[1:], text, 0, longest)
        return None if end is None else Match(0, end)

    # states that failed from an earlier start fail from every later one
    seen = set()
    for start in range(len(text) + 1):
        end = _run([(pattern, start, start, 1)], text, longest, seen)
        if end is not None:
            return Match(start, end - start)
    return None
