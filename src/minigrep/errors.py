"""Exceptions raised by minigrep. A pattern that does not match is not one of them."""


class MinigrepError(Exception):
    """Base class for everything minigrep raises on purpose."""


class InvalidPatternError(MinigrepError, ValueError):
    """A pattern outside the supported grammar (strict mode only)."""

    def __init__(self, pattern, position, reason):
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r} at {position}: {reason}")


class LineTooLongError(MinigrepError):
    """An input line exceeded the configured maximum length."""

    def __init__(self, source, lineno, limit):
        self.source = source
        self.lineno = lineno
        self.limit = limit
        super().__init__(f"{source}:{lineno}: line longer than {limit} characters")
