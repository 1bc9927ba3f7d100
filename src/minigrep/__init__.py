"""A tiny grep with its own backtracking regex engine."""
from minigrep.errors import InvalidPatternError, LineTooLongError, MinigrepError
from minigrep.matcher import Match, match_here, search, validate

__version__ = "0.1.0"

__all__ = [
    "InvalidPatternError",
    "LineTooLongError",
    "Match",
    "MinigrepError",
    "match_here",
    "search",
    "validate",
]
