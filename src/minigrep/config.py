import os
from dataclasses import dataclass

DEFAULT_MAX_LINE = 4096
COLOR_MODES = ("auto", "always", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GrepConfig:
    """Knobs for one minigrep run. CLI flags override what from_env() finds."""
    longest: bool = True
    strict: bool = False
    color: str = "auto"
    max_line: int = DEFAULT_MAX_LINE
    recursive: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ=None):
        """
        Build a config from MINIGREP_* environment variables:
          MINIGREP_MAX_LINE   -> max_line (positive int)
          MINIGREP_COLOR      -> color (auto|always|never)
          MINIGREP_LOG_LEVEL  -> log_level (DEBUG, INFO, ...)
        Bad values raise ValueError.
        """
        env = os.environ if environ is None else environ
        cfg = cls()
        if "MINIGREP_MAX_LINE" in env:
            cfg.max_line = parse_max_line(env["MINIGREP_MAX_LINE"])
        if "MINIGREP_COLOR" in env:
            cfg.color = parse_color(env["MINIGREP_COLOR"])
        if "MINIGREP_LOG_LEVEL" in env:
            cfg.log_level = parse_log_level(env["MINIGREP_LOG_LEVEL"])
        return cfg

    def use_color(self, stream):
        if self.color == "auto":
            return hasattr(stream, "isatty") and stream.isatty()
        return self.color == "always"


def parse_max_line(value):
    n = int(value)
    if n <= 0:
        raise ValueError(f"max line length must be positive, got {value!r}")
    return n


def parse_color(value):
    if value not in COLOR_MODES:
        raise ValueError(f"color must be one of {', '.join(COLOR_MODES)}, got {value!r}")
    return value


def parse_log_level(value):
    level = value.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level
