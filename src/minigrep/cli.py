#!/usr/bin/env python3
import os
import sys

from minigrep.config import GrepConfig, parse_color, parse_max_line
from minigrep.errors import MinigrepError
from minigrep.logging_config import get_logger, setup_logging
from minigrep.matcher import validate
from minigrep.scanner import process_file, process_stream, walk_dir

logger = get_logger("cli")

# ------------------------------------------------------------
# minigrep command line: prints the lines that match PATTERN.
#
#   minigrep [options] [-E] PATTERN [FILE ...]
#
# The pattern comes from -E, or else from the first bare argument.
# Every other bare argument is a path. With no paths, stdin is read.
# With several paths each printed line gets a "path:" prefix.
# -r walks the given directories (at least one path is required)
# and prefixes every line with its file's path.
#
#   -S, --strict        reject patterns outside the grammar
#   --shortest          '*' and '+' settle for the shortest span
#   --color=WHEN        red match highlight: auto (tty only), always, never
#   --max-line N        lines longer than N characters are a fatal error
#   -v                  debug logging on stderr
#
# Exit status: 0 something matched, 1 nothing matched or bad
# arguments, 2 fatal error (strict-mode pattern, oversized line).
# ------------------------------------------------------------

USAGE = "usage: minigrep [-r] [-S] [--shortest] [--color=WHEN] [--max-line N] [-v] [-E] PATTERN [FILE ...]"


def parse_args(args, config):
    """
    Parse flags in any order into `config`; returns (pattern, paths).
    Bad args print the usage line and exit 1.
    """
    pat = None
    paths = []
    i = 0
    try:
        while i < len(args):
            a = args[i]
            if a == "-r":
                config.recursive = True
            elif a in ("-S", "--strict"):
                config.strict = True
            elif a == "--shortest":
                config.longest = False
            elif a == "-v":
                config.log_level = "DEBUG"
            elif a == "-E" or a == "--max-line":
                if i + 1 >= len(args):
                    raise ValueError(f"{a} needs an argument")
                if a == "-E":
                    pat = args[i + 1]
                else:
                    config.max_line = parse_max_line(args[i + 1])
                i += 1
            elif a.startswith("--color="):
                config.color = parse_color(a.split("=", 1)[1])
            elif a == "--color":
                config.color = "always"
            elif pat is None and not paths and "-E" not in args:
                pat = a
            else:
                paths.append(a)
            i += 1
    except ValueError as e:
        print(f"minigrep: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if pat is None:
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    if config.recursive and not paths:
        print("minigrep: -r needs at least one path", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    return pat, paths


def run(pat, paths, config, out=None):
    """
    Scan stdin, files or directory trees per `config`.
    Returns True if any line matched.

      - If recursive, treat each path as file or directory and walk directories.
      - Otherwise scan the given files, prefixing with the path when there are several.
      - If no paths, read from stdin.
    """
    if config.strict:
        validate(pat)

    if config.recursive:
        any_match = False
        for p in paths:
            if os.path.isdir(p):
                any_match |= walk_dir(p, pat, config, out=out)
            elif os.path.isfile(p):
                any_match |= process_file(p, pat, config, prefix=f"{os.path.normpath(p)}:", out=out)
            else:
                logger.error("%s: No such file or directory", p)
        return any_match

    if paths:
        multi = len(paths) > 1
        any_match = False
        for fp in paths:
            pref = f"{fp}:" if multi else ""
            any_match |= process_file(fp, pat, config, pref, out=out)
        return any_match

    return process_stream(sys.stdin, pat, config, out=out)


def main(argv=None):
    """
    CLI entry point.

    Usage examples:
      echo "apple pie" | minigrep -E "ap+le"
      minigrep "cat$" file1.txt file2.txt
      minigrep -r -E ".*berry" dir/
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        config = GrepConfig.from_env()
    except ValueError as e:
        print(f"minigrep: {e}", file=sys.stderr)
        sys.exit(2)

    pat, paths = parse_args(args, config)
    setup_logging(config.log_level)
    logger.debug("pattern %r, paths %r, %s", pat, paths, config)

    try:
        ok = run(pat, paths, config)
    except MinigrepError as e:
        logger.error("%s", e)
        sys.exit(2)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
