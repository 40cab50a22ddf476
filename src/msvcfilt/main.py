import argparse
import os
import sys
from typing import List, Optional, Tuple

from .engine import FilterEngine
from .errors import MsvcFiltError
from .resolver import RESOLVER_CHOICES
from .utils.config import ConfigManager
from .utils.help import USAGE, display_help
from .utils.log import setup_logging
from .utils.source import use_surrogateescape

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# -help and -keep are kept for compatibility with the single-dash spelling
HELP_FLAGS = ("-help", "--help", "-h")
KEEP_FLAGS = ("-keep", "--keep")
VALUE_OPTIONS = ("--resolver", "--undname-tool", "--log-level")


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="msvcfilt",
        usage=USAGE,
        description="Undecorate MSVC symbol names in text",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("strings", nargs="*", metavar="DECORATED", help="Strings to filter instead of STDIN")
    parser.add_argument(*HELP_FLAGS, dest="help", action="store_true", help="Display help and exit")
    parser.add_argument(*KEEP_FLAGS, dest="keep", action="store_true", default=None,
                        help="Insert the undecorated name after the original instead of replacing it")
    parser.add_argument("--resolver", choices=RESOLVER_CHOICES, default=None, help="Undecoration backend")
    parser.add_argument("--undname-tool", dest="undname_tool", default=None, help="Executable for the undname backend")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def _split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate option tokens from literal strings. Options may appear anywhere;
    every other token, even one starting with '-', is a literal line.
    """
    options, strings = [], []
    tokens = iter(argv)
    for token in tokens:
        name = token.split("=", 1)[0]
        if token in HELP_FLAGS or token in KEEP_FLAGS:
            options.append(token)
        elif name in VALUE_OPTIONS:
            options.append(token)
            if "=" not in token:
                value = next(tokens, None)
                if value is not None:
                    options.append(value)
        else:
            strings.append(token)
    return options, strings


def parse_cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    argv = sys.argv[1:] if argv is None else argv
    options, strings = _split_argv(argv)
    args = _build_parser().parse_args(options)
    args.strings = strings
    return args


def run(argv: Optional[List[str]] = None):
    args = parse_cli(argv)

    if args.help:
        display_help()
        sys.exit(0)

    config = ConfigManager()
    config.override(
        resolver=args.resolver,
        undname_tool=args.undname_tool,
        log_level=args.log_level,
    )
    setup_logging(config.get("log_level"), config.get("log_file"))

    if not args.strings:
        use_surrogateescape(sys.stdin)
    use_surrogateescape(sys.stdout)

    try:
        engine = FilterEngine(config, inputs=args.strings, keep_original=args.keep)
        engine.run()
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        # Downstream reader went away (e.g. `| head`); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except MsvcFiltError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Fatal Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    run()
