"""
nlisp - Main Entry Point
Runs a script, or reads lines interactively and prints each result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from nlisp.config import get_prompt, setup_logging
from nlisp.errors import NlispError
from nlisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="nlisp",
        description="nlisp - a small Lisp with closures, vectors and maps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Interactive mode
  %(prog)s script.nl            # Run a script and print each result
  %(prog)s -i script.nl         # Run a script, then stay interactive
  %(prog)s --log-level DEBUG    # Trace definitions and calls on stderr
        """,
    )
    parser.add_argument("script", nargs="?", help="nlisp script file to execute")
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start interactive mode (after running the script, if any)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: NLISP_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--prelude",
        default=None,
        help="File of definitions to evaluate before anything else",
    )
    return parser


def run_repl(
    interp: Interpreter,
    prompt: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Read a line, evaluate it, print the result; stop at end of input.

    An error is reported and the loop continues with a fresh prompt. Bindings
    made by forms that succeeded before the error are kept.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        if not line.strip():
            continue
        try:
            stdout.write(interp.rep(line))
        except NlispError as e:
            logger.warning("recovered from %s", type(e).__name__)
            stdout.write(f"error: {e}\n")
        except RecursionError:
            logger.warning("recovered from RecursionError")
            stdout.write("error: maximum recursion depth exceeded\n")


def run_script(interp: Interpreter, path: Path, stdout: Optional[TextIO] = None) -> int:
    stdout = stdout or sys.stdout
    try:
        source = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        stdout.write(f"error: cannot read {path}: {e.strerror}\n")
        return 1
    try:
        stdout.write(interp.rep(source))
    except NlispError as e:
        stdout.write(f"error: {e}\n")
        return 1
    except RecursionError:
        stdout.write("error: maximum recursion depth exceeded\n")
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        interp = Interpreter()
        if args.prelude:
            interp.eval_file(Path(args.prelude))
    except (NlispError, OSError) as e:
        sys.stdout.write(f"error: failed to load prelude: {e}\n")
        return 1

    status = 0
    if args.script:
        status = run_script(interp, Path(args.script))
    if args.interactive or not args.script:
        run_repl(interp, get_prompt())
    return status


if __name__ == "__main__":
    sys.exit(main())
