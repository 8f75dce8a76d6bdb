"""
Command-line front-end.

Usage:
    python -m sequentprover                      # interactive prompt
    python -m sequentprover "A |- A" "|- A || !A" [--latex]
    python -m sequentprover --gui

With sequents on the command line each one is proved in turn and the exit
status is 0 when all are provable, 1 when any is unprovable and 2 when any
fails to parse. All logic lives in the parser and prover; this module only
reads input and prints results.
"""
import argparse
import logging
import os
import sys

from . import __version__
from .config import (
    BANNER,
    HELP_TEXT,
    HINT,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
    PROMPT,
    PROVABLE_MESSAGE,
    UNPROVABLE_MESSAGE,
)
from .errors import SequentParseError
from .parser import parse
from .proof import prove

logger = logging.getLogger(__name__)

EXIT_PROVABLE = 0
EXIT_UNPROVABLE = 1
EXIT_PARSE_ERROR = 2


def configure_logging(verbose=False):
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(format=LOG_FORMAT, level=level)


def report_parse_error(error, line, err):
    print(error, file=err)
    if error.position is not None:
        print(line, file=err)
        print(" " * error.position + "^", file=err)


def prove_line(line, out, err, latex=False):
    """Parse and prove one line, print the outcome and return an exit status."""
    try:
        sequent = parse(line)
    except SequentParseError as e:
        logger.debug("parse failed for %r: %s", line, e)
        report_parse_error(e, line, err)
        return EXIT_PARSE_ERROR

    print(file=out)
    print(sequent, file=out)
    proof = prove(sequent)
    if not proof.provable:
        print(UNPROVABLE_MESSAGE, file=out)
        return EXIT_UNPROVABLE

    print(PROVABLE_MESSAGE, file=out)
    print(file=out)
    print(proof.figure.to_latex() if latex else proof.figure, file=out)
    print(file=out)
    return EXIT_PROVABLE


def repl(stdin=None, out=None, err=None, latex=False):
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr

    print(BANNER, file=out)
    print(HINT, file=out)
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            # EOF
            print(file=out)
            return

        line = line.rstrip("\r\n")
        command = line.strip()
        if not command:
            continue
        if command.startswith(":"):
            if command == ":q":
                return
            if command == ":h":
                print(HELP_TEXT, file=out)
            else:
                print("unknown command", file=err)
                print(HINT, file=err)
            continue

        prove_line(line, out, err, latex=latex)


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sequent-prover",
        description="Decide propositional sequents and print their proof figures.",
    )
    parser.add_argument(
        "sequents",
        nargs="*",
        help='Sequents to prove, e.g. "A -> B, A |- B". Starts a prompt when omitted.',
    )
    parser.add_argument(
        "--latex",
        action="store_true",
        help="Print proofs as LaTeX \\infer derivations instead of ASCII figures.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the graphical prover.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every decomposition step.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.gui:
        from .app import main as app_main
        app_main()
        return EXIT_PROVABLE

    if not args.sequents:
        repl(latex=args.latex)
        return EXIT_PROVABLE

    status = EXIT_PROVABLE
    for text in args.sequents:
        status = max(status, prove_line(text, sys.stdout, sys.stderr, latex=args.latex))
    return status
