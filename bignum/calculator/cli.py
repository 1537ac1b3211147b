"""
bignum calculator CLI.

Usage:
    # demonstration of the BigInt API
    python -m bignum demo

    # evaluate every op(a,b) line of a file
    python -m bignum file expressions.txt [--json] [--skip-blank] [--lenient]

    # evaluate expressions given on the command line
    python -m bignum eval -- "+(12,30)" "-(7)"

    # no command: interactive mode selection (1 = demo, 2 = file)
    python -m bignum

Exit codes:
    0  Success
    1  Argument error, invalid mode, or at least one line failed
    2  Input file could not be opened
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from bignum.calculator.evaluator import EvaluatorConfig
from bignum.calculator.session import run_demo, run_file, run_lines

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_FILE_ERROR = 2


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _config_from_args(args: argparse.Namespace) -> EvaluatorConfig:
    return EvaluatorConfig(
        skip_blank_lines=getattr(args, "skip_blank", False),
        strict_operands=not getattr(args, "lenient", False),
    )


def _cmd_demo(args: argparse.Namespace) -> int:
    run_demo(sys.stdout)
    return EXIT_OK


def _cmd_file(args: argparse.Namespace) -> int:
    try:
        summary = run_file(
            args.path,
            config=_config_from_args(args),
            out=sys.stdout,
            err=sys.stderr,
            json_output=args.json,
        )
    except OSError as e:
        logger.debug("cannot open %s: %s", args.path, e)
        print(f"Error opening file: {args.path}", file=sys.stderr)
        return EXIT_FILE_ERROR
    return EXIT_OK if summary.all_ok else EXIT_FAILED


def _cmd_eval(args: argparse.Namespace) -> int:
    summary = run_lines(
        args.expressions,
        config=_config_from_args(args),
        out=sys.stdout,
        err=sys.stderr,
        json_output=args.json,
    )
    return EXIT_OK if summary.all_ok else EXIT_FAILED


def _interactive(path: Optional[str]) -> int:
    """Mode selection prompt: 1 = demo, 2 = file."""
    mode = input("Enter mode (enter 1 for demo mode, 2 for file mode): ").strip()

    if mode == "1":
        run_demo(sys.stdout)
        return EXIT_OK

    if mode == "2":
        if path is None:
            path = input("Enter filePath: ").strip()
        return _cmd_file(argparse.Namespace(path=path, json=False))

    print("Invalid mode selected.", file=sys.stderr)
    return EXIT_FAILED


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum",
        description="Arbitrary-precision integer calculator for op(a,b) expressions.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-i", "--input", dest="input_path", default=None,
        help="File used by interactive file mode (when no command is given)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("demo", help="Run the BigInt demonstration")

    evaluation = argparse.ArgumentParser(add_help=False)
    evaluation.add_argument("--json", action="store_true", help="Emit one JSON record per line")
    evaluation.add_argument("--skip-blank", action="store_true", help="Skip empty lines silently")
    evaluation.add_argument(
        "--lenient", action="store_true",
        help="Accept any [+-]?[0-9]+ operand (normalizing leading zeros)",
    )

    file_parser = sub.add_parser("file", parents=[evaluation], help="Evaluate a file of expressions")
    file_parser.add_argument("path", help="Path to the input file")

    eval_parser = sub.add_parser("eval", parents=[evaluation], help="Evaluate expressions")
    eval_parser.add_argument("expressions", nargs="+", metavar="EXPR", help="Expression such as +(1,2)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        return _interactive(args.input_path)
    if args.command == "demo":
        return _cmd_demo(args)
    if args.command == "file":
        return _cmd_file(args)
    if args.command == "eval":
        return _cmd_eval(args)

    parser.print_help()
    return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
