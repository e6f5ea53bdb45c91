#!/usr/bin/env python3
"""
Run a solitude script.

Usage: solitude SCRIPT [--max-vars N] [--max-funcs N] [--block-comments] ...
"""
import argparse
import sys

from syntax import Limits
from script_errors import ScriptOpenError
from interpreter import Interpreter
from script_runner import report_error
from script_state import ScriptState


def build_arg_parser():
    defaults = Limits()
    parser = argparse.ArgumentParser(
        prog="solitude",
        description="Run a line-oriented solitude script"
    )
    parser.add_argument("script", help="path of the script to run")
    parser.add_argument(
        "--max-vars", type=int, default=defaults.max_variables,
        help=f"maximum number of variables (default: {defaults.max_variables})"
    )
    parser.add_argument(
        "--max-funcs", type=int, default=defaults.max_functions,
        help=f"maximum number of functions (default: {defaults.max_functions})"
    )
    parser.add_argument(
        "--max-name-length", type=int, default=defaults.max_name_length,
        help=f"longest variable or function name (default: {defaults.max_name_length})"
    )
    parser.add_argument(
        "--max-value-length", type=int, default=defaults.max_value_length,
        help=f"longest variable value (default: {defaults.max_value_length})"
    )
    parser.add_argument(
        "--max-body-length", type=int, default=defaults.max_body_length,
        help=f"longest function body (default: {defaults.max_body_length})"
    )
    parser.add_argument(
        "--buffer-size", type=int, default=defaults.buffer_size,
        help=f"longest interpolated line (default: {defaults.buffer_size})"
    )
    parser.add_argument(
        "--block-comments", action="store_true",
        help="treat lines of '...' as block comment delimiters"
    )
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    limits = Limits(
        max_name_length=args.max_name_length,
        max_value_length=args.max_value_length,
        max_variables=args.max_vars,
        max_body_length=args.max_body_length,
        max_functions=args.max_funcs,
        buffer_size=args.buffer_size,
    )
    interp = Interpreter(ScriptState(limits), block_comments=args.block_comments)

    try:
        interp.run_file(args.script)
    except ScriptOpenError as e:
        report_error(e)
        return 1
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
