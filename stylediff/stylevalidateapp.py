# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_prettyprint_args, ConfigBackedParser,
    prettyprint_config_from_args,
    )
from .prettyprint import pretty_print_errors
from .reference import load_reference
from .utils import read_style, setup_std_streams
from .validation import ValidationError, validate_style


_description = """Validate the layer filters, layer properties and light of styles.
Exits with status 1 if any problem was found.
"""


def main_validate(args):
    try:
        reference = load_reference(args.reference_version)
    except ValueError as e:
        print(str(e))
        return 1

    for fn in args.styles:
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())

    status = 0
    report = {}
    for fn in args.styles:
        try:
            style = read_style(fn, on_null='minimal')
        except ValueError as e:
            errors = [ValidationError("", "Could not read style: {}".format(e))]
        else:
            errors = validate_style(style, reference)
        if errors:
            status = 1
        if args.output_json:
            report[fn] = [e._asdict() for e in errors]
        else:
            pretty_print_errors(fn, errors, config)

    if args.output_json:
        print(json.dumps(report, indent=2, separators=(",", ": ")))
    return status


def _build_arg_parser(prog='stylediff-validate'):
    """Creates an argument parser for the validate command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument(
        '--reference-version',
        type=int,
        default=8,
        help="version of the bundled style reference to validate against.")
    parser.add_argument("styles", nargs="+", help="style filename(s)")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_validate(arguments)


if __name__ == "__main__":
    sys.exit(main())
