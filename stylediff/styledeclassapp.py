# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_class_args, add_filename_args, add_output_args,
    ConfigBackedParser,
    )
from .declass import declass_style
from .log import warning
from .utils import read_style, write_json, setup_std_streams


_description = """Merge paint classes into the main paint of every layer of a style.
Prints the resulting style as JSON unless an output file is given.
"""


def main_declass(args):
    if not os.path.exists(args.style):
        print("Missing file {}".format(args.style))
        return 1
    try:
        style = read_style(args.style, on_null='minimal')
    except ValueError as e:
        print("Could not read style: {}".format(e))
        return 1

    if not args.classes:
        warning("No paint classes given, the style is left unchanged.")
    result = declass_style(style, args.classes)

    if args.out:
        write_json(result, args.out)
    else:
        print(json.dumps(result, indent=2, separators=(",", ": ")))
    return 0


def _build_arg_parser(prog='stylediff-declass'):
    """Creates an argument parser for the declass command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_class_args(parser)
    add_filename_args(parser, ["style"])
    add_output_args(parser, "declassed style")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_declass(arguments)


if __name__ == "__main__":
    sys.exit(main())
