# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_output_args, ConfigBackedParser,
    )
from .log import StyleMigrationError
from .migrations import migrate, LATEST_VERSION
from .utils import read_style, write_json, setup_std_streams


_description = """Migrate a style to a newer style version.
Prints the migrated style as JSON unless an output file is given.
"""


def main_migrate(args):
    if not os.path.exists(args.style):
        print("Missing file {}".format(args.style))
        return 1
    try:
        style = read_style(args.style, on_null='minimal')
    except ValueError as e:
        print("Could not read style: {}".format(e))
        return 1

    try:
        result = migrate(style, target=args.target)
    except StyleMigrationError as e:
        print(str(e))
        return 1

    if args.out:
        write_json(result, args.out)
    else:
        print(json.dumps(result, indent=2, separators=(",", ": ")))
    return 0


def _build_arg_parser(prog='stylediff-migrate'):
    """Creates an argument parser for the migrate command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    parser.add_argument(
        '--target',
        type=int,
        default=LATEST_VERSION,
        help="the style version to migrate to. Default is %d." % LATEST_VERSION)
    add_filename_args(parser, ["style"])
    add_output_args(parser, "migrated style")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_migrate(arguments)


if __name__ == "__main__":
    sys.exit(main())
