# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_output_args,
    add_prettyprint_args, ConfigBackedParser, prettyprint_config_from_args,
    )
from .declass import declass_style
from .diffing import diff_styles
from .log import StyleMigrationError
from .migrations import migrate
from .prettyprint import pretty_print_style_diff
from .utils import EXPLICIT_MISSING_FILE, read_style, write_json, setup_std_streams


_description = "Compute the operations turning one map style into another."


def main_diff(args):
    """Main handler of diff CLI"""
    before = args.before
    after = args.after

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (before, after):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1
    if before == EXPLICIT_MISSING_FILE and after == EXPLICIT_MISSING_FILE:
        print("Cannot diff {} against {}".format(before, after))
        return 1

    try:
        a = read_style(before, on_null='minimal')
        b = read_style(after, on_null='minimal')
    except ValueError as e:
        print("Could not read style: {}".format(e))
        return 1

    if args.migrate:
        try:
            a = migrate(a)
            b = migrate(b)
        except StyleMigrationError as e:
            print(str(e))
            return 1

    if args.classes:
        a = declass_style(a, args.classes)
        b = declass_style(b, args.classes)

    d = diff_styles(a, b)

    # Output as JSON to file, or print to stdout:
    if args.out:
        write_json(d, args.out)
    elif args.output_json:
        print(json.dumps(d, indent=2, separators=(",", ": ")))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_style_diff(before, after, d, config)

    return 0


def _build_arg_parser(prog='stylediff-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["before", "after"])
    add_output_args(parser, "list of operations")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
