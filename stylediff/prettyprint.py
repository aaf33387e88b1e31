# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .log import StyleDiffFormatError, StyleFilterError
from .operations import Command
from .validation.filters import parse_filter, format_filter


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78

DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'ERROR',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        ERROR  = '{color}!! '.format(color=colorama.Fore.RED + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        ERROR  = '!! ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def ERROR(self):
        return col_const[self.use_color].ERROR

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing."
    if not isinstance(v, str):
        vstr = pprint.pformat(v)
    else:
        vstr = v
    return vstr


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict):
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, target, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, target, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_new_value(value, config):
    "Print the value set by an operation, None meaning the value is unset."
    if value is None:
        config.out.write("%s(unset)\n" % (config.REMOVE,))
    else:
        pretty_print_value(value, config.ADD, config)


def format_filter_value(value):
    "Render a filter as an expression, falling back to its json for bad filters."
    try:
        return format_filter(parse_filter(value))
    except StyleFilterError:
        return format_value(value)


def pretty_print_operation(op, config=DefaultConfig):
    """Pretty-print a single style operation.

    Operations modifying a layer are headed by the layer id, values
    removed are prefixed by config.REMOVE and values set by config.ADD.
    """
    command = op["command"]
    args = op["args"]

    if command == Command.SET_STYLE:
        style = args[0] if isinstance(args[0], dict) else {}
        pretty_print_diff_action("replaced style", "version %s" % style.get("version"), config)
        pretty_print_value(style, config.ADD, config)

    elif command == Command.ADD_SOURCE:
        pretty_print_diff_action("added source", args[0], config)
        pretty_print_value(args[1], config.ADD, config)

    elif command == Command.REMOVE_SOURCE:
        pretty_print_diff_action("removed source", args[0], config)

    elif command == Command.ADD_LAYER:
        layer = args[0]
        before = args[1] if len(args) > 1 else None
        where = "at top" if before is None else "before %s" % before
        pretty_print_diff_action("added layer", "%s %s" % (layer.get("id"), where), config)
        pretty_print_value(layer, config.ADD, config)

    elif command == Command.REMOVE_LAYER:
        pretty_print_diff_action("removed layer", args[0], config)

    elif command in (Command.SET_PAINT_PROPERTY, Command.SET_LAYOUT_PROPERTY):
        layer_id, name, value = args[:3]
        if command == Command.SET_LAYOUT_PROPERTY:
            block = "layout"
        elif len(args) > 3 and args[3] is not None:
            block = "paint.%s" % args[3]
        else:
            block = "paint"
        pretty_print_diff_action(
            "changed %s property" % block, "%s %s" % (layer_id, name), config)
        pretty_print_new_value(value, config)

    elif command == Command.SET_FILTER:
        pretty_print_diff_action("changed filter", args[0], config)
        if args[1] is None:
            pretty_print_new_value(None, config)
        else:
            pretty_print_multiline(format_filter_value(args[1]), config.ADD, config)

    elif command == Command.SET_LAYER_ZOOM_RANGE:
        pretty_print_diff_action("changed zoom range", args[0], config)
        pretty_print_key_value("minzoom", format_value(args[1]), config.ADD, config)
        pretty_print_key_value("maxzoom", format_value(args[2]), config.ADD, config)

    elif command == Command.SET_LIGHT:
        pretty_print_diff_action("changed", "light", config)
        pretty_print_new_value(args[0], config)

    elif command in (Command.SET_CENTER, Command.SET_ZOOM,
                     Command.SET_BEARING, Command.SET_PITCH):
        name = command[len("set"):].lower()
        pretty_print_diff_action("changed", name, config)
        pretty_print_new_value(args[0], config)

    else:
        raise StyleDiffFormatError("Unknown style operation {}".format(command))

    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_operations(operations, config=DefaultConfig):
    "Pretty-print a list of style operations."
    for op in operations:
        pretty_print_operation(op, config)


style_diff_header = """\
stylediff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_style_diff(afn, bfn, operations, config=DefaultConfig):
    """Pretty-print a style diff

    Parameters
    ----------

    afn: str
        Filename of the style diffed from
    bfn: str
        Filename of the style diffed to
    operations: list
        The operations turning the first style into the second
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if operations:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(style_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_operations(operations, config)


def pretty_print_errors(filename, errors, config=DefaultConfig):
    "Pretty-print the validation errors found in a style file."
    for e in errors:
        location = "%s: %s" % (filename, e.path) if e.path else filename
        config.out.write("%s%s: %s%s\n" % (config.ERROR, location, e.message, config.RESET))
