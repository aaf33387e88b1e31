# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Legacy filters: validation, and parsing into a tree.

A legacy filter is an array [operator, ...operands]:

    ["==", "class", "street"]
    ["in", "$type", "Point", "LineString"]
    ["has", "name"]
    ["all", ["==", "class", "street"], ["!has", "name"]]
"""

from collections import namedtuple
import json

from ..log import StyleFilterError
from .common import ValidationError, CONSTANT_SIGIL, json_type, validate_enum

__all__ = [
    "Comparison", "Membership", "Existence", "Combinator",
    "parse_filter", "format_filter", "validate_filter",
]


COMPARISON_OPERATORS = ("==", "!=", ">", ">=", "<", "<=")
ORDER_OPERATORS = (">", ">=", "<", "<=")
MEMBERSHIP_OPERATORS = ("in", "!in")
EXISTENCE_OPERATORS = ("has", "!has")
COMBINING_OPERATORS = ("all", "any", "none")

# Pseudo key matching the geometry type of a feature
TYPE_KEY = "$type"


Comparison = namedtuple("Comparison", ["op", "key", "value"])
Membership = namedtuple("Membership", ["op", "key", "values"])
Existence = namedtuple("Existence", ["op", "key"])
Combinator = namedtuple("Combinator", ["op", "filters"])


def parse_filter(value):
    """Parse a legacy filter array into a tree of filter nodes.

    Raises StyleFilterError for arrays that are not a valid filter.
    Run validate_filter first for a full report of what is wrong.
    """
    if not isinstance(value, (list, tuple)) or not value:
        raise StyleFilterError("Filter must be a non-empty array, not %r." % (value,))
    op = value[0]
    operands = list(value[1:])

    if op in COMBINING_OPERATORS:
        return Combinator(op, tuple(parse_filter(f) for f in operands))

    if not operands or not isinstance(operands[0], str):
        raise StyleFilterError("Filter %r needs a key." % (value,))
    key = operands[0]

    if op in COMPARISON_OPERATORS:
        if len(operands) != 2:
            raise StyleFilterError("Filter %r needs exactly one value." % (value,))
        return Comparison(op, key, operands[1])
    elif op in MEMBERSHIP_OPERATORS:
        return Membership(op, key, tuple(operands[1:]))
    elif op in EXISTENCE_OPERATORS:
        if len(operands) != 1:
            raise StyleFilterError("Filter %r takes no value." % (value,))
        return Existence(op, key)
    raise StyleFilterError("Unknown filter operator %r." % (op,))


def format_filter(node):
    "Render a filter tree as a single line expression for display."
    if isinstance(node, Comparison):
        return "%s %s %s" % (node.key, node.op, json.dumps(node.value))
    elif isinstance(node, Membership):
        values = ", ".join(json.dumps(v) for v in node.values)
        op = "in" if node.op == "in" else "not in"
        return "%s %s [%s]" % (node.key, op, values)
    elif isinstance(node, Existence):
        return ("has %s" if node.op == "has" else "not has %s") % node.key
    elif isinstance(node, Combinator):
        if not node.filters:
            return "true" if node.op in ("all", "none") else "false"
        parts = []
        for child in node.filters:
            text = format_filter(child)
            if isinstance(child, Combinator) and len(child.filters) > 1:
                text = "(%s)" % text
            parts.append(text)
        if node.op == "all":
            return " and ".join(parts)
        joined = " or ".join(parts)
        if node.op == "none":
            return "not (%s)" % joined if len(parts) > 1 else "not %s" % joined
        return joined
    raise StyleFilterError("Not a filter node: %r" % (node,))


def validate_simple_filter(value, reference, path):
    errors = []
    if len(value) >= 2:
        key = value[1]
        if json_type(key) != "string":
            errors.append(ValidationError(
                "%s[1]" % path, "string expected, %s found" % json_type(key)))
        elif key.startswith(CONSTANT_SIGIL):
            errors.append(ValidationError("%s[1]" % path, "filter key cannot be a constant"))

    for i in range(2, len(value)):
        item = value[i]
        item_path = "%s[%d]" % (path, i)
        kind = json_type(item)
        if len(value) >= 2 and value[1] == TYPE_KEY:
            errors.extend(validate_enum(item, reference.geometry_types, item_path))
        elif kind == "string" and item.startswith(CONSTANT_SIGIL):
            errors.append(ValidationError(item_path, "filter value cannot be a constant"))
        elif kind not in ("string", "number", "boolean", "null"):
            errors.append(ValidationError(
                item_path, "string, number, boolean, or null expected, %s found" % kind))
    return errors


def validate_filter(value, reference, path="filter"):
    """Check a legacy filter, returning a list of ValidationErrors.

    Nested filters of all/any/none are checked recursively, every problem
    found is reported.
    """
    if json_type(value) != "array":
        return [ValidationError(path, "array expected, %s found" % json_type(value))]
    if len(value) < 1:
        return [ValidationError(path, "filter array must have at least 1 element")]

    op = value[0]
    errors = validate_enum(op, reference.filter_operators, "%s[0]" % path)

    if op in ORDER_OPERATORS:
        if len(value) >= 2 and value[1] == TYPE_KEY:
            errors.append(ValidationError(
                path, '"$type" cannot be use with operator "%s"' % op))
        if len(value) != 3:
            errors.append(ValidationError(
                path, 'filter array for operator "%s" must have 3 elements' % op))
        errors.extend(validate_simple_filter(value, reference, path))

    elif op in ("==", "!="):
        if len(value) != 3:
            errors.append(ValidationError(
                path, 'filter array for operator "%s" must have 3 elements' % op))
        errors.extend(validate_simple_filter(value, reference, path))

    elif op in MEMBERSHIP_OPERATORS:
        errors.extend(validate_simple_filter(value, reference, path))

    elif op in EXISTENCE_OPERATORS:
        if len(value) != 2:
            errors.append(ValidationError(path, '"has" filter must have exactly 1 operand'))
        errors.extend(validate_simple_filter(value, reference, path))

    elif op in COMBINING_OPERATORS:
        for i in range(1, len(value)):
            errors.extend(validate_filter(value[i], reference, "%s[%d]" % (path, i)))

    return errors
