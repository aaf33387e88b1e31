# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
from numbers import Number
import re

__all__ = ["ValidationError", "json_type", "validate_enum", "validate_value"]


ValidationError = namedtuple("ValidationError", ["path", "message"])

# Sigil of constant references, not allowed where literal values are required
CONSTANT_SIGIL = "@"


def json_type(value):
    "Name the json type of a value the way error messages report it."
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value):
    return json_type(value) == "number"


_hex_color = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_functional_color = re.compile(
    r"^(?:rgba?|hsla?)\(\s*-?[\d.]+%?\s*(?:,\s*-?[\d.]+%?\s*){2,3}\)$", re.IGNORECASE)

# CSS Color Module Level 4 named colors, plus transparent
named_colors = frozenset((
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige",
    "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown",
    "burlywood", "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink", "deepskyblue",
    "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "fuchsia", "gainsboro", "ghostwhite", "gold", "goldenrod",
    "gray", "green", "greenyellow", "grey", "honeydew", "hotpink", "indianred",
    "indigo", "ivory", "khaki", "lavender", "lavenderblush", "lawngreen",
    "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
    "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
    "lime", "limegreen", "linen", "magenta", "maroon", "mediumaquamarine",
    "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace", "olive", "olivedrab", "orange",
    "orangered", "orchid", "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink", "plum",
    "powderblue", "purple", "rebeccapurple", "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell", "sienna",
    "silver", "skyblue", "slateblue", "slategray", "slategrey", "snow",
    "springgreen", "steelblue", "tan", "teal", "thistle", "tomato",
    "transparent", "turquoise", "violet", "wheat", "white", "whitesmoke",
    "yellow", "yellowgreen",
))


def is_color(value):
    "Whether value is a css color string: hex, rgb(a), hsl(a) or named."
    if not isinstance(value, str):
        return False
    s = value.strip()
    return bool(_hex_color.match(s) or _functional_color.match(s) or
                s.lower() in named_colors)


def validate_enum(value, values, path):
    if value not in values:
        return [ValidationError(path, "expected one of [%s], %s found" % (
            ", ".join(repr(v) for v in values), repr(value)))]
    return []


def validate_number(value, spec, path):
    if not is_number(value):
        return [ValidationError(path, "number expected, %s found" % json_type(value))]
    if spec.minimum is not None and value < spec.minimum:
        return [ValidationError(path, "%s is less than the minimum value %s" % (value, spec.minimum))]
    if spec.maximum is not None and value > spec.maximum:
        return [ValidationError(path, "%s is greater than the maximum value %s" % (value, spec.maximum))]
    return []


def validate_array(value, spec, path):
    if json_type(value) != "array":
        return [ValidationError(path, "array expected, %s found" % json_type(value))]
    if spec.length is not None and len(value) != spec.length:
        return [ValidationError(path, "array length %d expected, length %d found" % (
            spec.length, len(value)))]
    errors = []
    for i, item in enumerate(value):
        if spec.value is not None and json_type(item) != spec.value:
            errors.append(ValidationError("%s[%d]" % (path, i), "%s expected, %s found" % (
                spec.value, json_type(item))))
    return errors


def validate_value(value, spec, path):
    "Check a constant value against a PropertySpec."
    if spec.type == "enum":
        return validate_enum(value, spec.values or (), path)
    elif spec.type == "color":
        if not is_color(value):
            return [ValidationError(path, "color expected, %r found" % (value,))]
        return []
    elif spec.type == "number":
        return validate_number(value, spec, path)
    elif spec.type == "array":
        return validate_array(value, spec, path)
    elif spec.type in ("string", "boolean"):
        if json_type(value) != spec.type:
            return [ValidationError(path, "%s expected, %s found" % (spec.type, json_type(value)))]
    return []
