# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Validation of the parts of a style the style reference describes.

Validators never raise on invalid input, they return the list of all
problems found as ValidationError(path, message) tuples.
"""

from .common import ValidationError, CONSTANT_SIGIL, json_type, validate_value
from .filters import validate_filter, parse_filter, format_filter
from .functions import validate_function, is_function
from .light import validate_light, validate_transition

__all__ = [
    "ValidationError", "validate_style", "validate_filter", "validate_function",
    "validate_light", "parse_filter", "format_filter",
]


def _block_kind(key):
    "Return 'layout' or 'paint' for property block keys, including paint classes."
    for kind in ("layout", "paint"):
        if key == kind or key.startswith(kind + "."):
            return kind
    return None


def validate_property(name, value, kind, reference, constants, path):
    table = reference.layout if kind == "layout" else reference.paint
    spec = table.get(name)
    if spec is None:
        base = name[:-len("-transition")] if name.endswith("-transition") else None
        if kind == "paint" and base in table and table[base].transition:
            return validate_transition(value, reference, path)
        return [ValidationError(path, 'unknown property "%s"' % name)]

    if isinstance(value, str) and value.startswith(CONSTANT_SIGIL):
        if value not in constants:
            return [ValidationError(path, 'constant "%s" not found' % value)]
        value = constants[value]

    if is_function(value):
        return validate_function(value, spec, reference.function_types, path)
    return validate_value(value, spec, path)


def validate_layer(layer, reference, constants, path):
    if json_type(layer) != "object":
        return [ValidationError(path, "object expected, %s found" % json_type(layer))]

    errors = []
    if "filter" in layer:
        errors.extend(validate_filter(layer["filter"], reference, path + ".filter"))

    for key, block in layer.items():
        kind = _block_kind(key)
        if kind is None:
            continue
        block_path = "%s.%s" % (path, key)
        if json_type(block) != "object":
            errors.append(ValidationError(
                block_path, "object expected, %s found" % json_type(block)))
            continue
        for name, value in block.items():
            errors.extend(validate_property(
                name, value, kind, reference, constants, "%s.%s" % (block_path, name)))
    return errors


def validate_style(style, reference):
    """Check the light, the layer filters and the layer properties of a style.

    Returns a list of ValidationErrors, empty if no problem was found.
    """
    if json_type(style) != "object":
        return [ValidationError("", "object expected, %s found" % json_type(style))]

    errors = []
    if "light" in style:
        errors.extend(validate_light(style["light"], reference))

    constants = style.get("constants")
    if json_type(constants) != "object":
        constants = {}

    layers = style.get("layers", [])
    if json_type(layers) != "array":
        return errors + [ValidationError("layers", "array expected, %s found" % json_type(layers))]
    for i, layer in enumerate(layers):
        errors.extend(validate_layer(layer, reference, constants, "layers[%d]" % i))
    return errors
