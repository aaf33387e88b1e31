# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Migration of version 8 styles to version 9.

Version 9 replaces the stops of property functions by a domain and a
range, and makes the function type explicit.
"""

import copy

from ..diffing.comparing import is_mapping, is_sequence
from ..log import debug, warning

__all__ = ["migrate_v9"]


# Prefix of constant references, resolved through the style constants
CONSTANT_SIGIL = "@"


def each_layer(layers):
    "Iterate over layers, including layers nested in layer groups."
    if not is_sequence(layers):
        return
    for layer in layers:
        if is_mapping(layer):
            yield layer
            yield from each_layer(layer.get("layers"))


def each_property_block(layer, prefix):
    "Iterate over the layout or paint blocks of a layer, paint classes included."
    for key, block in layer.items():
        if key.startswith(prefix) and is_mapping(block):
            yield block


def migrate_function(name, value, reference, constants):
    """Rewrite a stops based function in place into domain/range form."""
    if is_mapping(value) and "stops" in value:
        spec = reference.property(name)
        if spec is None:
            debug("Not migrating function of unknown property %r", name)
            return
        stops = value["stops"]
        if not is_sequence(stops) or not all(
                is_sequence(stop) and len(stop) >= 2 for stop in stops):
            warning("Not migrating function of %r with malformed stops %r", name, stops)
            return
        del value["stops"]
        value["domain"] = [stop[0] for stop in stops]
        value["range"] = [stop[1] for stop in stops]

        if reference.is_discrete(name):
            # N breakpoints between N+1 values, the first stop input is implied
            value["type"] = "interval"
            value["domain"] = value["domain"][1:]
            value.pop("base", None)
        else:
            value["type"] = "exponential"

    elif isinstance(value, str) and value.startswith(CONSTANT_SIGIL):
        resolved = constants.get(value)
        if is_mapping(resolved):
            migrate_function(name, resolved, reference, constants)


def migrate_v9(style, reference):
    """Return a copy of a version 8 style migrated to version 9.

    `reference` is the StyleReference used to tell discrete properties
    from interpolated ones.
    """
    style = copy.deepcopy(style)
    style["version"] = 9

    constants = style.get("constants")
    if not is_mapping(constants):
        constants = {}

    for layer in each_layer(style.get("layers")):
        for prefix in ("layout", "paint"):
            for block in each_property_block(layer, prefix):
                for name, value in block.items():
                    migrate_function(name, value, reference, constants)

    return style
