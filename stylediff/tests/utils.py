# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from stylediff import diff_styles
from stylediff.diffing.comparing import IGNORED_KEYS
from stylediff.operations import is_valid_operations


def op(command, *args):
    "Build the plain dict form of an operation."
    return {"command": command, "args": list(args)}


def _find_layer(layers, layer_id):
    for i, layer in enumerate(layers):
        if layer["id"] == layer_id:
            return i
    raise AssertionError("layer %r not found in %r" % (layer_id, [l["id"] for l in layers]))


def _remove_layer(layers, layer_id):
    del layers[_find_layer(layers, layer_id)]
    # Layers refing a removed layer go with it
    for layer in list(layers):
        if layer.get("ref") == layer_id and layer in layers:
            _remove_layer(layers, layer["id"])


def _set_key(obj, key, value):
    if value is None:
        obj.pop(key, None)
    else:
        obj[key] = copy.deepcopy(value)


def apply_operations(style, operations):
    """Replay operations on a copy of style, the way a map renderer would.

    Asserts that every operation is applicable at its point of the replay.
    """
    style = copy.deepcopy(style)
    layers = style.setdefault("layers", [])
    sources = style.setdefault("sources", {})

    for e in operations:
        command, args = e["command"], e["args"]
        if command == "setStyle":
            style = copy.deepcopy(args[0])
            layers = style.setdefault("layers", [])
            sources = style.setdefault("sources", {})
        elif command == "addSource":
            assert args[0] not in sources
            sources[args[0]] = copy.deepcopy(args[1])
        elif command == "removeSource":
            del sources[args[0]]
        elif command == "addLayer":
            layer, before = args
            assert all(l["id"] != layer["id"] for l in layers)
            if before is None:
                layers.append(copy.deepcopy(layer))
            else:
                layers.insert(_find_layer(layers, before), copy.deepcopy(layer))
        elif command == "removeLayer":
            _remove_layer(layers, args[0])
        elif command in ("setPaintProperty", "setLayoutProperty"):
            layer_id, name, value, klass = args
            layer = layers[_find_layer(layers, layer_id)]
            if command == "setLayoutProperty":
                block = "layout"
            else:
                block = "paint" if klass is None else "paint." + klass
            _set_key(layer.setdefault(block, {}), name, value)
        elif command == "setFilter":
            _set_key(layers[_find_layer(layers, args[0])], "filter", args[1])
        elif command == "setLayerZoomRange":
            layer = layers[_find_layer(layers, args[0])]
            _set_key(layer, "minzoom", args[1])
            _set_key(layer, "maxzoom", args[2])
        elif command == "setLight":
            _set_key(style, "light", args[0])
        elif command in ("setCenter", "setZoom", "setBearing", "setPitch"):
            _set_key(style, command[len("set"):].lower(), args[0])
        else:
            raise AssertionError("unknown command %r" % command)
    return style


def normalized(style):
    "Drop ignored keys and empty property blocks, for comparing replay results."
    style = {k: v for k, v in style.items() if k not in IGNORED_KEYS}
    style.setdefault("sources", {})
    layers = []
    for layer in style.get("layers", []):
        layers.append({
            k: v for k, v in layer.items()
            if k not in IGNORED_KEYS and v != {}
        })
    style["layers"] = layers
    return style


def check_diff_and_replay(a, b):
    "Check that replaying diff_styles(a, b) on a reproduces b."
    d = diff_styles(a, b)
    assert is_valid_operations(d)
    assert normalized(apply_operations(a, d)) == normalized(b)
    return d


def check_symmetric_diff_and_replay(a, b):
    "Check that diffs in both directions replay correctly."
    check_diff_and_replay(a, b)
    check_diff_and_replay(b, a)
