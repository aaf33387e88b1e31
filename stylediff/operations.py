# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from numbers import Number

from .log import StyleDiffFormatError


# Sentinel for keys absent from a style document, to allow None as a value
Missing = object()


def defined(value):
    "Map the Missing sentinel to None, the wire representation of undefined."
    return None if value is Missing else value


class Operation(dict):
    """For internal usage in stylediff library.

    Minimal class providing attribute access to operation keys.
    Compares equal to a plain dict with the same command and args,
    and serializes to json without conversion.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        return self[name]

    def __setattr__(self, name, value):
        self[name] = value


class Command:
    "Collection of valid values for the command field in operations."
    SET_STYLE = "setStyle"
    ADD_SOURCE = "addSource"
    REMOVE_SOURCE = "removeSource"
    ADD_LAYER = "addLayer"
    REMOVE_LAYER = "removeLayer"
    SET_PAINT_PROPERTY = "setPaintProperty"
    SET_LAYOUT_PROPERTY = "setLayoutProperty"
    SET_FILTER = "setFilter"
    SET_LAYER_ZOOM_RANGE = "setLayerZoomRange"
    SET_LIGHT = "setLight"
    SET_CENTER = "setCenter"
    SET_ZOOM = "setZoom"
    SET_BEARING = "setBearing"
    SET_PITCH = "setPitch"


# Number of positional arguments for each command
COMMAND_ARITY = {
    Command.SET_STYLE: 1,
    Command.ADD_SOURCE: 2,
    Command.REMOVE_SOURCE: 1,
    Command.ADD_LAYER: 2,
    Command.REMOVE_LAYER: 1,
    Command.SET_PAINT_PROPERTY: 4,
    Command.SET_LAYOUT_PROPERTY: 4,
    Command.SET_FILTER: 2,
    Command.SET_LAYER_ZOOM_RANGE: 3,
    Command.SET_LIGHT: 1,
    Command.SET_CENTER: 1,
    Command.SET_ZOOM: 1,
    Command.SET_BEARING: 1,
    Command.SET_PITCH: 1,
}

# Commands taking a layer id as first argument
LAYER_COMMANDS = (
    Command.REMOVE_LAYER,
    Command.SET_PAINT_PROPERTY,
    Command.SET_LAYOUT_PROPERTY,
    Command.SET_FILTER,
    Command.SET_LAYER_ZOOM_RANGE,
)

CAMERA_COMMANDS = (
    Command.SET_ZOOM,
    Command.SET_BEARING,
    Command.SET_PITCH,
)


def _op(command, *args):
    return Operation(command=command, args=list(args))


def op_set_style(style):
    "Create an operation replacing the whole style."
    return _op(Command.SET_STYLE, style)

def op_add_source(source_id, source):
    "Create an operation adding a source."
    return _op(Command.ADD_SOURCE, source_id, source)

def op_remove_source(source_id):
    "Create an operation removing a source."
    return _op(Command.REMOVE_SOURCE, source_id)

def op_add_layer(layer, before_id=None):
    "Create an operation inserting layer before the layer before_id, or on top if None."
    return _op(Command.ADD_LAYER, layer, defined(before_id))

def op_remove_layer(layer_id):
    "Create an operation removing a layer."
    return _op(Command.REMOVE_LAYER, layer_id)

def op_set_paint_property(layer_id, name, value, klass=None):
    "Create an operation setting (or unsetting, with None) a paint property."
    return _op(Command.SET_PAINT_PROPERTY, layer_id, name, defined(value), defined(klass))

def op_set_layout_property(layer_id, name, value, klass=None):
    "Create an operation setting (or unsetting, with None) a layout property."
    return _op(Command.SET_LAYOUT_PROPERTY, layer_id, name, defined(value), defined(klass))

def op_set_filter(layer_id, filter):
    "Create an operation replacing the filter of a layer."
    return _op(Command.SET_FILTER, layer_id, defined(filter))

def op_set_layer_zoom_range(layer_id, minzoom, maxzoom):
    "Create an operation setting both zoom bounds of a layer."
    return _op(Command.SET_LAYER_ZOOM_RANGE, layer_id, defined(minzoom), defined(maxzoom))

def op_set_light(light):
    return _op(Command.SET_LIGHT, defined(light))

def op_set_center(center):
    return _op(Command.SET_CENTER, defined(center))

def op_set_zoom(zoom):
    return _op(Command.SET_ZOOM, defined(zoom))

def op_set_bearing(bearing):
    return _op(Command.SET_BEARING, defined(bearing))

def op_set_pitch(pitch):
    return _op(Command.SET_PITCH, defined(pitch))


def to_operation_dicts(ops):
    "Convert a json-loaded list of operation dicts to Operation objects."
    if not isinstance(ops, list):
        raise StyleDiffFormatError("Operations must be a list.")
    return [Operation(**e) if isinstance(e, dict) else e for e in ops]


def is_valid_operations(ops):
    """Checks whether a list of operations is well formed.

    Returns a boolean indicating the well-formedness of the list.
    """
    try:
        validate_operations(ops)
        result = True
    except StyleDiffFormatError:
        result = False
    return result


def validate_operations(ops):
    """Check whether a list of operations is well formed.

    Raises a StyleDiffFormatError if not well formed.
    """
    if not isinstance(ops, list):
        raise StyleDiffFormatError("Operations must be a list.")
    for e in ops:
        validate_operation(e)


def _is_optional_str(value):
    return value is None or isinstance(value, str)


def _is_optional_number(value):
    return value is None or (isinstance(value, Number) and not isinstance(value, bool))


def validate_operation(e):
    """Check that e is a well formed operation.

    Raises a StyleDiffFormatError if not well formed.
    """
    if not isinstance(e, Operation):
        raise StyleDiffFormatError("Operation '{}' is not an operation type.".format(e))
    if set(e.keys()) != {"command", "args"}:
        raise StyleDiffFormatError(
            "Operation must have exactly the keys 'command' and 'args', not {}.".format(
                sorted(e.keys())))

    command = e.command
    args = e.args
    if command not in COMMAND_ARITY:
        raise StyleDiffFormatError("Unknown command '{}'.".format(command))
    if not isinstance(args, list):
        raise StyleDiffFormatError(
            "{} expects a list of arguments, not '{}'.".format(command, args))
    if len(args) != COMMAND_ARITY[command]:
        raise StyleDiffFormatError(
            "{} expects {} arguments, got {}.".format(
                command, COMMAND_ARITY[command], len(args)))

    if command in LAYER_COMMANDS:
        if not isinstance(args[0], str):
            raise StyleDiffFormatError(
                "{} expects a layer id string, not '{}'.".format(command, args[0]))
        if command in (Command.SET_PAINT_PROPERTY, Command.SET_LAYOUT_PROPERTY):
            if not isinstance(args[1], str):
                raise StyleDiffFormatError(
                    "{} expects a property name string, not '{}'.".format(command, args[1]))
            if not _is_optional_str(args[3]):
                raise StyleDiffFormatError(
                    "{} expects a class name string or None, not '{}'.".format(
                        command, args[3]))
        elif command == Command.SET_LAYER_ZOOM_RANGE:
            if not (_is_optional_number(args[1]) and _is_optional_number(args[2])):
                raise StyleDiffFormatError(
                    "setLayerZoomRange expects numbers or None, not {}.".format(args[1:]))
    elif command == Command.ADD_LAYER:
        layer = args[0]
        if not isinstance(layer, dict) or not isinstance(layer.get("id"), str):
            raise StyleDiffFormatError(
                "addLayer expects a layer with an id, not '{}'.".format(layer))
        if not _is_optional_str(args[1]):
            raise StyleDiffFormatError(
                "addLayer expects a layer id string or None as anchor, not '{}'.".format(
                    args[1]))
    elif command in (Command.ADD_SOURCE, Command.REMOVE_SOURCE):
        if not isinstance(args[0], str):
            raise StyleDiffFormatError(
                "{} expects a source id string, not '{}'.".format(command, args[0]))
    elif command == Command.SET_STYLE:
        if not isinstance(args[0], dict):
            raise StyleDiffFormatError("setStyle expects a style object.")
    elif command == Command.SET_CENTER:
        center = args[0]
        if center is not None and not (
                isinstance(center, (list, tuple)) and len(center) == 2 and
                all(_is_optional_number(c) and c is not None for c in center)):
            raise StyleDiffFormatError(
                "setCenter expects a [lng, lat] pair, not '{}'.".format(center))
    elif command in CAMERA_COMMANDS:
        if not _is_optional_number(args[0]):
            raise StyleDiffFormatError(
                "{} expects a number, not '{}'.".format(command, args[0]))

    # Note that values of properties, filters, sources and light are
    # not checked, they can in principle be arbitrary json objects
