# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Tools for diffing map styles.

Both styles are assumed to be of the same style version, use the
migrations to bring them to a common version first. A version
mismatch is answered with a single setStyle operation.
"""

from ..log import warning
from ..operations import (
    op_set_style, op_add_source, op_remove_source, op_set_light,
    op_set_center, op_set_zoom, op_set_bearing, op_set_pitch,
)
from .comparing import json_equal, lookup, strip_ignored, is_mapping
from .layers import diff_layers

__all__ = ["diff_styles"]


# Camera keys and their operations, in output order
camera_operations = (
    ("center", op_set_center),
    ("zoom", op_set_zoom),
    ("bearing", op_set_bearing),
    ("pitch", op_set_pitch),
)


def diff_sources(before, after):
    """Compute additions and removals of sources.

    Sources are compared by presence only, a source whose definition
    changed is left alone.
    """
    if not is_mapping(before):
        before = {}
    if not is_mapping(after):
        after = {}

    ops = []
    for source_id in before:
        if source_id not in after:
            ops.append(op_remove_source(source_id))
    for source_id, source in after.items():
        if source_id not in before:
            ops.append(op_add_source(source_id, source))
        elif not json_equal(before[source_id], source):
            warning("Source %r changed, which cannot be updated in place. "
                    "Remove and add the source to apply this change.", source_id)
    return ops


def diff_light(before, after):
    light = lookup(after, "light")
    if json_equal(lookup(before, "light"), light):
        return []
    return [op_set_light(light)]


def diff_camera(before, after):
    "Compute camera updates, each camera key is checked independently."
    ops = []
    for key, make_op in camera_operations:
        value = lookup(after, key)
        if not json_equal(lookup(before, key), value):
            ops.append(make_op(value))
    return ops


def diff_styles(before, after):
    """Compute the ordered list of operations turning style before into after.

    The result is ordered: source removals, source additions, layer
    removals, layer moves, layer additions, layer property updates,
    light, then center, zoom, bearing and pitch. Metadata is ignored.
    Neither style is modified.
    """
    if not json_equal(lookup(before, "version"), lookup(after, "version")):
        return [op_set_style(after)]

    if json_equal(strip_ignored(before), strip_ignored(after)):
        return []

    ops = []
    ops.extend(diff_sources(lookup(before, "sources"), lookup(after, "sources")))
    ops.extend(diff_layers(lookup(before, "layers"), lookup(after, "layers")))
    ops.extend(diff_light(before, after))
    ops.extend(diff_camera(before, after))
    return ops
