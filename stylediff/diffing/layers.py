# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Tools for diffing the layer list of two styles.

Layers are identified by their id, not by their position. The diff is
computed in four passes: removals (including layers that disappear
implicitly with the layer they ref), moves of surviving layers, additions,
and finally property updates of the surviving layers that stayed in place.
All passes assume the operations are replayed in order, so every anchor
passed to addLayer names a layer that exists at that point of the replay.
"""

from ..log import warning
from ..operations import (
    Missing,
    op_add_layer, op_remove_layer,
    op_set_paint_property, op_set_layout_property,
    op_set_filter, op_set_layer_zoom_range,
)
from .comparing import json_equal, lookup, strip_ignored, is_mapping, is_sequence

__all__ = ["diff_layers"]


# Prefix of the keys holding paint class overlays, e.g. "paint.night"
PAINT_CLASS_PREFIX = "paint."

# Fields that define what a layer draws, they can not be updated in place
IDENTITY_KEYS = ("type", "source", "source-layer", "ref")


def index_layers(layers):
    """Return the ordered list of layer ids and an id -> layer mapping.

    Layers without a string id are skipped, and only the first layer
    of a duplicated id is kept.
    """
    order = []
    index = {}
    if not is_sequence(layers):
        return order, index
    for layer in layers:
        layer_id = lookup(layer, "id")
        if not isinstance(layer_id, str):
            warning("Skipping layer without a valid id: %r", layer)
            continue
        if layer_id in index:
            warning("Skipping duplicate layer id %r", layer_id)
            continue
        order.append(layer_id)
        index[layer_id] = layer
    return order, index


def ref_chain(layer_id, index):
    """Return the ids layer_id refs, directly or through other ref layers.

    The chain stops at the first layer without a ref or with a ref to
    an unknown layer. A cyclic chain is invalid and returns no ids.
    """
    chain = []
    seen = {layer_id}
    ref = lookup(index.get(layer_id), "ref")
    while isinstance(ref, str) and ref in index:
        if ref in seen:
            return []
        chain.append(ref)
        seen.add(ref)
        ref = lookup(index[ref], "ref")
    return chain


def find_ref_casualties(order, index, removed):
    """Return the set of layers removed implicitly through their ref.

    A layer whose ref chain reaches a removed layer is gone as soon as
    that layer is removed, whether or not it is still in the new style.
    """
    return set(
        layer_id for layer_id in order
        if any(ref in removed for ref in ref_chain(layer_id, index))
    )


def diff_removed_layers(before_order, before_index, after_index):
    """Compute removals, return (operations, ids of layers no longer live)."""
    removed = set(layer_id for layer_id in before_order if layer_id not in after_index)
    casualties = find_ref_casualties(before_order, before_index, removed)

    ops = []
    for layer_id in before_order:
        if layer_id in removed and layer_id not in casualties:
            ops.append(op_remove_layer(layer_id))
    return ops, removed | casualties


def find_dependents(layer_id, tracker, live):
    "Return the live layers whose ref chain reaches layer_id."
    index = dict((other, live[other]) for other in tracker)
    return set(
        other for other in tracker
        if layer_id in ref_chain(other, index)
    )


def diff_moved_layers(before_order, after_order, before_index, after_index, surviving):
    """Compute remove/add pairs putting surviving layers in their new order.

    Works backwards through the new order on a replay of the live layer
    list, so that each layer is inserted before a layer already in place.
    Removing a moved layer also removes the live layers that ref it, those
    are no longer live and are left to the addition pass.
    Returns (operations, ids of moved layers, ids of layers lost on the way).
    """
    tracker = [layer_id for layer_id in before_order if layer_id in surviving]
    target = [layer_id for layer_id in after_order if layer_id in surviving]
    live = dict((layer_id, before_index[layer_id]) for layer_id in tracker)

    ops = []
    moved = set()
    lost = set()
    # Layers at the end of tracker already in their final position
    in_place = set()
    for layer_id in reversed(target):
        if layer_id in lost:
            continue
        if tracker[len(tracker) - 1 - len(in_place)] == layer_id:
            in_place.add(layer_id)
            continue
        dependents = find_dependents(layer_id, tracker, live)
        ops.append(op_remove_layer(layer_id))
        tracker = [other for other in tracker
                   if other != layer_id and other not in dependents]
        lost |= dependents
        in_place -= dependents
        moved -= dependents

        pos = len(tracker) - len(in_place)
        anchor = tracker[pos] if pos < len(tracker) else None
        ops.append(op_add_layer(after_index[layer_id], anchor))
        tracker.insert(pos, layer_id)
        live[layer_id] = after_index[layer_id]
        in_place.add(layer_id)
        moved.add(layer_id)
    return ops, moved, lost


def diff_added_layers(after_order, after_index, surviving):
    """Compute additions of layers that are not live.

    Each layer is inserted before the layer following it in the new
    order. Going backwards guarantees that layer is in place already.
    """
    ops = []
    for pos in range(len(after_order) - 1, -1, -1):
        layer_id = after_order[pos]
        if layer_id in surviving:
            continue
        anchor = after_order[pos + 1] if pos + 1 < len(after_order) else None
        ops.append(op_add_layer(after_index[layer_id], anchor))
    return ops


def diff_property_block(layer_id, before, after, make_op, klass=None):
    """Compute one operation per changed key of a paint or layout block.

    Keys are visited in the order of the old block, then keys only in
    the new block in their order. Removed keys are set to None.
    """
    if not is_mapping(before):
        before = {}
    if not is_mapping(after):
        after = {}

    ops = []
    for key, value in before.items():
        new_value = after.get(key, Missing)
        if not json_equal(value, new_value):
            ops.append(make_op(layer_id, key, new_value, klass))
    for key, value in after.items():
        if key not in before:
            ops.append(make_op(layer_id, key, value, klass))
    return ops


def paint_class_keys(before, after):
    "The paint class keys of two versions of a layer, in layer key order."
    keys = []
    for layer in (before, after):
        if not is_mapping(layer):
            continue
        for key in layer:
            if key.startswith(PAINT_CLASS_PREFIX) and key not in keys:
                keys.append(key)
    return keys


def diff_layer_properties(layer_id, before, after):
    """Compute in place updates of a layer present in both styles.

    Updates are ordered paint, paint classes, layout, filter, zoom range.
    """
    if json_equal(strip_ignored(before), strip_ignored(after)):
        return []

    for key in IDENTITY_KEYS:
        if not json_equal(lookup(before, key), lookup(after, key)):
            warning("Layer %r changed %r, which cannot be updated in place. "
                    "Remove and add the layer to apply this change.", layer_id, key)

    ops = []
    ops.extend(diff_property_block(
        layer_id, lookup(before, "paint"), lookup(after, "paint"),
        op_set_paint_property))
    for key in paint_class_keys(before, after):
        ops.extend(diff_property_block(
            layer_id, lookup(before, key), lookup(after, key),
            op_set_paint_property, klass=key[len(PAINT_CLASS_PREFIX):]))
    ops.extend(diff_property_block(
        layer_id, lookup(before, "layout"), lookup(after, "layout"),
        op_set_layout_property))

    after_filter = lookup(after, "filter")
    if not json_equal(lookup(before, "filter"), after_filter):
        ops.append(op_set_filter(layer_id, after_filter))

    minzoom = lookup(after, "minzoom")
    maxzoom = lookup(after, "maxzoom")
    if not (json_equal(lookup(before, "minzoom"), minzoom) and
            json_equal(lookup(before, "maxzoom"), maxzoom)):
        ops.append(op_set_layer_zoom_range(layer_id, minzoom, maxzoom))

    return ops


def diff_layers(before, after):
    """Compute the operations turning the layer list before into after.

    The result concatenates removals, moves, additions and property
    updates, in that order.
    """
    before_order, before_index = index_layers(before)
    after_order, after_index = index_layers(after)

    ops, gone = diff_removed_layers(before_order, before_index, after_index)
    surviving = set(layer_id for layer_id in before_order if layer_id not in gone)

    move_ops, moved, lost = diff_moved_layers(
        before_order, after_order, before_index, after_index, surviving)
    ops.extend(move_ops)
    surviving -= lost

    ops.extend(diff_added_layers(after_order, after_index, surviving))

    for layer_id in after_order:
        if layer_id in surviving and layer_id not in moved:
            ops.extend(diff_layer_properties(
                layer_id, before_index[layer_id], after_index[layer_id]))

    return ops
