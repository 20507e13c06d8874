# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Deep copy of component trees and property values."""

from __future__ import annotations

from typing import Any

from .node import Node


def copy_value(value: Any) -> Any:
    """Copy a property value so that no dict or list is shared.

    Node references are cloned, scalars are returned as-is.
    """
    if isinstance(value, Node):
        return clone_node(value)
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(copy_value(v) for v in value)
    return value


def clone_node(node: Node) -> Node:
    """Return a structurally independent copy of node and its subtree.

    The clone keeps the concrete class, kind and multiplicity, gets a deep
    copy of the properties and fresh clones of every child (re-attached with
    ``add_child``). It has no parent.
    """
    clone = object.__new__(type(node))
    clone._kind = node._kind
    clone._multiplicity = node._multiplicity
    clone.properties = node.properties.copy()
    clone._children = []
    clone._parent_ref = None

    # Subclasses without __slots__ may carry extra instance state.
    extra = getattr(node, '__dict__', None)
    if extra:
        clone.__dict__.update(copy_value(extra))

    for child in node:
        clone.add_child(clone_node(child))

    return clone
