# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Wire serialization of component trees.

The wire format is a JSON object with:
    - ``type``: the node kind
    - ``child`` (SINGLE nodes) or ``children`` (MANY nodes), when the node
      has children
    - every property as a top-level key, dotted paths materialized as nested
      objects

Properties are overlaid last, so a property named ``type``, ``child`` or
``children`` wins over the structural key of the same name.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .node import Node


def serialize_value(value: Any) -> Any:
    """Convert a property value to plain data.

    Node references (at any depth inside dicts, lists and tuples) are
    replaced by their own wire representation; other values are copied
    structurally so the output never aliases the node's storage.
    """
    from .node import Node

    if isinstance(value, Node):
        return serialize_node(value)
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def serialize_node(node: Node) -> dict[str, Any]:
    """Return the wire representation of node and its descendants.

    A SINGLE node emits only its first child; further children are dropped
    without error (use strict validation to flag them).
    """
    from .node import Multiplicity

    obj: dict[str, Any] = {'type': node.kind}

    if node.has_children():
        children = node.get_children()
        if node.multiplicity is Multiplicity.MANY:
            obj['children'] = [serialize_node(child) for child in children]
        else:
            obj['child'] = serialize_node(children[0])

    for key, value in node.properties.get_all().items():
        obj[key] = serialize_value(value)

    return obj


def dump_json(data: dict[str, Any], indent: int | None = 2) -> str:
    """Format a wire dict as JSON (unicode left unescaped)."""
    return json.dumps(data, indent=indent, ensure_ascii=False)


def to_json(node: Node, indent: int | None = 2) -> str:
    """Serialize node to a JSON string.

    Args:
        node: The tree root.
        indent: Pretty-print indentation, None for compact output.
    """
    return dump_json(serialize_node(node), indent=indent)
