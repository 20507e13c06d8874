# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Recursive validation of component trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node


def check_structure(node: Node, strict_single_child: bool = False) -> list[str]:
    """Structural rules applied to every node, whatever its kind.

    Args:
        node: The node to check (children are not visited).
        strict_single_child: If True, a SINGLE node holding more than one
            child is an error instead of being truncated at serialization.

    Returns:
        List of error messages (empty if valid).
    """
    from .node import Multiplicity

    errors = []

    if not node.kind:
        errors.append("Component type is required")

    if (
        strict_single_child
        and node.multiplicity is Multiplicity.SINGLE
        and node.child_count() > 1
    ):
        errors.append(
            f"'{node.kind}' accepts a single child, found {node.child_count()}"
        )

    return errors


def collect_errors(node: Node, strict_single_child: bool = False) -> list[str]:
    """Collect all validation errors of a tree.

    Each node contributes its structural errors, then its kind-specific
    ``check()`` errors, then the errors of its children in order
    (depth-first pre-order). Every node is visited even after errors.

    Args:
        node: The tree root.
        strict_single_child: See ``check_structure``.

    Returns:
        Flat list of error messages (empty if valid).
    """
    errors = check_structure(node, strict_single_child=strict_single_child)
    errors.extend(node.check())

    for child in node:
        errors.extend(collect_errors(child, strict_single_child=strict_single_child))

    return errors
