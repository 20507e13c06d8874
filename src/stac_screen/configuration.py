# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Declarative configuration of component nodes.

A configuration is a plain dict applied key by key, in insertion order:

    1. a key matching an ``@option`` of the node calls that option
    2. ``properties`` (dict) is applied with ``PropertyStore.set_all``
    3. ``style`` (dict) is merged under the ``style`` property
    4. ``children`` (list/tuple) attaches every Node element, others skipped
    5. any other key is ignored

Order matters: later keys can overwrite what earlier keys merged.

Example:
    >>> apply_configuration(text, {
    ...     'font_weight': 'bold',
    ...     'style': {'fontSize': 18},
    ...     'properties': {'maxLines': 2},
    ... })
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger(__name__)


def apply_configuration(node: Node, config: Mapping[str, Any] | None) -> Node:
    """Mutate node according to config.

    Args:
        node: The node to configure.
        config: Configuration dict, or None for no-op.

    Returns:
        The same node.

    Raises:
        InvalidArgumentError: If config is not a mapping, or an option
            rejects its value.
    """
    from .node import Node

    if config is None:
        return node
    if not isinstance(config, Mapping):
        raise InvalidArgumentError(
            f"Configuration must be a mapping, not {type(config).__name__}"
        )

    for key, value in config.items():
        handler = node.get_option(key)
        if handler is not None:
            handler(value)
        elif key == 'properties':
            if isinstance(value, Mapping):
                node.properties.set_all(value)
        elif key == 'style':
            if isinstance(value, Mapping):
                node.properties.set('style', dict(value))
        elif key == 'children':
            if isinstance(value, (list, tuple)):
                for child in value:
                    if isinstance(child, Node):
                        node.add_child(child)
        else:
            logger.debug("Ignoring configuration key %r for '%s'", key, node.kind)

    return node
