# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ScreenBuilder - Builder pattern for whole screens."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .exceptions import InvalidArgumentError, ValidationFailedError
from .factory import FactoryBase
from .node import Node
from .registry import Registry
from .serialization import dump_json

logger = logging.getLogger(__name__)


class ScreenBuilder:
    """Holds the root component of a screen and builds its wire format.

    Short names resolve to factory operations, so the builder doubles as
    a fluent creation API:

        >>> sb = ScreenBuilder()
        >>> sb.set_root_component(
        ...     sb.column(config={'main_axis_alignment': 'center'}).add_children([
        ...         sb.text('Hello'),
        ...         sb.text('World'),
        ...     ])
        ... )
        >>> sb.build()['children'][0]
        {'type': 'text', 'data': 'Hello'}

    Real methods on ScreenBuilder take precedence over factory operations.
    For clashing names, use ``builder.factory.resolve(name)``.
    """

    def __init__(
        self,
        factory: FactoryBase | None = None,
        strict_single_child: bool = False,
    ) -> None:
        """Initialize a ScreenBuilder.

        Args:
            factory: Factory used for short-name creation. Defaults to a
                ComponentFactory with the stock kinds.
            strict_single_child: If True, validation reports single-child
                components holding more than one child instead of letting
                serialization drop the extra ones.
        """
        if factory is None:
            from .components import ComponentFactory

            factory = ComponentFactory()
        self._factory = factory
        self._root: Node | None = None
        self.strict_single_child = strict_single_child

    def __repr__(self) -> str:
        return f"ScreenBuilder(root={self._root!r})"

    def __getattr__(self, name: str) -> Callable[..., Node]:
        """Resolve a short name (e.g. 'row', 'text') to a factory operation.

        Raises:
            UnknownOperationError: If the factory has no such operation.
        """
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self._factory.resolve(name)

    @property
    def factory(self) -> FactoryBase:
        return self._factory

    @property
    def registry(self) -> Registry:
        return self._factory.registry

    # ==================== Root ====================

    def set_root_component(self, component: Node) -> ScreenBuilder:
        if not isinstance(component, Node):
            raise InvalidArgumentError(
                f"Root component must be a Node, not {type(component).__name__}"
            )
        self._root = component
        return self

    def get_root_component(self) -> Node | None:
        return self._root

    @property
    def root(self) -> Node | None:
        return self._root

    # ==================== Creation ====================

    def create(self, kind: str, *args: Any, config: dict[str, Any] | None = None, **kwargs: Any) -> Node:
        """Create a node of a registered kind (see ``Registry.create``)."""
        return self._factory.create(kind, *args, config=config, **kwargs)

    def call(self, name: str, *args: Any, **kwargs: Any) -> Node:
        """Invoke a factory operation by short name.

        Raises:
            UnknownOperationError: If the factory has no such operation.
        """
        return self._factory.resolve(name)(*args, **kwargs)

    # ==================== Build ====================

    def validate(self) -> list[str]:
        """Return the screen validation errors (empty if valid)."""
        if self._root is None:
            return ['Root component is required']
        return self._root.validate(strict_single_child=self.strict_single_child)

    def build(self) -> dict[str, Any]:
        """Validate and return the wire representation of the screen.

        Raises:
            ValidationFailedError: If validation reports any error,
                including a missing root component.
        """
        errors = self.validate()
        if errors:
            raise ValidationFailedError(errors, prefix='Screen validation failed')

        if self._root is None:
            return {}
        logger.debug("Building screen rooted at '%s'", self._root.kind)
        return self._root.serialize()

    def serialize(self) -> dict[str, Any]:
        """Wire representation without validation; ``{}`` when no root is set."""
        if self._root is None:
            return {}
        return self._root.serialize()

    def to_dict(self) -> dict[str, Any]:
        return self.build()

    def to_json(self, indent: int | None = 2) -> str:
        return dump_json(self.build(), indent=indent)

    def clone(self) -> ScreenBuilder:
        """Return a builder on the same factory holding a deep copy of the root."""
        cloned = type(self)(factory=self._factory, strict_single_child=self.strict_single_child)
        if self._root is not None:
            cloned.set_root_component(self._root.clone())
        return cloned

