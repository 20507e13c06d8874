# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Registry of node kinds.

A Registry maps kind names to constructors, and optionally to a default
configuration and a custom validator. It is a plain object passed by
reference: one owner registers kinds at startup, then any number of readers
call ``create()``. There is no internal locking; callers that share a
registry across threads must either synchronize themselves or ``freeze()``
it first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from .cloning import copy_value
from .configuration import apply_configuration
from .exceptions import FrozenRegistryError, UnsupportedKindError, ValidationFailedError

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger(__name__)

Constructor = Callable[..., 'Node']
Validator = Callable[['Node'], list]


class Registry:
    """Kind name -> constructor, default configuration and validator.

    Example:
        >>> registry = Registry()
        >>> registry.register('text', TextComponent)
        >>> registry.register_default_configuration('text', {'style': {'fontSize': 14}})
        >>> registry.create('text', 'Hello').serialize()
        {'type': 'text', 'data': 'Hello', 'style': {'fontSize': 14}}
    """

    def __init__(self) -> None:
        self._constructors: dict[str, Constructor] = {}
        self._validators: dict[str, Validator] = {}
        self._configurations: dict[str, dict[str, Any]] = {}
        self._frozen = False

    def __repr__(self) -> str:
        state = ', frozen' if self._frozen else ''
        return f"Registry({list(self._constructors)}{state})"

    def __contains__(self, kind: str) -> bool:
        return kind in self._constructors

    # ==================== Mutation ====================

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenRegistryError("Registry is frozen and cannot be modified")

    def register(self, kind: str, constructor: Constructor) -> None:
        """Register the constructor used by ``create(kind, ...)``."""
        self._check_mutable()
        self._constructors[kind] = constructor
        logger.debug("Registered kind '%s'", kind)

    def register_validator(self, kind: str, validator: Validator) -> None:
        """Register a custom validator run by ``create`` after node validation."""
        self._check_mutable()
        self._validators[kind] = validator

    def register_default_configuration(self, kind: str, config: dict[str, Any]) -> None:
        """Register a configuration applied after the per-call configuration."""
        self._check_mutable()
        self._configurations[kind] = config

    def clear(self) -> None:
        """Drop every registered kind, validator and default configuration."""
        self._check_mutable()
        self._constructors.clear()
        self._validators.clear()
        self._configurations.clear()
        logger.debug("Registry cleared")

    def freeze(self) -> Registry:
        """Make the registry read-only. Mutations then raise FrozenRegistryError."""
        self._frozen = True
        logger.debug("Registry frozen with %d kinds", len(self._constructors))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ==================== Lookup ====================

    def is_supported(self, kind: str) -> bool:
        return kind in self._constructors

    def supported_kinds(self) -> list[str]:
        return list(self._constructors)

    def get_constructor(self, kind: str) -> Constructor:
        """Return the constructor for kind.

        Raises:
            UnsupportedKindError: If kind is not registered.
        """
        try:
            return self._constructors[kind]
        except KeyError:
            raise UnsupportedKindError(f"Component type '{kind}' is not supported") from None

    def get_validator(self, kind: str) -> Validator | None:
        return self._validators.get(kind)

    def get_default_configuration(self, kind: str) -> dict[str, Any] | None:
        return self._configurations.get(kind)

    # ==================== Creation ====================

    def validate_node(self, kind: str, node: Node) -> list[str]:
        """Node validation followed by the custom validator registered for kind."""
        errors = node.validate()
        validator = self._validators.get(kind)
        if validator is not None:
            custom_errors = validator(node)
            if custom_errors:
                errors.extend(custom_errors)
        return errors

    def build(
        self,
        kind: str,
        *args: Any,
        config: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Node:
        """Construct and configure a node of the given kind, without validating.

        The explicit ``config`` is applied first, then a fresh copy of the
        registered default configuration, so defaults win on any key both of
        them set. Nodes inside the default are cloned for every call.

        When ``config`` is not given and the only positional argument is a
        mapping, that mapping is used as the configuration, so
        ``build('row', {'spacing': 8})`` works like
        ``build('row', config={'spacing': 8})``. Constructors whose single
        argument is itself a mapping must receive it as a keyword.

        Args:
            kind: Registered kind name.
            *args: Positional arguments for the constructor.
            config: Per-call configuration.
            **kwargs: Keyword arguments for the constructor.

        Raises:
            UnsupportedKindError: If kind is not registered.
        """
        constructor = self.get_constructor(kind)
        if config is None and len(args) == 1 and isinstance(args[0], Mapping):
            config, args = args[0], ()
        node = constructor(*args, **kwargs)

        apply_configuration(node, config)
        default = self._configurations.get(kind)
        if default is not None:
            apply_configuration(node, copy_value(default))

        logger.debug("Built '%s' node for kind '%s'", node.kind, kind)
        return node

    def create(
        self,
        kind: str,
        *args: Any,
        config: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Node:
        """Build a node (see ``build``) and validate it.

        Raises:
            UnsupportedKindError: If kind is not registered.
            ValidationFailedError: If the node or the custom validator
                reports errors.
        """
        node = self.build(kind, *args, config=config, **kwargs)

        errors = self.validate_node(kind, node)
        if errors:
            raise ValidationFailedError(errors, prefix='Component validation failed')

        return node
