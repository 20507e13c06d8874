# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FactoryBase - named creation operations on top of a Registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from .exceptions import UnknownOperationError
from .registry import Registry

if TYPE_CHECKING:
    from .node import Node


def operation(*names: str) -> Callable:
    """Decorator exposing a factory method under one or more short names.

    Without names, the method name minus its ``create_`` prefix is used.

    Example:
        >>> class MyFactory(FactoryBase):
        ...     @operation()                      # short name 'badge'
        ...     def create_badge(self, label=''):
        ...         return self.registry.build('badge', label)
        ...
        ...     @operation('hstack', 'row')       # two short names
        ...     def create_row(self, config=None):
        ...         return self.registry.build('row', config=config)
    """
    def decorator(func: Callable) -> Callable:
        if names:
            func._operation_names = names  # type: ignore
        elif func.__name__.startswith('create_'):
            func._operation_names = (func.__name__[7:],)  # type: ignore
        else:
            func._operation_names = (func.__name__,)  # type: ignore
        return func

    return decorator


class FactoryBase:
    """Base class for component factories.

    A factory owns (or shares) a Registry and exposes creation operations
    by short name. Lookup order for ``resolve(name)``:

    1. operations registered on this instance with ``register_operation``
    2. ``@operation`` methods of the class (shared by every instance)

    The class automatically builds an _operations dict mapping short
    names to methods via __init_subclass__.
    """

    # Class-level dict mapping short name -> method name
    _operations: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _operations dict from @operation decorated methods."""
        super().__init_subclass__(**kwargs)

        cls._operations = {}
        for base in reversed(cls.__mro__[1:]):
            cls._operations.update(getattr(base, '_operations', {}))

        for name, method in cls.__dict__.items():
            for short_name in getattr(method, '_operation_names', ()):
                cls._operations[short_name] = name

    def __init__(self, registry: Registry | None = None) -> None:
        """Initialize a factory.

        Args:
            registry: Registry to create nodes with. A new empty one is
                created when omitted.
        """
        self.registry = registry if registry is not None else Registry()
        self._instance_operations: dict[str, Callable[..., Node]] = {}

    def register_operation(self, name: str, func: Callable[..., Node]) -> None:
        """Expose func under a short name on this factory instance only."""
        self._instance_operations[name] = func

    def has_operation(self, name: str) -> bool:
        return name in self._instance_operations or name in type(self)._operations

    def operations(self) -> list[str]:
        """All resolvable short names."""
        names = list(self._instance_operations)
        names.extend(n for n in type(self)._operations if n not in self._instance_operations)
        return names

    def resolve(self, name: str) -> Callable[..., Node]:
        """Return the creation callable for a short name.

        Raises:
            UnknownOperationError: If neither the instance nor the class
                defines the operation.
        """
        func = self._instance_operations.get(name)
        if func is not None:
            return func

        method_name = type(self)._operations.get(name)
        if method_name is not None:
            return getattr(self, method_name)

        raise UnknownOperationError(
            f"Method '{name}' does not exist on {type(self).__name__}"
        )

    def create(self, kind: str, *args: Any, config: dict[str, Any] | None = None, **kwargs: Any) -> Node:
        """Create a node of a registered kind (see ``Registry.create``)."""
        return self.registry.create(kind, *args, config=config, **kwargs)

    def build(self, kind: str, *args: Any, config: dict[str, Any] | None = None, **kwargs: Any) -> Node:
        """Build a node of a registered kind without validating it (see ``Registry.build``)."""
        return self.registry.build(kind, *args, config=config, **kwargs)

    def is_supported(self, kind: str) -> bool:
        return self.registry.is_supported(kind)

    def get_supported_types(self) -> list[str]:
        return self.registry.supported_kinds()
