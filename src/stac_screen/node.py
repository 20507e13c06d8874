# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Component node classes."""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Any, Callable, Iterable, Iterator

from .exceptions import InvalidArgumentError
from .properties import PropertyStore


class Multiplicity(Enum):
    """How a node's children are emitted on the wire.

    SINGLE nodes emit ``"child"`` (first child only), MANY nodes emit
    ``"children"``.
    """

    SINGLE = 'single'
    MANY = 'many'


def option(name: str | None = None) -> Callable:
    """Decorator marking a node method as a configuration option.

    The option key defaults to the method name without its ``set_`` prefix.
    Options are collected per class by ``Node.__init_subclass__`` and are the
    only methods the configuration applier dispatches to.

    Example:
        >>> class Label(Node):
        ...     @option()
        ...     def set_text(self, text):          # key 'text'
        ...         return self.set_property('data', text)
        ...
        ...     @option('weight')
        ...     def set_font_weight(self, weight):
        ...         return self.set_style('fontWeight', weight)
    """
    def decorator(func: Callable) -> Callable:
        key = name
        if key is None:
            key = func.__name__[4:] if func.__name__.startswith('set_') else func.__name__
        func._option_key = key  # type: ignore
        return func

    return decorator


class Node:
    """A node in a UI component tree.

    Each node has:
    - kind: the wire type tag (immutable)
    - properties: a PropertyStore overlaid on the wire representation
    - children: ordered list of owned child nodes
    - parent: non-owning (weak) reference to the containing node
    - multiplicity: SINGLE or MANY (immutable), drives serialization shape

    Subclasses add kind-specific validation by overriding ``check()``; the
    base structural rule and the recursion into children are always applied
    by the validator, so overrides never call the base implementation.

    Example:
        >>> column = Node('column', Multiplicity.MANY)
        >>> column.add_child(Node('text').set_property('data', 'Hello'))
        >>> column.serialize()
        {'type': 'column', 'children': [{'type': 'text', 'data': 'Hello'}]}
    """

    __slots__ = ('_kind', '_multiplicity', 'properties', '_children', '_parent_ref', '__weakref__')

    # Class-level dict mapping option key -> method name
    _options: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _options dict from @option decorated methods."""
        super().__init_subclass__(**kwargs)

        cls._options = {}
        for base in reversed(cls.__mro__[1:]):
            cls._options.update(getattr(base, '_options', {}))

        for name, method in cls.__dict__.items():
            key = getattr(method, '_option_key', None)
            if key is not None:
                cls._options[key] = name

    def __init__(
        self,
        kind: str,
        multiplicity: Multiplicity = Multiplicity.SINGLE,
        properties: dict[str, Any] | None = None,
    ) -> None:
        """Initialize a Node.

        Args:
            kind: The wire type of the node (e.g. 'column', 'text').
            multiplicity: SINGLE emits 'child', MANY emits 'children'.
            properties: Optional initial properties.
        """
        if not isinstance(multiplicity, Multiplicity):
            raise InvalidArgumentError(f"Invalid multiplicity: {multiplicity!r}")
        self._kind = kind
        self._multiplicity = multiplicity
        self.properties = PropertyStore(properties)
        self._children: list[Node] = []
        self._parent_ref: weakref.ref[Node] | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind!r}, children={len(self._children)})"

    def __iter__(self) -> Iterator[Node]:
        """Iterate over direct children in insertion order."""
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        return True

    # ==================== Identity ====================

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def multiplicity(self) -> Multiplicity:
        return self._multiplicity

    def get_type(self) -> str:
        return self._kind

    # ==================== Properties ====================

    def set_property(self, key: str, value: Any) -> Node:
        """Set a property (dotted keys allowed). Empty values are skipped."""
        self.properties.set(key, value)
        return self

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def get_properties(self) -> dict[str, Any]:
        return self.properties.get_all()

    def set_properties(self, properties: dict[str, Any]) -> Node:
        self.properties.set_all(properties)
        return self

    def unset_property(self, key: str) -> Node:
        self.properties.unset(key)
        return self

    def set_style(self, key: str, value: Any) -> Node:
        """Set a single entry under the 'style' property."""
        self.properties.set(f"style.{key}", value)
        return self

    def get_style(self, key: str, default: Any = None) -> Any:
        return self.properties.get(f"style.{key}", default)

    def set_styles(self, styles: dict[str, Any]) -> Node:
        """Merge a dict of style entries under the 'style' property."""
        self.properties.set('style', dict(styles))
        return self

    # ==================== Tree ====================

    @property
    def parent(self) -> Node | None:
        """The containing node, or None for a detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def get_parent(self) -> Node | None:
        return self.parent

    @property
    def root(self) -> Node:
        """The topmost ancestor (self if detached)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def _check_attachable(self, node: Any) -> None:
        if not isinstance(node, Node):
            raise InvalidArgumentError(
                f"Child must be a Node, not {type(node).__name__}"
            )
        if node.parent is not None:
            raise InvalidArgumentError(
                f"'{node.kind}' is already a child of '{node.parent.kind}'; detach it first"
            )
        ancestor: Node | None = self
        while ancestor is not None:
            if ancestor is node:
                raise InvalidArgumentError(
                    f"Cannot add '{node.kind}' under itself or one of its descendants"
                )
            ancestor = ancestor.parent

    def add_child(self, node: Node) -> Node:
        """Attach a child at the end of the children list.

        Raises:
            InvalidArgumentError: If node is not a Node, is already attached
                to a parent, or would create a cycle.
        """
        self._check_attachable(node)
        node._parent_ref = weakref.ref(self)
        self._children.append(node)
        return self

    def add_children(self, nodes: Iterable[Node]) -> Node:
        """Attach several children in order.

        All elements are type-checked before any of them is attached.
        """
        nodes = list(nodes)
        for node in nodes:
            if not isinstance(node, Node):
                raise InvalidArgumentError(
                    f"Child must be a Node, not {type(node).__name__}"
                )
        for node in nodes:
            self.add_child(node)
        return self

    def remove_child(self, node: Node) -> Node:
        """Detach and return a direct child.

        Raises:
            InvalidArgumentError: If node is not a child of this node.
        """
        for i, child in enumerate(self._children):
            if child is node:
                del self._children[i]
                node._parent_ref = None
                return node
        raise InvalidArgumentError(f"'{node.kind}' is not a child of '{self.kind}'")

    def detach(self) -> Node:
        """Remove this node from its parent, if any."""
        parent = self.parent
        if parent is not None:
            parent.remove_child(self)
        return self

    def get_children(self) -> list[Node]:
        """Return a copy of the children list."""
        return list(self._children)

    def has_children(self) -> bool:
        return bool(self._children)

    def child_count(self) -> int:
        return len(self._children)

    # ==================== Configuration ====================

    def get_option(self, key: str) -> Callable[[Any], Any] | None:
        """Return the bound option method registered for key, or None."""
        method_name = type(self)._options.get(key)
        if method_name is None:
            return None
        return getattr(self, method_name)

    def configure(self, config: dict[str, Any] | None) -> Node:
        """Apply a configuration dict (see ``apply_configuration``)."""
        from .configuration import apply_configuration

        apply_configuration(self, config)
        return self

    # ==================== Validation / output ====================

    def check(self) -> list[str]:
        """Kind-specific validation. Override in subclasses."""
        return []

    def validate(self, strict_single_child: bool = False) -> list[str]:
        """Collect validation errors for this node and its descendants."""
        from .validation import collect_errors

        return collect_errors(self, strict_single_child=strict_single_child)

    def serialize(self) -> dict[str, Any]:
        """Return the wire representation as a plain dict."""
        from .serialization import serialize_node

        return serialize_node(self)

    def to_array(self) -> dict[str, Any]:
        return self.serialize()

    def build(self) -> dict[str, Any]:
        return self.serialize()

    def to_json(self, indent: int | None = 2) -> str:
        from .serialization import to_json

        return to_json(self, indent=indent)

    def clone(self) -> Node:
        """Return a deep, parentless copy of this subtree."""
        from .cloning import clone_node

        return clone_node(self)
