# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conditional and custom components."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidArgumentError
from ..node import Multiplicity, Node, option


def _require_node(value: Any, name: str) -> Node:
    if not isinstance(value, Node):
        raise InvalidArgumentError(f"{name} must be a Node, not {type(value).__name__}")
    return value


class ConditionalComponent(Node):
    """Shows ``trueChild`` or ``falseChild`` depending on a client-side function.

    Branch nodes are kept as nested node references in the ``trueChild`` and
    ``falseChild`` properties and serialized in place; they are not children
    of the conditional.

    Example:
        >>> cond = ConditionalComponent().show_when('isLoggedIn', TextComponent('Welcome'))
        >>> cond.serialize()['trueChild']
        {'type': 'text', 'data': 'Welcome'}
    """

    def __init__(self, condition: str = '') -> None:
        super().__init__('conditionalWidget')
        self.set_condition(condition)

    @option()
    def set_condition(self, function_name: str) -> ConditionalComponent:
        self.set_property('condition', function_name)
        return self

    def get_condition(self) -> str | None:
        return self.get_property('condition')

    @option()
    def set_condition_params(self, params: dict[str, Any]) -> ConditionalComponent:
        self.set_property('conditionParams', params)
        return self

    def set_condition_with_params(
        self, function_name: str, params: dict[str, Any] | None = None
    ) -> ConditionalComponent:
        self.set_condition(function_name)
        if params:
            self.set_condition_params(params)
        return self

    @option()
    def set_true_child(self, child: Node) -> ConditionalComponent:
        self.set_property('trueChild', _require_node(child, 'trueChild'))
        return self

    @option()
    def set_false_child(self, child: Node) -> ConditionalComponent:
        self.set_property('falseChild', _require_node(child, 'falseChild'))
        return self

    def show_when(self, function_name: str, child: Node) -> ConditionalComponent:
        return self.set_condition(function_name).set_true_child(child)

    def hide_when(self, function_name: str, child: Node) -> ConditionalComponent:
        return self.set_condition(function_name).set_false_child(child)

    def set_branches(
        self, function_name: str, true_child: Node, false_child: Node
    ) -> ConditionalComponent:
        self.set_condition(function_name)
        self.set_true_child(true_child)
        return self.set_false_child(false_child)

    def has_true_child(self) -> bool:
        return self.get_property('trueChild') is not None

    def has_false_child(self) -> bool:
        return self.get_property('falseChild') is not None

    def check(self) -> list[str]:
        errors = []

        if not self.get_condition():
            errors.append("Function name is required for conditional component")

        if not self.has_true_child() and not self.has_false_child():
            errors.append("At least one child (trueChild or falseChild) must be set")

        return errors


class CustomComponent(Node):
    """A node of any client-side type, with no kind-specific rules.

    Args:
        custom_type: The wire type.
        can_have_children: If True the node emits ``children`` (MANY),
            otherwise a single ``child``.
    """

    def __init__(self, custom_type: str, can_have_children: bool = False) -> None:
        multiplicity = Multiplicity.MANY if can_have_children else Multiplicity.SINGLE
        super().__init__(custom_type, multiplicity)
