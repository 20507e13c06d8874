# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ComponentFactory - stock node kinds and their creation shortcuts."""

from __future__ import annotations

from functools import partial
from typing import Any

from ..factory import FactoryBase, operation
from ..node import Node
from ..registry import Registry
from .content import ButtonComponent, IconComponent, TextComponent
from .forms import FormComponent, InputComponent
from .layout import (
    CenterComponent,
    ContainerComponent,
    ExpandedComponent,
    PaddingComponent,
    SizedBoxComponent,
)
from .logic import ConditionalComponent, CustomComponent

Config = dict[str, Any] | None

# Factory container names -> ContainerComponent types. Unknown names fall
# back to 'column'.
CONTAINER_TYPE_MAPPINGS = {
    'container': 'container',
    'column': 'column',
    'row': 'row',
    'stack': 'stack',
    'list_view': 'listview',
}


def register_stock_components(registry: Registry) -> Registry:
    """Register every stock kind on registry.

    Kinds: container, column, row, stack, list_view, text, button, icon,
    input, padding, expanded, custom, conditional, center, sized_box, form.
    """
    for name, container_type in CONTAINER_TYPE_MAPPINGS.items():
        registry.register(name, partial(ContainerComponent, container_type))
    registry.register('text', TextComponent)
    registry.register('button', ButtonComponent)
    registry.register('icon', IconComponent)
    registry.register('input', InputComponent)
    registry.register('padding', PaddingComponent)
    registry.register('expanded', ExpandedComponent)
    registry.register('custom', CustomComponent)
    registry.register('conditional', ConditionalComponent)
    registry.register('center', CenterComponent)
    registry.register('sized_box', SizedBoxComponent)
    registry.register('form', FormComponent)
    return registry


class ComponentFactory(FactoryBase):
    """Creates stock components through a Registry.

    Every ``create_*`` operation goes through ``Registry.build``: the
    per-call configuration and the registered default configuration apply,
    validation is left to ``Node.validate`` or ``ScreenBuilder.build`` so
    nodes can be filled in after creation.

    Example:
        >>> factory = ComponentFactory()
        >>> factory.resolve('row')(config={'main_axis_alignment': 'center'})
        >>> factory.create_text('Hello', config={'font_weight': 'bold'})
    """

    def __init__(self, registry: Registry | None = None) -> None:
        """Initialize the factory.

        Args:
            registry: Registry to use as-is. When omitted, a new registry
                with every stock kind registered is created.
        """
        if registry is None:
            registry = register_stock_components(Registry())
        super().__init__(registry)

    # === Containers ===

    @operation()
    def create_container(self, container_type: str = 'column', config: Config = None) -> Node:
        name = container_type if container_type in CONTAINER_TYPE_MAPPINGS else 'column'
        return self.registry.build(name, config=config)

    @operation()
    def create_column(self, config: Config = None) -> Node:
        return self.create_container('column', config)

    @operation()
    def create_row(self, config: Config = None) -> Node:
        return self.create_container('row', config)

    @operation()
    def create_stack(self, config: Config = None) -> Node:
        return self.create_container('stack', config)

    @operation()
    def create_list_view(self, config: Config = None) -> Node:
        return self.create_container('list_view', config)

    # === Content ===

    @operation()
    def create_text(self, text: str = '', config: Config = None) -> Node:
        return self.registry.build('text', text, config=config)

    @operation()
    def create_button(
        self,
        text: Node | str | None = None,
        on_pressed: str = '',
        button_type: str = 'elevated',
        config: Config = None,
    ) -> Node:
        return self.registry.build(
            'button', text, on_pressed, button_type, config=config
        )

    @operation()
    def create_elevated_button(
        self, text: Node | str | None = None, on_pressed: str = '', config: Config = None
    ) -> Node:
        return self.create_button(text, on_pressed, 'elevated', config)

    @operation()
    def create_outlined_button(
        self, text: Node | str | None = None, on_pressed: str = '', config: Config = None
    ) -> Node:
        return self.create_button(text, on_pressed, 'outlined', config)

    @operation()
    def create_text_button(
        self, text: Node | str | None = None, on_pressed: str = '', config: Config = None
    ) -> Node:
        return self.create_button(text, on_pressed, 'text', config)

    @operation()
    def create_icon_button(
        self,
        icon: Node,
        text: Node | str | None = None,
        on_pressed: str = '',
        config: Config = None,
    ) -> Node:
        config = {**(config or {}), 'icon': icon}
        return self.create_button(text, on_pressed, 'icon', config)

    @operation()
    def create_icon(self, icon: str, config: Config = None) -> Node:
        return self.registry.build('icon', icon, config=config)

    # === Forms ===

    @operation()
    def create_input(self, field_id: str = '', config: Config = None) -> Node:
        return self.registry.build('input', field_id, config=config)

    @operation()
    def create_form(self, config: Config = None) -> Node:
        return self.registry.build('form', config=config)

    # === Wrappers ===

    @operation()
    def create_padding(self, config: Config = None) -> Node:
        return self.registry.build('padding', config=config)

    @operation()
    def create_expanded(self, config: Config = None) -> Node:
        return self.registry.build('expanded', config=config)

    @operation()
    def create_center(self, config: Config = None) -> Node:
        return self.registry.build('center', config=config)

    @operation()
    def create_sized_box(self, config: Config = None) -> Node:
        return self.registry.build('sized_box', config=config)

    # === Logic ===

    @operation()
    def create_conditional(self, condition: str = '', config: Config = None) -> Node:
        return self.registry.build('conditional', condition, config=config)

    @operation()
    def create_custom(
        self, custom_type: str, can_have_children: bool = False, config: Config = None
    ) -> Node:
        return self.registry.build(
            'custom', custom_type, can_have_children, config=config
        )
