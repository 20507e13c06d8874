# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stock component kinds and the factory that registers them."""

from .content import ButtonComponent, IconComponent, TextComponent
from .factory import ComponentFactory, register_stock_components
from .forms import FormComponent, InputComponent
from .layout import (
    CenterComponent,
    ContainerComponent,
    ExpandedComponent,
    PaddingComponent,
    SizedBoxComponent,
)
from .logic import ConditionalComponent, CustomComponent

__all__ = [
    'ComponentFactory',
    'register_stock_components',
    # Layout
    'ContainerComponent',
    'PaddingComponent',
    'ExpandedComponent',
    'CenterComponent',
    'SizedBoxComponent',
    # Content
    'TextComponent',
    'IconComponent',
    'ButtonComponent',
    # Forms
    'FormComponent',
    'InputComponent',
    # Logic
    'ConditionalComponent',
    'CustomComponent',
]
