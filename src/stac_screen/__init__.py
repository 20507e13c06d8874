# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stac Screen - Declarative UI component trees for server-driven UI.

A lightweight, zero-dependency library that builds component trees and
serializes them to the nested JSON wire format consumed by Stac/Flutter
rendering clients.
"""

__version__ = "0.1.0"

from .builder import ScreenBuilder
from .cloning import clone_node, copy_value
from .components import (
    ButtonComponent,
    CenterComponent,
    ComponentFactory,
    ConditionalComponent,
    ContainerComponent,
    CustomComponent,
    ExpandedComponent,
    FormComponent,
    IconComponent,
    InputComponent,
    PaddingComponent,
    SizedBoxComponent,
    TextComponent,
    register_stock_components,
)
from .configuration import apply_configuration
from .exceptions import (
    FrozenRegistryError,
    InvalidArgumentError,
    StacScreenError,
    UnknownOperationError,
    UnsupportedKindError,
    ValidationFailedError,
)
from .factory import FactoryBase, operation
from .node import Multiplicity, Node, option
from .properties import PropertyStore
from .registry import Registry
from .serialization import dump_json, serialize_node, to_json
from .validation import collect_errors

__all__ = [
    # Core classes
    "Node",
    "Multiplicity",
    "PropertyStore",
    "option",
    # Tree operations
    "serialize_node",
    "to_json",
    "dump_json",
    "collect_errors",
    "clone_node",
    "copy_value",
    "apply_configuration",
    # Registry / factory / builder
    "Registry",
    "FactoryBase",
    "operation",
    "ComponentFactory",
    "register_stock_components",
    "ScreenBuilder",
    # Components
    "ContainerComponent",
    "TextComponent",
    "ButtonComponent",
    "IconComponent",
    "InputComponent",
    "PaddingComponent",
    "ExpandedComponent",
    "CenterComponent",
    "SizedBoxComponent",
    "FormComponent",
    "ConditionalComponent",
    "CustomComponent",
    # Exceptions
    "StacScreenError",
    "InvalidArgumentError",
    "UnsupportedKindError",
    "UnknownOperationError",
    "ValidationFailedError",
    "FrozenRegistryError",
]
