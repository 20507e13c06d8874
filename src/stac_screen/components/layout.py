# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Layout components: containers, padding, expanded, center, sized box."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidArgumentError
from ..node import Multiplicity, Node, option

CONTAINER_TYPES = {
    'column': 'column',
    'row': 'row',
    'stack': 'stack',
    'container': 'container',
    'listview': 'listView',
}

MAIN_AXIS_ALIGNMENTS = ('start', 'end', 'center', 'spaceBetween', 'spaceAround', 'spaceEvenly')

CROSS_AXIS_ALIGNMENTS = ('start', 'end', 'center', 'stretch', 'baseline')

MAIN_AXIS_SIZES = ('min', 'max')

SCROLL_DIRECTIONS = ('vertical', 'horizontal')

STACK_FIT_OPTIONS = ('loose', 'expand', 'passthrough')

PADDING_EDGES = ('left', 'top', 'right', 'bottom')


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ContainerComponent(Node):
    """Multi-child layout: column, row, stack, container or list view.

    Example:
        >>> column = ContainerComponent('column')
        >>> column.set_main_axis_alignment('spaceBetween')
        >>> column.add_children([TextComponent('A'), TextComponent('B')])
    """

    def __init__(self, container_type: str = 'column') -> None:
        if container_type not in CONTAINER_TYPES:
            raise InvalidArgumentError(f"Invalid container type: {container_type}")
        super().__init__(CONTAINER_TYPES[container_type], Multiplicity.MANY)
        self._initialize_defaults()

    def _initialize_defaults(self) -> None:
        if self.kind in ('column', 'row'):
            self.set_property('mainAxisAlignment', 'start')
            self.set_property('crossAxisAlignment', 'center')
        elif self.kind == 'stack':
            self.set_property('alignment', 'topStart')
            self.set_property('fit', 'loose')
        elif self.kind == 'container':
            self.set_property('alignment', 'center')
        elif self.kind == 'listView':
            self.set_property('scrollDirection', 'vertical')
            self.set_property('shrinkWrap', False)

    @property
    def is_list_view(self) -> bool:
        return self.kind == 'listView'

    @option()
    def set_main_axis_alignment(self, alignment: str) -> ContainerComponent:
        if alignment not in MAIN_AXIS_ALIGNMENTS:
            raise InvalidArgumentError(f"Invalid main axis alignment: {alignment}")
        self.set_property('mainAxisAlignment', alignment)
        return self

    @option()
    def set_cross_axis_alignment(self, alignment: str) -> ContainerComponent:
        if alignment not in CROSS_AXIS_ALIGNMENTS:
            raise InvalidArgumentError(f"Invalid cross axis alignment: {alignment}")
        self.set_property('crossAxisAlignment', alignment)
        return self

    @option()
    def set_main_axis_size(self, size: str) -> ContainerComponent:
        if size not in MAIN_AXIS_SIZES:
            raise InvalidArgumentError(f"Invalid main axis size: {size}")
        self.set_property('mainAxisSize', size)
        return self

    @option()
    def set_fit(self, fit: str) -> ContainerComponent:
        if fit not in STACK_FIT_OPTIONS:
            raise InvalidArgumentError(f"Invalid stack fit: {fit}")
        self.set_property('fit', fit)
        return self

    @option()
    def set_spacing(self, spacing: float) -> ContainerComponent:
        self.set_property('spacing', spacing)
        return self

    @option()
    def set_scroll_direction(self, direction: str) -> ContainerComponent:
        if not self.is_list_view:
            raise InvalidArgumentError("Scroll direction can only be set on listview containers")
        if direction not in SCROLL_DIRECTIONS:
            raise InvalidArgumentError(f"Invalid scroll direction: {direction}")
        self.set_property('scrollDirection', direction)
        return self

    @option()
    def set_shrink_wrap(self, shrink_wrap: bool) -> ContainerComponent:
        if not self.is_list_view:
            raise InvalidArgumentError("Shrink wrap can only be set on listview containers")
        self.set_property('shrinkWrap', bool(shrink_wrap))
        return self

    def check(self) -> list[str]:
        errors = []

        if self.kind not in CONTAINER_TYPES.values():
            errors.append(f"Invalid container type: {self.kind}")

        main_axis = self.get_property('mainAxisAlignment')
        if main_axis and main_axis not in MAIN_AXIS_ALIGNMENTS:
            errors.append(f"Invalid main axis alignment: {main_axis}")

        cross_axis = self.get_property('crossAxisAlignment')
        if cross_axis and cross_axis not in CROSS_AXIS_ALIGNMENTS:
            errors.append(f"Invalid cross axis alignment: {cross_axis}")

        return errors


def _check_padding_dict(padding: dict[str, Any]) -> None:
    for key, value in padding.items():
        if key not in PADDING_EDGES:
            raise InvalidArgumentError(
                f"Invalid padding key: {key}. Valid keys are: {', '.join(PADDING_EDGES)}"
            )
        if not _is_int(value) or value < 0:
            raise InvalidArgumentError(
                f"Padding value for '{key}' must be a non-negative integer"
            )


class PaddingComponent(Node):
    """Single-child wrapper adding uniform or per-edge padding."""

    def __init__(self) -> None:
        super().__init__('padding')
        self.set_padding(0)

    @option()
    def set_padding(self, padding: int | dict[str, int]) -> PaddingComponent:
        """Set uniform (int) or per-edge (dict) padding.

        Raises:
            InvalidArgumentError: If padding is neither an int nor a valid
                edge dict.
        """
        if _is_int(padding):
            self.set_property('padding', padding)
        elif isinstance(padding, dict):
            _check_padding_dict(padding)
            self.set_property('padding', padding)
        else:
            raise InvalidArgumentError("Padding must be an integer or a dict")
        return self

    def get_padding(self) -> int | dict[str, int]:
        return self.get_property('padding', 0)

    def set_padding_edge(self, edge: str, value: int) -> PaddingComponent:
        """Set one edge. A uniform padding is discarded first."""
        if edge not in PADDING_EDGES:
            raise InvalidArgumentError(
                f"Invalid edge: {edge}. Valid edges are: {', '.join(PADDING_EDGES)}"
            )
        current = self.get_property('padding', {})
        current = dict(current) if isinstance(current, dict) else {}
        current[edge] = value
        return self.set_padding(current)

    def get_padding_edge(self, edge: str) -> int | None:
        padding = self.get_property('padding', {})
        if _is_int(padding):
            return padding
        return padding.get(edge)

    @option()
    def set_left(self, value: int) -> PaddingComponent:
        return self.set_padding_edge('left', value)

    @option()
    def set_top(self, value: int) -> PaddingComponent:
        return self.set_padding_edge('top', value)

    @option()
    def set_right(self, value: int) -> PaddingComponent:
        return self.set_padding_edge('right', value)

    @option()
    def set_bottom(self, value: int) -> PaddingComponent:
        return self.set_padding_edge('bottom', value)

    @option()
    def set_horizontal(self, value: int) -> PaddingComponent:
        return self.set_padding_edge('left', value).set_padding_edge('right', value)

    @option()
    def set_vertical(self, value: int) -> PaddingComponent:
        return self.set_padding_edge('top', value).set_padding_edge('bottom', value)

    def check(self) -> list[str]:
        errors = []
        padding = self.get_property('padding')

        if padding is None:
            errors.append("Padding value is required")
        elif _is_int(padding) and padding < 0:
            errors.append("Padding value must be non-negative")
        elif isinstance(padding, dict):
            try:
                _check_padding_dict(padding)
            except InvalidArgumentError as e:
                errors.append(str(e))

        return errors


class ExpandedComponent(Node):
    """Single-child flex wrapper."""

    def __init__(self) -> None:
        super().__init__('expanded')
        self.set_flex(1)

    @option()
    def set_flex(self, flex: int) -> ExpandedComponent:
        if not _is_int(flex) or flex <= 0:
            raise InvalidArgumentError("Flex must be a positive integer")
        self.set_property('flex', flex)
        return self

    def get_flex(self) -> int:
        return self.get_property('flex', 1)

    def check(self) -> list[str]:
        flex = self.get_property('flex')
        if not _is_int(flex) or flex <= 0:
            return ["Flex must be a positive integer"]
        return []


class CenterComponent(Node):
    """Single-child centering wrapper."""

    def __init__(self) -> None:
        super().__init__('center')

    def check(self) -> list[str]:
        if self.child_count() > 1:
            return ['Center component can only have one child']
        return []


class SizedBoxComponent(Node):
    """Fixed-size box, optionally wrapping a child."""

    def __init__(self) -> None:
        super().__init__('sizedBox')

    @option()
    def set_width(self, width: float) -> SizedBoxComponent:
        self.set_property('width', float(width))
        return self

    def get_width(self) -> float | None:
        return self.get_property('width')

    @option()
    def set_height(self, height: float) -> SizedBoxComponent:
        self.set_property('height', float(height))
        return self

    def get_height(self) -> float | None:
        return self.get_property('height')
