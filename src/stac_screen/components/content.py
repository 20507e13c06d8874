# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Content components: text, icon and buttons."""

from __future__ import annotations

from numbers import Real

from ..exceptions import InvalidArgumentError
from ..node import Node, option

FONT_WEIGHTS = {
    'thin': 'w100',
    'extraLight': 'w200',
    'light': 'w300',
    'normal': 'w400',
    'medium': 'w500',
    'semiBold': 'w600',
    'bold': 'w700',
    'extraBold': 'w800',
    'black': 'w900',
}

TEXT_ALIGNMENTS = {
    'left': 'TextAlign.left',
    'right': 'TextAlign.right',
    'center': 'TextAlign.center',
    'justify': 'TextAlign.justify',
    'start': 'TextAlign.start',
    'end': 'TextAlign.end',
}

TEXT_OVERFLOW_OPTIONS = {
    'clip': 'TextOverflow.clip',
    'fade': 'TextOverflow.fade',
    'ellipsis': 'TextOverflow.ellipsis',
    'visible': 'TextOverflow.visible',
}

BUTTON_TYPES = {
    'elevated': 'elevatedButton',
    'outlined': 'outlinedButton',
    'text': 'textButton',
    'icon': 'iconButton',
}


class TextComponent(Node):
    """A text label. The content is stored in the ``data`` property.

    Example:
        >>> TextComponent('Add Item').set_font_weight('bold').serialize()
        {'type': 'text', 'data': 'Add Item', 'style': {'fontWeight': 'w700'}}
    """

    def __init__(self, text: str = '') -> None:
        super().__init__('text')
        self.set_text(text)

    @option()
    def set_text(self, text: str) -> TextComponent:
        self.set_property('data', text)
        return self

    def get_text(self) -> str:
        return self.get_property('data', '')

    @option()
    def set_text_align(self, alignment: str) -> TextComponent:
        if alignment not in TEXT_ALIGNMENTS:
            raise InvalidArgumentError(f"Invalid text alignment: {alignment}")
        self.set_property('textAlign', alignment)
        return self

    @option()
    def set_overflow(self, overflow: str) -> TextComponent:
        if overflow not in TEXT_OVERFLOW_OPTIONS:
            raise InvalidArgumentError(f"Invalid text overflow: {overflow}")
        self.set_property('overflow', overflow)
        return self

    @option()
    def set_font_weight(self, weight: str) -> TextComponent:
        if weight not in FONT_WEIGHTS:
            raise InvalidArgumentError(f"Invalid font weight: {weight}")
        self.set_style('fontWeight', FONT_WEIGHTS[weight])
        return self

    @option()
    def set_font_size(self, size: float) -> TextComponent:
        self.set_style('fontSize', size)
        return self

    @option()
    def set_color(self, color: str) -> TextComponent:
        self.set_style('color', color)
        return self

    @option()
    def set_max_lines(self, max_lines: int) -> TextComponent:
        self.set_property('maxLines', max_lines)
        return self

    def check(self) -> list[str]:
        errors = []

        text = self.get_property('data')
        if text is None or text == '':
            errors.append("Text content is required")

        font_size = self.get_style('fontSize')
        if font_size is not None and (
            isinstance(font_size, bool) or not isinstance(font_size, Real) or font_size <= 0
        ):
            errors.append("Font size must be a positive number")

        overflow = self.get_property('overflow')
        if overflow and overflow not in TEXT_OVERFLOW_OPTIONS:
            errors.append(f"Invalid text overflow: {overflow}")

        return errors


class IconComponent(Node):
    """A named icon (default size 24)."""

    def __init__(self, icon: str = '') -> None:
        super().__init__('icon')
        self.set_icon(icon)
        self.set_size(24)

    @option()
    def set_icon(self, icon: str) -> IconComponent:
        self.set_property('icon', icon)
        return self

    @option()
    def set_size(self, size: int) -> IconComponent:
        self.set_property('size', size)
        return self

    @option()
    def set_color(self, color: str) -> IconComponent:
        self.set_property('color', color)
        return self

    def check(self) -> list[str]:
        if not self.get_property('icon'):
            return ["Icon name is required"]
        return []


class ButtonComponent(Node):
    """A button. Its label is the single child, its icon a nested node.

    Args:
        text: Label as a node (usually a TextComponent) or a plain string.
        on_pressed: Name of the client-side action.
        button_type: One of BUTTON_TYPES keys.
    """

    def __init__(
        self,
        text: Node | str | None = None,
        on_pressed: str = '',
        button_type: str = 'elevated',
    ) -> None:
        if button_type not in BUTTON_TYPES:
            raise InvalidArgumentError(f"Invalid button type: {button_type}")
        super().__init__(BUTTON_TYPES[button_type])
        self.set_text(text)
        self.set_on_pressed(on_pressed)

    @option()
    def set_text(self, text: Node | str | None) -> ButtonComponent:
        """Attach the label. Strings are wrapped in a TextComponent."""
        if isinstance(text, str):
            text = TextComponent(text) if text else None
        if text is not None:
            self.add_child(text)
        return self

    @option()
    def set_on_pressed(self, callback: str) -> ButtonComponent:
        self.set_property('onPressed', callback)
        return self

    @option()
    def set_icon(self, icon: Node) -> ButtonComponent:
        """Set the button icon; serialized in place under ``icon``."""
        if not isinstance(icon, Node):
            raise InvalidArgumentError(f"Icon must be a Node, not {type(icon).__name__}")
        self.set_property('icon', icon)
        return self
