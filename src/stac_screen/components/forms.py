# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Form components: form and text input."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidArgumentError
from ..node import Node, option

KEYBOARD_TYPES = {
    'text': 'text',
    'number': 'number',
    'email': 'emailAddress',
    'phone': 'phone',
    'url': 'url',
    'multiline': 'multiline',
    'password': 'visiblePassword',
    'datetime': 'datetime',
}

AUTOVALIDATE_MODES = {
    'disabled': 'disabled',
    'always': 'always',
    'onUserInteraction': 'onUserInteraction',
    'onUnfocus': 'onUnfocus',
}


def _check_autovalidate_mode(mode: str) -> str:
    if mode not in AUTOVALIDATE_MODES:
        raise InvalidArgumentError(
            f"Invalid autovalidate mode: {mode}. "
            f"Valid modes are: {', '.join(AUTOVALIDATE_MODES)}"
        )
    return AUTOVALIDATE_MODES[mode]


class FormComponent(Node):
    """A form wrapping a single child (usually a column of inputs)."""

    def __init__(self) -> None:
        super().__init__('form')
        self.set_autovalidate_mode('disabled')

    @option()
    def set_autovalidate_mode(self, mode: str) -> FormComponent:
        self.set_property('autovalidateMode', _check_autovalidate_mode(mode))
        return self

    def get_autovalidate_mode(self) -> str:
        return self.get_property('autovalidateMode', AUTOVALIDATE_MODES['disabled'])

    def check(self) -> list[str]:
        mode = self.get_autovalidate_mode()
        if mode not in AUTOVALIDATE_MODES.values():
            return [f"Invalid autovalidate mode: {mode}"]
        return []


class InputComponent(Node):
    """A text form field identified by ``id``.

    Decoration entries live under the ``decoration`` property; prefix and
    suffix icons are nodes serialized in place.

    Example:
        >>> field = InputComponent('username')
        >>> field.set_validator_rules([{'rule': 'required', 'message': 'Required'}])
        >>> field.set_decoration('hintText', 'Username')
        >>> field.set_prefix_icon(IconComponent('person'))
    """

    def __init__(self, field_id: str = '') -> None:
        super().__init__('textFormField')
        self.set_id(field_id)
        self.set_property('autovalidateMode', AUTOVALIDATE_MODES['disabled'])
        self.set_property('keyboardType', KEYBOARD_TYPES['text'])
        self.set_property('validatorRules', [])

    @option()
    def set_id(self, field_id: str) -> InputComponent:
        self.set_property('id', field_id)
        return self

    def get_id(self) -> str:
        return self.get_property('id', '')

    @option()
    def set_autovalidate_mode(self, mode: str) -> InputComponent:
        self.set_property('autovalidateMode', _check_autovalidate_mode(mode))
        return self

    def get_autovalidate_mode(self) -> str:
        return self.get_property('autovalidateMode', AUTOVALIDATE_MODES['disabled'])

    @option()
    def set_validator_rules(self, rules: list[dict[str, str]]) -> InputComponent:
        """Replace the validator rules.

        Each rule is a dict with string ``rule`` and ``message`` entries.

        Raises:
            InvalidArgumentError: If a rule is malformed.
        """
        for index, rule in enumerate(rules):
            if not isinstance(rule, dict):
                raise InvalidArgumentError(f"Validator rule at index {index} must be a dict")
            if 'rule' not in rule or 'message' not in rule:
                raise InvalidArgumentError(
                    f"Validator rule at index {index} must have 'rule' and 'message' keys"
                )
            if not isinstance(rule['rule'], str) or not isinstance(rule['message'], str):
                raise InvalidArgumentError(
                    f"Validator rule 'rule' and 'message' must be strings at index {index}"
                )
        self.set_property('validatorRules', list(rules))
        return self

    def get_validator_rules(self) -> list[dict[str, str]]:
        return self.get_property('validatorRules', [])

    @option()
    def set_keyboard_type(self, keyboard_type: str) -> InputComponent:
        if keyboard_type not in KEYBOARD_TYPES:
            raise InvalidArgumentError(f"Invalid keyboard type: {keyboard_type}")
        self.set_property('keyboardType', KEYBOARD_TYPES[keyboard_type])
        return self

    def get_keyboard_type(self) -> str:
        return self.get_property('keyboardType', KEYBOARD_TYPES['text'])

    def set_decoration(self, key: str, value: Any) -> InputComponent:
        self.set_property(f"decoration.{key}", value)
        return self

    def get_decoration(self, key: str, default: Any = None) -> Any:
        return self.get_property(f"decoration.{key}", default)

    @option('decoration')
    def set_decorations(self, decoration: dict[str, Any]) -> InputComponent:
        self.set_property('decoration', dict(decoration))
        return self

    @option()
    def set_hint_text(self, hint: str) -> InputComponent:
        return self.set_decoration('hintText', hint)

    @option()
    def set_prefix_icon(self, icon: Node) -> InputComponent:
        if not isinstance(icon, Node):
            raise InvalidArgumentError(f"Icon must be a Node, not {type(icon).__name__}")
        return self.set_decoration('prefixIcon', icon)

    @option()
    def set_suffix_icon(self, icon: Node) -> InputComponent:
        if not isinstance(icon, Node):
            raise InvalidArgumentError(f"Icon must be a Node, not {type(icon).__name__}")
        return self.set_decoration('suffixIcon', icon)

    @option()
    def set_enabled(self, enabled: bool) -> InputComponent:
        self.set_property('enabled', bool(enabled))
        return self

    @option()
    def set_obscure_text(self, obscure: bool) -> InputComponent:
        self.set_property('obscureText', bool(obscure))
        return self

    def check(self) -> list[str]:
        errors = []

        if not self.get_id():
            errors.append("Input field ID is required")

        mode = self.get_autovalidate_mode()
        if mode not in AUTOVALIDATE_MODES.values():
            errors.append(f"Invalid autovalidate mode: {mode}")

        keyboard_type = self.get_keyboard_type()
        if keyboard_type not in KEYBOARD_TYPES.values():
            errors.append(f"Invalid keyboard type: {keyboard_type}")

        if not isinstance(self.get_validator_rules(), list):
            errors.append("Validator rules must be a list")

        return errors
