# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Login screen - Example screen built with ScreenBuilder.

A didactic example showing short-name creation, fluent setters and
nested node properties (the prefix icon of the input field).

Run it to print the screen's JSON:

    $ python examples/login_screen/login_screen.py
"""

from __future__ import annotations

import logging

from stac_screen import ScreenBuilder


def login_screen() -> ScreenBuilder:
    """Return a builder holding a small login form."""
    sb = ScreenBuilder()

    username = sb.input('username')
    username.set_validator_rules([
        {'rule': 'required', 'message': 'This field is required'},
        {'rule': 'min:3', 'message': 'Must be at least 3 characters'},
    ])
    username.set_decoration('hintText', 'Username')
    username.set_prefix_icon(sb.icon('person').set_color('#888888'))

    add_label = sb.row(config={'spacing': 8, 'main_axis_alignment': 'center'})
    add_label.add_children([
        sb.icon('add').set_color('#FFFFFF'),
        sb.text('Add Item').set_font_weight('bold'),
    ])

    column = sb.column(config={
        'main_axis_alignment': 'center',
        'cross_axis_alignment': 'center',
    })
    column.add_children([
        sb.expanded().add_child(username),
        sb.row(config={'main_axis_alignment': 'spaceEvenly'}).add_child(
            sb.elevated_button(on_pressed='addItem').add_child(add_label)
        ),
    ])

    sb.set_root_component(sb.padding(config={'padding': 16}).add_child(column))
    return sb


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    print(login_screen().to_json())
