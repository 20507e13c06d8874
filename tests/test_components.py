# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the stock component kinds and ComponentFactory."""

import pytest

from stac_screen import (
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
    InvalidArgumentError,
    Multiplicity,
    PaddingComponent,
    Registry,
    SizedBoxComponent,
    TextComponent,
    ValidationFailedError,
    register_stock_components,
)


class TestContainerComponent:
    """Tests for multi-child layouts."""

    def test_column_defaults(self):
        """Test column starts with start/center alignments."""
        column = ContainerComponent('column')
        assert column.multiplicity is Multiplicity.MANY
        assert column.serialize() == {
            'type': 'column',
            'mainAxisAlignment': 'start',
            'crossAxisAlignment': 'center',
        }

    def test_stack_and_container_defaults(self):
        """Test stack and container default properties."""
        assert ContainerComponent('stack').get_properties() == {
            'alignment': 'topStart',
            'fit': 'loose',
        }
        assert ContainerComponent('container').get_properties() == {'alignment': 'center'}

    def test_list_view_kind(self):
        """Test 'listview' maps to the listView wire type."""
        view = ContainerComponent('listview')
        assert view.kind == 'listView'
        assert view.get_property('scrollDirection') == 'vertical'
        assert view.get_property('shrinkWrap') is False

    def test_invalid_container_type(self):
        """Test an unknown container type is rejected."""
        with pytest.raises(InvalidArgumentError, match="Invalid container type"):
            ContainerComponent('grid')

    def test_alignment_setters(self):
        """Test alignments are validated and stored."""
        row = ContainerComponent('row')
        row.set_main_axis_alignment('spaceBetween').set_cross_axis_alignment('stretch')
        assert row.get_property('mainAxisAlignment') == 'spaceBetween'
        assert row.get_property('crossAxisAlignment') == 'stretch'

    def test_invalid_alignment(self):
        """Test invalid enum values raise immediately."""
        row = ContainerComponent('row')
        with pytest.raises(InvalidArgumentError, match="Invalid main axis alignment"):
            row.set_main_axis_alignment('middle')
        with pytest.raises(InvalidArgumentError, match="Invalid cross axis alignment"):
            row.set_cross_axis_alignment('spaceAround')
        with pytest.raises(InvalidArgumentError, match="Invalid main axis size"):
            row.set_main_axis_size('huge')
        with pytest.raises(InvalidArgumentError, match="Invalid stack fit"):
            ContainerComponent('stack').set_fit('fill')

    def test_scroll_options_list_view_only(self):
        """Test scroll direction and shrink wrap need a list view."""
        with pytest.raises(InvalidArgumentError, match="listview"):
            ContainerComponent('column').set_scroll_direction('horizontal')
        with pytest.raises(InvalidArgumentError, match="listview"):
            ContainerComponent('column').set_shrink_wrap(True)
        view = ContainerComponent('listview').set_scroll_direction('horizontal')
        assert view.set_shrink_wrap(1).get_property('shrinkWrap') is True
        assert view.get_property('scrollDirection') == 'horizontal'

    def test_check_flags_bad_stored_alignment(self):
        """Test validation catches alignments written as raw properties."""
        column = ContainerComponent('column').set_property('mainAxisAlignment', 'middle')
        assert column.validate() == ['Invalid main axis alignment: middle']


class TestTextComponent:
    """Tests for text labels."""

    def test_serialize(self):
        """Test text with font weight serializes the mapped weight."""
        node = TextComponent('Add Item').set_font_weight('bold')
        assert node.serialize() == {
            'type': 'text',
            'data': 'Add Item',
            'style': {'fontWeight': 'w700'},
        }

    def test_text_is_single(self):
        """Test text nodes are SINGLE."""
        assert TextComponent('x').multiplicity is Multiplicity.SINGLE

    def test_alignment_and_overflow_store_short_name(self):
        """Test text alignment and overflow keep the short name."""
        node = TextComponent('x').set_text_align('center').set_overflow('ellipsis')
        assert node.get_property('textAlign') == 'center'
        assert node.get_property('overflow') == 'ellipsis'

    def test_invalid_values(self):
        """Test invalid enum values raise."""
        with pytest.raises(InvalidArgumentError, match="Invalid font weight"):
            TextComponent('x').set_font_weight('heavy')
        with pytest.raises(InvalidArgumentError, match="Invalid text alignment"):
            TextComponent('x').set_text_align('middle')
        with pytest.raises(InvalidArgumentError, match="Invalid text overflow"):
            TextComponent('x').set_overflow('wrap')

    def test_check(self):
        """Test missing text and bad font sizes are reported."""
        assert TextComponent().validate() == ['Text content is required']
        assert TextComponent('x').set_font_size(0).validate() == [
            'Font size must be a positive number'
        ]
        assert TextComponent('x').set_font_size('big').validate() == [
            'Font size must be a positive number'
        ]
        assert TextComponent('x').set_font_size(12.5).validate() == []


class TestButtonAndIcon:
    """Tests for buttons and icons."""

    def test_button_wraps_string_label(self):
        """Test a string label becomes a text child."""
        button = ButtonComponent('Save', 'save')
        assert button.serialize() == {
            'type': 'elevatedButton',
            'child': {'type': 'text', 'data': 'Save'},
            'onPressed': 'save',
        }

    def test_button_types(self):
        """Test button types map to wire kinds."""
        assert ButtonComponent(button_type='outlined').kind == 'outlinedButton'
        assert ButtonComponent(button_type='text').kind == 'textButton'
        with pytest.raises(InvalidArgumentError, match="Invalid button type"):
            ButtonComponent(button_type='flat')

    def test_button_icon_serialized_in_place(self):
        """Test the icon node is serialized under 'icon'."""
        button = ButtonComponent(button_type='icon').set_icon(IconComponent('add'))
        assert button.serialize()['icon'] == {'type': 'icon', 'icon': 'add', 'size': 24}

    def test_button_icon_requires_node(self):
        """Test a non-Node icon is rejected."""
        with pytest.raises(InvalidArgumentError, match="Icon must be a Node"):
            ButtonComponent().set_icon('add')

    def test_icon_defaults_and_check(self):
        """Test icon default size and name requirement."""
        icon = IconComponent('home').set_color('#333')
        assert icon.get_properties() == {'icon': 'home', 'size': 24, 'color': '#333'}
        assert IconComponent().validate() == ['Icon name is required']


class TestWrappers:
    """Tests for padding, expanded, center and sized box."""

    def test_padding_default(self):
        """Test padding defaults to 0 and validates."""
        padding = PaddingComponent()
        assert padding.get_padding() == 0
        assert padding.validate() == []

    def test_padding_edges(self):
        """Test edge setters build an edge dict."""
        padding = PaddingComponent().set_horizontal(8).set_top(4)
        assert padding.get_padding() == {'left': 8, 'right': 8, 'top': 4}
        assert padding.get_padding_edge('left') == 8
        assert padding.get_padding_edge('bottom') is None

    def test_uniform_padding_edge_lookup(self):
        """Test a uniform padding answers for every edge."""
        assert PaddingComponent().set_padding(12).get_padding_edge('top') == 12

    def test_invalid_padding(self):
        """Test malformed paddings raise."""
        with pytest.raises(InvalidArgumentError, match="integer or a dict"):
            PaddingComponent().set_padding(1.5)
        with pytest.raises(InvalidArgumentError, match="Invalid padding key"):
            PaddingComponent().set_padding({'middle': 2})
        with pytest.raises(InvalidArgumentError, match="non-negative integer"):
            PaddingComponent().set_padding({'left': -2})
        with pytest.raises(InvalidArgumentError, match="Invalid edge"):
            PaddingComponent().set_padding_edge('center', 2)

    def test_padding_check(self):
        """Test negative uniform padding is reported."""
        padding = PaddingComponent().set_property('padding', -1)
        assert padding.validate() == ['Padding value must be non-negative']

    def test_expanded(self):
        """Test flex default and validation."""
        expanded = ExpandedComponent()
        assert expanded.get_flex() == 1
        assert expanded.set_flex(3).get_flex() == 3
        with pytest.raises(InvalidArgumentError, match="Flex must be a positive integer"):
            expanded.set_flex(0)

    def test_center_single_child(self):
        """Test center reports more than one child."""
        center = CenterComponent().add_children([TextComponent('a'), TextComponent('b')])
        assert center.validate() == ['Center component can only have one child']

    def test_sized_box(self):
        """Test sized box dimensions are stored as floats."""
        box = SizedBoxComponent().set_width(100).set_height(20)
        assert box.serialize() == {'type': 'sizedBox', 'width': 100.0, 'height': 20.0}


class TestFormComponents:
    """Tests for forms and inputs."""

    def test_form_defaults(self):
        """Test form autovalidate default and mode validation."""
        form = FormComponent()
        assert form.get_autovalidate_mode() == 'disabled'
        form.set_autovalidate_mode('onUserInteraction')
        assert form.get_property('autovalidateMode') == 'onUserInteraction'
        with pytest.raises(InvalidArgumentError, match="Invalid autovalidate mode"):
            form.set_autovalidate_mode('sometimes')

    def test_input_defaults(self):
        """Test input default properties."""
        field = InputComponent('email')
        assert field.serialize() == {
            'type': 'textFormField',
            'id': 'email',
            'autovalidateMode': 'disabled',
            'keyboardType': 'text',
            'validatorRules': [],
        }

    def test_input_keyboard_type_mapped(self):
        """Test keyboard types are mapped to wire values."""
        field = InputComponent('email').set_keyboard_type('email')
        assert field.get_keyboard_type() == 'emailAddress'
        with pytest.raises(InvalidArgumentError, match="Invalid keyboard type"):
            field.set_keyboard_type('numeric')

    def test_input_validator_rules(self):
        """Test validator rules are checked for shape."""
        field = InputComponent('email')
        rules = [{'rule': 'required', 'message': 'Required'}]
        assert field.set_validator_rules(rules).get_validator_rules() == rules
        with pytest.raises(InvalidArgumentError, match="must have 'rule' and 'message'"):
            field.set_validator_rules([{'rule': 'required'}])
        with pytest.raises(InvalidArgumentError, match="must be a dict"):
            field.set_validator_rules(['required'])

    def test_input_decoration(self):
        """Test decoration entries and icons are nested under 'decoration'."""
        field = InputComponent('user').set_hint_text('Username')
        field.set_prefix_icon(IconComponent('person'))
        assert field.serialize()['decoration'] == {
            'hintText': 'Username',
            'prefixIcon': {'type': 'icon', 'icon': 'person', 'size': 24},
        }

    def test_input_id_required(self):
        """Test a missing id is reported."""
        assert InputComponent().validate() == ['Input field ID is required']


class TestLogicComponents:
    """Tests for conditional and custom components."""

    def test_show_when(self):
        """Test show_when sets the condition and the true branch."""
        cond = ConditionalComponent().show_when('isLoggedIn', TextComponent('Welcome'))
        assert cond.serialize() == {
            'type': 'conditionalWidget',
            'condition': 'isLoggedIn',
            'trueChild': {'type': 'text', 'data': 'Welcome'},
        }
        assert cond.has_true_child()
        assert not cond.has_false_child()

    def test_branches_with_params(self):
        """Test both branches and condition parameters."""
        cond = ConditionalComponent().set_branches(
            'hasItems', TextComponent('List'), TextComponent('Empty')
        )
        cond.set_condition_with_params('hasItems', {'min': 1})
        result = cond.serialize()
        assert result['conditionParams'] == {'min': 1}
        assert result['falseChild'] == {'type': 'text', 'data': 'Empty'}

    def test_conditional_check(self):
        """Test missing condition and branches are both reported."""
        assert ConditionalComponent().validate() == [
            'Function name is required for conditional component',
            'At least one child (trueChild or falseChild) must be set',
        ]

    def test_branch_requires_node(self):
        """Test a non-Node branch is rejected."""
        with pytest.raises(InvalidArgumentError, match="trueChild must be a Node"):
            ConditionalComponent('x').set_true_child('Welcome')

    def test_custom_multiplicity(self):
        """Test custom components choose their multiplicity."""
        assert CustomComponent('card').multiplicity is Multiplicity.SINGLE
        assert CustomComponent('wrap', True).multiplicity is Multiplicity.MANY


class TestComponentFactory:
    """Tests for the stock factory operations."""

    def test_stock_kinds_registered(self):
        """Test the default registry holds every stock kind."""
        factory = ComponentFactory()
        assert factory.get_supported_types() == [
            'container', 'column', 'row', 'stack', 'list_view',
            'text', 'button', 'icon', 'input', 'padding', 'expanded',
            'custom', 'conditional', 'center', 'sized_box', 'form',
        ]

    def test_shared_registry(self):
        """Test an explicit registry is used as-is."""
        registry = register_stock_components(Registry()).freeze()
        factory = ComponentFactory(registry)
        assert factory.registry is registry
        assert factory.create_row().kind == 'row'

    def test_container_operations(self):
        """Test container shortcuts and the column fallback."""
        factory = ComponentFactory()
        assert factory.create_column().kind == 'column'
        assert factory.create_stack().kind == 'stack'
        assert factory.create_list_view().kind == 'listView'
        assert factory.create_container('container').kind == 'container'
        assert factory.create_container('grid').kind == 'column'

    def test_create_with_config(self):
        """Test configuration flows through the registry."""
        factory = ComponentFactory()
        row = factory.resolve('row')(config={'main_axis_alignment': 'center'})
        assert row.get_property('mainAxisAlignment') == 'center'
        text = factory.create_text('Hello', config={'font_weight': 'bold'})
        assert text.get_style('fontWeight') == 'w700'

    def test_button_operations(self):
        """Test button shortcuts pick the button kind."""
        factory = ComponentFactory()
        assert factory.create_elevated_button('Go').kind == 'elevatedButton'
        assert factory.create_outlined_button('Go').kind == 'outlinedButton'
        assert factory.create_text_button('Go').kind == 'textButton'

    def test_icon_button(self):
        """Test the icon button carries its icon node."""
        factory = ComponentFactory()
        button = factory.create_icon_button(factory.create_icon('add'), on_pressed='add')
        assert button.kind == 'iconButton'
        assert button.serialize() == {
            'type': 'iconButton',
            'onPressed': 'add',
            'icon': {'type': 'icon', 'icon': 'add', 'size': 24},
        }

    def test_operations_do_not_validate(self):
        """Test create_* operations return incomplete nodes for later filling."""
        factory = ComponentFactory()
        text = factory.create_text()
        assert text.validate() == ['Text content is required']
        assert text.set_text('x').validate() == []
        assert factory.create_input().validate() == ['Input field ID is required']

    def test_generic_create_validates(self):
        """Test the generic create path still validates."""
        factory = ComponentFactory()
        with pytest.raises(ValidationFailedError, match="Text content is required"):
            factory.create('text', '')
        with pytest.raises(ValidationFailedError, match="Input field ID is required"):
            factory.create('input')

    def test_default_configuration_applies(self):
        """Test registered defaults reach nodes created by operations."""
        factory = ComponentFactory()
        factory.registry.register_default_configuration('text', {'color': '#333'})
        assert factory.create_text('x', config={'color': 'red'}).get_style('color') == '#333'

    def test_conditional_and_custom(self):
        """Test conditional and custom creation."""
        factory = ComponentFactory()
        cond = factory.create_conditional(
            'isAdmin', config={'true_child': factory.create_text('Admin')}
        )
        assert cond.get_property('trueChild').get_property('data') == 'Admin'
        card = factory.create_custom('card', True, config={'properties': {'elevation': 2}})
        assert card.serialize() == {'type': 'card', 'elevation': 2}

    def test_wrappers_and_forms(self):
        """Test wrapper and form creation with children config."""
        factory = ComponentFactory()
        padding = factory.create_padding(
            config={'padding': 16, 'children': [factory.create_text('x')]}
        )
        assert padding.serialize() == {
            'type': 'padding',
            'child': {'type': 'text', 'data': 'x'},
            'padding': 16,
        }
        assert factory.create_expanded(config={'flex': 2}).get_flex() == 2
        assert factory.create_center().kind == 'center'
        assert factory.create_sized_box(config={'height': 8}).get_height() == 8.0
        assert factory.create_form().kind == 'form'
