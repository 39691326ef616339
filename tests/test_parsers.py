# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the declaration parser."""

from genro_stylestore.parsers import (
    CSS_NUMBER,
    IS_UNIQUE,
    Nested,
    Property,
    hyphenate,
    interpolate,
    is_at_rule,
    is_nested_style,
    parse_styles,
    stringify_properties,
    style_to_string,
)


class TestHyphenate:
    """Tests for camelCase to CSS property conversion."""

    def test_camel_case(self):
        """Test uppercase letters become hyphen plus lowercase."""
        assert hyphenate('backgroundColor') == 'background-color'
        assert hyphenate('borderTopLeftRadius') == 'border-top-left-radius'

    def test_plain_name_unchanged(self):
        """Test already hyphenated names pass through."""
        assert hyphenate('color') == 'color'
        assert hyphenate('margin-top') == 'margin-top'

    def test_vendor_prefixes(self):
        """Test capitalised vendor prefixes gain a leading hyphen."""
        assert hyphenate('WebkitTransition') == '-webkit-transition'
        assert hyphenate('MozAppearance') == '-moz-appearance'

    def test_ms_prefix(self):
        """Test the lowercase ms prefix becomes -ms-."""
        assert hyphenate('msTransform') == '-ms-transform'
        assert hyphenate('msFlex') == '-ms-flex'


class TestPredicates:
    """Tests for key and value classification."""

    def test_is_at_rule(self):
        """Test at-rule detection."""
        assert is_at_rule('@media print')
        assert not is_at_rule('&:hover')
        assert not is_at_rule('')

    def test_is_nested_style(self):
        """Test only mappings are nested styles."""
        assert is_nested_style({'color': 'red'})
        assert not is_nested_style(['a', 'b'])
        assert not is_nested_style(None)
        assert not is_nested_style('red')


class TestParseStyles:
    """Tests for splitting one declaration level."""

    def test_properties_sorted(self):
        """Test properties are sorted by hyphenated name."""
        parsed = parse_styles({'zIndex': 1, 'color': 'red', 'backgroundColor': 'blue'}, True)
        assert [p.name for p in parsed.properties] == ['background-color', 'color', 'z-index']

    def test_tagged_union(self):
        """Test entries are split into Property and Nested."""
        parsed = parse_styles({'color': 'red', '&:hover': {'color': 'blue'}}, True)
        assert parsed.properties == [Property('color', 'red')]
        assert parsed.nested == [Nested('&:hover', {'color': 'blue'})]

    def test_nested_order_kept_with_selector(self):
        """Test nested keys keep declared order under a selector."""
        parsed = parse_styles({'&:hover': {}, '&:focus': {}}, True)
        assert [n.key for n in parsed.nested] == ['&:hover', '&:focus']

    def test_nested_sorted_without_selector(self):
        """Test nested keys are sorted without a selector context."""
        parsed = parse_styles({'100%': {}, '0%': {}, '50%': {}}, False)
        assert [n.key for n in parsed.nested] == ['0%', '100%', '50%']

    def test_keys_trimmed(self):
        """Test surrounding whitespace is stripped from keys."""
        parsed = parse_styles({' color ': 'red', ' &:hover ': {}}, True)
        assert parsed.properties[0].name == 'color'
        assert parsed.nested[0].key == '&:hover'

    def test_unique_marker(self):
        """Test the unique marker sets the flag and is not emitted."""
        parsed = parse_styles({IS_UNIQUE: True, 'color': 'red'}, True)
        assert parsed.is_unique is True
        assert [p.name for p in parsed.properties] == ['color']

    def test_unique_marker_falsy(self):
        """Test a falsy unique marker leaves the flag off."""
        assert parse_styles({IS_UNIQUE: False}, True).is_unique is False

    def test_lists_are_properties(self):
        """Test list values are properties, not nested styles."""
        parsed = parse_styles({'display': ['-webkit-flex', 'flex']}, True)
        assert parsed.nested == []
        assert parsed.properties[0].value == ['-webkit-flex', 'flex']


class TestStyleToString:
    """Tests for single declaration rendering."""

    def test_string_value(self):
        """Test strings render verbatim."""
        assert style_to_string('color', 'red') == 'color:red'

    def test_number_gets_px(self):
        """Test non-zero numbers get a px suffix."""
        assert style_to_string('width', 10) == 'width:10px'
        assert style_to_string('width', 1.5) == 'width:1.5px'
        assert style_to_string('width', -2) == 'width:-2px'

    def test_zero_has_no_unit(self):
        """Test zero renders without unit."""
        assert style_to_string('margin', 0) == 'margin:0'

    def test_unitless_properties(self):
        """Test unit-less properties keep bare numbers."""
        assert style_to_string('opacity', 0.5) == 'opacity:0.5'
        assert style_to_string('z-index', 10) == 'z-index:10'
        assert style_to_string('-webkit-flex', 1) == '-webkit-flex:1'

    def test_integral_float(self):
        """Test integral floats render without fraction."""
        assert style_to_string('line-height', 2.0) == 'line-height:2'

    def test_booleans(self):
        """Test booleans render lowercase and never get units."""
        assert style_to_string('flag', True) == 'flag:true'
        assert style_to_string('flag', False) == 'flag:false'

    def test_vendor_prefixed_table(self):
        """Test every vendor spelling of unit-less properties is known."""
        for prefix in ('', '-webkit-', '-ms-', '-moz-', '-o-'):
            assert prefix + 'line-height' in CSS_NUMBER
        assert 'width' not in CSS_NUMBER


class TestStringifyProperties:
    """Tests for canonical declaration text."""

    def test_join(self):
        """Test declarations are joined with semicolons in order."""
        props = [Property('color', 'red'), Property('margin', 0)]
        assert stringify_properties(props) == 'color:red;margin:0'

    def test_none_dropped(self):
        """Test None values are dropped."""
        props = [Property('color', None), Property('margin', 0)]
        assert stringify_properties(props) == 'margin:0'

    def test_fallback_list(self):
        """Test list values expand into repeated declarations."""
        props = [Property('display', ['-webkit-flex', None, '', 'flex'])]
        assert stringify_properties(props) == 'display:-webkit-flex;display:flex'

    def test_empty(self):
        """Test no properties gives empty text."""
        assert stringify_properties([]) == ''
        assert stringify_properties([Property('color', None)]) == ''


class TestInterpolate:
    """Tests for selector interpolation."""

    def test_ampersand(self):
        """Test & is replaced by the parent."""
        assert interpolate('&:hover', '.btn') == '.btn:hover'

    def test_multiple_ampersands(self):
        """Test every & is replaced."""
        assert interpolate('& + &', '.a') == '.a + .a'

    def test_descendant(self):
        """Test keys without & become descendants."""
        assert interpolate('span', '.btn') == '.btn span'
