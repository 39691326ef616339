# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for nested style declaration objects.

Available parsers:
- declarations: split a declaration level into sorted properties and
  nested blocks, and render canonical declaration text

Example:
    >>> from genro_stylestore.parsers import parse_styles, stringify_properties
    >>> parsed = parse_styles({'marginTop': 10, 'color': 'red'}, True)
    >>> stringify_properties(parsed.properties)
    'color:red;margin-top:10px'
"""

from .declarations import (
    CSS_NUMBER,
    IS_UNIQUE,
    Nested,
    ParsedStyles,
    Property,
    PropertyValue,
    Styles,
    hyphenate,
    interpolate,
    is_at_rule,
    is_nested_style,
    parse_styles,
    stringify_properties,
    style_to_string,
)

__all__ = [
    'CSS_NUMBER',
    'IS_UNIQUE',
    'Nested',
    'ParsedStyles',
    'Property',
    'PropertyValue',
    'Styles',
    'hyphenate',
    'interpolate',
    'is_at_rule',
    'is_nested_style',
    'parse_styles',
    'stringify_properties',
    'style_to_string',
]
