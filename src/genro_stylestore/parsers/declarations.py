# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for nested style declaration objects.

A declaration object is a dict mapping keys to either plain values or
nested declaration objects:

    {
        'color': 'red',
        'marginTop': 10,
        'display': ['-webkit-flex', 'flex'],
        '&:hover': {'color': 'blue'},
        '@media print': {'color': 'black'},
    }

Plain values (None, numbers, booleans, strings and lists of those) become
CSS properties. Dict values become nested selectors, or at-rules when the
key starts with ``@``. Parsing splits one level into a tagged union of
Property and Nested entries, with properties sorted by name so that the
rendered declaration text is canonical.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

PropertyValue = Union[None, int, float, bool, str, list, tuple]
Styles = Mapping[str, Any]

IS_UNIQUE = '__DO_NOT_DEDUPE_STYLE__'
"""Declaration key opting a block out of deduplication."""

_UNITLESS = (
    'animation-iteration-count',
    'box-flex',
    'box-flex-group',
    'column-count',
    'counter-increment',
    'counter-reset',
    'flex',
    'flex-grow',
    'flex-positive',
    'flex-shrink',
    'flex-negative',
    'font-weight',
    'line-clamp',
    'line-height',
    'opacity',
    'order',
    'orphans',
    'tab-size',
    'widows',
    'z-index',
    'zoom',
    # SVG
    'fill-opacity',
    'stroke-dashoffset',
    'stroke-opacity',
    'stroke-width',
)

CSS_NUMBER: frozenset[str] = frozenset(
    _UNITLESS
    + tuple(
        prefix + name
        for prefix in ('-webkit-', '-ms-', '-moz-', '-o-')
        for name in _UNITLESS
    )
)
"""Properties whose numeric values are rendered without a ``px`` unit."""

_UPPER_RE = re.compile(r'([A-Z])')
_MS_PREFIX_RE = re.compile(r'^ms-')


@dataclass(frozen=True)
class Property:
    """A plain declaration: hyphenated property name and raw value."""

    name: str
    value: PropertyValue


@dataclass(frozen=True)
class Nested:
    """A nested block: selector or at-rule key and its declarations."""

    key: str
    styles: Styles


@dataclass
class ParsedStyles:
    """One parsed level of a declaration object."""

    properties: list[Property] = field(default_factory=list)
    nested: list[Nested] = field(default_factory=list)
    is_unique: bool = False


def hyphenate(name: str) -> str:
    """Convert a camelCase property name to its CSS spelling.

    A leading ``ms`` token becomes the ``-ms-`` vendor prefix.

    Example:
        >>> hyphenate('backgroundColor')
        'background-color'
        >>> hyphenate('msTransform')
        '-ms-transform'
    """
    name = _UPPER_RE.sub(r'-\1', name)
    name = _MS_PREFIX_RE.sub('-ms-', name)
    return name.lower()


def is_at_rule(key: str) -> bool:
    """True if the key opens an at-rule (``@media``, ``@supports`` ...)."""
    return key[:1] == '@'


def is_nested_style(value: Any) -> bool:
    """True if the value is a nested declaration object."""
    return isinstance(value, Mapping)


def parse_styles(styles: Styles, has_nested_styles: bool) -> ParsedStyles:
    """Split one level of a declaration object.

    Args:
        styles: The declaration object.
        has_nested_styles: True when the level was entered with a selector
            context. Nested entries then keep their declared order; without
            one they are sorted by key.

    Returns:
        ParsedStyles with properties sorted by hyphenated name.
    """
    parsed = ParsedStyles()

    for key, value in styles.items():
        if key == IS_UNIQUE:
            parsed.is_unique = bool(value)
        elif is_nested_style(value):
            parsed.nested.append(Nested(key.strip(), value))
        else:
            parsed.properties.append(Property(hyphenate(key.strip()), value))

    parsed.properties.sort(key=lambda prop: prop.name)
    if not has_nested_styles:
        parsed.nested.sort(key=lambda nested: nested.key)
    return parsed


def format_value(value: Any) -> str:
    """Render a plain value the way CSS-in-JS tooling prints it."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer():
            return str(int(value))
    return str(value)


def style_to_string(name: str, value: Any) -> str:
    """Render one ``name:value`` declaration.

    Non-zero numbers get a ``px`` suffix unless the property is unit-less.
    """
    text = format_value(value)
    if (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and value != 0
        and name not in CSS_NUMBER
    ):
        text += 'px'
    return f'{name}:{text}'


def stringify_properties(properties: list[Property]) -> str:
    """Join properties into canonical declaration text.

    None values are dropped. List values emit one declaration per truthy
    item, in order, for fallback values.

    Example:
        >>> stringify_properties([Property('display', ['-webkit-flex', 'flex'])])
        'display:-webkit-flex;display:flex'
    """
    result = []
    for prop in properties:
        if prop.value is None:
            continue
        if isinstance(prop.value, (list, tuple)):
            result.extend(
                style_to_string(prop.name, item) for item in prop.value if item
            )
        else:
            result.append(style_to_string(prop.name, prop.value))
    return ';'.join(result)


def interpolate(selector: str, parent: str) -> str:
    """Resolve a nested selector against its parent selector.

    Every ``&`` is replaced by the parent; without one the selector is
    treated as a descendant of the parent.

    Example:
        >>> interpolate('&:hover', '.btn')
        '.btn:hover'
        >>> interpolate('span', '.btn')
        '.btn span'
    """
    if '&' in selector:
        return selector.replace('&', parent)
    return f'{parent} {selector}'
