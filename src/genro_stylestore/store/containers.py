# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Style and Rule containers."""

from __future__ import annotations

from typing import Union

from ..hashing import HashFunction
from ..node import NodeKind, Selector
from .core import Cache


def render_children(cache: Cache) -> str:
    """Concatenate the rendered children of a cache in order."""
    return ''.join(child.get_styles() for child in cache.values())


class Style(Cache[Selector]):
    """One canonical declaration block and the selectors that use it.

    The id is derived from the declaration text, so two registrations
    declaring the same properties share a single Style and render as
    one block with a comma-joined selector list.

    Example:
        >>> from genro_stylestore import Selector, string_hash
        >>> style = Style('color:red', string_hash)
        >>> _ = style.add(Selector('.a', string_hash))
        >>> _ = style.add(Selector('.b', string_hash))
        >>> style.get_styles()
        '.a,.b{color:red}'
    """

    __slots__ = ('style', 'id')

    kind = NodeKind.STYLE

    def __init__(
        self,
        style: str,
        hash: HashFunction,
        id: str | None = None,
    ) -> None:
        """Initialize a Style.

        Args:
            style: Canonical declaration text (``prop:value;prop:value``).
            hash: Hash function for the id and for child selectors.
            id: Explicit id. Defaults to ``c<hash(style)>``; force-unique
                styles pass a counter-derived ``u<n>`` id instead.
        """
        super().__init__(hash)
        self.style = style
        self.id = id if id is not None else f'c{hash(style)}'

    def get_styles(self) -> str:
        selectors = ','.join(selector.get_styles() for selector in self.values())
        return f'{selectors}{{{self.style}}}'

    def get_identifier(self) -> str:
        return self.style

    def clone(self) -> Style:
        return Style(self.style, self.hash, self.id).merge(self)


class Rule(Cache[Union['Rule', Style]]):
    """An at-rule (``@media``, ``@keyframes`` ...) wrapping nested blocks.

    A rule carries its prelude text, optional inline declarations and
    the parent-identity seed of the registration that created it.

    Example:
        >>> from genro_stylestore import Selector, string_hash
        >>> rule = Rule('@media print', '', string_hash)
        >>> style = rule.add(Style('color:red', string_hash))
        >>> _ = style.add(Selector('.a', string_hash))
        >>> rule.get_styles()
        '@media print{.a{color:red}}'
    """

    __slots__ = ('rule', 'style', 'id', 'pid')

    kind = NodeKind.RULE

    def __init__(
        self,
        rule: str,
        style: str,
        hash: HashFunction,
        id: str | None = None,
        pid: str = '',
    ) -> None:
        """Initialize a Rule.

        Args:
            rule: The rule prelude, e.g. ``@media print``.
            style: Inline declarations rendered before nested blocks.
            hash: Hash function for the id and for nested nodes.
            id: Explicit id. Defaults to ``a<hash(rule + '.' + style)>``.
            pid: Parent-identity seed, part of the content identifier.
        """
        super().__init__(hash)
        self.rule = rule
        self.style = style
        self.id = id if id is not None else f'a{hash(f"{rule}.{style}")}'
        self.pid = pid

    def get_styles(self) -> str:
        return f'{self.rule}{{{self.style}{render_children(self)}}}'

    def get_identifier(self) -> str:
        return f'{self.pid}.{self.rule}.{self.style}'

    def clone(self) -> Rule:
        return Rule(self.rule, self.style, self.hash, self.id, self.pid).merge(self)
