# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Flattening of nested declaration objects into a scratch style tree.

The recursive descent walks a declaration object level by level. Each
level contributes at most one Style (its own properties) plus whatever its
nested blocks produce. Selectors cannot be attached straight away because
the final class id depends on the whole registration, so every Style is
queued with its unresolved selector and finalized once the id is known.

The walk also accumulates the parent-identity seed: the declaration text
of each level followed by every nested key and the seed of that key's
subtree, in traversal order. Hashing the seed gives the registration id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from .node import Selector
from .parsers import (
    Styles,
    interpolate,
    is_at_rule,
    parse_styles,
    stringify_properties,
)
from .store import Cache, Rule, Style

UniqueId = Callable[[], str]
PendingSelector = tuple[Style, str]


@dataclass
class Collected:
    """Result of flattening one registration.

    Attributes:
        cache: Scratch cache holding every Style and Rule produced.
        pid: The parent-identity seed of the registration.
        id: The id minted from the seed (``f<hash>``, optionally prefixed
            by a display name).
    """

    cache: Cache[Union[Rule, Style]]
    pid: str
    id: str


def stylize(
    cache: Cache,
    selector: str,
    styles: Styles,
    pending: list[PendingSelector],
    unique_id: UniqueId,
    parent: str | None = None,
) -> str:
    """Flatten one level of ``styles`` into ``cache``.

    Args:
        cache: The cache receiving Style and Rule nodes for this level.
        selector: The key of this level: a selector, an at-rule, or empty
            for the top of a hash rule.
        styles: The declaration object of this level.
        pending: Receives ``(style, selector)`` pairs to finalize later.
        unique_id: Returns a fresh id for force-unique styles.
        parent: The resolved selector of the enclosing level, if any.

    Returns:
        The parent-identity seed of this level.
    """
    parsed = parse_styles(styles, bool(selector))
    style_string = stringify_properties(parsed.properties)
    pid = style_string

    if is_at_rule(selector):
        rule = cache.add(Rule(selector, '' if parent else style_string, cache.hash))

        # At-rule below a selector, e.g. `.foo > @media > .bar`.
        if style_string and parent:
            style = rule.add(Style(
                style_string, rule.hash, unique_id() if parsed.is_unique else None
            ))
            pending.append((style, parent))

        for nested in parsed.nested:
            pid += nested.key + stylize(
                rule, nested.key, nested.styles, pending, unique_id, parent
            )
    else:
        key = interpolate(selector, parent) if parent else selector

        if style_string:
            style = cache.add(Style(
                style_string, cache.hash, unique_id() if parsed.is_unique else None
            ))
            pending.append((style, key))

        for nested in parsed.nested:
            pid += nested.key + stylize(
                cache, nested.key, nested.styles, pending, unique_id, key
            )

    return pid


def collect_hashed_styles(
    container: Cache,
    styles: Styles,
    selector: str,
    is_style: bool,
    unique_id: UniqueId,
    display_name: str | None = None,
) -> Collected:
    """Flatten a registration into a scratch cache and mint its id.

    Args:
        container: The cache the result will be merged into; supplies the
            hash function.
        styles: The declaration object.
        selector: Selector context of the top level: ``'&'`` for class
            styles, ``''`` for hash rules, the user selector otherwise.
        is_style: If True, queued selectors are resolved against
            ``.<id>``; otherwise they are used verbatim.
        unique_id: Returns a fresh id for force-unique styles.
        display_name: Optional readable prefix for the minted id.

    Returns:
        Collected with the scratch cache, seed and minted id.
    """
    cache: Cache[Union[Rule, Style]] = Cache(container.hash)
    pending: list[PendingSelector] = []
    pid = stylize(cache, selector, styles, pending, unique_id)

    hashed = f'f{cache.hash(pid)}'
    id = f'{display_name}_{hashed}' if display_name else hashed

    for style, key in pending:
        if is_style:
            key = interpolate(key, f'.{id}')
        style.add(Selector(key, style.hash, pid=pid))

    return Collected(cache, pid, id)
