# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StyleStore node kinds, container contract and the Selector leaf."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar

from .hashing import HashFunction

T = TypeVar('T', bound='Container')


class NodeKind(Enum):
    """Discriminates the four kinds of node in a style tree."""

    SELECTOR = 'selector'
    STYLE = 'style'
    RULE = 'rule'
    ROOT = 'root'

    @property
    def is_container(self) -> bool:
        """True for kinds that hold children and merge recursively."""
        return self is not NodeKind.SELECTOR


class Container(Protocol):
    """Capabilities shared by every node stored in a Cache.

    - id: content-derived (or counter-derived) key inside the parent cache
    - kind: the NodeKind, used to decide on recursive merging
    - clone(): deep copy keeping the same id
    - get_identifier(): full content identity, compared on id clashes
    - get_styles(): rendered CSS text
    """

    id: str
    kind: NodeKind

    def clone(self: T) -> T: ...

    def get_identifier(self) -> str: ...

    def get_styles(self) -> str: ...


class Selector:
    """A leaf holding the text of one CSS selector.

    The ``pid`` is the parent-identity seed of the registration that
    produced the selector. Two selectors with the same text but a
    different seed share an id and therefore collide.

    Example:
        >>> from genro_stylestore import string_hash
        >>> sel = Selector('.f1x', string_hash)
        >>> sel.get_styles()
        '.f1x'
    """

    __slots__ = ('selector', 'hash', 'id', 'pid')

    kind = NodeKind.SELECTOR

    def __init__(
        self,
        selector: str,
        hash: HashFunction,
        id: str | None = None,
        pid: str = '',
    ) -> None:
        self.selector = selector
        self.hash = hash
        self.id = id if id is not None else f's{hash(selector)}'
        self.pid = pid

    def __repr__(self) -> str:
        return f"Selector({self.selector!r}, id={self.id!r})"

    def get_styles(self) -> str:
        return self.selector

    def get_identifier(self) -> str:
        return f'{self.pid}.{self.selector}'

    def clone(self) -> Selector:
        return Selector(self.selector, self.hash, self.id, self.pid)
