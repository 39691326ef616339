# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Cache - reference-counted, content-addressed container of style nodes.

This module provides the Cache class, the merge engine shared by every
container in genro-stylestore (Style, Rule and the StyleStore root).

Key Features:
    - **Content addressing**: children are keyed by their own ``id``,
      derived from a hash of their content
    - **Reference counting**: adding an existing id bumps a counter instead
      of duplicating the node; removing only drops it at zero
    - **Ordering**: the most recently (re-)added child renders last
    - **Recursive merge**: containers added over an existing container are
      merged into it child by child
    - **Change tracking**: ``change_id`` moves whenever the visible
      composition of the tree changes

Storage is an arena of slots addressed by id. Each slot holds the
canonical node and its reference count; a separate list keeps the
render order. Every id in the order list has exactly one slot with a
count of at least one.

Example:
    >>> from genro_stylestore import Cache, Style, string_hash
    >>> cache = Cache(string_hash)
    >>> style = cache.add(Style('color:red', string_hash))
    >>> cache.add(Style('color:red', string_hash)) is style
    True
    >>> cache.ref_count(style.id)
    2
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, TypeVar

from ..exceptions import HashCollisionError
from ..hashing import HashFunction
from ..node import Container

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Container)
C = TypeVar('C', bound='Cache')


class _Slot(Generic[T]):
    """Arena slot: the canonical node stored under an id and its count."""

    __slots__ = ('node', 'count')

    def __init__(self, node: T) -> None:
        self.node = node
        self.count = 0

    def __repr__(self) -> str:
        return f"_Slot({self.node!r}, count={self.count})"


class Cache(Generic[T]):
    """A reference-counted, insertion-ordered collection of nodes.

    Cache provides:
    - add(node) / remove(node): reference-counted insertion and removal
    - merge(cache) / unmerge(cache): add/remove every child of another cache
    - values(): children in render order
    - change_id: counter bumped on every visible composition change

    Nodes are cloned on first insertion, so the cache owns its own copy
    and later mutations of the caller's node do not leak in.

    Attributes:
        hash: The hash function used by nodes created for this cache.
        change_id: Monotonic counter of composition changes.
    """

    __slots__ = ('hash', 'change_id', '_slots', '_order')

    def __init__(self, hash: HashFunction) -> None:
        """Initialize an empty Cache.

        Args:
            hash: The hash function shared with nodes built for this cache.
        """
        self.hash = hash
        self.change_id = 0
        self._slots: dict[str, _Slot[T]] = {}
        self._order: list[str] = []

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._order})"

    def __len__(self) -> int:
        """Return the number of distinct children."""
        return len(self._order)

    def __iter__(self) -> Iterator[T]:
        """Iterate over children in render order."""
        return iter(self.values())

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._slots

    # ==================== Access ====================

    def values(self) -> list[T]:
        """Return children in render order."""
        return [self._slots[node_id].node for node_id in self._order]

    def get(self, node: Container) -> T | None:
        """Return the canonical child stored under ``node.id``, if any."""
        slot = self._slots.get(node.id)
        return slot.node if slot is not None else None

    def ref_count(self, node_id: str) -> int:
        """Return how many live references point at ``node_id``."""
        slot = self._slots.get(node_id)
        return slot.count if slot is not None else 0

    # ==================== Merge Engine ====================

    def _find_collision(self, node: Container) -> tuple[Container, Container] | None:
        """Return the first ``(incoming, existing)`` pair whose ids match
        but whose contents differ, walking into matching containers.
        """
        slot = self._slots.get(node.id)
        if slot is None:
            return None
        item = slot.node
        if item.get_identifier() != node.get_identifier():
            return node, item
        if item.kind.is_container and node.kind.is_container:
            for child in node.values():
                found = item._find_collision(child)
                if found is not None:
                    return found
        return None

    def _check_collision(self, node: Container) -> None:
        found = self._find_collision(node)
        if found is not None:
            incoming, existing = found
            logger.debug("Hash collision on id %r", incoming.id)
            raise HashCollisionError(incoming, existing)

    def add(self, node: T) -> T:
        """Add a reference to ``node`` and return the canonical child.

        A new id is cloned into the cache and appended at the end. An
        existing id has its count incremented and is moved to the end;
        when both sides are containers the incoming children are merged
        into the stored one.

        Args:
            node: The node to add.

        Returns:
            The node stored in this cache for ``node.id``.

        Raises:
            HashCollisionError: If a different content is already stored
                under the same id, at any depth of the incoming node. The
                cache is left untouched.
        """
        self._check_collision(node)
        slot = self._slots.get(node.id)

        if slot is None:
            slot = _Slot(node.clone())
            slot.count = 1
            self._slots[node.id] = slot
            self._order.append(node.id)
            self.change_id += 1
            return slot.node

        item = slot.node
        slot.count += 1
        self._order.remove(node.id)
        self._order.append(node.id)

        if item.kind.is_container and node.kind.is_container:
            prev_change_id = item.change_id
            item.merge(node)
            if item.change_id != prev_change_id:
                self.change_id += 1

        return item

    def remove(self, node: T) -> None:
        """Drop one reference to ``node``.

        The child is deleted when its count reaches zero. Otherwise, when
        both sides are containers, the incoming children are unmerged
        from the stored one. Removing an unknown id is a no-op.

        Args:
            node: The node to remove.
        """
        slot = self._slots.get(node.id)
        if slot is None:
            return

        slot.count -= 1
        if slot.count == 0:
            del self._slots[node.id]
            self._order.remove(node.id)
            self.change_id += 1
            return

        item = slot.node
        if item.kind.is_container and node.kind.is_container:
            prev_change_id = item.change_id
            item.unmerge(node)
            if item.change_id != prev_change_id:
                self.change_id += 1

    def merge(self: C, cache: Iterable[T]) -> C:
        """Add every child of ``cache`` in its render order.

        Every child is checked for collisions before any is added, so a
        failed merge leaves this cache untouched.

        Returns:
            This cache, for chaining.

        Raises:
            HashCollisionError: If any child collides at any depth.
        """
        values = list(cache)
        for value in values:
            self._check_collision(value)
        for value in values:
            self.add(value)
        return self

    def unmerge(self: C, cache: Iterable[T]) -> C:
        """Remove every child of ``cache`` in its render order.

        Returns:
            This cache, for chaining.
        """
        for value in list(cache):
            self.remove(value)
        return self

    def clone(self) -> Cache[T]:
        """Return a new Cache holding its own references to every child."""
        return Cache(self.hash).merge(self)
