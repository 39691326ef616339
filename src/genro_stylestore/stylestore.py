# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StyleStore - deduplicating registry of nested style declarations.

This module provides the StyleStore class, the root container of a style
tree, and the ``create`` factory. Declarations registered on a store are
flattened into content-addressed Style and Rule nodes, merged with any
identical nodes already present, and rendered to CSS on demand.

Registration kinds:
    - **register_style**: a class-scoped block; returns the generated
      class name
    - **register_keyframes**: an ``@keyframes`` block; returns the
      generated animation name
    - **register_hash_rule**: any at-rule named by a generated id
    - **register_rule**: a block under a user-authored selector or at-rule

Example:
    Basic usage::

        store = create()
        name = store.register_style({
            'color': 'red',
            '&:hover': {'color': 'blue'},
        })
        store.get_styles()
        # '.f1abc{color:red}.f1abc:hover{color:blue}'

    Retracting registrations by composing stores::

        page = create()
        widget = create()
        widget.register_style({'color': 'red'})
        page.merge(widget)     # widget styles now render from page
        page.unmerge(widget)   # and are gone again
"""

from __future__ import annotations

import itertools
import logging
from typing import Union

from .builder import collect_hashed_styles
from .config import StyleStoreConfig
from .hashing import HashFunction, to_base36
from .node import NodeKind
from .parsers import Styles
from .store import Cache, Rule, Style, render_children

logger = logging.getLogger(__name__)

_store_ids = itertools.count(1)


class StyleStore(Cache[Union[Rule, Style]]):
    """Root container of a style tree.

    StyleStore provides:
    - register_style(styles, display_name): class-scoped styles
    - register_keyframes(keyframes, display_name): ``@keyframes`` blocks
    - register_hash_rule(rule, styles, display_name): hashed at-rules
    - register_rule(rule, styles): user selector or at-rule blocks
    - get_styles(): the full rendered CSS

    A StyleStore is itself a Cache, so stores compose: merging a store
    into another adds a reference to each of its nodes, and unmerging it
    drops exactly those references.

    Thread safety:
        Mutations (registrations, add, remove, merge, unmerge) must be
        serialized by the caller. Reference counts and ordering are not
        protected against concurrent mutation. Concurrent get_styles()
        calls are safe as long as no mutation runs at the same time.

    Attributes:
        id: Process-unique ``f<n>`` token identifying this store.
        debug: If True, display names are prepended to generated ids.
    """

    __slots__ = ('id', 'debug', '_unique_ids')

    kind = NodeKind.ROOT

    def __init__(
        self,
        hash: HashFunction,
        debug: bool = False,
        id: str | None = None,
    ) -> None:
        """Initialize a StyleStore.

        Args:
            hash: Deterministic string hash used for every node id.
            debug: If True, display names are prepended to generated ids.
            id: Explicit store id. Defaults to the next process-wide token.

        Raises:
            TypeError: If ``hash`` is not callable.
        """
        if not callable(hash):
            raise TypeError(f"hash must be callable, not {type(hash).__name__}")
        super().__init__(hash)
        self.debug = debug
        self.id = id if id is not None else f'f{to_base36(next(_store_ids))}'
        self._unique_ids = itertools.count(1)

    def _unique_id(self) -> str:
        """Return a fresh id for a force-unique Style.

        The store id is part of the token so that unique styles of two
        stores stay distinct once merged together.
        """
        return f'u{to_base36(next(self._unique_ids))}.{self.id}'

    def _display_name(self, display_name: str | None) -> str | None:
        return display_name if self.debug else None

    # ==================== Registrars ====================

    def register_style(self, styles: Styles, display_name: str | None = None) -> str:
        """Register class-scoped styles and return the generated class name.

        Nested keys are resolved against ``&``, which stands for the
        generated class. Registering the same declarations again returns
        the same name and does not duplicate output.

        Args:
            styles: Nested declaration object.
            display_name: Readable prefix for the class name (debug only).

        Returns:
            The class name, without the leading dot.

        Example:
            >>> store = create(debug=False)
            >>> store.register_style({'color': 'red'})
            'f1jvcvsh'
        """
        collected = collect_hashed_styles(
            self, styles, '&', True, self._unique_id,
            self._display_name(display_name),
        )
        self.merge(collected.cache)
        logger.debug("Registered style %s", collected.id)
        return collected.id

    def register_keyframes(
        self, keyframes: Styles, display_name: str | None = None
    ) -> str:
        """Register ``@keyframes`` steps and return the animation name.

        Steps are sorted by key, so declaration order of the steps does
        not change the generated name.
        """
        return self.register_hash_rule('@keyframes', keyframes, display_name)

    def register_hash_rule(
        self, rule: str, styles: Styles, display_name: str | None = None
    ) -> str:
        """Register an at-rule named after the hash of its content.

        The whole registration is wrapped in a single ``<rule> <id>``
        Rule rather than merged flat into the store.

        Args:
            rule: The at-rule prefix, e.g. ``@keyframes``.
            styles: Nested declaration object for the rule body.
            display_name: Readable prefix for the id (debug only).

        Returns:
            The generated id.
        """
        collected = collect_hashed_styles(
            self, styles, '', False, self._unique_id,
            self._display_name(display_name),
        )
        at_rule = Rule(f'{rule} {collected.id}', '', self.hash, pid=collected.pid)
        at_rule.merge(collected.cache)
        self.add(at_rule)
        logger.debug("Registered %s %s", rule, collected.id)
        return collected.id

    def register_rule(self, rule: str, styles: Styles) -> None:
        """Register styles under a user-authored selector or at-rule.

        Args:
            rule: Selector (``body``, ``.btn``) or at-rule (``@media print``).
            styles: Nested declaration object.
        """
        collected = collect_hashed_styles(self, styles, rule, False, self._unique_id)
        self.merge(collected.cache)
        logger.debug("Registered rule %r", rule)

    # ==================== Container ====================

    def get_styles(self) -> str:
        """Render the whole tree to CSS text."""
        return render_children(self)

    def get_identifier(self) -> str:
        return self.id

    def clone(self) -> StyleStore:
        store = StyleStore(self.hash, self.debug, self.id)
        store._unique_ids = self._unique_ids
        return store.merge(self)


def create(hash: HashFunction | None = None, debug: bool | None = None) -> StyleStore:
    """Create a new StyleStore.

    Args:
        hash: Hash function. Defaults to ``string_hash``.
        debug: Debug flag. Defaults to True unless ``STYLESTORE_ENV`` is
            ``production``.

    Example:
        >>> store = create(debug=False)
        >>> store.register_rule('body', {'margin': 0})
        >>> store.get_styles()
        'body{margin:0}'
    """
    config = StyleStoreConfig.from_env()
    return StyleStore(
        hash if hash is not None else config.hash,
        config.debug if debug is None else debug,
    )
