# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-StyleStore - Content-addressed, deduplicating style registry.

A lightweight, zero-dependency library that flattens nested style
declarations into reference-counted CSS blocks keyed by content hash
(Genro Kyō).
"""

__version__ = "0.1.0"

from .config import StyleStoreConfig
from .exceptions import HashCollisionError, StyleStoreError
from .hashing import HashFunction, string_hash
from .node import Container, NodeKind, Selector
from .parsers import IS_UNIQUE, Styles
from .store import Cache, Rule, Style
from .stylestore import StyleStore, create

__all__ = [
    # Core classes
    "StyleStore",
    "create",
    "Cache",
    # Nodes
    "Container",
    "NodeKind",
    "Selector",
    "Style",
    "Rule",
    # Declarations
    "IS_UNIQUE",
    "Styles",
    # Hashing and configuration
    "HashFunction",
    "string_hash",
    "StyleStoreConfig",
    # Exceptions
    "StyleStoreError",
    "HashCollisionError",
]
