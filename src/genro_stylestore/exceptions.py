# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StyleStore exceptions."""

from __future__ import annotations

from typing import Any


class StyleStoreError(Exception):
    """Base exception for StyleStore errors."""

    pass


class HashCollisionError(StyleStoreError):
    """Raised when two different contents hash to the same node id.

    Attributes:
        incoming: The node being added.
        existing: The node already stored under the same id.
    """

    def __init__(self, incoming: Any, existing: Any) -> None:
        self.incoming = incoming
        self.existing = existing
        super().__init__(
            f"Hash collision: {incoming.get_styles()} === {existing.get_styles()}"
        )
