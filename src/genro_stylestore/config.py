# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StyleStore configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .hashing import HashFunction, string_hash

ENV_VAR = 'STYLESTORE_ENV'
PRODUCTION = 'production'


@dataclass(frozen=True)
class StyleStoreConfig:
    """Settings for a new StyleStore.

    Attributes:
        hash: Hash function used for every content-addressed id.
        debug: If True, display names are prepended to generated ids.
    """

    hash: HashFunction = string_hash
    debug: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StyleStoreConfig:
        """Build a config whose debug flag follows ``STYLESTORE_ENV``.

        Debug mode is on unless the variable is set to ``production``.

        Args:
            environ: Mapping to read instead of ``os.environ``.
        """
        if environ is None:
            environ = os.environ
        return cls(debug=environ.get(ENV_VAR) != PRODUCTION)
