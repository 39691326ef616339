# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - content-addressed, reference-counted containers.

The package is organized into:
- core: the Cache merge engine (arena of reference-counted slots)
- containers: Style and Rule, the concrete containers of a style tree

Example:
    >>> from genro_stylestore import string_hash
    >>> from genro_stylestore.store import Cache, Style
    >>> cache = Cache(string_hash)
    >>> style = cache.add(Style('color:red', string_hash))
    >>> style.get_styles()
    '{color:red}'
"""

from .containers import Rule, Style, render_children
from .core import Cache

__all__ = ["Cache", "Rule", "Style", "render_children"]
