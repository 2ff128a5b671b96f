# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Format adapters turning configuration text into nested dicts.

Available adapters:
- toml: TOML documents (via tomli)
- json: JSON documents with an object at the top level

Example:
    >>> from genro_treeconfig.formats import TomlAdapter
    >>> TomlAdapter().parse('settings.toml')
"""

from .base import FormatAdapter
from .json import JsonAdapter
from .toml import TomlAdapter

__all__ = [
    'FormatAdapter',
    'JsonAdapter',
    'TomlAdapter',
]
