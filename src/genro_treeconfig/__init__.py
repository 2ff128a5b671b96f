# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeConfig - Hierarchical, strictly typed configuration store.

Values are addressed by dotted keys ('server.port') in a tree of ordered
tables, loaded from TOML or JSON and layered by successive loads.
"""

__version__ = "0.1.0"

from .config import (
    Config,
    JsonConfig,
    TomlConfig,
    ValueHandle,
    default_config,
    reset_default_config,
)
from .exceptions import (
    ConfigError,
    DuplicateKeyError,
    InvalidKeyError,
    InvalidValueError,
    KeyNotFoundError,
    ParseError,
    TypeMismatchError,
    UnsupportedValueError,
)
from .formats import FormatAdapter, JsonAdapter, TomlAdapter
from .node import ConfigNode, ValueKind
from .table import ConfigTable

__all__ = [
    # Store
    "Config",
    "TomlConfig",
    "JsonConfig",
    "ValueHandle",
    "default_config",
    "reset_default_config",
    # Tree
    "ConfigTable",
    "ConfigNode",
    "ValueKind",
    # Formats
    "FormatAdapter",
    "TomlAdapter",
    "JsonAdapter",
    # Exceptions
    "ConfigError",
    "ParseError",
    "TypeMismatchError",
    "KeyNotFoundError",
    "DuplicateKeyError",
    "InvalidKeyError",
    "UnsupportedValueError",
    "InvalidValueError",
]
