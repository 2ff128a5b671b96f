# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeConfig exceptions."""

from __future__ import annotations


class ConfigError(Exception):
    """Base exception for TreeConfig errors."""

    pass


class ParseError(ConfigError, ValueError):
    """Raised when a format adapter cannot parse its source text."""

    pass


class TypeMismatchError(ConfigError, TypeError):
    """Raised when a node has a different kind than requested.

    Also raised when a value node blocks descent along a dotted path.
    """

    pass


class KeyNotFoundError(ConfigError, KeyError):
    """Raised when reading a path that does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


class DuplicateKeyError(ConfigError, KeyError):
    """Raised when adding a label that already exists in a table."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


class InvalidKeyError(ConfigError, ValueError):
    """Raised for a malformed dotted key, e.g. one with an empty segment."""

    pass


class UnsupportedValueError(ConfigError, TypeError):
    """Raised when parsed data holds a value outside the supported kinds."""

    pass


class InvalidValueError(ConfigError, ValueError):
    """Raised when a value of the right kind is out of range."""

    pass
