# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeConfig node classes."""

from __future__ import annotations

from enum import Enum
from typing import Any, TYPE_CHECKING

from .exceptions import InvalidValueError, TypeMismatchError

if TYPE_CHECKING:
    from .table import ConfigTable

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ValueKind(Enum):
    """The closed set of scalar kinds a value node can hold.

    Each member carries the Python type used for its values.

    Example:
        >>> ValueKind.of(int)
        <ValueKind.INTEGER: 'integer'>
        >>> ValueKind.detect(True)
        <ValueKind.BOOLEAN: 'boolean'>
    """

    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'
    STRING = 'string'

    @property
    def pytype(self) -> type:
        """The Python type of values of this kind."""
        return _PYTYPES[self]

    @property
    def default(self) -> Any:
        """Value given to a freshly created node of this kind."""
        return self.pytype()

    @classmethod
    def of(cls, kind: ValueKind | type) -> ValueKind:
        """Normalize a ValueKind or one of int, float, bool, str.

        Raises:
            TypeError: If kind is not one of the supported types.
        """
        if isinstance(kind, ValueKind):
            return kind
        for member, pytype in _PYTYPES.items():
            if kind is pytype:
                return member
        raise TypeError(
            f"kind must be a ValueKind or one of int, float, bool, str, not {kind!r}"
        )

    @classmethod
    def detect(cls, value: Any) -> ValueKind | None:
        """Return the kind of a Python value, or None if unsupported.

        The check is on the exact type, so True is a BOOLEAN and never an
        INTEGER.
        """
        for member, pytype in _PYTYPES.items():
            if type(value) is pytype:
                return member
        return None

    def check(self, value: Any) -> Any:
        """Return value if it is a valid payload for this kind.

        Raises:
            TypeMismatchError: If value is not exactly of this kind.
            InvalidValueError: If an integer is outside the 64-bit range.
        """
        if type(value) is not self.pytype:
            raise TypeMismatchError(
                f"expected {self.value} value, got {type(value).__name__} {value!r}"
            )
        if self is ValueKind.INTEGER and not INT64_MIN <= value <= INT64_MAX:
            raise InvalidValueError(f"integer {value} is outside the 64-bit range")
        return value


_PYTYPES: dict[ValueKind, type] = {
    ValueKind.INTEGER: int,
    ValueKind.FLOAT: float,
    ValueKind.BOOLEAN: bool,
    ValueKind.STRING: str,
}


class ConfigNode:
    """A node in a ConfigTable hierarchy.

    Each node has:
    - label: The node's unique name/key within its parent
    - value: Either a scalar of one ValueKind or a ConfigTable (for children)
    - parent: Reference to the containing ConfigTable

    Example:
        >>> node = ConfigNode('port', 8080)
        >>> node.kind
        <ValueKind.INTEGER: 'integer'>
        >>> node.value
        8080
    """

    __slots__ = ('label', 'value', 'parent')

    def __init__(
        self,
        label: str,
        value: Any,
        parent: ConfigTable | None = None,
    ) -> None:
        """Initialize a ConfigNode.

        Args:
            label: The node's unique name/key.
            value: A scalar of a supported kind, or a ConfigTable.
            parent: The ConfigTable containing this node.
        """
        self.label = label
        self.value = value
        self.parent = parent

    def __repr__(self) -> str:
        from .table import ConfigTable
        value_repr = (
            f"ConfigTable({len(self.value)})"
            if isinstance(self.value, ConfigTable)
            else repr(self.value)
        )
        return f"ConfigNode({self.label!r}, value={value_repr})"

    @property
    def is_branch(self) -> bool:
        """True if this node contains a ConfigTable (has children)."""
        from .table import ConfigTable
        return isinstance(self.value, ConfigTable)

    @property
    def is_leaf(self) -> bool:
        """True if this node contains a scalar value."""
        return not self.is_branch

    @property
    def kind(self) -> ValueKind | None:
        """The ValueKind of a leaf, None for a branch."""
        if self.is_branch:
            return None
        return ValueKind.detect(self.value)

    @property
    def path(self) -> str:
        """Dotted path of this node from the root table."""
        labels = [self.label]
        table = self.parent
        while table is not None and table.parent is not None:
            labels.append(table.parent.label)
            table = table.parent.parent
        return '.'.join(reversed(labels))

    def describe(self) -> str:
        """Short kind description used in error messages."""
        if self.is_branch:
            return 'a table'
        kind = self.kind
        if kind is ValueKind.INTEGER:
            return 'an integer value'
        return f"a {kind.value} value" if kind else 'a value'
