# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigTable - An ordered table of configuration nodes.

This module provides the ConfigTable class, the tree structure behind a
Config store. A table maps unique labels to ConfigNode instances and keeps
them in insertion order. Nested tables are stored as the value of a branch
node, so a whole configuration is a single tree rooted at one table.

Path Syntax:
    - Dotted paths: 'server.http.port'
    - Empty path: the table itself

Example:
    >>> table = ConfigTable()
    >>> table.add_value('name', 'MyApp')
    >>> table.add_table('server').add_value('port', 8080)
    >>> table.get_node('server.port').value
    8080
"""

from __future__ import annotations

from typing import Any, Iterator

from .exceptions import (
    DuplicateKeyError,
    KeyNotFoundError,
    TypeMismatchError,
    UnsupportedValueError,
)
from .node import ConfigNode, ValueKind
from .paths import ResolveMode, check_label, join_path, split_path


class ConfigTable:
    """An insertion-ordered mapping of labels to ConfigNode.

    The internal storage uses a dict for O(1) lookup plus a list that
    keeps insertion order for iteration.

    Attributes:
        parent: The ConfigNode that contains this table as its value,
            or None if this is a root table.
    """

    __slots__ = ('_nodes', '_order', 'parent')

    def __init__(self, parent: ConfigNode | None = None) -> None:
        """Initialize an empty ConfigTable.

        Args:
            parent: The ConfigNode that contains this table as its value.
        """
        self._nodes: dict[str, ConfigNode] = {}
        self._order: list[ConfigNode] = []
        self.parent = parent

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing node labels."""
        return f"ConfigTable({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of direct children in this table."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[ConfigNode]:
        """Iterate over direct child nodes in insertion order."""
        return iter(self._order)

    def __contains__(self, label: str) -> bool:
        """Check if a label or dotted path exists."""
        return self.find_node(label) is not None

    @property
    def path(self) -> str:
        """Dotted path of this table from the root, empty for the root."""
        return self.parent.path if self.parent is not None else ''

    # ==================== Node Insertion ====================

    def _insert_node(self, node: ConfigNode) -> ConfigNode:
        """Append a node to both _nodes dict and _order list."""
        node.parent = self
        self._nodes[node.label] = node
        self._order.append(node)
        return node

    def _check_new_label(self, label: str) -> None:
        check_label(label)
        if label in self._nodes:
            raise DuplicateKeyError(
                f"Label '{join_path(self.path, label)}' already exists"
            )

    def add_table(self, label: str) -> ConfigTable:
        """Create an empty child table and return it.

        Raises:
            DuplicateKeyError: If label already exists in this table.
            InvalidKeyError: If label cannot be addressed.
        """
        self._check_new_label(label)
        child = ConfigTable()
        node = self._insert_node(ConfigNode(label, child))
        child.parent = node
        return child

    def add_value(self, label: str, value: Any) -> ConfigNode:
        """Create a leaf holding a scalar and return its node.

        Raises:
            DuplicateKeyError: If label already exists in this table.
            InvalidKeyError: If label cannot be addressed.
            UnsupportedValueError: If value is not an int, float, bool or str.
            InvalidValueError: If an integer is outside the 64-bit range.
        """
        self._check_new_label(label)
        kind = ValueKind.detect(value)
        if kind is None:
            raise UnsupportedValueError(
                f"Unsupported {type(value).__name__} value at "
                f"'{join_path(self.path, label)}'"
            )
        return self._insert_node(ConfigNode(label, kind.check(value)))

    # ==================== Path Resolution ====================

    def _htraverse(
        self, segments: tuple[str, ...], mode: ResolveMode = ResolveMode.READ
    ) -> tuple[ConfigTable, str] | None:
        """Walk all segments but the last, according to mode.

        Args:
            segments: Path segments as returned by split_path. Must not
                be empty.
            mode: ResolveMode controlling creation and failure.

        Returns:
            Tuple of (parent_table, final_label), or None in PROBE mode
            when the walk cannot complete.

        Raises:
            KeyNotFoundError: READ mode and a segment is missing.
            TypeMismatchError: Non-PROBE mode and a leaf blocks descent.
        """
        current = self

        for i, part in enumerate(segments[:-1]):
            node = current._nodes.get(part)
            if node is None:
                if mode.autocreate:
                    current = current.add_table(part)
                    continue
                if mode is ResolveMode.PROBE:
                    return None
                raise KeyNotFoundError(
                    f"Path segment '{join_path(*segments[:i + 1])}' not found"
                )

            if not node.is_branch:
                if mode is ResolveMode.PROBE:
                    return None
                remaining = join_path(*segments[i + 1:])
                raise TypeMismatchError(
                    f"'{node.path}' is {node.describe()}, cannot access '{remaining}'"
                )

            current = node.value

        return current, segments[-1]

    def get_node(self, path: str) -> ConfigNode:
        """Get node at the given dotted path.

        Raises:
            KeyNotFoundError: If any segment is missing.
            TypeMismatchError: If a leaf blocks the path.
            InvalidKeyError: If the path is malformed or empty.
        """
        segments = split_path(path)
        if not segments:
            raise KeyNotFoundError("Empty path has no node")
        parent_table, label = self._htraverse(segments, ResolveMode.READ)
        try:
            return parent_table._nodes[label]
        except KeyError:
            raise KeyNotFoundError(f"Path segment '{path}' not found") from None

    def find_node(self, path: str) -> ConfigNode | None:
        """Get node at path, or None if it cannot be reached.

        Never raises, malformed paths also return None.
        """
        try:
            segments = split_path(path)
        except ValueError:
            return None
        if not segments:
            return None
        resolved = self._htraverse(segments, ResolveMode.PROBE)
        if resolved is None:
            return None
        parent_table, label = resolved
        return parent_table._nodes.get(label)

    def get_table(self, path: str, mode: ResolveMode = ResolveMode.READ) -> ConfigTable | None:
        """Get the table at path, creating it when mode allows.

        An empty path returns this table.

        Returns:
            The ConfigTable, or None in PROBE mode when it does not exist.

        Raises:
            KeyNotFoundError: READ mode and the table is missing.
            TypeMismatchError: Non-PROBE mode and a leaf occupies the path.
        """
        segments = split_path(path)
        if not segments:
            return self
        resolved = self._htraverse(segments, mode)
        if resolved is None:
            return None
        parent_table, label = resolved
        node = parent_table._nodes.get(label)
        if node is None:
            if mode.autocreate:
                return parent_table.add_table(label)
            if mode is ResolveMode.PROBE:
                return None
            raise KeyNotFoundError(f"Path segment '{path}' not found")
        if not node.is_branch:
            if mode is ResolveMode.PROBE:
                return None
            raise TypeMismatchError(f"'{path}' is {node.describe()}, not a table")
        return node.value

    # ==================== Iteration ====================

    def iter_keys(self) -> Iterator[str]:
        """Yield labels at this level in insertion order."""
        for n in self._order:
            yield n.label

    def keys(self) -> list[str]:
        """Return list of labels at this level in insertion order."""
        return list(self.iter_keys())

    def get(self, label: str, default: Any = None) -> ConfigNode | None:
        """Get node by label at this level, with default.

        Unlike get_node(), this only looks at direct children (no path traversal).
        """
        return self._nodes.get(label, default)

    # ==================== Walk ====================

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, ConfigNode]]:
        """Walk the tree depth-first, yielding (path, node) pairs.

        Example:
            >>> for path, node in table.walk():
            ...     print(path, node.value)
        """
        for node in self._order:
            path = join_path(_prefix, node.label)
            yield path, node
            if node.is_branch:
                yield from node.value.walk(path)

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to plain nested dict (recursive), preserving order."""
        result: dict[str, Any] = {}
        for node in self._order:
            if node.is_branch:
                result[node.label] = node.value.as_dict()
            else:
                result[node.label] = node.value
        return result

    def copy(self) -> ConfigTable:
        """Return a detached deep copy of this table."""
        clone = ConfigTable()
        for node in self._order:
            if node.is_branch:
                child = node.value.copy()
                child.parent = clone._insert_node(ConfigNode(node.label, child))
            else:
                clone._insert_node(ConfigNode(node.label, node.value))
        return clone

    def clear(self) -> None:
        """Remove all nodes from this table."""
        self._nodes.clear()
        self._order.clear()
