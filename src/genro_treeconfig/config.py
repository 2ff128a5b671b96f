# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Config - A hierarchical store of typed configuration values.

Keys are hierarchical and give the complete path to their target value
using dotted components, e.g. ``'table.nested.value'``. Every value has
one of four kinds (integer, float, boolean, string) fixed when it is
created; reads and writes with another kind are rejected rather than
coerced.

Example:
    Loading and reading::

        config = TomlConfig('app.toml')
        config.load('local.toml')           # later loads win
        config.load(stream, root='plugins') # mount under a table

        port = config.read('server.port', int)

    Writing::

        config.write('server.port', int).value = 9090
        config.set('server.host', 'localhost')
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .exceptions import KeyNotFoundError, TypeMismatchError
from .formats import FormatAdapter, JsonAdapter, TomlAdapter
from .formats.base import Source
from .loading import check_merge, merge_table, table_from_mapping
from .node import ConfigNode, ValueKind
from .paths import ResolveMode, split_path
from .table import ConfigTable

logger = logging.getLogger(__name__)


class ValueHandle:
    """Writable handle on a value node of a Config.

    Returned by Config.write(). Assigning ``handle.value`` updates the
    stored value in place after checking its kind. A handle must not be
    kept across a later load() or write() that may replace the subtree it
    points into.

    Example:
        >>> handle = config.write('server.port', int)
        >>> handle.value = 8080
        >>> config.read('server.port', int)
        8080
    """

    __slots__ = ('key', 'kind', '_node')

    def __init__(self, key: str, kind: ValueKind, node: ConfigNode) -> None:
        self.key = key
        self.kind = kind
        self._node = node

    def __repr__(self) -> str:
        return f"ValueHandle({self.key!r}, {self.kind.value}, value={self._node.value!r})"

    @property
    def value(self) -> Any:
        return self._node.value

    @value.setter
    def value(self, value: Any) -> None:
        self._node.value = self.kind.check(value)


class Config:
    """Store configuration data parsed by a FormatAdapter.

    Config provides:
    - load(source, root): merge a file or stream into the store
    - read(key, kind) / get(key, kind, default): typed reads
    - write(key, kind) / set(key, value): typed write-or-create
    - has_key(key) / key in config: existence test

    Args:
        adapter: FormatAdapter used by load().
        source: Optional path or stream loaded at construction.
        root: Where to place the data of source.
    """

    __slots__ = ('adapter', '_tree')

    def __init__(
        self,
        adapter: FormatAdapter,
        source: Source | None = None,
        root: str = '',
    ) -> None:
        self.adapter = adapter
        self._tree = ConfigTable()
        if source is not None:
            self.load(source, root)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tree.keys()})"

    def __len__(self) -> int:
        """Return the number of top-level entries."""
        return len(self._tree)

    def __iter__(self) -> Iterator[ConfigNode]:
        """Iterate over top-level nodes in insertion order."""
        return iter(self._tree)

    def __contains__(self, key: str) -> bool:
        return self.has_key(key)

    @property
    def tree(self) -> ConfigTable:
        """The root table."""
        return self._tree

    # ==================== Loading ====================

    def load(self, source: Source, root: str = '') -> None:
        """Load config data from a file path or an input stream.

        The parsed data is merged into the table at root, which is created
        if needed. The whole merge is validated first, so on error the
        store is left unchanged.

        Args:
            source: File path (str or os.PathLike) or readable stream.
            root: Dotted key of the table receiving the data.

        Raises:
            ParseError: If the source is malformed.
            InvalidKeyError: If root is malformed or a parsed label cannot
                be addressed.
            TypeMismatchError: If the data conflicts with existing nodes.
            UnsupportedValueError: If the data holds values of other kinds.
        """
        split_path(root)
        incoming = table_from_mapping(self.adapter.parse(source))
        try:
            dest = self._tree.get_table(root, ResolveMode.READ)
        except KeyNotFoundError:
            dest = None
        check_merge(dest, incoming)

        dest = self._tree.get_table(root, ResolveMode.MERGE)
        merge_table(dest, incoming)
        logger.debug(
            "Loaded %d %s entries from %r at root %r",
            len(incoming), self.adapter.name, source, root,
        )

    # ==================== Typed Access ====================

    def write(self, key: str, kind: ValueKind | type) -> ValueHandle:
        """Writeable access to a value.

        A new value node is created if it does not exist, including all
        parent tables as necessary, holding the default of its kind. An
        existing value must already have the requested kind.

        Args:
            key: Dotted key.
            kind: ValueKind, or one of int, float, bool, str.

        Returns:
            ValueHandle on the node.

        Raises:
            TypeMismatchError: If a node of another kind exists at key or
                a value node blocks the path.
            InvalidKeyError: If key is malformed.
        """
        kind = ValueKind.of(kind)
        segments = split_path(key)
        if not segments:
            raise TypeMismatchError("The root is a table, not a value")
        parent_table, label = self._tree._htraverse(segments, ResolveMode.WRITE)
        node = parent_table.get(label)
        if node is None:
            node = parent_table.add_value(label, kind.default)
        elif node.kind is not kind:
            raise TypeMismatchError(
                f"'{key}' is {node.describe()}, expected {kind.value}"
            )
        return ValueHandle(key, kind, node)

    def set(self, key: str, value: Any) -> ValueHandle:
        """Write value at key, inferring its kind from its type.

        Raises:
            TypeError: If value is not an int, float, bool, or str.
            TypeMismatchError: If a node of another kind exists at key.
            InvalidValueError: If an integer is outside the 64-bit range.
        """
        kind = ValueKind.detect(value)
        if kind is None:
            raise TypeError(f"Unsupported value type {type(value).__name__}")
        kind.check(value)
        handle = self.write(key, kind)
        handle.value = value
        return handle

    def read(self, key: str, kind: ValueKind | type) -> Any:
        """Read-only access to a value.

        Args:
            key: Dotted key.
            kind: ValueKind, or one of int, float, bool, str.

        Raises:
            KeyNotFoundError: If the path does not exist.
            TypeMismatchError: If the target is a table or a value of
                another kind.
            InvalidKeyError: If key is malformed.
        """
        kind = ValueKind.of(kind)
        if not split_path(key):
            raise TypeMismatchError("The root is a table, not a value")
        node = self._tree.get_node(key)
        if node.kind is not kind:
            raise TypeMismatchError(
                f"'{key}' is {node.describe()}, expected {kind.value}"
            )
        return node.value

    def get(self, key: str, kind: ValueKind | type, default: Any = None) -> Any:
        """Like read(), but return default when the path does not exist."""
        try:
            return self.read(key, kind)
        except KeyNotFoundError:
            return default

    def has_key(self, key: str) -> bool:
        """Test if key exists. Never raises; the empty key is the root."""
        if key == '':
            return True
        return self._tree.find_node(key) is not None

    # ==================== Inspection ====================

    def keys(self) -> list[str]:
        """Return top-level labels in insertion order."""
        return self._tree.keys()

    def walk(self) -> Iterator[tuple[str, ConfigNode]]:
        """Yield (dotted_path, node) for every node, depth-first."""
        return self._tree.walk()

    def as_dict(self) -> dict[str, Any]:
        """Convert the whole store to nested plain dicts."""
        return self._tree.as_dict()

    def clear(self) -> None:
        """Remove all data."""
        self._tree.clear()


class TomlConfig(Config):
    """Store TOML config data.

    Example:
        >>> config = TomlConfig(io.StringIO('[server]\\nport = 8080'))
        >>> config.read('server.port', int)
        8080
    """

    __slots__ = ()

    def __init__(self, source: Source | None = None, root: str = '') -> None:
        super().__init__(TomlAdapter(), source, root)


class JsonConfig(Config):
    """Store JSON config data."""

    __slots__ = ()

    def __init__(self, source: Source | None = None, root: str = '') -> None:
        super().__init__(JsonAdapter(), source, root)


_default_config: Config | None = None


def default_config() -> Config:
    """Return the process-wide TomlConfig, creating it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = TomlConfig()
    return _default_config


def reset_default_config() -> None:
    """Discard the process-wide config; the next call creates a new one."""
    global _default_config
    _default_config = None
