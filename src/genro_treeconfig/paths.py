# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted path utilities.

A key such as ``'server.http.port'`` addresses a node by walking the table
children ``server``, then ``http``, then ``port``. There is no escaping for
literal dots inside a label.
"""

from __future__ import annotations

from enum import Enum

from .exceptions import InvalidKeyError

KEY_DELIMITER = '.'


class ResolveMode(Enum):
    """How a path walk treats missing or non-table intermediate nodes.

    - READ: missing segment raises KeyNotFoundError, leaf raises TypeMismatchError
    - WRITE: missing segment creates a table, leaf raises TypeMismatchError
    - MERGE: same as WRITE, used when attaching loaded data
    - PROBE: never raises, the walk returns None instead
    """

    READ = 'read'
    WRITE = 'write'
    MERGE = 'merge'
    PROBE = 'probe'

    @property
    def autocreate(self) -> bool:
        return self in (ResolveMode.WRITE, ResolveMode.MERGE)


def split_path(key: str) -> tuple[str, ...]:
    """Split a dotted key into its segments.

    Args:
        key: Dotted key. The empty string addresses the root.

    Returns:
        Tuple of non-empty segments, empty for the root.

    Raises:
        InvalidKeyError: If key is not a string or has an empty segment.

    Example:
        >>> split_path('a.b.c')
        ('a', 'b', 'c')
        >>> split_path('')
        ()
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a string, not {type(key).__name__}")
    if not key:
        return ()
    segments = tuple(key.split(KEY_DELIMITER))
    if '' in segments:
        raise InvalidKeyError(f"Empty segment in key '{key}'")
    return segments


def join_path(*segments: str) -> str:
    """Join segments into a dotted key, skipping empty parts."""
    return KEY_DELIMITER.join(s for s in segments if s)


def check_label(label: str) -> str:
    """Return label if it can be addressed by a dotted key.

    Raises:
        InvalidKeyError: If label is empty, not a string, or contains a dot.
    """
    if not isinstance(label, str) or not label:
        raise InvalidKeyError(f"Invalid label {label!r}")
    if KEY_DELIMITER in label:
        raise InvalidKeyError(
            f"Label '{label}' contains '{KEY_DELIMITER}' and cannot be addressed"
        )
    return label
