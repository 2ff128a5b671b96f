# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading and merging of parsed data into a ConfigTable.

A merge is done in two passes: check_merge() walks the incoming tree
against the destination without touching it, then merge_table() applies
it. When the check passes the apply step cannot fail, so a rejected load
leaves the destination unchanged.

Merge rules, for each label of the incoming table:
    - absent in destination: inserted as a copy
    - table over table: merged recursively
    - value over value of the same kind: overwritten (later loads win)
    - anything else: TypeMismatchError
"""

from __future__ import annotations

from typing import Any, Mapping

from .exceptions import TypeMismatchError
from .node import ConfigNode
from .paths import join_path
from .table import ConfigTable


def table_from_mapping(data: Mapping[str, Any]) -> ConfigTable:
    """Build a detached ConfigTable from a nested mapping.

    Args:
        data: Parsed data, as returned by a format adapter.

    Returns:
        A new ConfigTable mirroring data in iteration order.

    Raises:
        InvalidKeyError: If a label is empty or contains a dot.
        UnsupportedValueError: If a value is not a mapping or a scalar of
            a supported kind (int, float, bool, str).
        InvalidValueError: If an integer is outside the 64-bit range.

    Example:
        >>> table = table_from_mapping({'server': {'port': 8080}})
        >>> table.get_node('server.port').value
        8080
    """
    table = ConfigTable()
    _fill_table(table, data)
    return table


def _fill_table(table: ConfigTable, data: Mapping[str, Any]) -> None:
    for label, value in data.items():
        if isinstance(value, Mapping):
            _fill_table(table.add_table(label), value)
        else:
            table.add_value(label, value)


def check_merge(dest: ConfigTable | None, incoming: ConfigTable, _prefix: str = '') -> None:
    """Verify that incoming can be merged into dest.

    Args:
        dest: Destination table, or None when it does not exist yet (any
            incoming tree fits an absent destination).
        incoming: Table to merge.

    Raises:
        TypeMismatchError: If a label exists on both sides with
            different kinds.
    """
    if dest is None:
        return
    for new_node in incoming:
        path = join_path(_prefix, new_node.label)
        cur_node = dest.get(new_node.label)
        if cur_node is None:
            continue
        if cur_node.is_branch and new_node.is_branch:
            check_merge(cur_node.value, new_node.value, path)
        elif cur_node.is_branch or new_node.is_branch or cur_node.kind is not new_node.kind:
            raise TypeMismatchError(
                f"Cannot merge {new_node.describe()} over "
                f"{cur_node.describe()} at '{path}'"
            )


def merge_table(dest: ConfigTable, incoming: ConfigTable) -> None:
    """Overlay incoming onto dest in place.

    Call check_merge() first; this function does not validate kinds.
    """
    for new_node in incoming:
        cur_node = dest.get(new_node.label)
        if cur_node is None:
            if new_node.is_branch:
                child = new_node.value.copy()
                child.parent = dest._insert_node(ConfigNode(new_node.label, child))
            else:
                dest.add_value(new_node.label, new_node.value)
        elif cur_node.is_branch:
            merge_table(cur_node.value, new_node.value)
        else:
            cur_node.value = new_node.value
