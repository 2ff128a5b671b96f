# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TOML format adapter, backed by tomli."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

import tomli

from ..exceptions import ParseError
from .base import FormatAdapter


class TomlAdapter(FormatAdapter):
    """Parse TOML documents into nested dicts.

    Example:
        >>> TomlAdapter().parse(io.StringIO('[server]\\nport = 8080'))
        {'server': {'port': 8080}}
    """

    name = 'toml'

    def parse_stream(self, stream: IO[Any]) -> dict[str, Any]:
        content = stream.read()
        try:
            if isinstance(content, bytes):
                content = content.decode('utf-8')
            return tomli.loads(content)
        except (tomli.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ParseError(f"Invalid TOML: {exc}") from exc

    def parse_path(self, path: Path) -> dict[str, Any]:
        with open(path, 'rb') as f:
            try:
                return tomli.load(f)
            except (tomli.TOMLDecodeError, UnicodeDecodeError) as exc:
                raise ParseError(f"Invalid TOML in {path}: {exc}") from exc
