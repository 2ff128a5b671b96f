# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON format adapter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import IO, Any

from ..exceptions import ParseError
from .base import FormatAdapter


class JsonAdapter(FormatAdapter):
    """Parse JSON documents whose top level is an object."""

    name = 'json'

    def parse_stream(self, stream: IO[Any]) -> dict[str, Any]:
        return self._loads(stream.read())

    def parse_path(self, path: Path) -> dict[str, Any]:
        with open(path, 'rb') as f:
            return self._loads(f.read(), path)

    def _loads(self, content: str | bytes, path: Path | None = None) -> dict[str, Any]:
        where = f" in {path}" if path is not None else ''
        try:
            data = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseError(f"Invalid JSON{where}: {exc}") from exc
        if not isinstance(data, dict):
            raise ParseError(
                f"JSON document{where} must be an object, not {type(data).__name__}"
            )
        return data
