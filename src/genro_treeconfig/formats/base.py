# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FormatAdapter - Abstract base class for configuration text formats."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

Source = Union[str, os.PathLike, IO[Any]]


class FormatAdapter(ABC):
    """Abstract base class for format adapters.

    An adapter turns configuration text into a plain nested dict of
    tables and scalars. It is the only component aware of a concrete
    syntax; Config never looks at the text itself.

    Subclasses implement both entry points and must raise ParseError on
    malformed input:

        class IniAdapter(FormatAdapter):
            name = 'ini'

            def parse_stream(self, stream):
                ...

            def parse_path(self, path):
                ...
    """

    name: str = ''

    @abstractmethod
    def parse_stream(self, stream: IO[Any]) -> dict[str, Any]:
        """Parse an open text or binary stream.

        Raises:
            ParseError: If the content is malformed.
        """

    @abstractmethod
    def parse_path(self, path: Path) -> dict[str, Any]:
        """Parse the file at path.

        Raises:
            ParseError: If the content is malformed.
            OSError: If the file cannot be read.
        """

    def parse(self, source: Source) -> dict[str, Any]:
        """Parse a path or a stream, dispatching on the source type.

        Strings and os.PathLike objects are file paths; anything else must
        be a readable stream.
        """
        if isinstance(source, (str, os.PathLike)):
            return self.parse_path(Path(source))
        if not hasattr(source, 'read'):
            raise TypeError(
                f"source must be a path or a readable stream, not {type(source).__name__}"
            )
        return self.parse_stream(source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
