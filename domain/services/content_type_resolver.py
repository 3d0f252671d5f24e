"""Domain service resolving content types from file names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domain.value_objects.content_type_table import CONTENT_TYPE_TABLE

if TYPE_CHECKING:
    from collections.abc import Mapping


def extension_of(file_name: str | None) -> str:
    """Return the lower-cased extension of the final path segment, dot included.

    Returns an empty string when the name has no extension.
    """
    if not file_name:
        return ""
    segment = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    dot = segment.rfind(".")
    if dot < 0:
        return ""
    return segment[dot:].lower()


class ContentTypeResolver:
    """Look up the canonical content type for a file name's extension.

    Absence is a normal outcome: callers use it to decide whether to send a
    content-type header at all, so lookups never raise.
    """

    def __init__(self, table: Mapping[str, str] = CONTENT_TYPE_TABLE) -> None:
        self._table = table

    def try_get_content_type(self, file_name: str | None) -> tuple[bool, str | None]:
        """Return ``(found, content_type)`` for ``file_name``.

        Args:
            file_name: Name or path of the file, e.g. ``"photos/header.JPG"``

        Returns:
            ``(True, mime)`` when the extension is known, ``(False, None)`` otherwise

        """
        content_type = self._table.get(extension_of(file_name))
        if content_type is None:
            return False, None
        return True, content_type

    def get_content_type(self, file_name: str | None) -> str | None:
        """Return the content type for ``file_name`` or None when unknown."""
        _, content_type = self.try_get_content_type(file_name)
        return content_type
