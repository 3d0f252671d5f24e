"""Domain service translating between full object URLs and container paths."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from domain.exceptions import InvalidArgumentError
from domain.value_objects.object_location import ObjectLocation

if TYPE_CHECKING:
    from domain.value_objects.storage_options import StorageOptions


class ObjectPathResolver:
    """Recover container-relative object paths from full download URLs.

    Matching is plain substring search for the container segment, which
    tolerates raw backend URLs as well as CDN-fronted URLs with arbitrary
    prefixes. A container name that also appears earlier in the URL (for
    example inside the host name followed by '/') matches there first; this
    ambiguity is accepted rather than parsing URLs against a template.
    """

    def __init__(self, options: StorageOptions) -> None:
        self.root_path = options.root_client_path

    @staticmethod
    def get_object_name(container: str, full_path: str) -> str | None:
        """Return the object path that follows ``<container>/`` in ``full_path``.

        The container segment is located case-insensitively. When it is
        missing, or when nothing precedes it, the name cannot be resolved and
        None is returned.

        Args:
            container: Container the object should be found in
            full_path: Full download path of the object

        Returns:
            Object path inside the container, or None if the container could
            not be located in the path

        """
        match = re.search(re.escape(f"{container}/"), full_path, flags=re.IGNORECASE)
        if match is None or match.start() == 0:
            return None
        return full_path[match.end() :]

    def decompose_url(self, full_path: str) -> ObjectLocation:
        """Split a full object URL into root, container and object path.

        Args:
            full_path: Full URL of the object, beginning with the root client path

        Returns:
            The decomposed ObjectLocation

        Raises:
            InvalidArgumentError: If the URL does not begin with the configured
                root, or has no ``container/object`` part after it

        """
        if not full_path.startswith(self.root_path):
            msg = f"Provided URI was not of the expected root path: {full_path}"
            raise InvalidArgumentError(msg)

        remainder = full_path[len(self.root_path) :]
        if not remainder.startswith("/"):
            msg = f"Provided URI has no container after the root path: {full_path}"
            raise InvalidArgumentError(msg)

        container, separator, object_path = remainder[1:].partition("/")
        if not separator or not container or not object_path:
            msg = f"Provided URI does not name an object inside a container: {full_path}"
            raise InvalidArgumentError(msg)

        return ObjectLocation(
            root_url=self.root_path,
            container=container,
            object_path=object_path,
        )
