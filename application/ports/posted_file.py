from typing import BinaryIO, Protocol


class PostedFile(Protocol):
    """A file posted by a client, e.g. one part of a multipart form."""

    @property
    def file_name(self) -> str: ...

    def open_read_stream(self) -> BinaryIO: ...
