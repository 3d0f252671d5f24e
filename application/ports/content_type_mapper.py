from typing import Protocol


class ContentTypeMapper(Protocol):
    def try_get_content_type(self, file_name: str | None) -> tuple[bool, str | None]: ...
