from typing import BinaryIO

from fastapi import UploadFile

from application.ports.posted_file import PostedFile


class UploadFilePostedFile(PostedFile):
    """Expose a multipart ``UploadFile`` through the PostedFile port."""

    def __init__(self, upload: UploadFile) -> None:
        self._upload = upload

    @property
    def file_name(self) -> str:
        return self._upload.filename or ""

    def open_read_stream(self) -> BinaryIO:
        self._upload.file.seek(0)
        return self._upload.file
