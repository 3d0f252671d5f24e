from enum import Enum


class SignedUrlPermission(str, Enum):
    """Access scope embedded in a signed URL."""

    READ = "READ"
    WRITE = "WRITE"
    DELETE = "DELETE"
