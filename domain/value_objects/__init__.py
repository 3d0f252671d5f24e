from .content_type_table import CONTENT_TYPE_TABLE
from .object_location import ObjectLocation
from .object_metadata import ObjectMetadata
from .signed_url_permission import SignedUrlPermission
from .storage_options import StorageOptions

__all__ = [
    "CONTENT_TYPE_TABLE",
    "ObjectLocation",
    "ObjectMetadata",
    "SignedUrlPermission",
    "StorageOptions",
]
