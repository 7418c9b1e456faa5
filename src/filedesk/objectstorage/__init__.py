"""Object storage operations for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .deletion import delete_object
from .listing import (
    FileEntry,
    FolderEntry,
    Listing,
    S3PrefixLister,
    browse_files,
    list_files,
    project_listing,
)
from .uploads import UploadAuthorization, create_upload_authorization

__all__ = [
    "FileEntry",
    "FolderEntry",
    "Listing",
    "S3ClientConfig",
    "S3ClientManager",
    "S3PrefixLister",
    "UploadAuthorization",
    "browse_files",
    "create_upload_authorization",
    "delete_object",
    "list_files",
    "project_listing",
]
