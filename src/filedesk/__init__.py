"""Object-storage file manager core for a business-management portal.

This package turns user-typed folder names into safe object keys, issues
presigned upload URLs, deletes stored files and renders delimiter listings of
an S3-compatible bucket (Cloudflare R2, MinIO, AWS S3) as folders and files.

Recommended Usage:
    >>> from filedesk import list_files, to_storage_prefix
    >>> listing = list_files(to_storage_prefix("Clientes/João Silva") + "/")
    >>> [folder.name for folder in listing.folders]

Storage is configured through ``FILEDESK_STORAGE_*`` environment variables;
see :class:`filedesk.core.config.StorageSettings`.
"""

__version__ = "0.1.0"

from .core.config import StorageSettings
from .objectstorage import (
    FileEntry,
    FolderEntry,
    Listing,
    S3ClientConfig,
    UploadAuthorization,
    browse_files,
    create_upload_authorization,
    delete_object,
    list_files,
    project_listing,
)
from .paths import (
    build_object_key,
    key_from_public_url,
    normalize_path,
    to_storage_prefix,
)
from .schemas import DeleteRequest, UploadRequest, parse_request

__all__ = [
    # Configuration
    "StorageSettings",
    "S3ClientConfig",
    # Paths and keys
    "build_object_key",
    "key_from_public_url",
    "normalize_path",
    "to_storage_prefix",
    # Listing
    "FileEntry",
    "FolderEntry",
    "Listing",
    "browse_files",
    "list_files",
    "project_listing",
    # Uploads and deletion
    "DeleteRequest",
    "UploadAuthorization",
    "UploadRequest",
    "create_upload_authorization",
    "delete_object",
    "parse_request",
]
