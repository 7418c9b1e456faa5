"""Object storage listing operations."""

from .prefix_contents import S3PrefixLister, browse_files, list_files
from .tree import FileEntry, FolderEntry, Listing, RawObject, project_listing

__all__ = [
    "FileEntry",
    "FolderEntry",
    "Listing",
    "RawObject",
    "S3PrefixLister",
    "browse_files",
    "list_files",
    "project_listing",
]
