"""Projection of a delimiter listing into a folder/file view.

Object stores have no directories: a "folder" here is only the common prefix
reported by a delimiter listing, and is never stored or cached.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Literal, Optional, TypedDict, Union

from filedesk.paths import public_url as build_public_url

DELIMITER = "/"


class RawObject(TypedDict):
    """One entry of a ``list_objects_v2`` ``Contents`` page."""

    Key: str
    Size: int
    LastModified: datetime


@dataclass(frozen=True)
class FolderEntry:
    """A synthesized folder.

    Attributes:
        name: Folder name relative to the queried prefix, no trailing slash
        full_key: Common prefix as returned by the store, trailing slash kept
            so it can be used directly as the next query prefix
    """

    name: str
    full_key: str

    @property
    def kind(self) -> Literal["folder"]:
        return "folder"


@dataclass(frozen=True)
class FileEntry:
    """A stored object visible under the queried prefix."""

    name: str
    full_key: str
    size: int
    last_modified: Optional[datetime]
    public_url: str

    @property
    def kind(self) -> Literal["file"]:
        return "file"


ListingEntry = Union[FolderEntry, FileEntry]


@dataclass(frozen=True)
class Listing:
    """Immediate child folders and files of a prefix.

    ``error`` is only set by the degraded result of :func:`browse_files`;
    such a listing is always empty.
    """

    folders: list[FolderEntry] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def entries(self) -> list[ListingEntry]:
        """Folders followed by files."""
        return [*self.folders, *self.files]


def _strip_prefix(value: str, prefix: str) -> str:
    if prefix and value.startswith(prefix):
        return value[len(prefix) :]
    return value


def project_listing(
    prefix: str,
    raw_entries: Iterable[RawObject],
    common_prefixes: Iterable[str],
    public_base_url: str = "",
) -> Listing:
    """Convert a flat listing response into folder and file entries.

    Order is preserved exactly as returned by the store. The zero-byte
    placeholder object whose key equals the prefix (an explicitly created
    empty folder) is not a file and is dropped. For recursive listings the
    caller passes no common prefixes, so every key at any depth comes back
    as a file.

    Args:
        prefix: Queried prefix
        raw_entries: ``Contents`` items (``Key``, ``Size``, ``LastModified``)
        common_prefixes: ``CommonPrefixes`` values as plain strings
        public_base_url: Base URL prepended to keys for public links

    Returns:
        Listing with folders and files
    """
    files = []
    for obj in raw_entries:
        key = obj["Key"]
        name = _strip_prefix(key, prefix)
        if not name:
            continue
        files.append(
            FileEntry(
                name=name,
                full_key=key,
                size=obj.get("Size", 0),
                last_modified=obj.get("LastModified"),
                public_url=build_public_url(public_base_url, key),
            )
        )

    folders = [
        FolderEntry(
            name=_strip_prefix(common_prefix, prefix).removesuffix(DELIMITER),
            full_key=common_prefix,
        )
        for common_prefix in common_prefixes
    ]

    return Listing(folders=folders, files=files)
