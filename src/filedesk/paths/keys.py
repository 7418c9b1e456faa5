"""Object key construction and public URL handling."""

import re
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote, urlparse

from filedesk.core import get_logger
from filedesk.core.exceptions import ValidationError

from .normalize import to_storage_prefix

logger = get_logger(__name__)

_FILENAME_DISALLOWED = re.compile(r"[^a-zA-Z0-9.\-]")


@dataclass(frozen=True)
class ObjectKey:
    """A generated upload key.

    Attributes:
        key: Full object key (``prefix/filename`` or just ``filename``)
        filename: Generated unique file name ``{millis}-{sanitized name}``
        prefix: Storage prefix the file lives under (empty for bucket root)
    """

    key: str
    filename: str
    prefix: str


def sanitize_filename(filename: str) -> str:
    """Remove every character except ASCII letters, digits, ``.`` and ``-``."""
    return _FILENAME_DISALLOWED.sub("", filename)


def build_object_key(
    folder: Optional[str],
    filename: str,
    timestamp_ms: Optional[int] = None,
) -> ObjectKey:
    """Build a unique object key for an upload.

    The unique part is only the millisecond timestamp plus the sanitized
    original name: two uploads of the same name within the same millisecond
    produce the same key. This is a known limitation.

    Args:
        folder: Raw folder path (normalized here), or None for the bucket root
        filename: Original file name
        timestamp_ms: Unix time in milliseconds; defaults to now

    Returns:
        ObjectKey with the key, generated filename and prefix
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000

    unique_filename = f"{timestamp_ms}-{sanitize_filename(filename)}"
    prefix = to_storage_prefix(folder or "")
    key = f"{prefix}/{unique_filename}" if prefix else unique_filename

    logger.debug("Object key built", key=key, prefix=prefix)
    return ObjectKey(key=key, filename=unique_filename, prefix=prefix)


def public_url(base_url: str, key: str) -> str:
    """Join the public base URL and a key. No encoding is applied."""
    return f"{base_url.rstrip('/')}/{key}"


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def decode_object_key(key: str) -> str:
    """URI-decode a key received verbatim from the store or a client.

    Raises:
        ValidationError: If the decoded key is empty
    """
    decoded = unquote(key or "")
    if not decoded:
        raise ValidationError("Missing object key")
    return decoded


def key_from_public_url(url_or_key: str, public_base_url: Optional[str] = None) -> str:
    """Recover an object key from a previously issued public URL.

    Accepts a full ``http(s)`` URL, whose path becomes the key, or a bare key
    (optionally still prefixed with the public base URL). The base URL only
    matches on a segment boundary. Bare keys such as ``http-exports/a.pdf``
    are not URLs and pass through untouched. The result is URI-decoded.

    Raises:
        ValidationError: If the value is empty or yields an empty key
    """
    if not url_or_key:
        raise ValidationError("Missing file URL or key")

    key = url_or_key
    base = public_base_url.rstrip("/") if public_base_url else ""
    if base and (key == base or key.startswith(f"{base}/")):
        key = key[len(base) :].lstrip("/")
    elif _is_http_url(key):
        key = urlparse(key).path[1:]

    key = unquote(key)
    if not key:
        raise ValidationError(f"Could not derive an object key from '{url_or_key}'")
    return key
