"""Path normalization and object key construction."""

from .keys import (
    ObjectKey,
    build_object_key,
    decode_object_key,
    key_from_public_url,
    public_url,
    sanitize_filename,
)
from .normalize import normalize_path, to_storage_prefix

__all__ = [
    "ObjectKey",
    "build_object_key",
    "decode_object_key",
    "key_from_public_url",
    "normalize_path",
    "public_url",
    "sanitize_filename",
    "to_storage_prefix",
]
