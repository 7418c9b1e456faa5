"""Normalization of user-supplied folder paths into storage key segments.

Folder names typed by users (client and project names, mostly) may carry
accents, spaces and punctuation. Object keys built from them must stay
ASCII-safe so that public URLs can be formed by plain concatenation:

    >>> normalize_path("Clientes/João Silva")
    'Clientes/Joao-Silva'
    >>> to_storage_prefix("/Clientes//João Silva/")
    'Clientes/Joao-Silva'
"""

import re
import unicodedata

_DISALLOWED = re.compile(r"[^A-Za-z0-9_/ \-]")
_WHITESPACE = re.compile(r"\s+")


def _strip_diacritics(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_path(raw_path: str) -> str:
    """Convert a raw folder path into a safe object-storage key segment.

    Accents are removed (keeping the base letter), every character outside
    letters, digits, ``-``, ``_``, ``/`` and space is dropped, and whitespace
    runs become a single ``-``. Slashes are kept as segment separators;
    leading, trailing and repeated slashes are left for the caller (see
    :func:`to_storage_prefix`).

    Args:
        raw_path: Folder path as entered by the user (may be empty)

    Returns:
        String containing only ``[A-Za-z0-9_/-]``
    """
    if not raw_path:
        return ""

    cleaned = _DISALLOWED.sub("", _strip_diacritics(raw_path))
    return _WHITESPACE.sub("-", cleaned)


def to_storage_prefix(raw_path: str) -> str:
    """Normalize a folder path and drop empty segments.

    The result has no leading or trailing separator and no empty segments,
    and may be empty.
    """
    segments = normalize_path(raw_path).split("/")
    return "/".join(segment for segment in segments if segment)
