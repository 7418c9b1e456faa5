"""Tests for folder path normalization and object key construction."""

import re

import pytest

from filedesk.core.exceptions import ValidationError
from filedesk.paths import (
    build_object_key,
    decode_object_key,
    key_from_public_url,
    normalize_path,
    public_url,
    sanitize_filename,
    to_storage_prefix,
)

SAFE_OUTPUT = re.compile(r"^[A-Za-z0-9_/-]*$")

SAMPLE_INPUTS = [
    "",
    "João Silva",
    "Clientes/João Silva/Orçamento 2024",
    "  leading and trailing  ",
    "tabs\tand\nnewlines",
    "weird!@#$%^&*()+=chars",
    "/a//b/",
    "Ünïcödé Çàfé – résumé",
    "日本語 フォルダ",
    "already-clean/segment_1",
]


class TestNormalizePath:
    """Test folder path normalization."""

    def test_strips_accents_and_hyphenates_spaces(self):
        """Accented letters keep their base letter, spaces become hyphens."""
        assert normalize_path("João Silva") == "Joao-Silva"

    def test_empty_string(self):
        """Empty input returns empty output."""
        assert normalize_path("") == ""

    def test_keeps_slashes(self):
        """Slashes are preserved as segment separators."""
        assert (
            normalize_path("Clientes/João Silva/Orçamento 2024")
            == "Clientes/Joao-Silva/Orcamento-2024"
        )

    def test_collapses_whitespace_runs(self):
        """A run of spaces becomes one hyphen."""
        assert normalize_path("a    b") == "a-b"

    def test_removes_disallowed_characters(self):
        """Punctuation outside the whitelist is dropped."""
        assert normalize_path("weird!@#$%^&*()+=chars") == "weirdchars"
        assert normalize_path("report.v2") == "reportv2"

    def test_does_not_trim_slashes(self):
        """Leading, trailing and repeated slashes are left to the caller."""
        assert normalize_path("/a//b/") == "/a//b/"

    def test_non_latin_letters_dropped(self):
        """Letters without an ASCII base are removed entirely."""
        assert normalize_path("日本語 フォルダ") == "-"

    @pytest.mark.parametrize("raw", SAMPLE_INPUTS)
    def test_output_alphabet(self, raw):
        """Output only ever contains letters, digits, '_', '/' and '-'."""
        assert SAFE_OUTPUT.match(normalize_path(raw))

    @pytest.mark.parametrize("raw", SAMPLE_INPUTS)
    def test_idempotent(self, raw):
        """Normalizing twice equals normalizing once."""
        once = normalize_path(raw)
        assert normalize_path(once) == once


class TestToStoragePrefix:
    """Test conversion of folder paths into storage prefixes."""

    def test_trims_and_collapses_separators(self):
        """Empty segments are dropped."""
        assert to_storage_prefix("/Clientes//João Silva/") == "Clientes/Joao-Silva"

    def test_only_separators(self):
        """A path made of slashes maps to the bucket root."""
        assert to_storage_prefix("///") == ""

    def test_segment_that_normalizes_to_nothing(self):
        """Segments emptied by normalization are dropped too."""
        assert to_storage_prefix("clients/!!!/acme") == "clients/acme"

    @pytest.mark.parametrize("raw", SAMPLE_INPUTS)
    def test_idempotent(self, raw):
        """Re-normalizing a prefix returns it unchanged."""
        prefix = to_storage_prefix(raw)
        assert to_storage_prefix(prefix) == prefix
        assert not prefix.startswith("/")
        assert not prefix.endswith("/")


class TestBuildObjectKey:
    """Test upload key generation."""

    def test_key_with_folder(self):
        """The key is prefix, timestamp and sanitized name."""
        object_key = build_object_key(
            "Clientes/João Silva", "Proposta Final.pdf", timestamp_ms=1700000000000
        )
        assert object_key.key == "Clientes/Joao-Silva/1700000000000-PropostaFinal.pdf"
        assert object_key.filename == "1700000000000-PropostaFinal.pdf"
        assert object_key.prefix == "Clientes/Joao-Silva"

    def test_key_without_folder(self):
        """Without a folder the key is just the generated file name."""
        object_key = build_object_key(None, "logo.png", timestamp_ms=42)
        assert object_key.key == "42-logo.png"
        assert object_key.prefix == ""

    def test_folder_normalizing_to_nothing(self):
        """A folder with no usable characters lands in the bucket root."""
        object_key = build_object_key("///", "logo.png", timestamp_ms=42)
        assert object_key.key == "42-logo.png"

    def test_different_names_same_millisecond(self):
        """Different sanitized names do not collide within one millisecond."""
        first = build_object_key("docs", "a.pdf", timestamp_ms=1)
        second = build_object_key("docs", "b.pdf", timestamp_ms=1)
        assert first.key != second.key

    def test_same_name_same_millisecond_collides(self):
        """Identical name and millisecond give the same key (known limitation)."""
        first = build_object_key("docs", "a.pdf", timestamp_ms=1)
        second = build_object_key("docs", "a.pdf", timestamp_ms=1)
        assert first.key == second.key

    def test_default_timestamp_is_millis(self):
        """The default timestamp is the current Unix time in milliseconds."""
        object_key = build_object_key(None, "x.txt")
        timestamp = int(object_key.filename.split("-", 1)[0])
        assert timestamp > 1_600_000_000_000


class TestSanitizeFilename:
    """Test original file name sanitization."""

    def test_keeps_extension_dot(self):
        """Dots and hyphens survive, everything else outside ASCII goes."""
        assert sanitize_filename("Relatório Q1 (final)-v2.pdf") == "RelatrioQ1final-v2.pdf"


class TestPublicUrls:
    """Test public URL construction and key recovery."""

    def test_public_url(self):
        """Base and key are joined with a single slash."""
        assert public_url("https://files.example.com/", "a/b.png") == (
            "https://files.example.com/a/b.png"
        )

    def test_key_from_full_url(self):
        """The URL path without its leading slash is the key."""
        assert (
            key_from_public_url("https://pub.example.com/clients/acme/1-logo.png")
            == "clients/acme/1-logo.png"
        )

    def test_key_from_url_is_decoded(self):
        """Percent-encoded characters are decoded."""
        assert (
            key_from_public_url("https://pub.example.com/old%20files/a%20b.png")
            == "old files/a b.png"
        )

    def test_key_from_base_with_path(self):
        """A configured base URL with a path component is stripped whole."""
        assert (
            key_from_public_url(
                "https://cdn.example.com/bucket/clients/1-a.png",
                "https://cdn.example.com/bucket",
            )
            == "clients/1-a.png"
        )

    def test_bare_key_passes_through(self):
        """A bare key is only decoded."""
        assert key_from_public_url("clients/acme/1-logo.png") == "clients/acme/1-logo.png"

    def test_empty_value_rejected(self):
        """An empty URL or key is a validation error."""
        with pytest.raises(ValidationError):
            key_from_public_url("")

    def test_url_without_path_rejected(self):
        """A URL pointing at the site root has no key."""
        with pytest.raises(ValidationError):
            key_from_public_url("https://pub.example.com/")

    def test_bare_key_starting_with_http(self):
        """Keys that merely begin with 'http' are not treated as URLs."""
        assert key_from_public_url("http-exports/1-a.pdf") == "http-exports/1-a.pdf"
        assert key_from_public_url("httpdocs/1-a.pdf") == "httpdocs/1-a.pdf"

    def test_normalized_http_folder_round_trips(self):
        """A folder the normalizer produces survives key recovery unchanged."""
        key = f"{to_storage_prefix('http exports')}/1-a.pdf"
        assert key == "http-exports/1-a.pdf"
        assert key_from_public_url(key, "https://files.example.com") == key

    def test_scheme_without_host_is_not_a_url(self):
        """An http scheme with no host is kept as a key."""
        assert key_from_public_url("http:docs/a.pdf") == "http:docs/a.pdf"

    def test_base_matches_on_segment_boundary(self):
        """Sharing only a string prefix with the base is not a base match."""
        assert (
            key_from_public_url(
                "https://cdn.example.com/bucket-old/a.png",
                "https://cdn.example.com/bucket",
            )
            == "bucket-old/a.png"
        )

    def test_base_with_trailing_slash(self):
        """A configured base ending in '/' still matches."""
        assert (
            key_from_public_url(
                "https://files.example.com/docs/a.png", "https://files.example.com/"
            )
            == "docs/a.png"
        )

    def test_value_equal_to_base_rejected(self):
        """The base URL on its own names no object."""
        with pytest.raises(ValidationError):
            key_from_public_url(
                "https://files.example.com", "https://files.example.com"
            )


class TestDecodeObjectKey:
    """Test decoding of explicit object keys."""

    def test_decodes_without_url_handling(self):
        """Explicit keys are only URI-decoded."""
        assert decode_object_key("httpdocs/a%20b.pdf") == "httpdocs/a b.pdf"

    def test_empty_key_rejected(self):
        """An empty key is a validation error."""
        with pytest.raises(ValidationError):
            decode_object_key("")
