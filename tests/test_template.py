"""Tests for digest computation and filename templating."""

from __future__ import annotations

import hashlib

import pytest

from bundlehash.hasher import Hasher
from bundlehash.template import format_filename, has_template, truncate_digest

SHA1_EMPTY = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
MD5_EMPTY = "d41d8cd98f00b204e9800998ecf8427e"


# ── Hasher ───────────────────────────────────────────────────────────────────

class TestHasher:

    def test_hash_string_defaults_to_sha1(self):
        assert Hasher.hash_string("") == SHA1_EMPTY

    def test_hash_string_md5(self):
        assert Hasher.hash_string("", "md5") == MD5_EMPTY

    def test_hash_string_encodes_utf8(self):
        text = "const s = 'héllo';"
        expected = hashlib.sha256(text.encode("utf-8")).hexdigest()
        assert Hasher.hash_string(text, "sha256") == expected

    def test_hash_file_matches_hash_string(self, tmp_path):
        f = tmp_path / "bundle.js"
        f.write_text("const a = 1;", encoding="utf-8")
        for algorithm in ("md5", "sha1", "sha256", "sha512"):
            assert Hasher.hash_file(f, algorithm) == Hasher.hash_string("const a = 1;", algorithm)

    def test_hash_file_keeps_crlf(self, tmp_path):
        f = tmp_path / "bundle.js"
        f.write_bytes(b"a;\r\nb;\r\n")
        assert Hasher.hash_file(f) == hashlib.sha1(b"a;\r\nb;\r\n").hexdigest()
        assert Hasher.hash_file(f) == Hasher.hash_string("a;\r\nb;\r\n")

    @pytest.mark.parametrize(
        "algorithm, length",
        [("md5", 32), ("sha1", 40), ("sha256", 64), ("sha512", 128)],
    )
    def test_digest_length(self, algorithm, length):
        assert Hasher.digest_length(algorithm) == length
        assert len(Hasher.hash_string("x", algorithm)) == length

    def test_digest_is_lowercase_hex(self):
        digest = Hasher.hash_string("const a = 1;", "sha512")
        assert digest == digest.lower()
        int(digest, 16)


# ── has_template ─────────────────────────────────────────────────────────────

class TestHasTemplate:

    @pytest.mark.parametrize(
        "dest",
        ["dist/[hash].js", "dist/[hash:8].js", "[hash]/index.js", "app.[hash:123].min.js"],
    )
    def test_recognised(self, dest):
        assert has_template(dest) is True

    @pytest.mark.parametrize(
        "dest",
        ["dist/out.js", "dist/[hash:].js", "dist/[HASH].js", "dist/[hash:x].js", "dist/hash.js", ""],
    )
    def test_not_recognised(self, dest):
        assert has_template(dest) is False


# ── format_filename ──────────────────────────────────────────────────────────

class TestFormatFilename:

    digest = hashlib.sha1(b"const a = 1;").hexdigest()

    def test_full_digest(self):
        assert format_filename("dist/[hash].js", self.digest) == f"dist/{self.digest}.js"

    def test_truncated_digest(self):
        assert format_filename("dist/[hash:8].js", self.digest) == f"dist/{self.digest[:8]}.js"

    def test_length_equal_to_digest_keeps_full(self):
        assert format_filename("dist/[hash:40].js", self.digest) == f"dist/{self.digest}.js"

    def test_length_beyond_digest_keeps_full(self):
        assert format_filename("dist/[hash:500].js", self.digest) == f"dist/{self.digest}.js"

    def test_zero_length_gives_empty_segment(self):
        assert format_filename("dist/app.[hash:0].js", self.digest) == "dist/app..js"

    def test_hash_as_directory(self):
        assert format_filename("dist/[hash]/index.js", self.digest) == f"dist/{self.digest}/index.js"

    def test_only_first_placeholder_substituted(self):
        result = format_filename("dist/[hash:4]-[hash].js", self.digest)
        assert result == f"dist/{self.digest[:4]}-[hash].js"

    def test_no_placeholder_returns_dest(self):
        assert format_filename("dist/out.js", self.digest) == "dist/out.js"

    def test_deterministic(self):
        first = format_filename("dist/[hash:12].js", self.digest)
        second = format_filename("dist/[hash:12].js", self.digest)
        assert first == second

    def test_truncate_digest(self):
        assert truncate_digest("abcdef", None) == "abcdef"
        assert truncate_digest("abcdef", 3) == "abc"
        assert truncate_digest("abcdef", 10) == "abcdef"
        assert truncate_digest("abcdef", 0) == ""
