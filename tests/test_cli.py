"""Tests for the bundlehash command line."""

from __future__ import annotations

import hashlib
import json

import pytest
from typer.testing import CliRunner

from bundlehash.cli import app
from bundlehash.config import MSG_NO_TEMPLATE

CODE = "export default 42;"
SHA1 = hashlib.sha1(CODE.encode("utf-8")).hexdigest()

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "BUNDLEHASH_DEST",
        "BUNDLEHASH_ALGORITHM",
        "BUNDLEHASH_REPLACE",
        "BUNDLEHASH_MANIFEST",
        "BUNDLEHASH_MANIFEST_KEY",
        "BUNDLEHASH_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def bundle(tmp_path):
    path = tmp_path / "build" / "index.js"
    path.parent.mkdir()
    path.write_text(CODE, encoding="utf-8")
    return path


def _invoke(tmp_path, *args):
    return runner.invoke(
        app, ["--project-root", str(tmp_path), "--log-level", "WARNING", *args],
    )


class TestHashCommand:

    def test_hash_with_dest(self, tmp_path, bundle):
        dest = tmp_path / "dist" / "[hash:8].js"
        result = _invoke(tmp_path, "hash", str(bundle), "--dest", str(dest))

        assert result.exit_code == 0, result.output
        expected = tmp_path / "dist" / f"{SHA1[:8]}.js"
        assert str(expected) in result.output
        assert expected.read_text(encoding="utf-8") == CODE
        assert bundle.is_file()

    def test_hash_replace_and_manifest(self, tmp_path, bundle):
        manifest = tmp_path / "dist" / "manifest.json"
        result = _invoke(
            tmp_path,
            "hash", str(bundle),
            "--dest", str(tmp_path / "dist" / "[hash].js"),
            "--replace",
            "--manifest", str(manifest),
            "--manifest-key", "index.js",
        )

        assert result.exit_code == 0, result.output
        assert not bundle.exists()
        data = json.loads(manifest.read_text(encoding="utf-8"))
        assert data == {"index.js": str(tmp_path / "dist" / f"{SHA1}.js")}

    def test_dest_from_config_file(self, tmp_path, bundle):
        (tmp_path / "bundlehash.json").write_text(json.dumps({
            "dest": str(tmp_path / "out" / "[hash].js"),
            "algorithm": "md5",
        }), encoding="utf-8")
        result = _invoke(tmp_path, "hash", str(bundle))

        assert result.exit_code == 0, result.output
        md5 = hashlib.md5(CODE.encode("utf-8")).hexdigest()
        assert (tmp_path / "out" / f"{md5}.js").is_file()

    def test_inline_sourcemap(self, tmp_path, bundle):
        map_path = tmp_path / "build" / "index.js.map"
        map_path.write_text(json.dumps({"version": 3, "sources": ["a.js"], "mappings": "AAAA"}))
        result = _invoke(
            tmp_path,
            "hash", str(bundle),
            "--dest", str(tmp_path / "dist" / "[hash].js"),
            "--map", str(map_path),
            "--sourcemap", "inline",
        )

        assert result.exit_code == 0, result.output
        code = (tmp_path / "dist" / f"{SHA1}.js").read_text(encoding="utf-8")
        assert "//# sourceMappingURL=data:application/json" in code
        assert not (tmp_path / "dist" / f"{SHA1}.js.map").exists()

    def test_missing_template_exits_with_message(self, tmp_path, bundle):
        result = _invoke(tmp_path, "hash", str(bundle), "--dest", str(tmp_path / "out.js"))

        assert result.exit_code == 2
        assert MSG_NO_TEMPLATE in result.output
        assert not (tmp_path / "out.js").exists()

    def test_unknown_sourcemap_mode(self, tmp_path, bundle):
        result = _invoke(
            tmp_path, "hash", str(bundle),
            "--dest", str(tmp_path / "[hash].js"),
            "--sourcemap", "hidden",
        )
        assert result.exit_code != 0


class TestDigestCommand:

    def test_digest_default_sha1(self, tmp_path, bundle):
        result = _invoke(tmp_path, "digest", str(bundle))
        assert result.exit_code == 0, result.output
        assert result.output.strip() == SHA1

    def test_digest_sha256(self, tmp_path, bundle):
        result = _invoke(tmp_path, "digest", str(bundle), "--algorithm", "sha256")
        assert result.output.strip() == hashlib.sha256(CODE.encode("utf-8")).hexdigest()

    def test_digest_rejects_unknown_algorithm(self, tmp_path, bundle):
        result = _invoke(tmp_path, "digest", str(bundle), "--algorithm", "crc32")
        assert result.exit_code != 0


class TestInitCommand:

    def test_init_writes_template(self, tmp_path):
        result = _invoke(tmp_path, "init")
        assert result.exit_code == 0, result.output
        assert (tmp_path / ".env.example").is_file()
