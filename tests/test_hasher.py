import hashlib

import pytest

import config
from errors import ConfigurationError
from hasher import SUPPORTED_ALGOS, build_file_hash, resolve_hash

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def test_empty_file_known_answers(tmp_path):
    empty = tmp_path / "empty"
    empty.write_bytes(b"")
    assert build_file_hash(hashlib.sha256, empty) == EMPTY_SHA256
    assert build_file_hash(hashlib.md5, empty) == EMPTY_MD5


def test_matches_hashlib_across_chunks(tmp_path):
    data = bytes(range(256)) * (config.CHUNK_SIZE // 256 * 3 + 7)
    f = tmp_path / "big.bin"
    f.write_bytes(data)
    assert build_file_hash(hashlib.sha512, f) == hashlib.sha512(data).hexdigest()


def test_digest_is_lowercase_hex(tmp_path):
    f = tmp_path / "a.txt"
    f.write_bytes(b"hello")
    digest = build_file_hash(hashlib.sha1, f)
    assert digest == digest.lower()
    assert len(digest) == 40


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_file_hash(hashlib.sha256, tmp_path / "nope")


def test_directory_raises(tmp_path):
    with pytest.raises(OSError):
        build_file_hash(hashlib.sha256, tmp_path)


def test_resolve_hash():
    assert resolve_hash("sha256") is hashlib.sha256
    assert resolve_hash("MD5") is hashlib.md5
    assert "sha512" in SUPPORTED_ALGOS


@pytest.mark.parametrize("name", ["crc32", "shake_128", ""])
def test_resolve_hash_rejects_unknown(name):
    with pytest.raises(ConfigurationError, match="Unknown hash"):
        resolve_hash(name)
