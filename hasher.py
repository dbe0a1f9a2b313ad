# hasher.py
import hashlib

import config
from errors import ConfigurationError

# shake_* digests have no fixed length, so they can't be rendered by hexdigest()
SUPPORTED_ALGOS = sorted(a for a in hashlib.algorithms_guaranteed if not a.startswith("shake_"))


def resolve_hash(name):
    """Return the hashlib constructor for an algorithm name like 'sha256'."""
    algo = name.lower()
    if algo not in SUPPORTED_ALGOS:
        raise ConfigurationError(f"Unknown hash '{name}'")
    return getattr(hashlib, algo)


def build_file_hash(hash_new, filepath):
    """Hash the contents of a single file.

    ``hash_new`` is any zero-argument constructor returning an object with
    ``update()`` and ``hexdigest()``, e.g. ``hashlib.sha256``. OSError from
    opening or reading the file propagates; nothing is returned in that case.
    """
    h = hash_new()
    with open(filepath, 'rb') as f:
        while chunk := f.read(config.CHUNK_SIZE):
            h.update(chunk)
    return h.hexdigest()
