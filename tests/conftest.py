import logging
import os

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_recsum", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def tree(tmp_path):
    """a.txt and b.txt are readable, c.txt is a dangling symlink that can't be opened."""
    (tmp_path / "a.txt").write_bytes(b"hello")
    (tmp_path / "b.txt").write_bytes(b"world")
    os.symlink(tmp_path / "missing", tmp_path / "c.txt")
    return tmp_path
