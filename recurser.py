# recurser.py
import logging
import os
import queue
import stat
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import config
from errors import ConfigurationError, TraversalError
from hasher import build_file_hash

logger = logging.getLogger(__name__)

# Put once per worker after the walk; tells that worker the job queue is closed.
_CLOSED = object()


@dataclass(frozen=True)
class HashResult:
    """Outcome of hashing one file. ``hash`` is empty when ``error`` is set."""
    path: str
    hash: str
    start: datetime
    end: datetime
    error: Optional[Exception] = None

    @property
    def ok(self):
        return self.error is None

    @property
    def duration(self):
        return self.end - self.start


def default_filter(path, info, error):
    """Accept regular files and symlinks; anything that failed to stat is skipped."""
    if info is None:
        return False
    return stat.S_ISREG(info.st_mode) or stat.S_ISLNK(info.st_mode)


def hash_path(hash_new, path):
    """Hash one file and wrap the outcome, timing only the digest itself."""
    start = datetime.now(timezone.utc)
    try:
        digest, error = build_file_hash(hash_new, path), None
    except Exception as e:
        digest, error = "", e
    end = datetime.now(timezone.utc)
    return HashResult(path, digest, start, end, error)


class RecursiveHashBuilder:
    """Walks one root path and hashes every file the filter accepts.

    Results are put on ``output_queue``, which is shared with the caller and
    possibly with builders for other roots. The caller must drain it while
    ``walk()`` runs and close it (put ``None``) once every walk has returned.
    """

    def __init__(self, path, hash_new, output_queue, workers):
        if workers < 1:
            raise ConfigurationError("Must have at least 1 worker")
        self._path = path
        self.hash_new = hash_new
        self.output_queue = output_queue
        self.workers = workers
        self.filter = default_filter

    @property
    def path(self):
        """Root path being walked."""
        return self._path

    def set_filter(self, f):
        """Replace the predicate deciding which entries get hashed.

        ``f(path, info, error)`` receives the ``os.lstat`` result for the entry,
        or ``None`` together with the OSError when it could not be read. Must
        be called before ``walk()``.
        """
        self.filter = f

    def walk(self):
        """Start the workers, walk the root and block until every hash is built.

        Raises TraversalError if the root itself can't be accessed; paths
        queued before that still get their results.
        """
        jobs = queue.Queue(maxsize=config.JOB_QUEUE_SIZE)
        threads = []
        for i in range(self.workers):
            t = threading.Thread(target=self._build_hashes, args=(jobs,),
                                 name=f"recsum-worker-{i}", daemon=True)
            t.start()
            threads.append(t)
        logger.debug("Started %d workers for %s", self.workers, self._path)

        try:
            self._traverse(jobs)
        finally:
            for _ in threads:
                jobs.put(_CLOSED)
            for t in threads:
                t.join()
            logger.debug("Finished walking %s", self._path)

    def _build_hashes(self, jobs):
        while True:
            path = jobs.get()
            if path is _CLOSED:
                return
            self.output_queue.put(hash_path(self.hash_new, path))

    def _offer(self, jobs, path, info, error):
        if self.filter(path, info, error):
            jobs.put(path)

    def _traverse(self, jobs):
        try:
            info = os.lstat(self._path)
        except OSError as e:
            self._offer(jobs, self._path, None, e)
            raise TraversalError(self._path, e) from e

        if not stat.S_ISDIR(info.st_mode):
            self._offer(jobs, self._path, info, None)
            return

        # Directories are offered once: when os.walk lists them, or with the
        # error when it can't.
        pending = {self._path: info}
        root_errors = []

        def on_error(e):
            path = e.filename or self._path
            pending.pop(path, None)
            self._offer(jobs, path, None, e)
            if path == self._path:
                root_errors.append(e)

        for root, dirs, files in os.walk(self._path, onerror=on_error):
            if root in pending:
                self._offer(jobs, root, pending.pop(root), None)
            dirs.sort()
            for name in sorted(dirs + files):
                path = os.path.join(root, name)
                try:
                    entry_info, entry_error = os.lstat(path), None
                except OSError as e:
                    entry_info, entry_error = None, e
                if entry_info is not None and stat.S_ISDIR(entry_info.st_mode):
                    pending[path] = entry_info
                else:
                    self._offer(jobs, path, entry_info, entry_error)

        # Directories os.walk never reached, e.g. replaced during the walk.
        for path, entry_info in pending.items():
            self._offer(jobs, path, entry_info, None)

        if root_errors:
            raise TraversalError(self._path, root_errors[0]) from root_errors[0]


def new(path, hash_new, output_queue, workers):
    """Build a RecursiveHashBuilder; raises ConfigurationError if workers < 1."""
    return RecursiveHashBuilder(path, hash_new, output_queue, workers)
