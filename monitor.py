# monitor.py

import logging
import os
import time

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from recurser import default_filter, hash_path

logger = logging.getLogger(__name__)


class RehashHandler(FileSystemEventHandler):
    """Re-hashes files as they change and puts the results on ``results``."""

    def __init__(self, hash_new, results, filter=default_filter):
        super().__init__()
        self.hash_new = hash_new
        self.results = results
        self.filter = filter

    def on_any_event(self, event):
        if event.is_directory:
            return  # Ignore directory events

        if event.event_type == EVENT_TYPE_DELETED:
            logger.info("%s was removed", event.src_path)
            return
        if event.event_type == EVENT_TYPE_MOVED:
            path = event.dest_path
        elif event.event_type in (EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED):
            path = event.src_path
        else:
            return

        try:
            info, error = os.lstat(path), None
        except OSError as e:
            info, error = None, e
        if not self.filter(path, info, error):
            return

        logger.debug("Detected change: %s", path)
        self.results.put(hash_path(self.hash_new, path))


def watch(paths, hash_new, results, filter=default_filter, stop=None):
    """Watch every directory in ``paths`` until Ctrl-C (or ``stop`` is set).

    ``stop`` is an optional threading.Event, used when watching from another
    thread.
    """
    handler = RehashHandler(hash_new, results, filter)
    observer = Observer()
    watched = 0
    for path in paths:
        if os.path.isdir(path):
            observer.schedule(handler, path=path, recursive=True)
            watched += 1
    if not watched:
        logger.warning("No directories to watch")
        return

    observer.start()
    logger.info("Watching %d path(s) for changes, press Ctrl-C to stop", watched)
    try:
        while stop is None or not stop.is_set():
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
        observer.join()
