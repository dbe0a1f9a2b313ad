# report.py
import logging
import threading

logger = logging.getLogger(__name__)


def format_result(result):
    """Render a successful result the way sha256sum does: '<hash>  <path>'."""
    return f"{result.hash}  {result.path}\n"


class ResultWriter(threading.Thread):
    """Drains a result queue, writing hashes to ``stream`` and logging failures.

    The queue is closed by putting ``None`` on it; ``close()`` does that and
    waits for everything before it to be written. If the stream fails (closed
    pipe, full disk) the error is kept in ``error`` and the queue is still
    drained to the end, so producers never block on it.
    """

    def __init__(self, results, stream, verbose=False):
        super().__init__(name="recsum-writer", daemon=True)
        self.results = results
        self.stream = stream
        self.verbose = verbose
        self.written = 0
        self.failed = 0
        self.error = None

    def run(self):
        while True:
            result = self.results.get()
            if result is None:
                break
            if result.ok:
                if self._write(format_result(result)):
                    self.written += 1
            else:
                logger.error("%s failed with error '%s'", result.path, result.error)
                self.failed += 1
            if self.verbose:
                logger.info("%s completed in %s", result.path, result.duration)
        if self.error is None:
            try:
                self.stream.flush()
            except OSError as e:
                self._stream_failed(e)

    def _write(self, line):
        if self.error is not None:
            return False
        try:
            self.stream.write(line)
        except OSError as e:
            self._stream_failed(e)
            return False
        return True

    def _stream_failed(self, e):
        self.error = e
        logger.error("Cannot write results: %s", e)

    def close(self):
        self.results.put(None)
        self.join()
