import logging
import time

logger = logging.getLogger(__name__)


class Stopwatch:
    """
    A simple stopwatch utility for timing batch execution.
    Can be used as a context manager with the 'with' statement.

    Example usage:
        # Basic usage
        sw = Stopwatch()
        # Some code to time
        sw.stop()

        # Or as a context manager
        with Stopwatch() as sw:
            # Code to time
            time.sleep(1)
        sw.rounded()  # e.g. 1.0
    """

    def __init__(self, log=True):
        self.start_time = time.time()
        self.end_time = None
        self.log = log

    @property
    def elapsed(self) -> float:
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time

    def stop(self) -> float:
        self.end_time = time.time()
        elapsed = self.elapsed

        if self.log:
            logger.debug(f"Time taken: {elapsed:.2f}s")

        return elapsed

    def rounded(self, digits: int = 2) -> float:
        return round(self.elapsed, digits)

    def __enter__(self):
        # Reset timer when entering context
        self.start_time = time.time()
        self.end_time = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Call stop when exiting the context
        self.stop()
