"""Wall-clock timing for the benchmark harness."""

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator

from subsearch.utils.logger import logger


@dataclass
class Timing:
    """Elapsed time of a timed block, filled in when the block exits."""

    label: str
    start_time: float
    elapsed: float = 0.0


@contextmanager
def timed(label: str) -> Generator[Timing, None, None]:
    """
    Context manager measuring the wall-clock time of its block.

    Args:
        label: Name recorded in the debug log line.

    Yields:
        The Timing object; ``elapsed`` is set once the block finishes.
    """
    timing = Timing(label=label, start_time=time.perf_counter())
    try:
        yield timing
    finally:
        timing.elapsed = time.perf_counter() - timing.start_time
        logger.debug(f"{label} took {timing.elapsed:.4f}s")
