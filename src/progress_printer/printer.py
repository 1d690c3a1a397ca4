"""Progress printer for long-running loops.

Create a printer, start it, increment inside the loop and finish it:

    printer = ProgressPrinter(name='Counting', total=250)
    printer.start()
    for _ in range(250):
        printer.increment()
    printer.finish()

Output:

    Counting:   0/250   0% calculating...
    Counting: 100/250  40% ~1m30s
    Counting: 200/250  80% ~30s
    Counting: 250/250 100% 2m30s total
"""
import io
import logging
import operator
import sys
import time
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO, TypeVar

from progress_printer.formatting import format_duration, format_percent, left_pad

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_EVERY = 100
CALCULATING = 'calculating...'


class NullSink(io.TextIOBase):
    """Text stream that accepts writes and keeps nothing."""

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        return len(s)


class ProgressPrinter:
    """Counts progress and writes a status line every `every` increments."""

    def __init__(
        self,
        total: Optional[int] = None,
        name: Optional[str] = None,
        every: int = DEFAULT_EVERY,
        out: Optional[TextIO] = None,
        silent: bool = False,
    ):
        """Initialize the printer.

        Args:
            total: Expected number of items, or None when unknown
            name: Label prefixed to every line
            every: Print a line whenever the count is a multiple of this
            out: Stream lines are written to (default: sys.stdout)
            silent: If True, discard all output regardless of out

        Raises:
            ValueError: If total is negative or every is less than 1
        """
        if total is not None and total < 0:
            raise ValueError(f"total must be non-negative, got {total}")
        if every < 1:
            raise ValueError(f"every must be positive, got {every}")

        self.total = total
        self.name = name
        self.every = every
        self.start_time: Optional[float] = None
        self._current = 0

        if silent:
            self.out = NullSink()
        else:
            self.out = out if out is not None else sys.stdout

    @property
    def current(self) -> int:
        """Number of items counted so far."""
        return self._current

    def start(self) -> None:
        """Record the start time and print the zero line."""
        self.start_time = time.time()
        logger.debug(f"Started {self._label()} (total: {self.total})")
        self._print_progress(0)

    def increment(self, count: int = 1) -> None:
        """Advance the count, printing a line when it lands on a milestone.

        Only the final count is checked, so a large count that skips past
        a milestone prints nothing.

        Args:
            count: Number of items to add (default: 1)

        Raises:
            ValueError: If count is not a positive integer
        """
        # bool is an int subclass, reject it explicitly
        if isinstance(count, bool):
            raise ValueError(f"count must be an integer, got {count!r}")
        try:
            count = operator.index(count)
        except TypeError:
            raise ValueError(f"count must be an integer, got {count!r}")
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        self._current += count

        if self._at_milestone():
            self._print_progress(self._current)

    def finish(self) -> None:
        """Print the final line, with total elapsed time when known."""
        logger.debug(
            f"Finished {self._label()} at {self._current} "
            f"(elapsed: {self.elapsed_seconds()})"
        )
        self._print_progress(self._current, final=True)

    def wrap(self, func: Callable[['ProgressPrinter'], T]) -> T:
        """Run func between start() and finish().

        finish() runs even when func raises; the exception then propagates.

        Returns:
            Whatever func returns
        """
        self.start()
        try:
            return func(self)
        finally:
            self.finish()

    def track(self, iterable: Iterable[T]) -> Iterator[T]:
        """Yield items from iterable, incrementing after each one."""
        self.start()
        try:
            for item in iterable:
                yield item
                self.increment()
        finally:
            self.finish()

    def __enter__(self) -> 'ProgressPrinter':
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.finish()
        return False

    def percent_complete(self) -> Optional[float]:
        """Completed fraction in [0, 1], or None without a total.

        A zero total, or a count past the total, is complete.
        """
        if self.total is None:
            return None
        if self._current >= self.total:
            return 1.0
        return self._current / self.total

    def percent_complete_string(self) -> Optional[str]:
        if self.total is None:
            return None
        return format_percent(self.percent_complete())

    def percent_remaining(self) -> Optional[float]:
        if self.total is None:
            return None
        return 1.0 - self.percent_complete()

    def estimated_time_remaining(self, now: Optional[float] = None) -> Optional[str]:
        """Human readable time left, e.g. '~1m30s'.

        Args:
            now: Timestamp to measure against (default: time.time())

        Returns:
            'calculating...' before the first item, None without a total
            or before start() was called
        """
        if self.total is None:
            return None
        if self._current == 0:
            return CALCULATING

        seconds = self.seconds_remaining(now)
        if seconds is None:
            return None
        return '~' + format_duration(seconds)

    def seconds_remaining(self, now: Optional[float] = None) -> Optional[float]:
        """Extrapolate remaining seconds from the elapsed time.

        Elapsed time per unit of completed fraction, times the fraction
        still remaining.

        Args:
            now: Timestamp to measure against (default: time.time())

        Returns:
            Seconds remaining, 0.0 when complete, None when nothing is
            done yet, there is no total, or start() was never called
        """
        if self.total is None:
            return None

        remaining = self.percent_remaining()
        if remaining == 1.0:
            return None
        if remaining == 0.0:
            return 0.0

        elapsed = self.elapsed_seconds(now)
        if elapsed is None:
            return None
        return elapsed / self.percent_complete() * remaining

    def elapsed_seconds(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds since start(), or None if the printer was never started."""
        if self.start_time is None:
            return None
        if now is None:
            now = time.time()
        return now - self.start_time

    def format_line(self, n: int, final: bool = False, now: Optional[float] = None) -> str:
        """Build a progress line for count n, without the newline.

        Args:
            n: Count to show
            final: If True, show total elapsed time instead of an estimate
            now: Timestamp to measure against (default: time.time())

        Returns:
            str: The formatted line
        """
        parts = []

        if self.name is not None:
            parts.append(f"{self.name}: ")

        if self.total is not None:
            parts.append(left_pad(n, len(str(self.total))))
            parts.append(f"/{self.total} ")
            parts.append(left_pad(self.percent_complete_string(), 4))
        else:
            parts.append(str(n))

        if final:
            elapsed = self.elapsed_seconds(now)
            if elapsed is not None:
                parts.append(f" {format_duration(elapsed)} total")
        elif self.total is not None:
            eta = self.estimated_time_remaining(now)
            if eta is not None:
                parts.append(f" {eta}")

        return ''.join(parts)

    def _print_progress(self, n: int, final: bool = False) -> None:
        self.out.write(self.format_line(n, final=final) + '\n')

    def _at_milestone(self) -> bool:
        return self._current % self.every == 0

    def _label(self) -> str:
        return repr(self.name) if self.name is not None else 'progress'


def wrap(func: Callable[[ProgressPrinter], T], **kwargs: Any) -> T:
    """Create a printer from kwargs and run func inside it.

    Usage:
        result = wrap(lambda printer: do_work(printer), total=10, name='Work')
    """
    return ProgressPrinter(**kwargs).wrap(func)
