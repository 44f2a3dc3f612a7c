"""
Alternating merge of two iterables.

`alternate(first, second)` yields first[0], second[0], first[1], second[1], ...
and stops for good at the first exhausted pull from either side. It does not
keep draining the longer source, so the result length is 2 * min(k, j), or
one more when `first` is the longer of the two.
"""

import logging
from typing import Any, Iterable, Iterator

logger = logging.getLogger(__name__)


class Alternate:
    """Iterator that pulls from two sources in strict turns, starting with
    `first`. Nothing is buffered; each pull goes straight to the source
    whose turn it is."""

    def __init__(self, first: Iterable[Any], second: Iterable[Any]):
        self._first = iter(first)
        self._second = iter(second)
        self._odd = False              # False: first's turn, True: second's
        self._done = False

    @property
    def finished(self) -> bool:
        return self._done

    @property
    def turn(self) -> str:
        """Which source the next pull would go to: "first" or "second"."""
        return "second" if self._odd else "first"

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._done:
            raise StopIteration

        source = self._second if self._odd else self._first
        try:
            item = next(source)
        except StopIteration:
            self._done = True
            logger.debug(f"alternate: {self.turn} source exhausted")
            self._odd = not self._odd
            raise StopIteration from None

        self._odd = not self._odd
        return item

    def __repr__(self) -> str:
        state = "finished" if self._done else self.turn
        return f"Alternate(next={state})"


def alternate(first: Iterable[Any], second: Iterable[Any]) -> Alternate:
    """Merge two iterables turn by turn; see `Alternate`."""
    return Alternate(first, second)
