"""
Chainable, single-pass wrapper that exposes the counting combinators and the
alternating merge as methods:

    ExoticIterator(range(100)).map(square).skip(3).at_least(5, is_odd)
    ExoticIterator("abc").alternate("xyz").to_list()  # a x b y c z
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple

import exotic
from alternate import Alternate

logger = logging.getLogger(__name__)


class ExoticIterator:
    """
    A lazy pipeline over one underlying iterator. Adapters are recorded and
    only wired up on the first pull; terminal methods consume the pipeline.
    Like any Python iterator it can be traversed once.
    """
    def __init__(self, source: Iterable[Any], ops: Optional[List[Tuple[str, Any]]] = None):
        self._source = iter(source)
        self._ops = ops or []          # sequence of ("op_name", callable/arg)
        self._it = None                # built pipeline, created on first pull

    # --------- chainable adapters (lazy) ----------
    def map(self, fn: Callable[[Any], Any]) -> "ExoticIterator":
        return self._with_op(("map", fn))

    def filter(self, pred: Callable[[Any], bool]) -> "ExoticIterator":
        return self._with_op(("filter", pred))

    def skip(self, n: int) -> "ExoticIterator":
        if n < 0:
            raise ValueError("Skip count must be >= 0")
        return self._with_op(("skip", int(n)))

    def take(self, n: int) -> "ExoticIterator":
        if n < 0:
            raise ValueError("Take count must be >= 0")
        return self._with_op(("take", int(n)))

    def alternate(self, other: Iterable[Any]) -> "ExoticIterator":
        """Merge with `other` turn by turn, this pipeline going first."""
        return self._with_op(("alternate", other))

    # --------- terminal queries (consume the pipeline) ----------
    def at_least(self, n: int, predicate: Callable[[Any], bool]) -> bool:
        return exotic.at_least(self, n, predicate)

    def at_most(self, n: int, predicate: Callable[[Any], bool]) -> bool:
        return exotic.at_most(self, n, predicate)

    def exactly_n(self, n: int, predicate: Callable[[Any], bool]) -> bool:
        return exotic.exactly_n(self, n, predicate)

    def any_n(self, n: int, predicate: Callable[[Any], bool]) -> bool:
        """Alias of exactly_n."""
        return exotic.exactly_n(self, n, predicate)

    def exactly_m_n(
        self,
        m: int,
        predicate_m: Callable[[Any], bool],
        n: int,
        predicate_n: Callable[[Any], bool],
    ) -> bool:
        return exotic.exactly_m_n(self, m, predicate_m, n, predicate_n)

    def all_or_none(self, predicate: Callable[[Any], bool]) -> bool:
        return exotic.all_or_none(self, predicate)

    def perfectly_balanced(self, predicate: Callable[[Any], bool]) -> bool:
        return exotic.perfectly_balanced(self, predicate)

    def to_list(self) -> List[Any]:
        return list(self)

    # --------- iterator protocol ----------
    def __iter__(self):
        return self

    def __next__(self) -> Any:
        if self._it is None:
            self._it = self._build()
        return next(self._it)

    # --------- helpers ----------
    def _build(self):
        it = self._source
        for op, arg in self._ops:
            if op == "map":
                fn = arg
                it = (fn(x) for x in it)
            elif op == "filter":
                pred = arg
                it = (x for x in it if pred(x))
            elif op == "skip":
                k = arg
                def _skip(gen, k=k):
                    skipped = 0
                    for x in gen:
                        if skipped < k:
                            skipped += 1
                            continue
                        yield x
                it = _skip(it)
            elif op == "take":
                n = arg
                def _take(gen, n=n):
                    # never pulls item n+1
                    taken = 0
                    while taken < n:
                        try:
                            x = next(gen)
                        except StopIteration:
                            return
                        yield x
                        taken += 1
                it = _take(it)
            elif op == "alternate":
                it = Alternate(it, arg)
            else:
                raise ValueError(f"Unknown op: {op}")

        logger.debug(f"Built pipeline with ops: {[op for op, _ in self._ops]}")
        return it

    def _with_op(self, op_tuple: Tuple[str, Any]) -> "ExoticIterator":
        if self._it is not None:
            raise ValueError("Cannot chain onto a pipeline that has already been pulled from")
        return ExoticIterator(self._source, self._ops + [op_tuple])

    def __repr__(self) -> str:
        return f"ExoticIterator(ops={[op for op, _ in self._ops]})"
