"""
Predicate-counting combinators over single-pass lazy iterables.

Every function here consumes the iterable it is given and answers a counting
question with a plain bool. Each one stops pulling items as soon as its
verdict is settled, so most of them are safe on infinite sources:

    at_least(count(), 3, is_even)    # stops after the 3rd even number
    all_or_none(count(), is_even)    # stops at 1, the first mixed result

`perfectly_balanced` is the exception: it has to see every item.
"""

import logging
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


def _check_threshold(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"Threshold {name} must be >= 0, got {value}")


def at_least(iterable: Iterable[Any], n: int, predicate: Predicate) -> bool:
    """Return True iff at least `n` items pass `predicate`.

    Stops pulling as soon as the n-th match is found. With n == 0 nothing
    is pulled at all.
    """
    _check_threshold("n", n)
    if n == 0:
        return True

    matches = 0
    inspected = 0
    for item in iterable:
        inspected += 1
        if predicate(item):
            matches += 1
            if matches == n:
                logger.debug(f"at_least: reached {n} matches after {inspected} items")
                return True

    logger.debug(f"at_least: exhausted after {inspected} items with {matches}/{n} matches")
    return False


def at_most(iterable: Iterable[Any], n: int, predicate: Predicate) -> bool:
    """Return True iff no more than `n` items pass `predicate`.

    Stops with False at the (n+1)-th match; otherwise runs to exhaustion.
    """
    _check_threshold("n", n)

    matches = 0
    inspected = 0
    for item in iterable:
        inspected += 1
        if predicate(item):
            matches += 1
            if matches > n:
                logger.debug(f"at_most: match {matches} exceeds {n} after {inspected} items")
                return False

    logger.debug(f"at_most: exhausted after {inspected} items with {matches} matches")
    return True


def exactly_n(iterable: Iterable[Any], n: int, predicate: Predicate) -> bool:
    """Return True iff exactly `n` items pass `predicate`.

    Fails fast the moment the match count goes over `n`; a count below `n`
    can only be confirmed at exhaustion.
    """
    _check_threshold("n", n)

    matches = 0
    inspected = 0
    for item in iterable:
        inspected += 1
        if predicate(item):
            matches += 1
            if matches > n:
                logger.debug(f"exactly_n: match {matches} exceeds {n} after {inspected} items")
                return False

    logger.debug(f"exactly_n: exhausted after {inspected} items with {matches}/{n} matches")
    return matches == n


# Older name, kept for callers that still use it.
any_n = exactly_n


def exactly_m_n(
    iterable: Iterable[Any],
    m: int,
    predicate_m: Predicate,
    n: int,
    predicate_n: Predicate,
) -> bool:
    """Return True iff exactly `m` items pass `predicate_m` and exactly `n`
    items pass `predicate_n`.

    Both predicates are called on every inspected item, `predicate_m` first,
    even when one of them has already reached its threshold. The traversal
    is abandoned as soon as either count overshoots.

        >>> exactly_m_n("abcd1234", 4, str.isalpha, 4, str.isdigit)
        True
    """
    _check_threshold("m", m)
    _check_threshold("n", n)

    matches_m = 0
    matches_n = 0
    inspected = 0
    for item in iterable:
        inspected += 1
        passed_m = predicate_m(item)
        passed_n = predicate_n(item)
        if passed_m:
            matches_m += 1
        if passed_n:
            matches_n += 1
        if matches_m > m or matches_n > n:
            logger.debug(
                f"exactly_m_n: overshoot ({matches_m}/{m}, {matches_n}/{n}) after {inspected} items"
            )
            return False

    logger.debug(
        f"exactly_m_n: exhausted after {inspected} items with ({matches_m}/{m}, {matches_n}/{n})"
    )
    return matches_m == m and matches_n == n


def all_or_none(iterable: Iterable[Any], predicate: Predicate) -> bool:
    """Return True iff every item passes `predicate` or no item does.

    Returns False on the first mixed result. An empty iterable is True.
    """
    has_pass = False
    has_fail = False
    inspected = 0
    for item in iterable:
        inspected += 1
        if predicate(item):
            has_pass = True
        else:
            has_fail = True
        if has_pass and has_fail:
            logger.debug(f"all_or_none: mixed result after {inspected} items")
            return False

    logger.debug(f"all_or_none: exhausted after {inspected} items")
    return True


def perfectly_balanced(iterable: Iterable[Any], predicate: Predicate) -> bool:
    """Return True iff the iterable has an even length and exactly half of
    its items pass `predicate`. Always consumes the whole iterable."""
    total = 0
    matches = 0
    for item in iterable:
        total += 1
        if predicate(item):
            matches += 1

    logger.debug(f"perfectly_balanced: {matches} of {total} items matched")
    return total % 2 == 0 and total // 2 == matches
