from itertools import count

from alternate import alternate
from exotic import (
    all_or_none,
    at_least,
    at_most,
    exactly_m_n,
    exactly_n,
    perfectly_balanced,
)
from lazy import ExoticIterator
from utils import get_performance_summary, measure_traversal, setup_logging


def is_two(x):
    return x == 2


def is_even(x):
    return x % 2 == 0


setup_logging()

print("\n--- Demo: counting queries ---")
measure_traversal("at_least 3 twos in [1..6]", at_least, [1, 2, 3, 4, 5, 6], 3, is_two)
measure_traversal("at_least 3 twos in [2,3,2,4,2,5]", at_least, [2, 3, 2, 4, 2, 5], 3, is_two)
measure_traversal("at_most 1 two in [2,3,2,4,2,5]", at_most, [2, 3, 2, 4, 2, 5], 1, is_two)
measure_traversal("exactly 2 digits in 'deadb33f'", exactly_n, "deadb33f", 2, str.isdigit)
measure_traversal(
    "4 letters and 4 digits in 'abcd1234'",
    exactly_m_n, "abcd1234", 4, str.isalpha, 4, str.isdigit,
)
measure_traversal("all_or_none [True, False, True]", all_or_none, [True, False, True], bool)
measure_traversal("perfectly_balanced [1,2,4,6]", perfectly_balanced, [1, 2, 4, 6], is_even)

print("\n--- Demo: short-circuiting on an infinite source ---")
report = measure_traversal("at_least 1000 evens in count()", at_least, count(), 1000, is_even)
print(f"Stopped after {report.items_pulled} items")
report = measure_traversal("exactly_n 0 evens in count(1)", exactly_n, count(1), 0, is_even)
print(f"Stopped after {report.items_pulled} items")
report = measure_traversal("all_or_none evens in count()", all_or_none, count(), is_even)
print(f"Stopped after {report.items_pulled} items")

print("\n--- Demo: alternating merge ---")
print("alternate([1, 3], [2, 4]):", list(alternate([1, 3], [2, 4])))
print("alternate('abc', 'xy'):", list(alternate("abc", "xy")))
print("alternate('ab', 'xyz'):", list(alternate("ab", "xyz")))
balanced = ExoticIterator(count(0, 2)).alternate(count(1, 2)).take(10).perfectly_balanced(is_even)
print(f"Evens alternated with odds, first 10 perfectly balanced: {balanced}")

summary = get_performance_summary()
print(f"\nMeasured {summary.total_operations} traversals, "
      f"{summary.total_items_pulled} items pulled in {summary.total_time_ms:.2f} ms")
