"""Small combinatorics helpers: factorials, binomials and k-combinations."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n ({n})")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def n_choose_k(n: int, k: int) -> int:
    """Return the binomial coefficient "n choose k"."""
    if k < 0 or k > n:
        raise ValueError(f"n_choose_k requires 0 <= k <= n (n={n}, k={k})")
    return factorial(n) // (factorial(k) * factorial(n - k))


def combinations_of_k(sorted_elements: Sequence[int], k: int) -> list[set[int]]:
    """Return every k-element combination of ``sorted_elements`` as sets.

    Combinations are produced in lexicographic order of element position, so
    for ``[0, 1, 2]`` and ``k == 2`` the result is ``{0, 1}, {0, 2}, {1, 2}``.
    Choosing zero elements yields a single empty set.
    """
    if k < 0:
        raise ValueError(f"k must not be negative ({k})")
    return [set(combination) for combination in combinations(sorted_elements, k)]