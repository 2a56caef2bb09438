from __future__ import annotations

from typing import MutableSequence, Optional


def bubble_sort(A: MutableSequence[int], length: Optional[int] = None) -> None:
    """In-place adjacent compare-and-swap sort over the first ``length`` items."""
    n = len(A) if length is None else length
    if n <= 1:
        return

    for i in range(n):
        swapped = False
        # After pass i the last i slots already hold the largest values
        for j in range(n - 1 - i):
            if A[j] > A[j + 1]:
                A[j], A[j + 1] = A[j + 1], A[j]
                swapped = True
        if not swapped:
            break
