from __future__ import annotations
from typing import List, Sequence, Tuple


def _sort_count(arr: List[int]) -> Tuple[List[int], int]:
    if len(arr) < 2:
        return arr, 0
    mid = len(arr) // 2
    left, inv_l = _sort_count(arr[:mid])
    right, inv_r = _sort_count(arr[mid:])
    merged: List[int] = []
    inv = inv_l + inv_r
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i]); i += 1
        else:
            # every remaining left item is greater than right[j]
            merged.append(right[j]); j += 1
            inv += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inv


def count_inversions(seq: Sequence[int]) -> int:
    """Number of pairs i < j with seq[i] > seq[j] (merge counting, O(k log k))."""
    return _sort_count(list(seq))[1]
