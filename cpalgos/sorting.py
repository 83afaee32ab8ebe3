"""Classic comparison and distribution sorts.

Every sort takes an iterable and returns a new sorted list.
"""

from __future__ import annotations

import random

_rng = random.Random()


def partition_three_way(items, lo, hi, pivot):
    """Rearrange items[lo:hi] in place around pivot.

    Returns (start, end) such that items[lo:start] < pivot,
    items[start:end] == pivot and items[end:hi] > pivot.
    """
    i = less = lo
    greater = hi
    while i < greater:
        value = items[i]
        if value < pivot:
            items[i], items[less] = items[less], value
            i += 1
            less += 1
        elif value > pivot:
            greater -= 1
            items[i], items[greater] = items[greater], value
        else:
            i += 1
    return less, greater


def three_way_quick_sort(items):
    """Quick sort with a random pivot and three-way partitioning."""
    result = list(items)
    pending = [(0, len(result))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo < 2:
            continue
        pivot = result[_rng.randrange(lo, hi)]
        start, end = partition_three_way(result, lo, hi, pivot)
        pending.append((lo, start))
        pending.append((end, hi))
    return result


def _sift_down(heap, i, size):
    while (child := 2 * i + 1) < size:
        best = child if heap[child] > heap[i] else i
        right = child + 1
        if right < size and heap[right] > heap[best]:
            best = right
        if best == i:
            return
        heap[i], heap[best] = heap[best], heap[i]
        i = best


def heap_sort(items):
    """Sort with an in-place max-heap."""
    result = list(items)
    size = len(result)
    for i in reversed(range(size // 2)):
        _sift_down(result, i, size)
    for end in reversed(range(1, size)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end)
    return result


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort_iterative(items):
    """Bottom-up stable merge sort."""
    result = list(items)
    width = 1
    while width < len(result):
        merged = []
        for lo in range(0, len(result), 2 * width):
            merged.extend(_merge(result[lo:lo + width], result[lo + width:lo + 2 * width]))
        result = merged
        width *= 2
    return result


def merge_sort_recursive(items):
    """Top-down stable merge sort."""
    sequence = list(items)
    if len(sequence) <= 1:
        return sequence
    mid = len(sequence) // 2
    return _merge(merge_sort_recursive(sequence[:mid]), merge_sort_recursive(sequence[mid:]))


def _partition_first(items, lo, hi):
    """Partition items[lo..hi] (inclusive) around items[lo]; return the pivot's final index."""
    pivot = items[lo]
    i, j = lo + 1, hi
    while i <= j:
        if items[i] <= pivot:
            i += 1
        else:
            items[i], items[j] = items[j], items[i]
            j -= 1
    items[lo], items[j] = items[j], items[lo]
    return j


def _quick_sort(items, choose_pivot):
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        p = choose_pivot(lo, hi)
        result[lo], result[p] = result[p], result[lo]
        mid = _partition_first(result, lo, hi)
        pending.append((lo, mid - 1))
        pending.append((mid + 1, hi))
    return result


def quick_sort(items):
    """Quick sort using the first element of each range as pivot."""
    return _quick_sort(items, lambda lo, hi: lo)


def randomized_quick_sort(items):
    """Quick sort using a uniformly random pivot."""
    return _quick_sort(items, lambda lo, hi: _rng.randint(lo, hi))


def radix_sort(items, base, power):
    """LSD radix sort of non-negative integers on their lowest `power` digits in `base`."""
    if base < 2:
        raise ValueError("base must be at least 2")
    result = list(items)
    if any(value < 0 for value in result):
        raise ValueError("radix sort needs non-negative integers")
    offset = 1
    for _ in range(power):
        buckets = [[] for _ in range(base)]
        for value in result:
            buckets[value // offset % base].append(value)
        result = [value for bucket in buckets for value in bucket]
        offset *= base
    return result


def shell_sort(items):
    """Shell sort with halving gaps."""
    result = list(items)
    gap = len(result) // 2
    while gap > 0:
        for i in range(gap, len(result)):
            value = result[i]
            j = i
            while j >= gap and result[j - gap] > value:
                result[j] = result[j - gap]
                j -= gap
            result[j] = value
        gap //= 2
    return result