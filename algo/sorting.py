"""In-place sorting algorithms over lists of integers.

Every function rearranges the list it is given and returns None, like
``list.sort``.
"""

from itertools import accumulate, chain


def bubble_sort(items):
    """Sort by repeatedly swapping adjacent pairs; stops early once a pass swaps nothing."""
    n = len(items)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(items):
    """Sort by inserting each element into the sorted prefix before it."""
    for i in range(1, len(items)):
        value = items[i]
        j = i - 1
        while j >= 0 and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value


def selection_sort(items):
    """Sort by moving the smallest remaining element to the front of the unsorted part."""
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted_copy(items):
    if len(items) <= 1:
        return list(items)
    mid = (len(items) + 1) // 2
    return _merge(_merge_sorted_copy(items[:mid]), _merge_sorted_copy(items[mid:]))


def merge_sort(items):
    """Sort by splitting in halves, sorting each and merging them."""
    if len(items) <= 1:
        return
    items[:] = _merge_sorted_copy(items)


def _partition(items, start, end):
    pivot = items[end]
    i = start
    for j in range(start, end):
        if items[j] < pivot:
            if i != j:
                items[i], items[j] = items[j], items[i]
            i += 1
    items[i], items[end] = items[end], items[i]
    return i


def _quick_sort(items, start, end):
    if start >= end:
        return
    mid = _partition(items, start, end)
    _quick_sort(items, start, mid - 1)
    _quick_sort(items, mid + 1, end)


def quick_sort(items):
    """Sort with quicksort, partitioning around the last element in place."""
    _quick_sort(items, 0, len(items) - 1)


def _require_non_negative(items):
    if min(items) < 0:
        raise ValueError("values must not be negative")


def bucket_sort(items):
    """Sort non-negative integers by spreading them over ``len(items)`` buckets."""
    n = len(items)
    if n <= 1:
        return
    _require_non_negative(items)
    maximum = max(items)
    if maximum == 0:
        return
    buckets = [[] for _ in range(n)]
    for value in items:
        buckets[value * (n - 1) // maximum].append(value)
    for bucket in buckets:
        quick_sort(bucket)
    items[:] = list(chain.from_iterable(buckets))


def bucket_sort_simple(items):
    """Sort non-negative integers with one bucket per value from 0 to the maximum."""
    if len(items) <= 1:
        return
    _require_non_negative(items)
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]


def counting_sort(items):
    """Sort non-negative integers by counting occurrences and placing by prefix sums."""
    if len(items) <= 1:
        return
    _require_non_negative(items)
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    ends = list(accumulate(counts))
    result = [0] * len(items)
    for value in items:
        ends[value] -= 1
        result[ends[value]] = value
    items[:] = result