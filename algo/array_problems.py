"""Classic array exercises: in-place rearrangements, pair sums and simple scans."""

_ONE_TO_HUNDRED_TOTAL = sum(range(1, 101))


def move_zeroes(nums):
    """Move every zero to the end of ``nums`` in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def two_sum(nums, target):
    """Return indices ``[i, j]`` with ``i <= j`` whose values add up to ``target``.

    Every pair is tried in turn, and an element may be paired with itself.
    """
    for i, first in enumerate(nums):
        for j in range(i, len(nums)):
            if first + nums[j] == target:
                return [i, j]
    raise ValueError("no two numbers add up to the target")


def two_sum_hashed(nums, target):
    """Return indices ``[i, j]`` with ``i < j`` whose values add up to ``target``.

    Each value needed to complete an earlier element is remembered with
    that element's index, so one pass is enough.
    """
    wanted = {}
    for index, value in enumerate(nums):
        if value in wanted:
            return [wanted[value], index]
        wanted[target - value] = index
    raise ValueError("no two numbers add up to the target")


def max_area(heights):
    """Return the most water two of the vertical lines ``heights`` can hold."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        low, high = heights[left], heights[right]
        best = max(best, min(low, high) * (right - left))
        if low < high:
            left += 1
        else:
            right -= 1
    return best


def rotate(nums, k):
    """Rotate ``nums`` to the right by ``k`` steps in place."""
    if k < 0:
        raise ValueError("k must not be negative")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def remove_duplicates(nums):
    """Compact a sorted list so its distinct values lead; return how many there are.

    Values after the returned count are left as they were.
    """
    if not nums:
        return 0
    last = 0
    for value in nums:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def plus_one(digits):
    """Add one to the number whose decimal digits are ``digits`` and return the new digits."""
    if not digits:
        raise ValueError("digits must not be empty")
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def climb_stairs(n):
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def merge_sorted(nums1, m, nums2, n):
    """Merge the first ``m`` values of ``nums1`` with the first ``n`` of ``nums2`` into ``nums1``.

    ``nums1`` must have room for exactly ``m + n`` values.
    """
    if len(nums1) != m + n:
        raise ValueError("nums1 must hold exactly m + n slots")
    left, right = nums1[:m], nums2[:n]
    i = j = 0
    for position in range(m + n):
        if j >= n or (i < m and left[i] < right[j]):
            nums1[position] = left[i]
            i += 1
        else:
            nums1[position] = right[j]
            j += 1


def find_missing_number(items):
    """Return the number from 1 to 100 missing in ``items``; an empty list gives 0."""
    if not items:
        return 0
    return _ONE_TO_HUNDRED_TOTAL - sum(items)


def repeated_numbers(items):
    """Return every value that was already seen earlier, once per repeat, in order."""
    seen = set()
    repeats = []
    for value in items:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def find_max_and_min(items):
    """Return ``(largest, smallest)`` of ``items``; an empty list gives ``(0, 0)``."""
    if not items:
        return 0, 0
    return max(items), min(items)


def dedupe_sorted(items):
    """Drop consecutive duplicates from ``items`` in place and return it."""
    if not items:
        return items
    last = 0
    for value in items[1:]:
        if value != items[last]:
            last += 1
            items[last] = value
    del items[last + 1:]
    return items


def reverse_array(items):
    """Reverse ``items`` in place and return it."""
    items.reverse()
    return items