"""Binary search over sorted lists of integers and its boundary-finding variants.

Every function returns an index, or -1 when there is no match.
"""


def binary_search(items, value):
    """Return the index of some element equal to ``value``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == value:
            return mid
        if items[mid] > value:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def _search(items, value, low, high):
    if low > high:
        return -1
    mid = (low + high) // 2
    if items[mid] == value:
        return mid
    if items[mid] > value:
        return _search(items, value, low, mid - 1)
    return _search(items, value, mid + 1, high)


def binary_search_recursive(items, value):
    """Recursive form of :func:`binary_search`."""
    return _search(items, value, 0, len(items) - 1)


def binary_search_first(items, value):
    """Return the index of the first element equal to ``value``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) >> 1
        if items[mid] > value:
            high = mid - 1
        elif items[mid] < value:
            low = mid + 1
        elif mid == 0 or items[mid - 1] != value:
            return mid
        else:
            high = mid - 1
    return -1


def binary_search_last(items, value):
    """Return the index of the last element equal to ``value``."""
    n = len(items)
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) >> 1
        if items[mid] > value:
            high = mid - 1
        elif items[mid] < value:
            low = mid + 1
        elif mid == n - 1 or items[mid + 1] != value:
            return mid
        else:
            low = mid + 1
    return -1


def binary_search_first_gt(items, value):
    """Return the index of the first element greater than ``value``.

    Only answers when ``value`` itself occurs in ``items``.
    """
    n = len(items)
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) >> 1
        if items[mid] > value:
            high = mid - 1
        elif items[mid] < value:
            low = mid + 1
        elif mid != n - 1 and items[mid + 1] > value:
            return mid + 1
        else:
            low = mid + 1
    return -1


def binary_search_last_lt(items, value):
    """Return the index of the last element less than ``value``.

    Only answers when ``value`` itself occurs in ``items``.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) >> 1
        if items[mid] > value:
            high = mid - 1
        elif items[mid] < value:
            low = mid + 1
        elif mid == 0 or items[mid - 1] < value:
            return mid - 1
        else:
            high = mid - 1
    return -1