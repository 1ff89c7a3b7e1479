"""Small integer and digit-string algorithms."""


def gcd(a, b):
    """Greatest common divisor of two positive integers by binary halving and subtraction."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd needs positive integers")
    shift = 0
    while a != b:
        a_even = a & 1 == 0
        b_even = b & 1 == 0
        if a_even and b_even:
            a >>= 1
            b >>= 1
            shift += 1
        elif a_even:
            a >>= 1
        elif b_even:
            b >>= 1
        else:
            big, small = max(a, b), min(a, b)
            a, b = big - small, small
    return a << shift


def is_power_of_two(num):
    """Tell whether ``num`` is a positive integer power of two."""
    return num > 0 and num & (num - 1) == 0


def remove_k_digits(num, k):
    """Return the smallest number left after removing ``k`` digits from ``num``.

    Leading zeros are dropped; removing every digit leaves "0".
    """
    if not num.isdigit():
        raise ValueError("num must be a string of decimal digits")
    if not 0 <= k <= len(num):
        raise ValueError("k must lie between 0 and the number of digits")
    kept = []
    remaining = k
    for digit in num:
        while remaining and kept and kept[-1] > digit:
            kept.pop()
            remaining -= 1
        kept.append(digit)
    if remaining:
        del kept[-remaining:]
    return "".join(kept).lstrip("0") or "0"