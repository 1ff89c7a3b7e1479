"""Classic string exercises: scanning, conversions, reversals and path handling."""

from itertools import product

_ROMAN_DIGITS = (
    ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX"),
    ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC"),
    ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM"),
    ("", "M", "MM", "MMM"),
)

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def repeated_characters(text):
    """Return every character already seen earlier in ``text``, once per repeat, in order."""
    seen = set()
    repeats = []
    for char in text:
        if char in seen:
            repeats.append(char)
        seen.add(char)
    return repeats


def length_of_longest_substring(s):
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen = {}
    best = 0
    left = 0
    for i, char in enumerate(s):
        previous = last_seen.get(char, -1)
        if previous >= left:
            left = previous + 1
        else:
            best = max(best, i + 1 - left)
        last_seen[char] = i
    return best


def int_to_roman(num):
    """Write ``num`` (0 to 3999) in Roman numerals; zero gives the empty string."""
    if not 0 <= num <= 3999:
        raise ValueError("num must lie between 0 and 3999")
    thousands, hundreds, tens, ones = (_ROMAN_DIGITS[3], _ROMAN_DIGITS[2],
                                       _ROMAN_DIGITS[1], _ROMAN_DIGITS[0])
    return (thousands[num // 1000]
            + hundreds[num // 100 % 10]
            + tens[num // 10 % 10]
            + ones[num % 10])


def roman_to_int(s):
    """Read a Roman numeral, subtracting a symbol that stands before a larger one."""
    total = 0
    last = 0
    for symbol in reversed(s):
        try:
            value = _ROMAN_VALUES[symbol]
        except KeyError:
            raise ValueError(f"not a Roman numeral symbol: {symbol!r}") from None
        total += -value if value < last else value
        last = value
    return total


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    shortest = min(strs, key=len)
    for i, char in enumerate(shortest):
        if any(other[i] != char for other in strs):
            return shortest[:i]
    return shortest


def letter_combinations(digits):
    """Return every letter string a phone keypad can spell from ``digits``.

    A digit with no letters makes the result empty.
    """
    if not digits:
        return []
    groups = [_PHONE_LETTERS.get(digit, "") for digit in digits]
    return ["".join(letters) for letters in product(*groups)]


def str_str(haystack, needle):
    """Return the index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    width = len(needle)
    for i in range(len(haystack) - width + 1):
        if haystack[i:i + width] == needle:
            return i
    return -1


def reverse_string(chars):
    """Reverse the list ``chars`` in place."""
    chars.reverse()


def reverse_str(s, k):
    """Reverse the first ``k`` characters of every block of ``2 * k`` in ``s``."""
    if k <= 0:
        raise ValueError("k must be positive")
    pieces = []
    for start in range(0, len(s), 2 * k):
        block = s[start:start + 2 * k]
        pieces.append(block[:k][::-1] + block[k:])
    return "".join(pieces)


def reverse_words(s):
    """Reverse each space-separated word of ``s``, keeping the words in place."""
    return " ".join(word[::-1] for word in s.split(" "))


def length_of_last_word(s):
    """Return the length of the last space-separated word of ``s``; 0 if there is none."""
    return len(s.rstrip(" ").split(" ")[-1])


def simplify_path(path):
    """Return the canonical form of a Unix-style absolute ``path``."""
    stack = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return "/" + "/".join(stack)