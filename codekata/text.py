"""String puzzles: numerals, prefixes, brackets, searching and binary sums."""

from __future__ import annotations

from collections import Counter, deque
from itertools import pairwise, zip_longest

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_BRACKET_PAIRS = {"(": ")", "[": "]", "{": "}"}
_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals are ignored."""
    values = deque(_ROMAN_VALUES[c] for c in s if c in _ROMAN_VALUES)
    total = 0
    while values:
        current = values.popleft()
        if values and current < values[0]:
            total += values.popleft() - current
        else:
            total += current
    return total


def longest_common_prefix(strs: list[str]) -> str:
    """Longest string that every item of ``strs`` starts with."""
    if not strs:
        raise ValueError("longest_common_prefix() needs at least one string")
    first = strs[0]
    for length in range(len(first), 0, -1):
        prefix = first[:length]
        if all(s.startswith(prefix) for s in strs):
            return prefix
    return ""


def brackets_match(left: str, right: str) -> bool:
    """Whether ``left`` is an opening bracket closed by ``right``."""
    return _BRACKET_PAIRS.get(left) == right


def is_valid(s: str) -> bool:
    """Whether the brackets in ``s`` are balanced and properly nested."""
    while True:
        if len(s) % 2:
            return False
        matched: set[int] = set()
        for index, (left, right) in enumerate(pairwise(s)):
            if brackets_match(left, right):
                matched.update((index, index + 1))
        s = "".join(
            c
            for index, c in enumerate(s)
            if index not in matched and c not in _ASCII_WHITESPACE
        )
        if not s:
            return True
        if not matched:
            return False


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Length of the last whitespace-separated word in ``s``."""
    words = s.split()
    return len(words[-1]) if words else 0


def add_binary(a: str, b: str) -> str:
    """Sum of two binary strings, as a binary string as wide as the wider input."""
    bits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = (x == "1") + (y == "1") + carry
        bits.append("1" if total % 2 else "0")
        carry = total // 2
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Whether ``ransom_note`` can be spelled using the letters of ``magazine``."""
    return not Counter(ransom_note) - Counter(magazine)


def fizz_buzz(n: int) -> list[str]:
    """The FizzBuzz sequence for 1 through ``n``."""

    def word(value: int) -> str:
        if value % 15 == 0:
            return "FizzBuzz"
        if value % 3 == 0:
            return "Fizz"
        if value % 5 == 0:
            return "Buzz"
        return str(value)

    return [word(value) for value in range(1, n + 1)]