"""Substring puzzles: distinct runs, palindromes and zigzag layouts."""

from __future__ import annotations

from itertools import chain, cycle


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring of ``s``; the leftmost one on ties."""
    if not s:
        raise ValueError("longest_palindrome() needs a non-empty string")
    best_start, best_length = 0, 0
    for center in range(2 * len(s) - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        length = right - left - 1
        if length > best_length:
            best_start, best_length = left + 1, length
    return s[best_start : best_start + best_length]


def convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("convert() needs at least one row")
    if num_rows == 1:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    path = list(chain(range(num_rows), range(num_rows - 2, 0, -1)))
    for char, row in zip(s, cycle(path)):
        rows[row].append(char)
    return "".join("".join(row) for row in rows)