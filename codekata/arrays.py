"""Array puzzles: pair sums, in-place filtering, searching and prefix sums."""

from __future__ import annotations

from itertools import accumulate, chain, groupby


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices ``[later, earlier]`` of two values summing to ``target``, or []."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        earlier = seen.get(target - value)
        if earlier is not None:
            return [index, earlier]
        seen[value] = index
    return []


def remove_duplicates(nums: list[int]) -> int:
    """Drop consecutive repeats from ``nums`` in place; return its new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Sort ``nums`` in place and drop every ``val``; return its new length."""
    nums.sort()
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def search_insert(nums: list[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums)
    while low < high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid
    return low


def running_sum(nums: list[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def maximum_wealth(accounts: list[list[int]]) -> int:
    """Largest row total, never less than zero."""
    return max(chain([0], map(sum, accounts)))