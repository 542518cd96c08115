"""Selection and optimisation puzzles over integer arrays."""

from __future__ import annotations

import heapq
from collections import deque
from itertools import chain
from operator import itemgetter
from typing import Optional


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Median of all values in both arrays; 0.0 when both are empty."""
    merged = sorted(chain(nums1, nums2))
    if not merged:
        return 0.0
    mid = len(merged) // 2
    if len(merged) % 2:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2


def min_patches(nums: list[int], n: int) -> int:
    """Fewest numbers to add to sorted ``nums`` so every value in 1..n is a subset sum."""
    numbers = iter(nums)
    upcoming = next(numbers, None)
    reach = 1
    patches = 0
    while reach <= n:
        if upcoming is not None and upcoming <= reach:
            reach += upcoming
            upcoming = next(numbers, None)
        else:
            reach *= 2
            patches += 1
    return patches


def find_maximized_capital(
    k: int, w: int, profits: list[int], capital: list[int]
) -> int:
    """Capital after greedily running at most ``k`` affordable projects."""
    projects = deque(sorted(zip(capital, profits), key=itemgetter(0)))
    available: list[int] = []
    current = w
    for _ in range(k):
        while projects and projects[0][0] <= current:
            heapq.heappush(available, -projects.popleft()[1])
        if not available:
            break
        current -= heapq.heappop(available)
    return current


def three_sum(nums: list[int]) -> list[list[int]]:
    """All distinct sorted triplets of ``nums`` that sum to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    last = len(values) - 1
    for start, value in enumerate(values):
        if start and values[start - 1] == value:
            continue
        target = -value
        mid, right = start + 1, last
        while mid < right:
            total = values[mid] + values[right]
            if total == target:
                result.append([value, values[mid], values[right]])
                while mid < right and values[mid] == values[mid + 1]:
                    mid += 1
                while right > mid and values[right - 1] == values[right]:
                    right -= 1
                mid += 1
                right -= 1
            elif total < target:
                mid += 1
            else:
                right -= 1
    return result


def max_profit_assignment(
    difficulty: list[int], profit: list[int], worker: list[int]
) -> int:
    """Total profit when each worker takes the best job no harder than their ability."""
    if not worker:
        raise ValueError("max_profit_assignment() needs at least one worker")
    jobs = deque(sorted(zip(difficulty, profit), key=itemgetter(0)))
    best: Optional[int] = None
    total = 0
    for ability in sorted(worker):
        while jobs and jobs[0][0] <= ability:
            gain = jobs.popleft()[1]
            best = gain if best is None else max(best, gain)
        if best is not None:
            total += best
    return total


def max_satisfied(customers: list[int], grumpy: list[int], minutes: int) -> int:
    """Most satisfied customers when the owner stays calm for one window of ``minutes``."""
    if minutes < 0:
        raise ValueError("max_satisfied() needs a non-negative window")
    pairs = list(zip(customers, grumpy, strict=True))
    base = sum(count for count, moody in pairs if not moody)
    gains = [count if moody else 0 for count, moody in pairs]
    window = sum(gains[:minutes])
    best = window
    for entering, leaving in zip(gains[minutes:], gains):
        window += entering - leaving
        best = max(best, window)
    return base + best


def number_of_subarrays(nums: list[int], k: int) -> int:
    """Number of contiguous subarrays holding exactly ``k`` odd numbers."""
    if k < 1:
        raise ValueError("number_of_subarrays() needs k of at least 1")
    window: deque[int] = deque()
    odd_count = 0
    count = 0
    result = 0
    for value in nums:
        window.append(value)
        if value % 2 == 1:
            odd_count += 1
            count = 0
        while odd_count == k:
            if window.popleft() % 2 == 1:
                odd_count -= 1
            count += 1
        result += count
    return result


def can_make_bouquets(bloom_day: list[int], day: int, m: int, k: int) -> bool:
    """Whether ``m`` bouquets of ``k`` adjacent bloomed flowers exist on ``day``."""
    bouquets = 0
    run = 0
    for bloom in bloom_day:
        if bloom <= day:
            run += 1
            if run == k:
                bouquets += 1
                run = 0
        else:
            run = 0
    return bouquets >= m


def min_days(bloom_day: list[int], m: int, k: int) -> int:
    """Earliest day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    if len(bloom_day) < m * k or not bloom_day:
        return -1
    low, high = 0, max(bloom_day)
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if can_make_bouquets(bloom_day, mid, m, k):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer