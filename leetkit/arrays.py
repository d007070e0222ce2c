"""Array problems: k-sum searches, container area and partition sums."""

from __future__ import annotations

from typing import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct triples of values that sum to zero, each in ascending order."""
    values = sorted(nums)
    last_index = {value: index for index, value in enumerate(values)}
    seen: set[tuple[int, int, int]] = set()
    result: list[list[int]] = []
    for i, a in enumerate(values):
        for j in range(i + 1, len(values)):
            b = values[j]
            c = -(a + b)
            if last_index.get(c, -1) > j and (a, b, c) not in seen:
                seen.add((a, b, c))
                result.append([a, b, c])
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct quadruples of values that sum to target, each sorted."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    if size < 4:
        return result
    seen: set[tuple[int, ...]] = set()

    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        if values[i] + values[i + 1] + values[i + 2] + values[i + 3] > target:
            break
        if values[i] + values[-3] + values[-2] + values[-1] < target:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            if values[i] + values[j] + values[j + 1] + values[j + 2] > target:
                break
            if values[i] + values[j] + values[-2] + values[-1] < target:
                continue
            base = values[i] + values[j]
            lo, hi = 0, size - 1
            while lo < hi:
                if lo in (i, j) or hi in (i, j):
                    lo += 1
                    continue
                total = base + values[lo] + values[hi]
                if total == target:
                    quad = sorted((values[i], values[j], values[lo], values[hi]))
                    key = tuple(quad)
                    if key not in seen:
                        seen.add(key)
                        result.append(quad)
                    lo += 1
                elif total > target:
                    hi -= 1
                else:
                    lo += 1
    return result


def max_area(heights: Sequence[int]) -> int:
    """Return the largest water area held between two of the given lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        width = right - left
        if heights[left] < heights[right]:
            height = heights[left]
            left += 1
        else:
            height = heights[right]
            right -= 1
        best = max(best, height * width)
    return best


def max_sum_after_partitioning(values: Sequence[int], k: int) -> int:
    """Return the largest sum after splitting into runs of at most k, each raised to its maximum."""
    best = [0] * (len(values) + 1)
    for end in range(1, len(values) + 1):
        run_max = values[end - 1]
        for length in range(1, min(k, end) + 1):
            run_max = max(run_max, values[end - length])
            best[end] = max(best[end], best[end - length] + run_max * length)
    return best[-1]