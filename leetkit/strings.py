"""String problems: zigzag layout, wildcard matching, keypad letters, parentheses and decoding."""

from __future__ import annotations

from itertools import pairwise, product

MODULUS = 1_000_000_007

_KEYPAD: dict[str, str] = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError(f"number of rows must be positive, got {num_rows}")
    if num_rows == 1 or num_rows >= len(s):
        return s

    rows: list[list[str]] = [[] for _ in range(num_rows)]
    cycle = 2 * num_rows - 2
    for position, char in enumerate(s):
        offset = position % cycle
        row = offset if offset < num_rows else cycle - offset
        rows[row].append(char)
    return "".join("".join(row) for row in rows)


def is_match(s: str, pattern: str) -> bool:
    """Return True when pattern matches the whole of s.

    '.' matches any single character and '*' repeats the preceding element
    zero or more times. A '*' at the very start of the pattern is a literal.
    """
    rows, cols = len(s) + 1, len(pattern) + 1
    dp = [[False] * cols for _ in range(rows)]
    dp[0][0] = True

    for i in range(rows):
        for j in range(1, cols):
            token = pattern[j - 1]
            if j > 1 and token == "*":
                repeated = pattern[j - 2]
                dp[i][j] = dp[i][j - 2] or (
                    i > 0 and repeated in (s[i - 1], ".") and dp[i - 1][j]
                )
            else:
                dp[i][j] = i > 0 and dp[i - 1][j - 1] and token in (s[i - 1], ".")
    return dp[-1][-1]


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad can spell for digits 2-9.

    Earlier digits vary fastest: "23" gives "ad", "bd", "cd", "ae", ...
    """
    if not digits:
        return []
    try:
        letter_groups = [_KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit without letters: {exc.args[0]!r}") from None
    return ["".join(reversed(combo)) for combo in product(*reversed(letter_groups))]


def score_of_parentheses(s: str) -> int:
    """Score a balanced parentheses string: "()" is 1, "AB" is A+B, "(A)" is 2*A."""
    scores = [0]
    for char in s:
        if char == "(":
            scores.append(0)
        elif char == ")":
            if len(scores) == 1:
                raise ValueError("unbalanced parentheses")
            inner = scores.pop()
            scores[-1] += max(2 * inner, 1)
        else:
            raise ValueError(f"unexpected character: {char!r}")
    if len(scores) != 1:
        raise ValueError("unbalanced parentheses")
    return scores[0]


def _single_ways(char: str) -> int:
    if char == "*":
        return 9
    if char in "123456789":
        return 1
    return 0


def num_decodings(s: str) -> int:
    """Count the ways to decode s, where '*' stands for any digit 1-9.

    Letters map to 1-26; the count is taken modulo 1_000_000_007.
    """
    if not s:
        raise ValueError("cannot decode an empty string")

    before, last = 1, _single_ways(s[0])
    for previous, char in pairwise(s):
        if char == "0":
            ways = 0
            if previous in ("1", "2"):
                ways += before
            elif previous == "*":
                ways += 2 * before
        elif char in "123456789":
            ways = last
            low = char in "123456"
            if previous == "1" or (low and previous == "2") or (not low and previous == "*"):
                ways += before
            if low and previous == "*":
                ways += 2 * before
        elif char == "*":
            ways = 9 * last
            ways += {"1": 9, "2": 6, "*": 15}.get(previous, 0) * before
        else:
            ways = 0
        before, last = last, ways % MODULUS
    return last