"""Graph problems: garden colouring, the town judge and surrounded regions."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, MutableSequence, Sequence

_FLOWER_TYPES = (1, 2, 3, 4)


def _check_node(node: int, n: int) -> int:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} out of range 1..{n}")
    return node - 1


def garden_no_adj(n: int, paths: Iterable[Sequence[int]]) -> list[int]:
    """Give each of n gardens a flower type 1-4 so that no two joined gardens match.

    Gardens are numbered from 1 and coloured in order, each with the lowest
    type not already used by a joined, earlier coloured garden.
    """
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for a, b in paths:
        a_index, b_index = _check_node(a, n), _check_node(b, n)
        neighbours[a_index].append(b_index)
        neighbours[b_index].append(a_index)

    colours = [0] * n
    for garden, joined in enumerate(neighbours):
        taken = {colours[other] for other in joined}
        free = [flower for flower in _FLOWER_TYPES if flower not in taken]
        if not free:
            raise ValueError(f"garden {garden + 1} has no flower type left")
        colours[garden] = free[0]
    return colours


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """Return the person trusted by everyone else who trusts nobody, or -1.

    People are numbered from 1; trust pairs are (truster, trusted) and may repeat.
    A town of one person or fewer has person 1 as its judge.
    """
    if n <= 1:
        return 1

    trusted_by: defaultdict[int, set[int]] = defaultdict(set)
    trusters: set[int] = set()
    for truster, trusted in trust:
        _check_node(truster, n)
        _check_node(trusted, n)
        trusted_by[trusted].add(truster)
        trusters.add(truster)

    for person in range(1, n + 1):
        others = set(range(1, n + 1)) - {person}
        if trusted_by[person] == others and person not in trusters:
            return person
    return -1


def solve_surrounded_regions(board: Sequence[MutableSequence[str]]) -> None:
    """Turn every 'O' region that does not reach the board's edge into 'X', in place."""
    rows = len(board)
    if rows == 0:
        return
    cols = len(board[0])
    if cols == 0:
        return

    seen = [[False] * cols for _ in range(rows)]
    for start_row in range(rows):
        for start_col in range(cols):
            if seen[start_row][start_col] or board[start_row][start_col] != "O":
                continue

            region: list[tuple[int, int]] = []
            touches_border = False
            pending = deque([(start_row, start_col)])
            seen[start_row][start_col] = True
            while pending:
                x, y = pending.popleft()
                region.append((x, y))
                if x in (0, rows - 1) or y in (0, cols - 1):
                    touches_border = True
                for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
                    if (
                        0 <= nx < rows
                        and 0 <= ny < cols
                        and not seen[nx][ny]
                        and board[nx][ny] == "O"
                    ):
                        seen[nx][ny] = True
                        pending.append((nx, ny))

            if not touches_border:
                for x, y in region:
                    board[x][y] = "X"