"""Cheapest path through a grid of cell costs, from the top-left to the bottom-right corner."""

import heapq
import sys

_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def min_path_cost(grid):
    """Return the least total cost of cells on a four-way path from grid[0][0] to the far corner.

    The cost of a path counts every cell it visits, the first and the last included.
    """
    rows = len(grid)
    if rows == 0 or not grid[0]:
        raise ValueError("grid must have at least one cell")
    cols = len(grid[0])
    if any(len(line) != cols for line in grid):
        raise ValueError("grid rows must all have the same length")

    best = {(0, 0): grid[0][0]}
    heap = [(grid[0][0], 0, 0)]
    while heap:
        cost, x, y = heapq.heappop(heap)
        if cost > best[(x, y)]:
            continue
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols:
                candidate = cost + grid[nx][ny]
                if candidate < best.get((nx, ny), candidate + 1):
                    best[(nx, ny)] = candidate
                    heapq.heappush(heap, (candidate, nx, ny))
    return best[(rows - 1, cols - 1)]


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text):
    """Read a case count, then each grid as "rows cols" and its values; one cost per line."""
    tokens = iter(text.split())
    answers = []
    for _ in range(_next_int(tokens)):
        rows = _next_int(tokens)
        cols = _next_int(tokens)
        grid = [[_next_int(tokens) for _ in range(cols)] for _ in range(rows)]
        answers.append(min_path_cost(grid))
    return "".join(f"{answer}\n" for answer in answers)


def main(argv=None):
    """Read mazes from standard input and print the cheapest path costs."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0