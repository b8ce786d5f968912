"""Shortest walk across a grid with bombed cells, moving in four directions."""

import sys
from collections import deque

_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def shortest_path(rows, cols, bombs, start, dest):
    """Return the fewest steps from start to dest avoiding bombs; 0 when dest is unreachable."""
    blocked = set(bombs)
    distance = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _MOVES:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < rows
                and 0 <= nxt[1] < cols
                and nxt not in distance
                and nxt not in blocked
            ):
                distance[nxt] = distance[(x, y)] + 1
                queue.append(nxt)
    return distance.get(dest, 0)


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text):
    """Answer every grid description in text until a "0 0" line, one distance per line."""
    tokens = iter(text.split())
    answers = []
    for token in tokens:
        rows = int(token)
        cols = _next_int(tokens)
        if rows == 0 and cols == 0:
            break
        bombs = []
        for _ in range(_next_int(tokens)):
            row = _next_int(tokens)
            for _ in range(_next_int(tokens)):
                bombs.append((row, _next_int(tokens)))
        start = (_next_int(tokens), _next_int(tokens))
        dest = (_next_int(tokens), _next_int(tokens))
        answers.append(shortest_path(rows, cols, bombs, start, dest))
    return "".join(f"{answer}\n" for answer in answers)


def main(argv=None):
    """Read grids from standard input and print the shortest distances."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0