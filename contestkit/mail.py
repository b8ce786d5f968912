"""Shortest latency between two servers in an undirected weighted network."""

import heapq
import sys
from collections import defaultdict

# Distances at or beyond this bound count as unreachable.
_LIMIT = 214748369


def shortest_distance(n, edges, source, dest):
    """Return the least total weight from source to dest, or None when dest is unreachable.

    n is the number of servers; edges holds (u, v, weight) triples usable both ways.
    """
    if n < 0:
        raise ValueError("server count must not be negative")
    graph = defaultdict(list)
    for u, v, weight in edges:
        graph[u].append((v, weight))
        graph[v].append((u, weight))

    best = {source: 0}
    heap = [(0, source)]
    while heap:
        dist, u = heapq.heappop(heap)
        if dist > best[u]:
            continue
        for v, weight in graph[u]:
            candidate = dist + weight
            if candidate < best.get(v, _LIMIT):
                best[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return best.get(dest)


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text):
    """Answer each network in text with a "Case #k: distance" or "Case #k: unreachable" line."""
    tokens = iter(text.split())
    lines = []
    for case in range(1, _next_int(tokens) + 1):
        n = _next_int(tokens)
        m = _next_int(tokens)
        source = _next_int(tokens)
        dest = _next_int(tokens)
        edges = [
            (_next_int(tokens), _next_int(tokens), _next_int(tokens)) for _ in range(m)
        ]
        answer = shortest_distance(n, edges, source, dest)
        shown = "unreachable" if answer is None else answer
        lines.append(f"Case #{case}: {shown}\n")
    return "".join(lines)


def main(argv=None):
    """Read networks from standard input and print the shortest distances."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0