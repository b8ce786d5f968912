"""News spreading through a friendship network: the day with the biggest boom."""

import sys
from collections import Counter, deque


def boom(friends, source):
    """Return (largest number of people first told on one day, earliest such day).

    friends[i] lists the people employee i tells; the source hears the news on day 0.
    Returns None when the news reaches nobody besides the source.
    """
    employees = len(friends)
    distance = {source: 0}
    queue = deque([source])
    while queue:
        person = queue.popleft()
        told = friends[person] if 0 <= person < employees else ()
        for friend in told:
            if friend not in distance:
                distance[friend] = distance[person] + 1
                queue.append(friend)

    per_day = Counter(
        day
        for person, day in distance.items()
        if 1 <= day <= employees and person <= employees
    )
    if not per_day:
        return None
    biggest = max(per_day.values())
    first_day = min(day for day, told in per_day.items() if told == biggest)
    return biggest, first_day


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text):
    """Read the friend lists and the sources; print "size day" per source, or "0" for no boom."""
    tokens = iter(text.split())
    friends = []
    for _ in range(_next_int(tokens)):
        friends.append([_next_int(tokens) for _ in range(_next_int(tokens))])
    lines = []
    for _ in range(_next_int(tokens)):
        result = boom(friends, _next_int(tokens))
        lines.append("0\n" if result is None else f"{result[0]} {result[1]}\n")
    return "".join(lines)


def main(argv=None):
    """Read the network from standard input and print the boom for each source."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0