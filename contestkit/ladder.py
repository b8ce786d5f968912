"""Word ladders: the fewest one-letter changes that turn one dictionary word into another."""

import sys
from collections import deque

_END_OF_WORDS = "*"


def differs_by_one(first, second):
    """Return True when the words have the same length and differ in exactly one position."""
    if len(first) != len(second):
        return False
    return sum(a != b for a, b in zip(first, second)) == 1


def build_graph(words):
    """Return a mapping from each distinct word to the words one letter away from it.

    Words keep their first-seen order, both as keys and within each neighbour list.
    """
    unique = list(dict.fromkeys(words))
    return {
        word: [other for other in unique if differs_by_one(word, other)]
        for word in unique
    }


def _distances(graph, start):
    distance = {start: 0}
    queue = deque([start])
    while queue:
        word = queue.popleft()
        for neighbour in graph.get(word, ()):
            if neighbour not in distance:
                distance[neighbour] = distance[word] + 1
                queue.append(neighbour)
    return distance


def _distance_in(graph, start, dest):
    if start not in graph or dest not in graph:
        return None
    return _distances(graph, start).get(dest)


def transformation_distance(words, start, dest):
    """Return the fewest single-letter steps from start to dest through words.

    Returns None when either word is not in the dictionary or dest cannot be reached.
    """
    return _distance_in(build_graph(words), start, dest)


def _read_words(lines, pending):
    words = []
    while True:
        while not pending:
            try:
                pending.extend(next(lines).split())
            except StopIteration:
                raise ValueError("word list is not closed by '*'") from None
        token = pending.popleft()
        if token == _END_OF_WORDS:
            pending.clear()
            return words
        words.append(token)


def solve(text):
    """Answer each case: a dictionary closed by "*", then "start dest" lines up to a blank line.

    Each query prints "start dest distance", with 0 for unreachable or unknown words;
    a blank line separates the cases.
    """
    lines = iter(text.splitlines())
    pending = deque()
    for line in lines:
        if line.strip():
            pending.extend(line.split())
            break
    if not pending:
        raise ValueError("missing case count")
    count = int(pending.popleft())

    cases = []
    for _ in range(count):
        graph = build_graph(_read_words(lines, pending))
        answers = []
        for line in lines:
            if not line.strip():
                break
            tokens = line.split()
            if len(tokens) < 2:
                raise ValueError(f"query needs two words: {line!r}")
            start, dest = tokens[0], tokens[1]
            distance = _distance_in(graph, start, dest)
            answers.append(f"{start} {dest} {0 if distance is None else distance}\n")
        cases.append("".join(answers))
    return "\n".join(cases)


def main(argv=None):
    """Read dictionaries and queries from standard input and print the ladder lengths."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0