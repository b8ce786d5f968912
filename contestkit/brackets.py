"""Bracket balancing for strings of "()" and "[]", with a per-character stack trace."""

import sys

_OPENING = {")": "(", "]": "["}
_EMPTY = "Null"


def _walk(text):
    """Scan text and return (trace, balanced); scanning stops at the first mismatch."""
    stack = []
    trace = []
    matched = True
    for ch in text:
        if ch in "([":
            stack.append(ch)
        elif ch in _OPENING:
            if stack and stack[-1] == _OPENING[ch]:
                stack.pop()
            else:
                matched = False
        trace.append(stack[-1] if stack else _EMPTY)
        if not matched:
            break
    return trace, matched and not stack


def stack_trace(text):
    """Return the top of the bracket stack after each scanned character, or "Null" when empty."""
    return _walk(text)[0]


def is_balanced(text):
    """Return True when every bracket in text is closed in the right order."""
    return _walk(text)[1]


def solve(text):
    """Process a count line followed by that many lines; print each trace and Yes or No."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing line count")
    count = int(lines[0].strip())
    cases = lines[1 : count + 1]
    cases += [""] * (count - len(cases))
    output = []
    for line in cases:
        trace, balanced = _walk(line.rstrip("\r"))
        output.extend(trace)
        output.append("Yes" if balanced else "No")
    return "".join(f"{item}\n" for item in output)


def main(argv=None):
    """Read the cases from standard input and print the results."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0