"""String problems: camel-case words, common subsequences, permutations and
infix-to-postfix conversion."""

from __future__ import annotations

from collections.abc import Iterator

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "$": 3}
_RIGHT_ASSOCIATIVE = frozenset("$")
_IGNORED = frozenset(" ,")


def camel_case_words(text: str) -> int:
    """Count the words in a camelCase string: one plus each capital letter.

    Any character that sorts at or below ``'Z'`` counts as a word start.
    """
    return 1 + sum(1 for char in text if char <= "Z")


def common_child_length(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``.

    Arrangements are produced by swapping each later character into the
    current position in turn, so the first one is ``text`` itself. Repeated
    characters give repeated arrangements.
    """
    chars = list(text)

    def permute(i: int) -> Iterator[str]:
        if i == len(chars):
            yield "".join(chars)
            return
        for j in range(i, len(chars)):
            chars[i], chars[j] = chars[j], chars[i]
            yield from permute(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    yield from permute(0)


def precedence(operator: str) -> int:
    """Return the binding strength of an operator, or -1 if it is not one.

    ``+`` and ``-`` bind loosest, then ``*`` and ``/``, then ``$``
    (exponentiation).
    """
    return _PRECEDENCE.get(operator, -1)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _pops_before(top: str, incoming: str) -> bool:
    top_weight, incoming_weight = precedence(top), precedence(incoming)
    if top_weight == incoming_weight:
        return incoming not in _RIGHT_ASSOCIATIVE
    return top_weight > incoming_weight


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are ASCII letters and digits; operators are ``+ - * / $``, with
    ``$`` right-associative and the others left-associative. Spaces and
    commas are skipped. Raises ValueError for unbalanced parentheses or any
    other character.
    """
    pending: list[str] = []
    output: list[str] = []
    for char in expression:
        if char in _IGNORED:
            continue
        if char in _PRECEDENCE:
            while pending and pending[-1] != "(" and _pops_before(pending[-1], char):
                output.append(pending.pop())
            pending.append(char)
        elif _is_operand(char):
            output.append(char)
        elif char == "(":
            pending.append(char)
        elif char == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unmatched ')' in expression")
            pending.pop()
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    while pending:
        operator = pending.pop()
        if operator == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(operator)
    return "".join(output)