"""Escape-aware directive scanner.

A line is scanned once into ``Literal`` runs and ``Directive`` tokens:

- ``$(`` ``$<`` ``${`` open a directive closed by ``)`` ``>`` ``}``.
- An opener preceded by an odd number of backslashes is literal text; one
  backslash is dropped. An even number does not suppress it.
- Inside a body, a backslash-escaped closer is kept as a literal character and
  the backslash is dropped.
"""

from __future__ import annotations

from .errors import TemplateParseError
from .models import Directive, DirectiveKind, Literal, Token

OPENERS: dict[str, tuple[DirectiveKind, str]] = {
    "(": (DirectiveKind.EXEC, ")"),
    "<": (DirectiveKind.MODULE, ">"),
    "{": (DirectiveKind.COLOR, "}"),
}


def _backslashes_before(line: str, index: int) -> int:
    count = 0
    while index - count - 1 >= 0 and line[index - count - 1] == "\\":
        count += 1
    return count


def _read_body(line: str, start: int, closer: str) -> tuple[str, int]:
    """Return the directive body and the index of its closer."""
    body: list[str] = []
    for i in range(start + 2, len(line)):
        ch = line[i]
        if ch == closer:
            if i > start + 2 and line[i - 1] == "\\":
                body[-1] = ch
                continue
            return "".join(body), i
        body.append(ch)
    raise TemplateParseError(line, start)


def scan(line: str) -> list[Token]:
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    while i < len(line):
        ch = line[i]
        opener = line[i + 1] if i + 1 < len(line) else ""
        if ch != "$" or opener not in OPENERS:
            literal.append(ch)
            i += 1
            continue

        if _backslashes_before(line, i) % 2 == 1:
            literal[-1] = "$"
            i += 1
            continue

        kind, closer = OPENERS[opener]
        body, end = _read_body(line, i, closer)
        if literal:
            tokens.append(Literal("".join(literal)))
            literal = []
        tokens.append(Directive(kind=kind, body=body, offset=i))
        i = end + 1

    if literal:
        tokens.append(Literal("".join(literal)))
    return tokens
