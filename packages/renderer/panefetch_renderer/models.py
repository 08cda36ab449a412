"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Union


class Dialect(str, Enum):
    TERMINAL = "terminal"
    MARKUP = "markup"


class DirectiveKind(str, Enum):
    EXEC = "exec"
    MODULE = "module"
    COLOR = "color"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Directive:
    kind: DirectiveKind
    body: str
    offset: int


Token = Union[Literal, Directive]


@dataclass(frozen=True)
class RenderedLine:
    decorated: str
    plain: str


@dataclass(frozen=True)
class ColorSpec:
    """A resolved color.

    ``color`` is an ANSI color name or ``#rrggbb``; ``sgr`` keeps the raw
    parameters of an escape sequence so the terminal dialect can replay it.
    """

    color: str | None
    weight: str = "normal"
    ground: str = "fgcolor"
    sgr: str | None = None


@dataclass(frozen=True)
class ColorSlots:
    black: str
    red: str
    green: str
    blue: str
    cyan: str
    yellow: str
    magenta: str
    white: str

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def get(self, name: str) -> str | None:
        if name in self.names():
            return getattr(self, name)
        return None
