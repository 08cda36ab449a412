"""Directive evaluation into decorated and plain text."""

from __future__ import annotations

import html
import logging
from typing import Callable

from panefetch_facts.shell import shell_exec

from .colors import RESET, is_reset, open_sequence, resolve_color
from .errors import ModuleLookupError
from .models import ColorSlots, Dialect, DirectiveKind, Literal, RenderedLine
from .registry import ModuleRegistry, ModuleValue
from .scanner import scan

PLACEHOLDER = "<unknown/invalid module>"

_log = logging.getLogger("panefetch.evaluator")


def format_value(value: ModuleValue) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


class Evaluator:
    """Renders template lines for one dialect.

    Every token appends to the decorated and the plain buffer in the same step.
    Visible text (literals, command output, module values) goes to both; color
    codes only to the decorated one, so ``len(plain)`` is the visible width.
    """

    def __init__(
        self,
        registry: ModuleRegistry,
        palette: ColorSlots,
        dialect: Dialect = Dialect.TERMINAL,
        runner: Callable[[str], str] = shell_exec,
    ) -> None:
        self.registry = registry
        self.palette = palette
        self.dialect = dialect
        self.runner = runner

    def _visible(self, text: str) -> str:
        if self.dialect is Dialect.MARKUP:
            return html.escape(text, quote=False)
        return text

    def _lookup(self, path: str) -> str:
        try:
            return format_value(self.registry.lookup(path))
        except ModuleLookupError:
            _log.info(f"unknown module value {path!r}", extra={"event": "lookup_miss"})
            return PLACEHOLDER

    def _color(self, token: str) -> str | None:
        spec = resolve_color(token, self.palette)
        code = open_sequence(spec, self.dialect) if spec is not None else None
        if code is None:
            _log.warning(f"cannot use color {token!r} in {self.dialect.value} output", extra={"event": "color_unresolved"})
        return code

    def render(self, line: str) -> RenderedLine:
        decorated: list[str] = []
        plain: list[str] = []
        open_spans = 0

        for token in scan(line):
            if isinstance(token, Literal):
                text = token.text
            elif token.kind is DirectiveKind.EXEC:
                text = self.runner(token.body).rstrip("\n")
            elif token.kind is DirectiveKind.MODULE:
                text = self._lookup(token.body)
            elif is_reset(token.body, self.palette):
                if self.dialect is Dialect.MARKUP:
                    decorated.append("</span>" * open_spans)
                    open_spans = 0
                else:
                    decorated.append(RESET)
                continue
            else:
                code = self._color(token.body)
                if code is not None:
                    decorated.append(code)
                    open_spans += 1
                continue

            decorated.append(self._visible(text))
            plain.append(text)

        if self.dialect is Dialect.MARKUP:
            decorated.append("</span>" * open_spans)
        return RenderedLine(decorated="".join(decorated), plain="".join(plain))

    def render_all(self, lines: list[str]) -> list[RenderedLine]:
        return [self.render(line) for line in lines]
