"""Side-by-side composition of rendered logo and info lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from panefetch_facts.models import MAGIC_LINE

from .colors import RESET
from .evaluator import Evaluator
from .models import Dialect, RenderedLine

_log = logging.getLogger("panefetch.compositor")


def compose(
    logo: list[RenderedLine],
    info: list[RenderedLine],
    offset: int,
    dialect: Dialect = Dialect.TERMINAL,
) -> list[str]:
    """Merge already rendered lines.

    Info line ``i`` is placed after logo line ``i`` padded to the widest logo
    line plus ``offset``. Info lines containing ``MAGIC_LINE`` are dropped
    first; surplus logo lines trail the output.
    """
    suffix = RESET if dialect is Dialect.TERMINAL else ""
    max_plain = max((len(row.plain) for row in logo), default=0)
    info = [row for row in info if MAGIC_LINE not in row.decorated]

    out: list[str] = []
    for i, row in enumerate(info):
        prefix, width = "", 0
        if i < len(logo):
            prefix, width = logo[i].decorated + suffix, len(logo[i].plain)
        # TODO: wide (CJK/emoji) logo characters are counted as one column each.
        pad = max(0, max_plain + offset - width) if logo else 0
        out.append(f"{prefix}{' ' * pad}{row.decorated}{suffix}")

    for row in logo[len(info) :]:
        out.append(row.decorated + suffix)
    return out


@dataclass
class FetchRenderer:
    """Full render pass: includes, logo lines, layout lines, composition."""

    evaluator: Evaluator
    layout: list[str]
    includes: list[str] = field(default_factory=list)
    offset: int = 5

    def render(self, logo_lines: list[str] | None = None) -> list[str]:
        for name in self.includes:
            self.evaluator.registry.include(name)

        logo = self.evaluator.render_all(logo_lines or [])
        info = self.evaluator.render_all(self.layout)
        _log.debug(
            f"rendered {len(logo)} logo lines and {len(info)} layout lines",
            extra={"event": "render_done"},
        )
        return compose(logo, info, self.offset, self.evaluator.dialect)
