"""Built-in color slot palettes."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from .models import ColorSlots, Dialect

TERMINAL_PALETTE = ColorSlots(
    black="\\e[1;90m",
    red="\\e[1;91m",
    green="\\e[1;92m",
    blue="\\e[1;94m",
    cyan="\\e[1;96m",
    yellow="\\e[1;93m",
    magenta="\\e[1;95m",
    white="\\e[1;97m",
)

# Markup renderers only understand hex colors here, not escape codes.
MARKUP_PALETTE = ColorSlots(
    black="!#000005",
    red="!#ff2000",
    green="!#00ff00",
    blue="!#00aaff",
    cyan="!#00ffff",
    yellow="!#ffff00",
    magenta="!#f881ff",
    white="!#ffffff",
)


def default_palette(dialect: Dialect) -> ColorSlots:
    return MARKUP_PALETTE if dialect is Dialect.MARKUP else TERMINAL_PALETTE


def build_palette(dialect: Dialect, overrides: Mapping[str, str] | None = None) -> ColorSlots:
    """Dialect defaults with config overrides applied; unknown slot names are ignored."""
    known = ColorSlots.names()
    values = {k: v for k, v in (overrides or {}).items() if k in known and isinstance(v, str)}
    return replace(default_palette(dialect), **values)
