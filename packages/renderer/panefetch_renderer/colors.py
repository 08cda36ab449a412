"""Color token resolution and per-dialect formatting."""

from __future__ import annotations

from rich.color import Color, ColorParseError

from .models import ColorSlots, ColorSpec, Dialect

ESC = "\033"
RESET = f"{ESC}[0m"

_ANSI_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

# SGR code -> (color name, weight, ground)
SGR_TABLE: dict[int, tuple[str, str, str]] = {
    **{30 + i: (name, "normal", "fgcolor") for i, name in enumerate(_ANSI_NAMES)},
    **{90 + i: (name, "bold", "fgcolor") for i, name in enumerate(_ANSI_NAMES)},
    **{40 + i: (name, "normal", "bgcolor") for i, name in enumerate(_ANSI_NAMES)},
    **{100 + i: (name, "bold", "bgcolor") for i, name in enumerate(_ANSI_NAMES)},
}


def parse_sgr(params: str) -> ColorSpec:
    """Decompose SGR parameters like ``1;34`` into a color descriptor.

    Parameters outside ``SGR_TABLE`` keep only the raw ``sgr`` passthrough.
    """
    code = params
    bold = False
    if code.startswith("1;"):
        bold = True
        code = code[2:]
    elif code.startswith("0;"):
        code = code[2:]

    try:
        entry = SGR_TABLE.get(int(code))
    except ValueError:
        entry = None
    if entry is None:
        return ColorSpec(color=None, sgr=params)

    name, weight, ground = entry
    return ColorSpec(color=name, weight=("bold" if bold else weight), ground=ground, sgr=params)


def _escape_params(value: str) -> str | None:
    if value.startswith("\\e["):
        rest = value[3:]
    elif value.startswith(f"{ESC}["):
        rest = value[2:]
    else:
        return None
    return rest.split("m", 1)[0]


def is_reset(token: str, slots: ColorSlots) -> bool:
    r"""``${0}`` or an escape code carrying SGR 0 (``\e[0m``, ``\e[m``)."""
    if token == "0":
        return True
    return _escape_params(slots.get(token) or token) in ("0", "")


def resolve_color(token: str, slots: ColorSlots) -> ColorSpec | None:
    """Resolve a ``${token}`` body; ``None`` when it names no usable color."""
    value = slots.get(token) or token

    params = _escape_params(value)
    if params is not None:
        return parse_sgr(params)

    weight = "normal"
    if value.startswith("!#"):
        weight = "bold"
        value = value[1:]

    try:
        color = Color.parse(value)
    except ColorParseError:
        return None
    return ColorSpec(color=color.get_truecolor().hex, weight=weight)


def terminal_sequence(spec: ColorSpec) -> str:
    if spec.sgr is not None:
        return f"{ESC}[{spec.sgr}m"
    codes = Color.parse(spec.color or "default").get_ansi_codes(foreground=(spec.ground == "fgcolor"))
    if spec.weight == "bold":
        codes = ("1", *codes)
    return f"{ESC}[{';'.join(codes)}m"


def markup_tag(spec: ColorSpec) -> str | None:
    if spec.color is None:
        return None
    return f"<span {spec.ground}='{spec.color}' weight='{spec.weight}'>"


def open_sequence(spec: ColorSpec, dialect: Dialect) -> str | None:
    if dialect is Dialect.MARKUP:
        return markup_tag(spec)
    return terminal_sequence(spec)
