"""Template expansion and layout composition for panefetch."""

from .colors import RESET, resolve_color
from .errors import LogoSourceError, ModuleLookupError, RenderError, TemplateParseError, UnknownModuleError
from .models import ColorSlots, ColorSpec, Dialect, Directive, DirectiveKind, Literal, RenderedLine
from .registry import ModuleRegistry
from .scanner import scan
from .themes import build_palette, default_palette

try:  # pragma: no cover - optional at import time for test environments
    from .compositor import FetchRenderer, compose
    from .evaluator import PLACEHOLDER, Evaluator
    from .logos import list_logos, read_logo, resolve_logo_path
except Exception:  # pragma: no cover
    FetchRenderer = compose = Evaluator = None  # type: ignore[assignment]
    PLACEHOLDER = "<unknown/invalid module>"
    list_logos = read_logo = resolve_logo_path = None  # type: ignore[assignment]

__all__ = [
    "RESET",
    "ColorSlots",
    "ColorSpec",
    "Dialect",
    "Directive",
    "DirectiveKind",
    "Literal",
    "LogoSourceError",
    "ModuleLookupError",
    "ModuleRegistry",
    "PLACEHOLDER",
    "RenderError",
    "RenderedLine",
    "TemplateParseError",
    "UnknownModuleError",
    "build_palette",
    "default_palette",
    "resolve_color",
    "scan",
]

if FetchRenderer is not None:
    __all__ += ["Evaluator", "FetchRenderer", "compose", "list_logos", "read_logo", "resolve_logo_path"]
