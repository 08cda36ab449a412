"""CLI entrypoints for rendering, listing modules, and generating the config."""

from __future__ import annotations

import argparse
import json
from importlib import metadata
from pathlib import Path

from rich.console import Console

from panefetch_core import load_config, save_default_config
from panefetch_core.config import AppConfig, expand_var
from panefetch_core.logging_setup import configure_logging, get_logger
from panefetch_facts import UNKNOWN, FactProvider
from panefetch_renderer import (
    Dialect,
    Evaluator,
    FetchRenderer,
    ModuleLookupError,
    ModuleRegistry,
    RenderError,
    build_palette,
    list_logos,
    read_logo,
    resolve_logo_path,
)

LISTED_MODULES = ["os", "user", "cpu", "gpu", "ram", "disk", "theme", "system"]


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("panefetch")
    except Exception:
        return "0.1.0"


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(Path(args.config).expanduser() if args.config else None)


def _os_id(registry: ModuleRegistry) -> str:
    try:
        value = str(registry.lookup("os.id"))
    except ModuleLookupError:
        return "linux"
    return "linux" if value == UNKNOWN else value


def cmd_render(args: argparse.Namespace) -> int:
    cfg = _load(args)
    if args.source_path:
        cfg.source_path = expand_var(args.source_path)
    if args.no_logo:
        cfg.source_path = "off"
    if args.offset is not None:
        cfg.offset = max(0, args.offset)

    dialect = Dialect.MARKUP if (args.gui or cfg.gui.enable) else Dialect.TERMINAL
    palette = build_palette(dialect, cfg.gui.colors if dialect is Dialect.MARKUP else cfg.colors)
    registry = ModuleRegistry(FactProvider())
    evaluator = Evaluator(registry, palette, dialect)

    logo_path = resolve_logo_path(cfg.source_path, _os_id(registry), args.distro)
    get_logger().debug(f"logo path = {logo_path}", extra={"event": "logo_path"})
    logo_lines = read_logo(logo_path) if logo_path is not None else []

    renderer = FetchRenderer(evaluator, layout=cfg.layout, includes=cfg.includes, offset=cfg.offset)
    print("\n".join(renderer.render(logo_lines)))
    return 0


def cmd_list_modules(_args: argparse.Namespace) -> int:
    registry = ModuleRegistry(FactProvider())
    for name in LISTED_MODULES:
        registry.include(name)
    _print_json(registry.tables())
    return 0


def cmd_list_logos(_args: argparse.Namespace) -> int:
    _print_json(list_logos())
    return 0


def cmd_gen_config(args: argparse.Namespace) -> int:
    path = Path(args.config).expanduser() if args.config else None
    try:
        written = save_default_config(path, force=args.force)
    except FileExistsError as exc:
        Console(stderr=True).print(f"{exc} (use --force to overwrite)", style="yellow", markup=False, highlight=False)
        return 1
    print(written)
    return 0


def _add_global_options(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    extra = {"default": argparse.SUPPRESS} if suppress else {}
    parser.add_argument("--debug", action="store_true", help="Verbose logging on stderr", **extra)
    parser.add_argument("-C", "--config", help="Path to config.toml", **extra)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="panefetch", description="System information next to a logo")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    _add_global_options(parser)

    # Subcommands accept the global options too; SUPPRESS keeps them from
    # overwriting values given before the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    _add_global_options(common, suppress=True)
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", parents=[common], help="Render the layout next to the logo")
    render_cmd.add_argument("-s", "--source-path", default=None, help="Logo text file (overrides config)")
    render_cmd.add_argument("-d", "--distro", default=None, help="Use the built-in logo of this distro")
    render_cmd.add_argument("-n", "--no-logo", action="store_true", help="Do not display a logo")
    render_cmd.add_argument("-o", "--offset", type=int, default=None, help="Spaces between logo and layout")
    render_cmd.add_argument("-g", "--gui", action="store_true", help="Emit span markup instead of escape codes")
    render_cmd.set_defaults(func=cmd_render)

    modules_cmd = sub.add_parser("list-modules", parents=[common], help="Print every module value as JSON")
    modules_cmd.set_defaults(func=cmd_list_modules)

    logos_cmd = sub.add_parser("list-logos", parents=[common], help="Print the built-in logo names")
    logos_cmd.set_defaults(func=cmd_list_logos)

    gen_cmd = sub.add_parser("gen-config", parents=[common], help="Write the default config file")
    gen_cmd.add_argument("--force", action="store_true", help="Overwrite an existing config")
    gen_cmd.set_defaults(func=cmd_gen_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(console=args.debug, debug=args.debug)
    try:
        return int(args.func(args))
    except RenderError as exc:
        get_logger().error(str(exc), extra={"event": "render_failed"})
        Console(stderr=True).print(f"ERROR: {exc}", style="bold red", markup=False, highlight=False)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
