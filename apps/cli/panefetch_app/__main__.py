from __future__ import annotations

import sys

try:
    # Normal package import path.
    from .cli import main as _cli_main
except ImportError:
    # Script entrypoint path.
    from panefetch_app.cli import main as _cli_main


def _has_command(args: list[str]) -> bool:
    commands = {"render", "list-modules", "list-logos", "gen-config"}
    return any(arg in commands for arg in args) or any(arg in ("-h", "--help", "--version") for arg in args)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not _has_command(args):
        # Plain `panefetch` and `panefetch -n -C cfg.toml` both mean render.
        return int(_cli_main(["render", *args]))
    return int(_cli_main(args))


if __name__ == "__main__":
    raise SystemExit(main())
