"""User config schema and TOML load/save helpers."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_log = logging.getLogger("panefetch.config")

DEFAULT_INCLUDES = ["os", "user", "cpu", "gpu", "ram"]

DEFAULT_LAYOUT = [
    "${red}$<user.name>${0}@${cyan}$<os.hostname>",
    "───────────────────────────",
    "${red}OS${0}: $<os.name>",
    "${cyan}Uptime${0}: $<os.uptime_days> days, $<os.uptime_hours> hours, $<os.uptime_mins> minutes",
    "${green}Kernel${0}: $<os.kernel_name> $<os.kernel_version>",
    "${yellow}Arch${0}: $<os.arch>",
    "${magenta}DE${0}: $<user.de_name>",
    "${magenta}WM${0}: $<user.wm_name>",
    "${magenta}CPU${0}: $<cpu.name>",
    "${blue}GPU${0}: $<gpu.name>",
    "${#03ff93}RAM usage${0}: $<ram.used> MiB / $<ram.total> MiB",
    "",
    "${\\e[40m}   ${\\e[41m}   ${\\e[42m}   ${\\e[43m}   ${\\e[44m}   ${\\e[45m}   ${\\e[46m}   ${\\e[47m}   ",
    "${\\e[100m}   ${\\e[101m}   ${\\e[102m}   ${\\e[103m}   ${\\e[104m}   ${\\e[105m}   ${\\e[106m}   ${\\e[107m}   ",
]

DEFAULT_CONFIG_TOML = r"""[config]
# panefetch renders the "layout" lines next to a logo.
# Three kinds of tags can be used inside them:
#
# $<module.member>  value of a system fact, e.g. $<user.name> or $<os.kernel_version>
#                   run "panefetch list-modules" for everything available
# $(command)        output of a shell command, e.g. $(echo "hello world" | cut -d' ' -f2)
# ${color}          switch the color of the rest of the line, e.g. ${red}, ${#ff6622},
#                   ${!#ff6622} (bold) or an escape code like ${\e[1;32m}
#                   ${0} resets back to the normal color
#
# Put a backslash before the "$" to print a tag literally: \$(not executed)

# Modules loaded before rendering. An unknown name here is an error.
includes = ["os", "user", "cpu", "gpu", "ram"]

layout = [
    "${red}$<user.name>${0}@${cyan}$<os.hostname>",
    "───────────────────────────",
    "${red}OS${0}: $<os.name>",
    "${cyan}Uptime${0}: $<os.uptime_days> days, $<os.uptime_hours> hours, $<os.uptime_mins> minutes",
    "${green}Kernel${0}: $<os.kernel_name> $<os.kernel_version>",
    "${yellow}Arch${0}: $<os.arch>",
    "${magenta}DE${0}: $<user.de_name>",
    "${magenta}WM${0}: $<user.wm_name>",
    "${magenta}CPU${0}: $<cpu.name>",
    "${blue}GPU${0}: $<gpu.name>",
    "${#03ff93}RAM usage${0}: $<ram.used> MiB / $<ram.total> MiB",
    "",
    '${\e[40m}   ${\e[41m}   ${\e[42m}   ${\e[43m}   ${\e[44m}   ${\e[45m}   ${\e[46m}   ${\e[47m}   ',
    '${\e[100m}   ${\e[101m}   ${\e[102m}   ${\e[103m}   ${\e[104m}   ${\e[105m}   ${\e[106m}   ${\e[107m}   ',
]

# "os" for the logo of the running distro, "off" for no logo,
# or a path to a text file.
source-path = "os"

# Spaces between the logo and the layout.
offset = 5

# Color slots used by ${red}, ${cyan}, ...
# Hex (#55ff88), bold hex (!#55ff88) or escape codes ('\e[1;34m').
black = '\e[1;90m'
red = '\e[1;91m'
green = '\e[1;92m'
yellow = '\e[1;93m'
blue = '\e[1;94m'
magenta = '\e[1;95m'
cyan = '\e[1;96m'
white = '\e[1;97m'

[gui]
# Emit span markup instead of terminal escape codes.
enable = false

# Markup color slots. Escape codes are accepted too but hex colors work best.
black = "!#000005"
red = "!#ff2000"
green = "!#00ff00"
blue = "!#00aaff"
cyan = "!#00ffff"
yellow = "!#ffff00"
magenta = "!#f881ff"
white = "!#ffffff"
"""

_COLOR_SLOTS = ("black", "red", "green", "blue", "cyan", "yellow", "magenta", "white")


@dataclass
class GuiConfig:
    enable: bool = False
    colors: dict[str, str] = field(default_factory=dict)


@dataclass
class AppConfig:
    includes: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDES))
    layout: list[str] = field(default_factory=lambda: list(DEFAULT_LAYOUT))
    source_path: str = "os"
    offset: int = 5
    colors: dict[str, str] = field(default_factory=dict)
    gui: GuiConfig = field(default_factory=GuiConfig)


def config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    return (Path(base) if base else Path.home() / ".config") / "panefetch"


def config_path() -> Path:
    return config_dir() / "config.toml"


def expand_var(value: str) -> str:
    return os.path.expanduser(os.path.expandvars(value))


def _str_list(raw: Any, fallback: list[str]) -> list[str]:
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        return list(fallback)
    return list(raw)


def _colors(table: dict[str, Any]) -> dict[str, str]:
    return {k: v for k, v in table.items() if k in _COLOR_SLOTS and isinstance(v, str)}


def _normalize(cfg: AppConfig) -> None:
    try:
        cfg.offset = max(0, int(cfg.offset))
    except (TypeError, ValueError):
        cfg.offset = 5
    cfg.source_path = expand_var(str(cfg.source_path))


def _table(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        _log.warning(f"ignoring [{name}]: expected a table, got {type(value).__name__}", extra={"event": "config_invalid"})
        return {}
    return value


def parse_config(raw: dict[str, Any]) -> AppConfig:
    main = _table(raw, "config")
    gui = _table(raw, "gui")
    defaults = AppConfig()

    cfg = AppConfig(
        includes=_str_list(main.get("includes"), defaults.includes),
        layout=_str_list(main.get("layout"), defaults.layout),
        source_path=main.get("source-path", defaults.source_path),
        offset=main.get("offset", defaults.offset),
        colors=_colors(main),
        gui=GuiConfig(enable=bool(gui.get("enable", False)), colors=_colors(gui)),
    )
    _normalize(cfg)
    return cfg


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        _log.warning(f"ignoring unreadable config {path}: {exc}", extra={"event": "config_invalid"})
        return AppConfig()

    return parse_config(raw)


def save_default_config(path: Path | None = None, force: bool = False) -> Path:
    path = path or config_path()
    if path.exists() and not force:
        raise FileExistsError(f"{path} already exists")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    return path
