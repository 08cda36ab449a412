"""Memoized module -> member -> value table backed by a fact provider."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict
from typing import Callable, Union

from .errors import ModuleLookupError, UnknownModuleError

ModuleValue = Union[str, int, float]

_log = logging.getLogger("panefetch.registry")

_GPU_RE = re.compile(r"gpu(\d*)$")
_DISK_RE = re.compile(r"disk(?:\((.+)\))?$")
_THEME_RE = re.compile(r"theme(?:-gtk([234]))?$")

MODULE_NAMES = ("os", "user", "cpu", "gpu", "gpuN", "ram", "disk", "disk(<path>)", "theme", "theme-gtkN", "system")


def module_part(name: str) -> str:
    """Module part of ``module`` or ``module.member``; ``disk(<path>)`` may hold dots."""
    if name.startswith("disk("):
        close = name.find(")")
        if close != -1:
            return name[: close + 1]
    return name.partition(".")[0]


def split_path(path: str) -> tuple[str, str]:
    module = module_part(path)
    rest = path[len(module) :]
    if not rest.startswith(".") or len(rest) < 2:
        raise ModuleLookupError(path)
    return module, rest[1:]


class ModuleRegistry:
    """Lazily fetches each module's facts once and serves lookups from memory."""

    def __init__(self, provider) -> None:
        self._provider = provider
        self._tables: dict[str, dict[str, ModuleValue]] = {}

    def _fetcher(self, module: str) -> Callable[[], object] | None:
        p = self._provider
        fixed = {
            "os": p.os_facts,
            "user": p.user_facts,
            "cpu": p.cpu_facts,
            "ram": p.ram_facts,
            "system": p.system_facts,
        }
        if module in fixed:
            return fixed[module]

        if m := _GPU_RE.match(module):
            index = int(m.group(1) or 0)
            return lambda: p.gpu_facts(index)
        if m := _DISK_RE.match(module):
            path = m.group(1) or "/"
            return lambda: p.disk_facts(path)
        if m := _THEME_RE.match(module):
            version = int(m.group(1) or 3)
            return lambda: p.theme_facts(version)
        return None

    def is_known(self, module: str) -> bool:
        return module in self._tables or self._fetcher(module) is not None

    def _load(self, module: str) -> dict[str, ModuleValue]:
        table = self._tables.get(module)
        if table is not None:
            return table

        fetch = self._fetcher(module)
        if fetch is None:
            raise ModuleLookupError(module)
        table = dict(asdict(fetch()))
        self._tables[module] = table
        _log.debug(f"loaded module {module}: {sorted(table)}", extra={"event": "module_loaded"})
        return table

    def include(self, name: str) -> None:
        module = module_part(name)
        if not self.is_known(module):
            raise UnknownModuleError(name)
        self._load(module)

    def get(self, module: str, member: str) -> ModuleValue:
        table = self._load(module)
        if member not in table:
            raise ModuleLookupError(f"{module}.{member}")
        return table[member]

    def lookup(self, path: str) -> ModuleValue:
        module, member = split_path(path)
        return self.get(module, member)

    def tables(self) -> dict[str, dict[str, ModuleValue]]:
        return {name: dict(table) for name, table in self._tables.items()}
