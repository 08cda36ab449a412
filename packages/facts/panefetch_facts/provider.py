"""Host fact provider with graceful fallbacks.

Every query degrades to ``UNKNOWN`` (or ``MAGIC_LINE`` for optional desktop
facts) instead of raising, so a missing ``/sys`` file or an unsupported
``psutil`` call never breaks a render.
"""

from __future__ import annotations

import configparser
import os
import platform
import pwd
import re
import time
from pathlib import Path
from typing import Mapping

import psutil

from .models import (
    MAGIC_LINE,
    UNKNOWN,
    CpuFacts,
    DiskFacts,
    GpuFacts,
    OsFacts,
    RamFacts,
    SystemFacts,
    ThemeFacts,
    UserFacts,
)
from .pci import PciDatabase, short_vendor_name

_MIB = 1024**2
_GIB = 1024**3

_OS_RELEASE_PATHS = ("etc/os-release", "usr/lib/os-release", "usr/share/os-release")
_DMI_DIR = "sys/devices/virtual/dmi/id"
_DRM_DIR = "sys/class/drm"
_CARD_RE = re.compile(r"card(\d+)$")

_SHELLS = {"sh", "bash", "zsh", "fish", "dash", "ksh", "tcsh", "csh", "nu", "elvish", "xonsh", "sudo", "su", "doas"}
_WINDOW_MANAGERS = {
    "awesome": "awesome",
    "bspwm": "bspwm",
    "dwm": "dwm",
    "gnome-shell": "Mutter",
    "hyprland": "Hyprland",
    "i3": "i3",
    "kwin_wayland": "KWin",
    "kwin_x11": "KWin",
    "labwc": "labwc",
    "marco": "Marco",
    "muffin": "Muffin",
    "mutter": "Mutter",
    "openbox": "Openbox",
    "qtile": "Qtile",
    "river": "river",
    "sway": "sway",
    "wayfire": "Wayfire",
    "weston": "Weston",
    "xfwm4": "Xfwm4",
}
_GTK_KEYS = {
    "name": "gtk-theme-name",
    "icons": "gtk-icon-theme-name",
    "font": "gtk-font-name",
    "cursor": "gtk-cursor-theme-name",
}


def _cpu_temp_c() -> float | None:
    try:
        temps = psutil.sensors_temperatures()
    except Exception:
        return None
    if not temps:
        return None

    for name in ("coretemp", "cpu_thermal", "k10temp", "acpitz"):
        entries = temps.get(name)
        if entries:
            val = entries[0].current
            return float(val) if val is not None else None

    for _name, entries in temps.items():
        if entries and entries[0].current is not None:
            return float(entries[0].current)
    return None


def parse_os_release(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        values[key] = value.strip().strip("\"'")
    return values


def _clean_cpu_name(name: str) -> str:
    name = re.sub(r"\((R|TM|tm|r)\)", "", name)
    name = re.sub(r"\s+(CPU|Processor)?\s*@.*$", "", name)
    return re.sub(r"\s{2,}", " ", name).strip()


class FactProvider:
    """Queries the running host.

    ``root`` and ``home`` relocate every file read so the provider can be
    pointed at a fake filesystem tree.
    """

    def __init__(
        self,
        root: Path = Path("/"),
        home: Path | None = None,
        environ: Mapping[str, str] | None = None,
        pci: PciDatabase | None = None,
    ) -> None:
        self.root = root
        self.home = home or Path.home()
        self.environ = os.environ if environ is None else environ
        self.pci = pci or PciDatabase()

    def _read(self, relpath: str) -> str | None:
        try:
            return (self.root / relpath).read_text(encoding="utf-8", errors="replace").strip()
        except OSError:
            return None

    def os_facts(self) -> OsFacts:
        release: dict[str, str] = {}
        for relpath in _OS_RELEASE_PATHS:
            text = self._read(relpath)
            if text is not None:
                release = parse_os_release(text)
                break

        uname = platform.uname()
        try:
            uptime = max(int(time.time() - psutil.boot_time()), 0)
        except Exception:
            uptime = 0

        initsys = self._read("proc/1/comm") or UNKNOWN
        initsys = initsys.split("\0", 1)[0].rsplit("/", 1)[-1]

        return OsFacts(
            name=release.get("NAME", UNKNOWN),
            pretty_name=release.get("PRETTY_NAME", UNKNOWN),
            id=release.get("ID", UNKNOWN),
            version_id=release.get("VERSION_ID", UNKNOWN),
            version_codename=release.get("VERSION_CODENAME", UNKNOWN),
            kernel_name=uname.system or UNKNOWN,
            kernel_version=uname.release or UNKNOWN,
            hostname=uname.node or UNKNOWN,
            arch=uname.machine or UNKNOWN,
            uptime_secs=uptime % 60,
            uptime_mins=(uptime // 60) % 60,
            uptime_hours=(uptime // 3600) % 24,
            uptime_days=uptime // 86400,
            initsys_name=initsys,
        )

    def user_facts(self) -> UserFacts:
        try:
            entry = pwd.getpwuid(os.getuid())
            name, login_shell = entry.pw_name, entry.pw_shell
        except KeyError:
            name, login_shell = self.environ.get("USER", UNKNOWN), ""

        shell_path = self.environ.get("SHELL") or login_shell or UNKNOWN
        wm_name = self._wm_name()
        de_name = self._de_name()
        if de_name.lower() == wm_name.lower():
            de_name = MAGIC_LINE

        return UserFacts(
            name=name,
            shell_name=Path(shell_path).name if shell_path != UNKNOWN else UNKNOWN,
            shell_path=shell_path,
            de_name=de_name,
            wm_name=wm_name,
            term_name=self._term_name(),
        )

    def _de_name(self) -> str:
        for key in ("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION"):
            value = self.environ.get(key)
            if value:
                # XDG_CURRENT_DESKTOP may be a list like "ubuntu:GNOME"
                return value.split(":")[-1]
        return MAGIC_LINE

    def _wm_name(self) -> str:
        try:
            for proc in psutil.process_iter(["name"]):
                name = (proc.info.get("name") or "").lower()
                if name in _WINDOW_MANAGERS:
                    return _WINDOW_MANAGERS[name]
        except Exception:
            return MAGIC_LINE
        return MAGIC_LINE

    def _term_name(self) -> str:
        term = self.environ.get("TERM_PROGRAM")
        if term:
            return term
        try:
            for parent in psutil.Process().parents():
                name = parent.name()
                if name and name.lower() not in _SHELLS and not name.startswith("python"):
                    return name
        except Exception:
            return MAGIC_LINE
        return MAGIC_LINE

    def cpu_facts(self) -> CpuFacts:
        name = None
        cpuinfo = self._read("proc/cpuinfo")
        if cpuinfo:
            for line in cpuinfo.splitlines():
                key, sep, value = line.partition(":")
                if sep and key.strip() in ("model name", "Hardware", "cpu model"):
                    name = _clean_cpu_name(value)
                    break
        if not name:
            name = platform.processor() or UNKNOWN

        try:
            freq = psutil.cpu_freq()
        except Exception:
            freq = None
        temp = _cpu_temp_c()

        return CpuFacts(
            name=name,
            nproc=psutil.cpu_count(logical=True) or 0,
            freq_cur=(float(freq.current) / 1000 if freq else 0.0),
            freq_min=(float(freq.min) / 1000 if freq else 0.0),
            freq_max=(float(freq.max) / 1000 if freq else 0.0),
            temp=(temp if temp is not None else 0.0),
        )

    def _gpu_card(self, index: int) -> Path | None:
        drm = self.root / _DRM_DIR
        try:
            cards = sorted(
                (int(m.group(1)), p) for p in drm.iterdir() if (m := _CARD_RE.match(p.name))
            )
        except OSError:
            return None
        if index >= len(cards):
            return None
        return cards[index][1]

    def gpu_facts(self, index: int = 0) -> GpuFacts:
        card = self._gpu_card(index)
        if card is None:
            return GpuFacts(name=UNKNOWN, vendor=UNKNOWN)

        rel = card.relative_to(self.root)
        vendor_id = (self._read(f"{rel}/device/vendor") or "").lower().removeprefix("0x")
        device_id = (self._read(f"{rel}/device/device") or "").lower().removeprefix("0x")
        if not vendor_id:
            return GpuFacts(name=UNKNOWN, vendor=UNKNOWN)

        vendor = self.pci.vendor(vendor_id) or UNKNOWN
        device = self.pci.device(vendor_id, device_id) or UNKNOWN

        # "TU106 [GeForce GTX 1650]" -> "GeForce GTX 1650"
        first, last = device.find("["), device.rfind("]")
        if first != -1 and last > first:
            device = device[first + 1 : last]

        return GpuFacts(name=f"{short_vendor_name(vendor)} {device}", vendor=vendor)

    def ram_facts(self) -> RamFacts:
        vm = psutil.virtual_memory()
        swap = psutil.swap_memory()
        return RamFacts(
            used=vm.used / _MIB,
            total=vm.total / _MIB,
            free=vm.available / _MIB,
            swap_used=swap.used / _MIB,
            swap_total=swap.total / _MIB,
            swap_free=swap.free / _MIB,
        )

    def disk_facts(self, path: str = "/") -> DiskFacts:
        try:
            du = psutil.disk_usage(path)
        except OSError:
            return DiskFacts(used=0.0, total=0.0, free=0.0, fs=UNKNOWN, mountdir=UNKNOWN)

        fs, mountdir = UNKNOWN, UNKNOWN
        target = os.path.realpath(path)
        best = -1
        try:
            partitions = psutil.disk_partitions(all=True)
        except Exception:
            partitions = []
        for part in partitions:
            mount = part.mountpoint
            inside = target == mount or target.startswith(mount.rstrip("/") + "/")
            if inside and len(mount) > best:
                best = len(mount)
                fs, mountdir = part.fstype, mount

        return DiskFacts(
            used=du.used / _GIB,
            total=du.total / _GIB,
            free=du.free / _GIB,
            fs=fs,
            mountdir=mountdir,
        )

    def theme_facts(self, gtk_version: int = 3) -> ThemeFacts:
        values: dict[str, str] = {}
        if gtk_version == 2:
            rc = self.home / ".gtkrc-2.0"
            try:
                text = rc.read_text(encoding="utf-8", errors="replace")
            except OSError:
                text = ""
            for line in text.splitlines():
                key, sep, value = line.partition("=")
                if sep:
                    values[key.strip()] = value.strip().strip("\"'")
        else:
            config_home = Path(self.environ.get("XDG_CONFIG_HOME") or self.home / ".config")
            parser = configparser.ConfigParser(interpolation=None)
            try:
                parser.read(config_home / f"gtk-{gtk_version}.0" / "settings.ini", encoding="utf-8")
                if parser.has_section("Settings"):
                    values = dict(parser.items("Settings"))
            except configparser.Error:
                values = {}

        return ThemeFacts(**{member: values.get(key, UNKNOWN) for member, key in _GTK_KEYS.items()})

    def system_facts(self) -> SystemFacts:
        host_name = host_vendor = host_version = UNKNOWN

        board_name = self._read(f"{_DMI_DIR}/board_name")
        product_name = self._read(f"{_DMI_DIR}/product_name")
        if board_name:
            host_name = board_name
            host_version = self._read(f"{_DMI_DIR}/board_version") or UNKNOWN
            host_vendor = self._read(f"{_DMI_DIR}/board_vendor") or UNKNOWN
            if host_vendor == "Micro-Star International Co., Ltd.":
                host_vendor = "MSI"
        elif product_name:
            host_name = product_name
            version = self._read(f"{_DMI_DIR}/product_version") or UNKNOWN
            if product_name.startswith("Standard PC"):
                host_vendor = "KVM/QEMU"
                host_version = f"({version})"
            else:
                host_vendor = self._read(f"{_DMI_DIR}/sys_vendor") or UNKNOWN
                host_version = version

        return SystemFacts(
            host_name=host_name,
            host_vendor=host_vendor,
            host_version=host_version,
            arch=platform.machine() or UNKNOWN,
        )
