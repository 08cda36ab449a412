"""Typed fact models returned by the providers."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "(unknown)"

# A layout line whose rendered text contains this marker is dropped by the compositor.
MAGIC_LINE = "(cut this line NOW!! RAHHH)"


@dataclass(frozen=True)
class OsFacts:
    name: str
    pretty_name: str
    id: str
    version_id: str
    version_codename: str
    kernel_name: str
    kernel_version: str
    hostname: str
    arch: str
    uptime_secs: int
    uptime_mins: int
    uptime_hours: int
    uptime_days: int
    initsys_name: str


@dataclass(frozen=True)
class UserFacts:
    name: str
    shell_name: str
    shell_path: str
    de_name: str
    wm_name: str
    term_name: str


@dataclass(frozen=True)
class CpuFacts:
    name: str
    nproc: int
    freq_cur: float
    freq_min: float
    freq_max: float
    temp: float


@dataclass(frozen=True)
class GpuFacts:
    name: str
    vendor: str


@dataclass(frozen=True)
class RamFacts:
    used: float
    total: float
    free: float
    swap_used: float
    swap_total: float
    swap_free: float


@dataclass(frozen=True)
class DiskFacts:
    used: float
    total: float
    free: float
    fs: str
    mountdir: str


@dataclass(frozen=True)
class ThemeFacts:
    name: str
    icons: str
    font: str
    cursor: str


@dataclass(frozen=True)
class SystemFacts:
    host_name: str
    host_vendor: str
    host_version: str
    arch: str
