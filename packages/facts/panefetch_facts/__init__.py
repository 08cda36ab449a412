"""Host fact providers for panefetch."""

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
from .pci import PciDatabase
from .shell import shell_exec

try:  # pragma: no cover - optional at import time for minimal test environments
    from .provider import FactProvider
except Exception:  # pragma: no cover
    FactProvider = None  # type: ignore[assignment]

__all__ = [
    "MAGIC_LINE",
    "UNKNOWN",
    "CpuFacts",
    "DiskFacts",
    "GpuFacts",
    "OsFacts",
    "PciDatabase",
    "RamFacts",
    "SystemFacts",
    "ThemeFacts",
    "UserFacts",
    "shell_exec",
]

if FactProvider is not None:
    __all__.append("FactProvider")
