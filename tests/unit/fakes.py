"""In-memory stand-ins for the host fact provider and shell runner."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "facts"))

from panefetch_facts.models import (
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


class FakeProvider:
    def __init__(self):
        self.calls = []

    def os_facts(self):
        self.calls.append(("os",))
        return OsFacts(
            name="Arch Linux",
            pretty_name="Arch Linux",
            id="arch",
            version_id="rolling",
            version_codename=UNKNOWN,
            kernel_name="Linux",
            kernel_version="6.9.1-arch1-1",
            hostname="box",
            arch="x86_64",
            uptime_secs=5,
            uptime_mins=4,
            uptime_hours=3,
            uptime_days=1,
            initsys_name="systemd",
        )

    def user_facts(self):
        self.calls.append(("user",))
        return UserFacts(
            name="tux",
            shell_name="zsh",
            shell_path="/usr/bin/zsh",
            de_name="GNOME",
            wm_name=MAGIC_LINE,
            term_name="kitty",
        )

    def cpu_facts(self):
        self.calls.append(("cpu",))
        return CpuFacts(name="AMD Ryzen 5 5600X 6-Core Processor", nproc=12, freq_cur=3.7, freq_min=2.2, freq_max=4.65, temp=41.0)

    def gpu_facts(self, index=0):
        self.calls.append(("gpu", index))
        return GpuFacts(name=f"GPU {index}", vendor="Vendor")

    def ram_facts(self):
        self.calls.append(("ram",))
        return RamFacts(used=1024.5, total=16000.0, free=14975.5, swap_used=0.0, swap_total=2048.0, swap_free=2048.0)

    def disk_facts(self, path="/"):
        self.calls.append(("disk", path))
        return DiskFacts(used=10.0, total=100.0, free=90.0, fs="ext4", mountdir=path)

    def theme_facts(self, gtk_version=3):
        self.calls.append(("theme", gtk_version))
        return ThemeFacts(name=f"Adwaita-gtk{gtk_version}", icons="Papirus", font="Cantarell 11", cursor="Adwaita")

    def system_facts(self):
        self.calls.append(("system",))
        return SystemFacts(host_name="B550 GAMING", host_vendor="MSI", host_version="1.0", arch="x86_64")


class FakeRunner:
    def __init__(self, outputs=None):
        self.outputs = outputs or {}
        self.commands = []

    def __call__(self, command):
        self.commands.append(command)
        return self.outputs.get(command, "")
