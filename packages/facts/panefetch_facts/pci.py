"""Vendor/device name lookup in the system pci.ids database."""

from __future__ import annotations

from pathlib import Path

PCI_IDS_PATHS = (
    Path("/usr/share/hwdata/pci.ids"),
    Path("/usr/share/misc/pci.ids"),
    Path("/usr/share/pci.ids"),
    Path("/var/lib/pciutils/pci.ids"),
)

_VENDOR_SHORT_NAMES = {
    "NVIDIA Corporation": "NVIDIA",
    "Advanced Micro Devices, Inc. [AMD/ATI]": "AMD",
    "Advanced Micro Devices, Inc. [AMD]": "AMD",
    "Intel Corporation": "Intel",
}


def short_vendor_name(vendor: str) -> str:
    return _VENDOR_SHORT_NAMES.get(vendor, vendor)


class PciDatabase:
    """Lazily parsed pci.ids file. Ids are 4-digit lowercase hex strings."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._vendors: dict[str, str] | None = None
        self._devices: dict[tuple[str, str], str] = {}

    @property
    def path(self) -> Path | None:
        if self._path is None:
            self._path = next((p for p in PCI_IDS_PATHS if p.exists()), None)
        return self._path

    def _load(self) -> None:
        self._vendors = {}
        path = self.path
        if path is None or not path.is_file():
            return

        vendor = None
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            for raw in fh:
                line = raw.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                # Device classes follow the vendor list.
                if line.startswith("C "):
                    break
                if line.startswith("\t\t"):
                    continue
                if line.startswith("\t"):
                    if vendor is None:
                        continue
                    dev_id, _, name = line.strip().partition(" ")
                    self._devices[(vendor, dev_id.lower())] = name.strip()
                    continue
                vendor_id, _, name = line.partition(" ")
                vendor = vendor_id.lower()
                self._vendors[vendor] = name.strip()

    def vendor(self, vendor_id: str) -> str | None:
        if self._vendors is None:
            self._load()
        return self._vendors.get(vendor_id.lower())  # type: ignore[union-attr]

    def device(self, vendor_id: str, device_id: str) -> str | None:
        if self._vendors is None:
            self._load()
        return self._devices.get((vendor_id.lower(), device_id.lower()))
