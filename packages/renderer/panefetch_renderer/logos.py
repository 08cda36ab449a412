"""Logo source selection and loading."""

from __future__ import annotations

import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import LogoSourceError

ASCII_DIR = Path(__file__).resolve().parent / "ascii"
DEFAULT_LOGO = "linux"


def list_logos() -> list[str]:
    return sorted(p.stem for p in ASCII_DIR.glob("*.txt"))


def builtin_logo(distro: str) -> Path:
    path = ASCII_DIR / f"{distro.lower()}.txt"
    if path.exists():
        return path
    return ASCII_DIR / f"{DEFAULT_LOGO}.txt"


def resolve_logo_path(source_path: str, os_id: str, custom_distro: str | None = None) -> Path | None:
    """Map the configured source to a file; ``None`` means no logo.

    ``"os"`` picks the built-in art for ``os_id``, ``"off"`` disables the logo,
    anything else is a path.
    """
    source = source_path.strip()
    if source.lower() == "off":
        return None
    if custom_distro:
        if source and source.lower() != "os":
            raise LogoSourceError("Specify either a custom distro logo or a custom source path, not both")
        return builtin_logo(custom_distro)
    if not source or source.lower() == "os":
        return builtin_logo(os_id)
    return Path(os.path.expandvars(source)).expanduser()


def _is_image(path: Path) -> bool:
    # A recognised header is enough; truncated or corrupt images still count.
    try:
        with Image.open(path):
            return True
    except (UnidentifiedImageError, OSError):
        return False


def read_logo(path: Path) -> list[str]:
    if not path.is_file():
        raise LogoSourceError(f"Could not open logo file {str(path)!r}")
    if _is_image(path):
        raise LogoSourceError(f"The source file {str(path)!r} is an image; image logos need a GUI renderer")
    try:
        with path.open("r", encoding="utf-8") as fh:
            return fh.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise LogoSourceError(f"Could not read logo file {str(path)!r}: {exc}") from exc
