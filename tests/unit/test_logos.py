import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "facts"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from panefetch_renderer.errors import LogoSourceError
from panefetch_renderer.logos import ASCII_DIR, builtin_logo, list_logos, read_logo, resolve_logo_path
from panefetch_renderer.scanner import scan


class LogoSourceTests(unittest.TestCase):
    def test_off_disables_logo(self):
        self.assertIsNone(resolve_logo_path("off", "arch"))
        self.assertIsNone(resolve_logo_path(" OFF ", "arch", custom_distro="debian"))

    def test_os_picks_builtin(self):
        self.assertEqual(resolve_logo_path("os", "arch"), ASCII_DIR / "arch.txt")
        self.assertEqual(resolve_logo_path("", "Ubuntu"), ASCII_DIR / "ubuntu.txt")

    def test_unknown_distro_falls_back_to_linux(self):
        self.assertEqual(builtin_logo("haiku"), ASCII_DIR / "linux.txt")

    def test_custom_distro(self):
        self.assertEqual(resolve_logo_path("os", "arch", custom_distro="fedora"), ASCII_DIR / "fedora.txt")
        with self.assertRaises(LogoSourceError):
            resolve_logo_path("/tmp/logo.txt", "arch", custom_distro="fedora")

    def test_custom_path_is_expanded(self):
        path = resolve_logo_path("~/logo.txt", "arch")
        self.assertTrue(path.is_absolute())
        self.assertEqual(path.name, "logo.txt")


class ReadLogoTests(unittest.TestCase):
    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(LogoSourceError):
                read_logo(Path(tmp) / "nope.txt")

    def test_image_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logo.png"
            Image.new("RGB", (4, 4), (255, 0, 0)).save(path)
            with self.assertRaises(LogoSourceError):
                read_logo(path)

    def test_truncated_image_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logo.png"
            Image.new("RGB", (64, 64), (0, 128, 255)).save(path)
            data = path.read_bytes()
            path.write_bytes(data[: len(data) - 16])
            with self.assertRaises(LogoSourceError):
                read_logo(path)

    def test_text_logo(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logo.txt"
            path.write_text("${red} /\\\n${blue}/__\\\n", encoding="utf-8")
            self.assertEqual(read_logo(path), ["${red} /\\", "${blue}/__\\"])

    def test_builtin_logos_are_valid_templates(self):
        names = list_logos()
        self.assertIn("linux", names)
        self.assertIn("arch", names)
        for name in names:
            lines = read_logo(builtin_logo(name))
            self.assertTrue(lines, name)
            for line in lines:
                scan(line)


if __name__ == "__main__":
    unittest.main()
