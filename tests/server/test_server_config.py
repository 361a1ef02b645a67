import sys
import tempfile
import tomllib
import types
import unittest
from pathlib import Path

from app_config_schema import UIServerSettings

# Import server.config without executing src/server/__init__.py.
_SERVER_DIR = Path(__file__).resolve().parents[2] / "src" / "server"
if "server" not in sys.modules:
    _pkg = types.ModuleType("server")
    _pkg.__path__ = [str(_SERVER_DIR)]  # type: ignore[attr-defined]
    sys.modules["server"] = _pkg

from server.config import ServerConfigurationError, UIServerConfig, default_index_file


class UIServerConfigTests(unittest.TestCase):
    def test_from_settings_uses_bundled_web_ui(self) -> None:
        config = UIServerConfig.from_settings(UIServerSettings())

        self.assertEqual(("web_ui", "index.html"), Path(config.index_file).parts[-2:])
        self.assertTrue(Path(config.index_file).is_file())
        self.assertEqual(Path(config.index_file).parent, config.ui_root)
        self.assertEqual("/ws", config.websocket_path)

    def test_default_index_is_installed_as_server_package_data(self) -> None:
        index_file = default_index_file()

        self.assertEqual(_SERVER_DIR / "web_ui" / "index.html", index_file)
        for asset in ("app.js", "styles.css"):
            self.assertTrue((index_file.parent / asset).is_file())

        pyproject = tomllib.loads(
            (_SERVER_DIR.parents[1] / "pyproject.toml").read_text(encoding="utf-8")
        )
        package_data = pyproject["tool"]["setuptools"]["package-data"]
        self.assertIn("web_ui/*", package_data["server"])

    def test_from_settings_prefers_explicit_index_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            custom = Path(temp_dir) / "index.html"
            custom.write_text("<html></html>", encoding="utf-8")

            config = UIServerConfig.from_settings(UIServerSettings(index_file=str(custom)))

            self.assertEqual(str(custom), config.index_file)

    def test_rejects_out_of_range_port(self) -> None:
        with self.assertRaises(ServerConfigurationError):
            UIServerConfig.from_settings(UIServerSettings(port=70000))

    def test_rejects_blank_host(self) -> None:
        with self.assertRaises(ServerConfigurationError):
            UIServerConfig.from_settings(UIServerSettings(host="  "))

    def test_rejects_missing_index_file_when_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "nope.html"
            with self.assertRaises(ServerConfigurationError):
                UIServerConfig(index_file=str(missing))

    def test_disabled_server_skips_index_validation(self) -> None:
        config = UIServerConfig(enabled=False, index_file="/does/not/exist.html")
        self.assertFalse(config.enabled)


if __name__ == "__main__":
    unittest.main()
