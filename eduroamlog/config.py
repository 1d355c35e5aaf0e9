"""Read ~/.eduroamlog/config.toml for network, storage and logging settings."""

import re
from pathlib import Path
from typing import Optional


_CONFIG_PATH = Path.home() / ".eduroamlog" / "config.toml"
_DEFAULT_DB = Path.home() / ".eduroamlog" / "connections.db"


def _parse_toml_simple(text: str) -> dict:
    """Minimal TOML parser (no dependencies) for flat sections."""
    result = {}
    current = result
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        m = re.match(r"^\[(.+)]$", line)
        if m:
            current = result.setdefault(m.group(1).strip(), {})
            continue
        m = re.match(r'^(\w+)\s*=\s*"(.*)"\s*$', line)
        if m:
            current[m.group(1)] = m.group(2)
            continue
        m = re.match(r"^(\w+)\s*=\s*(true|false)\s*$", line, re.IGNORECASE)
        if m:
            current[m.group(1)] = m.group(2).lower() == "true"
            continue
        m = re.match(r"^(\w+)\s*=\s*(\d+\.\d*)\s*$", line)
        if m:
            current[m.group(1)] = float(m.group(2))
            continue
        m = re.match(r"^(\w+)\s*=\s*(\d+)\s*$", line)
        if m:
            current[m.group(1)] = int(m.group(2))
            continue
    return result


class Config:
    """Viewer and recorder settings loaded from ~/.eduroamlog/config.toml."""

    def __init__(self, path: Optional[Path] = None):
        self.path: Path = path or _CONFIG_PATH
        self.ssid: str = "eduroam"
        self.interface: str = "en0"
        self.db_path: Path = _DEFAULT_DB
        self.recorder_enabled: bool = True
        self.recorder_interval: float = 60.0
        self.log_level: str = "INFO"
        self.log_file: str = ""
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        data = _parse_toml_simple(self.path.read_text())
        network = data.get("network", {})
        self.ssid = network.get("ssid", self.ssid)
        self.interface = network.get("interface", self.interface)
        storage = data.get("storage", {})
        if storage.get("db_path"):
            self.db_path = Path(storage["db_path"]).expanduser()
        recorder = data.get("recorder", {})
        self.recorder_enabled = recorder.get("enabled", self.recorder_enabled)
        self.recorder_interval = float(recorder.get("interval", self.recorder_interval))
        logging_ = data.get("logging", {})
        self.log_level = str(logging_.get("level", self.log_level)).upper()
        self.log_file = logging_.get("file", self.log_file)


def load_config(path: Optional[Path] = None) -> Config:
    return Config(path)
