"""Record a connection whenever the machine is on the target Wi-Fi network."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .config import load_config
from .logs import setup_logging
from .store import ConnectionStore
from .wifi import WifiProbe

log = logging.getLogger(__name__)


class Recorder:
    """Periodic SSID check that folds matches into the connection store."""

    def __init__(self, probe: WifiProbe, store: ConnectionStore, target_ssid: str):
        self.probe = probe
        self.store = store
        self.target_ssid = target_ssid

    async def check(self) -> bool:
        """Returns True when a connection was recorded."""
        ssid = await self.probe.current_ssid()
        if ssid is None:
            log.info("No WiFi connection detected")
            return False
        log.info("Current WiFi SSID: %s", ssid)
        if ssid != self.target_ssid:
            return False
        log.info("SSID matched, inserting connection")
        await asyncio.to_thread(self.store.record)
        return True

    async def run(
        self, interval: float = 60.0, stop_event: Optional[asyncio.Event] = None
    ) -> None:
        """Check every ``interval`` seconds until ``stop_event`` is set."""
        stop_event = stop_event or asyncio.Event()
        while not stop_event.is_set():
            try:
                await self.check()
            except Exception:
                log.exception("Error checking WiFi connection")
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                pass


def main():
    config = load_config()
    setup_logging(config.log_level, config.log_file)
    recorder = Recorder(
        WifiProbe(config.interface), ConnectionStore(config.db_path), config.ssid
    )
    try:
        asyncio.run(recorder.run(config.recorder_interval))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
