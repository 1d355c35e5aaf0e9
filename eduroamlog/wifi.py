"""Current Wi-Fi SSID lookup via the platform's network tools."""

import asyncio
import logging
import sys
from typing import List, Optional, Tuple

log = logging.getLogger(__name__)


def parse_networksetup(stdout: str) -> Optional[str]:
    """Parse ``Current Wi-Fi Network: NAME`` (macOS networksetup)."""
    parts = stdout.split(": ", 1)
    if len(parts) < 2:
        return None
    return parts[1].strip() or None


def parse_nmcli(stdout: str) -> Optional[str]:
    """Parse ``nmcli -t -f active,ssid dev wifi`` output; the active line is ``yes:NAME``."""
    for line in stdout.splitlines():
        active, _, ssid = line.partition(":")
        if active == "yes" and ssid:
            return ssid.replace("\\:", ":")
    return None


class WifiProbe:
    """Ask the local network tooling which SSID the interface is joined to."""

    def __init__(self, interface: str = "en0", platform: Optional[str] = None):
        self.interface = interface
        self.platform = platform or sys.platform

    def command(self) -> Optional[List[str]]:
        if self.platform == "darwin":
            return ["networksetup", "-getairportnetwork", self.interface]
        if self.platform.startswith("linux"):
            return ["nmcli", "-t", "-f", "active,ssid", "dev", "wifi"]
        return None

    def parse(self, stdout: str) -> Optional[str]:
        if self.platform == "darwin":
            return parse_networksetup(stdout)
        return parse_nmcli(stdout)

    async def run(self, cmd: List[str], timeout: int = 10) -> Tuple[str, str, int]:
        """Run a command asynchronously. Returns (stdout, stderr, returncode)."""
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            try:
                stdout_b, stderr_b = await asyncio.wait_for(
                    proc.communicate(), timeout=timeout
                )
            except asyncio.TimeoutError:
                proc.kill()
                await proc.wait()
                return "", f"{cmd[0]} timed out", 1
            return (
                stdout_b.decode(errors="replace"),
                stderr_b.decode(errors="replace"),
                proc.returncode or 0,
            )
        except Exception as e:
            return "", str(e), 1

    async def current_ssid(self) -> Optional[str]:
        cmd = self.command()
        if cmd is None:
            log.warning("SSID lookup not supported on %s", self.platform)
            return None
        stdout, stderr, rc = await self.run(cmd)
        return self._result(stdout, stderr, rc)

    def _result(self, stdout: str, stderr: str, rc: int) -> Optional[str]:
        if rc != 0:
            log.warning("Error reading current SSID: %s", stderr.strip() or f"exit {rc}")
            return None
        return self.parse(stdout)
