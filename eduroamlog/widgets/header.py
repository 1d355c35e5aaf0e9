"""Title bar widget."""

from textual.widgets import Static


class LogHeader(Static):
    """Title bar naming the log and the network it tracks."""

    DEFAULT_CSS = """
    LogHeader {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
        content-align: center middle;
        padding: 0 1;
    }
    """

    def __init__(self, heading: str, ssid: str) -> None:
        self.heading = heading
        self.ssid = ssid
        super().__init__()

    def on_mount(self) -> None:
        self.update(f" {self.heading} | {self.ssid} ")
