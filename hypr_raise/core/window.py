"""
Window snapshot as reported by the compositor
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
from .errors import QueryError

# Window attribute -> key in `hyprctl clients -j` output
CLIENT_KEYS = {
    'window_class': 'class',
    'initial_class': 'initialClass',
    'title': 'title',
    'initial_title': 'initialTitle',
    'tag': 'tag',
    'xdg_tag': 'xdgTag',
}

@dataclass(frozen=True)
class Window:
    """
    Read-only view of one compositor client

    Only valid for the invocation that queried it; the compositor may have
    closed or refocused the window by the time it is acted upon.
    """
    address: str
    window_class: str
    initial_class: str = ""
    title: str = ""
    initial_title: str = ""
    tag: str = ""
    xdg_tag: str = ""
    focused: bool = False

    def __str__(self) -> str:
        marker = "*" if self.focused else " "
        return f"{marker} {self.address} {self.window_class}: {self.title}"

    @classmethod
    def from_client(cls, client: Dict[str, Any], active_address: Optional[str] = None) -> 'Window':
        """
        Build a Window from one entry of `hyprctl clients -j`

        Args:
            client: Decoded JSON object for a single client
            active_address: Address reported by `hyprctl activewindow -j`

        Returns:
            Window snapshot; absent or null string fields become ""

        Raises:
            QueryError: entry is not an object or lacks address/class
        """
        if not isinstance(client, dict):
            raise QueryError(f"Unexpected client entry: {client!r}")

        address = client.get('address')
        if not isinstance(address, str) or not address:
            raise QueryError(f"Client entry without address: {client!r}")
        if not isinstance(client.get('class'), str):
            raise QueryError(f"Client {address} has no class")

        values = {}
        for attr, key in CLIENT_KEYS.items():
            value = client.get(key)
            values[attr] = value if isinstance(value, str) else ""

        return cls(address=address,
                   focused=active_address is not None and address == active_address,
                   **values)
