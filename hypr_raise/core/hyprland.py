"""
Hyprland compositor access through the hyprctl command
"""
import json
import subprocess
from typing import List, Optional
from .errors import FocusError, QueryError, SpawnError
from .window import Window

class Hyprland:
    """Queries windows and dispatches focus/exec requests via hyprctl"""

    def __init__(self, hyprctl: str = "hyprctl"):
        """
        Args:
            hyprctl: Name or path of the hyprctl binary
        """
        self.hyprctl = hyprctl

    def run(self, *args: str) -> subprocess.CompletedProcess:
        """
        Run hyprctl with the given arguments and capture its output

        hyprctl writes UTF-8; undecodable bytes (e.g. in a window title)
        become U+FFFD instead of failing the whole query.

        Raises:
            OSError: hyprctl could not be executed
        """
        return subprocess.run([self.hyprctl, *args], capture_output=True,
                              encoding='utf-8', errors='replace')

    def dispatch(self, *args: str) -> str:
        """
        Send a dispatcher request

        Returns:
            Empty string on success, otherwise the reason reported by hyprctl
        """
        result = self.run("dispatch", *args)
        reply = (result.stdout or "").strip()
        if result.returncode != 0:
            return (result.stderr or "").strip() or reply or f"hyprctl exited with status {result.returncode}"
        if reply != "ok":
            return reply or "no reply from hyprctl"
        return ""

    def query(self, command: str):
        """
        Run a JSON query such as `clients` or `activewindow`

        Returns:
            Decoded JSON reply

        Raises:
            QueryError: hyprctl failed or printed something that is not JSON
        """
        try:
            result = self.run(command, "-j")
        except OSError as e:
            raise QueryError(f"Could not run {self.hyprctl}: {e}") from e

        if result.returncode != 0:
            reason = (result.stderr or result.stdout or "").strip()
            raise QueryError(f"`{self.hyprctl} {command} -j` failed with status {result.returncode}: {reason}")

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise QueryError(f"Failed to parse `{self.hyprctl} {command} -j`: {e}") from e

    def active_address(self) -> Optional[str]:
        """
        Address of the window holding keyboard focus

        Returns:
            None when no window is focused (hyprctl replies with `{}`)
        """
        active = self.query("activewindow")
        if not isinstance(active, dict):
            raise QueryError(f"Expected an object from `{self.hyprctl} activewindow -j`, got {type(active).__name__}")
        address = active.get('address')
        return address if isinstance(address, str) and address else None

    def list_windows(self) -> List[Window]:
        """
        Fetch all clients in compositor order, marking the active one

        Returns:
            List of Window snapshots

        Raises:
            QueryError: hyprctl failed or returned malformed data
        """
        clients = self.query("clients")
        if not isinstance(clients, list):
            raise QueryError(f"Expected a list from `{self.hyprctl} clients -j`, got {type(clients).__name__}")

        active = self.active_address()
        return [Window.from_client(client, active) for client in clients]

    def focus(self, address: str) -> None:
        """
        Focus the window with the given address

        Raises:
            FocusError: window vanished or hyprctl could not be run
        """
        try:
            reason = self.dispatch("focuswindow", f"address:{address}")
        except OSError as e:
            raise FocusError(address, str(e)) from e
        if reason:
            raise FocusError(address, reason)

    def exec(self, command: str) -> None:
        """
        Ask the compositor to start a command

        Raises:
            SpawnError: hyprctl could not be run or rejected the request
        """
        try:
            reason = self.dispatch("exec", command)
        except OSError as e:
            raise SpawnError(command, str(e)) from e
        if reason:
            raise SpawnError(command, reason)
