"""
Launch fallback used when no window matches
"""
import subprocess
from typing import Optional
from .errors import SpawnError
from .hyprland import Hyprland

class Launcher:
    """Starts the launch command without waiting for it"""

    def __init__(self, compositor: Optional[Hyprland] = None):
        """
        Args:
            compositor: When set, the command is started by the compositor
                (hyprctl dispatch exec) instead of as our own child
        """
        self.compositor = compositor

    def spawn(self, command: str) -> None:
        """
        Start command as an independent process

        Raises:
            SpawnError: the process could not be started
        """
        if self.compositor is not None:
            self.compositor.exec(command)
            return

        try:
            # New session so the command outlives us and ignores our signals
            subprocess.Popen(command, shell=True,
                             stdin=subprocess.DEVNULL,
                             stdout=subprocess.DEVNULL,
                             stderr=subprocess.DEVNULL,
                             close_fds=True,
                             start_new_session=True)
        except OSError as e:
            raise SpawnError(command, str(e)) from e
