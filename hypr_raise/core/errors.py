"""
Error types raised by hypr-raise

Everything derives from click's exception classes so the command line
interface reports them on stderr with the right exit status.
"""
import click


class RaiseError(click.ClickException):
    """Base class for failures talking to the compositor or the OS"""
    exit_code = 1


class ArgumentError(click.UsageError):
    """Malformed matcher, unknown field or method, or missing selection criteria"""


class PatternError(ArgumentError):
    """Regex matcher pattern that does not compile"""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid regex `{pattern}`: {reason}")
        self.pattern = pattern


class QueryError(RaiseError):
    """Window list could not be fetched or parsed"""


class FocusError(RaiseError):
    """Compositor refused to focus the window"""

    def __init__(self, address: str, reason: str):
        super().__init__(f"Could not focus window {address}: {reason}")
        self.address = address


class SpawnError(RaiseError):
    """Launch command could not be started"""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Could not launch `{command}`: {reason}")
        self.command = command
