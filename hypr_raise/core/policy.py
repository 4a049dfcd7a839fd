"""
Run-or-raise selection policy

One invocation makes one decision:

    no candidate                      -> launch
    one candidate, not focused        -> focus it
    focused window is a candidate     -> focus the next candidate (wraps)
    candidates, none focused          -> focus the first candidate
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, TYPE_CHECKING
import click
from .matcher import MatchSet
from .window import Window

if TYPE_CHECKING:
    from .hyprland import Hyprland
    from .launcher import Launcher

class DecisionKind(Enum):
    """Terminal outcomes of the selection policy"""
    LAUNCH = 'launch'
    FOCUS_SINGLE = 'focus-single'
    FOCUS_CYCLE = 'focus-cycle'
    FOCUS_FIRST = 'focus-first'

@dataclass(frozen=True)
class Decision:
    """What to do for this invocation, plus the candidates it was based on"""
    kind: DecisionKind
    candidates: List[Window]
    target: Optional[Window] = None

    def __str__(self) -> str:
        if self.target is None:
            return self.kind.value
        return f"{self.kind.value} {self.target.address}"

def decide(match_set: MatchSet, windows: Sequence[Window]) -> Decision:
    """
    Pick the window to focus, or decide to launch

    Args:
        match_set: Selection criteria
        windows: Window list in compositor order

    Returns:
        Decision; earliest candidate in compositor order wins unless the
        focused window is itself a candidate, in which case focus advances
        by exactly one position with wrap-around
    """
    candidates = match_set.filter(windows)

    if not candidates:
        return Decision(DecisionKind.LAUNCH, candidates)

    if len(candidates) == 1 and not candidates[0].focused:
        return Decision(DecisionKind.FOCUS_SINGLE, candidates, candidates[0])

    for index, window in enumerate(candidates):
        if window.focused:
            target = candidates[(index + 1) % len(candidates)]
            return Decision(DecisionKind.FOCUS_CYCLE, candidates, target)

    return Decision(DecisionKind.FOCUS_FIRST, candidates, candidates[0])

class RaiseOrRun:
    """Runs one query -> decide -> focus-or-spawn pass against the collaborators"""

    def __init__(self, compositor: 'Hyprland', launcher: 'Launcher',
                 quiet: bool = False, debug: bool = False):
        """
        Args:
            compositor: Provides list_windows() and focus(address)
            launcher: Provides spawn(command)
            quiet: Suppress the decision message
            debug: Show matchers and candidates
        """
        self.compositor = compositor
        self.launcher = launcher
        self.quiet = quiet
        self.debug = debug

    def run(self, match_set: MatchSet, launch: str) -> Decision:
        """
        Focus a matching window or launch the command

        Errors from the collaborators propagate unchanged; nothing is
        retried since the compositor state has already moved on.

        Returns:
            The Decision that was carried out
        """
        windows = self.compositor.list_windows()
        decision = decide(match_set, windows)

        if self.debug:
            click.secho(f"Matchers: {match_set}", bold=True, err=True)
            click.secho(f"Candidates ({len(decision.candidates)} of {len(windows)} windows):", bold=True, err=True)
            for window in decision.candidates:
                click.echo(f"   {window}", err=True)

        if decision.kind == DecisionKind.LAUNCH:
            if not self.quiet:
                click.secho(f"Launching {click.style(launch, fg='yellow', bold=True)}", fg="cyan", err=True)
            self.launcher.spawn(launch)
        else:
            target = decision.target
            if not self.quiet:
                click.secho(f"Focusing {click.style(target.window_class, fg='yellow', bold=True)} "
                            f"({target.address}, {decision.kind.value})", fg="cyan", err=True)
            self.compositor.focus(target.address)

        return decision
