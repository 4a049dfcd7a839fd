"""
Command line interface for hypr-raise
"""
import click
from . import __version__
from .core.errors import ArgumentError
from .core.hyprland import Hyprland
from .core.launcher import Launcher
from .core.matcher import build_match_set, parse_matcher
from .core.policy import RaiseOrRun

class MatcherType(click.ParamType):
    """Click parameter type for field[:method]=pattern matchers"""
    name = "field[:method]=pattern"

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            return value
        try:
            return parse_matcher(value)
        except ArgumentError as e:
            self.fail(e.message, param, ctx)

MATCHER = MatcherType()

@click.command(context_settings=dict(help_option_names=['-h', '--help'],
                                     auto_envvar_prefix='HYPR_RAISE'))
@click.version_option(version=__version__, prog_name='raise')
@click.option('--class', '-c', 'window_class', metavar='CLASS',
              help='Class to focus (shorthand for --match class=CLASS)')
@click.option('--launch', '-e', required=True, metavar='CMD',
              help='Command to launch when no window matches')
@click.option('--match', '-m', 'matchers', type=MATCHER, multiple=True,
              help='Additional matcher in the form field[:method]=pattern (repeatable)')
@click.option('--exec-via-hyprland', is_flag=True,
              help='Start the launch command with hyprctl dispatch exec')
@click.option('--hyprctl', default='hyprctl', show_default=True,
              help='hyprctl binary used to talk to the compositor')
@click.option('--quiet', '-q', is_flag=True, help='Suppress additional output')
@click.option('--debug', is_flag=True, help='Show matchers and candidate windows')
def main(window_class, launch, matchers, exec_via_hyprland, hyprctl, quiet, debug):
    """raise - focus a matching Hyprland window, or launch it.

Windows are selected by the conjunction of all matchers. If the focused
window already matches, focus moves to the next matching window, wrapping
around after the last one. If nothing matches, the launch command runs.

\b
Matcher fields:
    class (c), initialClass (initial-class), title,
    initialTitle (initial-title), tag, xdgTag (xdg-tag, xdgtag)

\b
Matcher methods (default: equals):
    equals (eq), contains (substr), prefix (starts-with, startswith),
    suffix (ends-with, endswith), regex (re)

\b
Examples:
    raise -c firefox -e firefox
    raise -m title:contains=Slack -e slack
    raise -m 'class:regex=(?i)^code' -m title:suffix=project -e code"""

    match_set = build_match_set(window_class, matchers)

    compositor = Hyprland(hyprctl)
    launcher = Launcher(compositor if exec_via_hyprland else None)

    RaiseOrRun(compositor, launcher, quiet=quiet, debug=debug).run(match_set, launch)

if __name__ == '__main__':
    main()
