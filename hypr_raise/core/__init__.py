"""
Core functionality for hypr-raise
"""
from .errors import RaiseError, ArgumentError, PatternError, QueryError, FocusError, SpawnError
from .window import Window
from .matcher import MatchField, MatchMethod, Matcher, MatchSet, parse_matcher, build_match_set
from .policy import DecisionKind, Decision, decide, RaiseOrRun
from .hyprland import Hyprland
from .launcher import Launcher

__all__ = [
    'RaiseError',
    'ArgumentError',
    'PatternError',
    'QueryError',
    'FocusError',
    'SpawnError',
    'Window',
    'MatchField',
    'MatchMethod',
    'Matcher',
    'MatchSet',
    'parse_matcher',
    'build_match_set',
    'DecisionKind',
    'Decision',
    'decide',
    'RaiseOrRun',
    'Hyprland',
    'Launcher'
]
