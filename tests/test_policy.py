"""
Tests for the run-or-raise selection policy
"""
import pytest
from unittest.mock import Mock
from hypr_raise.core.errors import FocusError, QueryError, SpawnError
from hypr_raise.core.matcher import MatchSet, parse_matcher
from hypr_raise.core.policy import DecisionKind, RaiseOrRun, decide
from .fakes import FakeCompositor, make_window

def match(*specs):
    return MatchSet(parse_matcher(spec) for spec in specs)

def run(windows, launcher, *specs, launch="firefox"):
    compositor = FakeCompositor(windows)
    decision = RaiseOrRun(compositor, launcher, quiet=True).run(match(*specs), launch)
    return compositor, decision

def test_empty_window_list_launches(launcher):
    """Test matchers=[class=firefox], windows=[] -> spawn("firefox")"""
    compositor, decision = run([], launcher, "class=firefox")
    assert decision.kind == DecisionKind.LAUNCH
    assert launcher.spawned == ["firefox"]
    assert compositor.focused == []
    assert compositor.queries == 1

def test_launch_uses_literal_command(launcher):
    windows = [make_window(0, "kitty")]
    compositor, _ = run(windows, launcher, "class=firefox", launch="firefox --new-window 'a b'")
    assert launcher.spawned == ["firefox --new-window 'a b'"]
    assert compositor.focused == []

def test_single_unfocused_candidate(launcher):
    """Test matchers=[class=firefox], windows=[{firefox, unfocused}] -> focus(window0)"""
    windows = [make_window(0, "firefox")]
    compositor, decision = run(windows, launcher, "class=firefox")
    assert decision.kind == DecisionKind.FOCUS_SINGLE
    assert compositor.focused == ["0x0000"]
    assert launcher.spawned == []

def test_cycle_from_focused_slack(launcher, slack_windows):
    """Test cycling from the focused Slack window to the next one"""
    compositor, decision = run(slack_windows, launcher, "class=Slack")
    assert decision.kind == DecisionKind.FOCUS_CYCLE
    assert compositor.focused == ["0x0001"]
    assert launcher.spawned == []

@pytest.mark.parametrize("focused_index,expected_index", [
    (0, 1),
    (1, 2),
    (2, 0),
])
def test_cycle_advances_and_wraps(focused_index, expected_index):
    windows = [make_window(i, "kitty", focused=(i == focused_index)) for i in range(3)]
    decision = decide(match("c=kitty"), windows)
    assert decision.kind == DecisionKind.FOCUS_CYCLE
    assert decision.target is windows[expected_index]

def test_cycle_within_filtered_order():
    """Test that cycling skips non-matching windows between candidates"""
    windows = [
        make_window(0, "kitty"),
        make_window(1, "firefox", focused=True),
        make_window(2, "kitty"),
        make_window(3, "firefox"),
        make_window(4, "firefox"),
    ]
    decision = decide(match("class=firefox"), windows)
    assert decision.target.address == "0x0003"

    windows[1] = make_window(1, "firefox")
    windows[4] = make_window(4, "firefox", focused=True)
    decision = decide(match("class=firefox"), windows)
    assert decision.target.address == "0x0001"

def test_single_focused_candidate_refocuses_itself(launcher):
    windows = [make_window(0, "kitty"), make_window(1, "firefox", focused=True)]
    compositor, decision = run(windows, launcher, "class=firefox")
    assert decision.kind == DecisionKind.FOCUS_CYCLE
    assert compositor.focused == ["0x0001"]
    assert launcher.spawned == []

def test_focus_first_when_focused_window_does_not_match(launcher):
    windows = [
        make_window(0, "kitty", focused=True),
        make_window(1, "firefox"),
        make_window(2, "firefox"),
    ]
    compositor, decision = run(windows, launcher, "class=firefox")
    assert decision.kind == DecisionKind.FOCUS_FIRST
    assert compositor.focused == ["0x0001"]

def test_decision_lists_candidates():
    windows = [make_window(0, "kitty"), make_window(1, "firefox"), make_window(2, "kitty")]
    decision = decide(match("c=kitty"), windows)
    assert [w.address for w in decision.candidates] == ["0x0000", "0x0002"]

def test_query_error_propagates(launcher):
    """Test that a failed query neither focuses nor launches"""
    compositor = Mock()
    compositor.list_windows.side_effect = QueryError("hyprctl not running")
    with pytest.raises(QueryError):
        RaiseOrRun(compositor, launcher, quiet=True).run(match("c=kitty"), "kitty")
    compositor.focus.assert_not_called()
    assert launcher.spawned == []

def test_focus_error_not_retried(launcher):
    compositor = Mock()
    compositor.list_windows.return_value = [make_window(0, "kitty")]
    compositor.focus.side_effect = FocusError("0x0000", "No such window found")
    with pytest.raises(FocusError):
        RaiseOrRun(compositor, launcher, quiet=True).run(match("c=kitty"), "kitty")
    compositor.focus.assert_called_once_with("0x0000")
    assert launcher.spawned == []

def test_spawn_error_propagates():
    compositor = FakeCompositor([])
    launcher = Mock()
    launcher.spawn.side_effect = SpawnError("nope", "not found")
    with pytest.raises(SpawnError):
        RaiseOrRun(compositor, launcher, quiet=True).run(match("c=kitty"), "nope")
    launcher.spawn.assert_called_once_with("nope")

def test_messages(launcher, capsys):
    compositor = FakeCompositor([make_window(0, "kitty")])
    RaiseOrRun(compositor, launcher, debug=True).run(match("c=kitty"), "kitty")
    err = capsys.readouterr().err
    assert "Matchers: class:equals=kitty" in err
    assert "Candidates (1 of 1 windows)" in err
    assert "Focusing kitty" in err

def test_quiet_suppresses_messages(launcher, capsys):
    RaiseOrRun(FakeCompositor([]), launcher, quiet=True).run(match("c=kitty"), "kitty")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""
