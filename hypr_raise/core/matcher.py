"""
Matcher specification parsing and evaluation

A matcher is written as `field[:method]=pattern`, for example:

    class=firefox               Exact class
    title:contains=YouTube      Title substring
    initialTitle:prefix=Zoom    Initial title starts with "Zoom"
    title:regex=(?i)^mail       Case-insensitive regex search
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence
from .errors import ArgumentError, PatternError
from .window import Window

class MatchField(Enum):
    """Window fields a matcher can test, valued by the Window attribute name"""
    CLASS = 'window_class'
    INITIAL_CLASS = 'initial_class'
    TITLE = 'title'
    INITIAL_TITLE = 'initial_title'
    TAG = 'tag'
    XDG_TAG = 'xdg_tag'

    def value_of(self, window: Window) -> str:
        """Current value of this field on the window ("" when unset)"""
        return getattr(window, self.value) or ""

class MatchMethod(Enum):
    """How a matcher compares its pattern to the field value"""
    EQUALS = 'equals'
    CONTAINS = 'contains'
    PREFIX = 'prefix'
    SUFFIX = 'suffix'
    REGEX = 'regex'

FIELD_ALIASES = {
    'class': MatchField.CLASS,
    'c': MatchField.CLASS,
    'initial-class': MatchField.INITIAL_CLASS,
    'initialClass': MatchField.INITIAL_CLASS,
    'title': MatchField.TITLE,
    'initial-title': MatchField.INITIAL_TITLE,
    'initialTitle': MatchField.INITIAL_TITLE,
    'tag': MatchField.TAG,
    'xdgtag': MatchField.XDG_TAG,
    'xdg-tag': MatchField.XDG_TAG,
    'xdgTag': MatchField.XDG_TAG,
}

# Field -> first alias listed for it, used when printing matchers
FIELD_NAMES = {match_field: alias for alias, match_field in reversed(list(FIELD_ALIASES.items()))}

METHOD_ALIASES = {
    'equals': MatchMethod.EQUALS,
    'eq': MatchMethod.EQUALS,
    'contains': MatchMethod.CONTAINS,
    'substr': MatchMethod.CONTAINS,
    'prefix': MatchMethod.PREFIX,
    'starts-with': MatchMethod.PREFIX,
    'startswith': MatchMethod.PREFIX,
    'suffix': MatchMethod.SUFFIX,
    'ends-with': MatchMethod.SUFFIX,
    'endswith': MatchMethod.SUFFIX,
    'regex': MatchMethod.REGEX,
    're': MatchMethod.REGEX,
}

@dataclass(frozen=True)
class Matcher:
    """
    Single field/method/pattern predicate over a Window

    The pattern is validated on construction and regex patterns are
    compiled once, so a Matcher that exists can always be evaluated.
    """
    match_field: MatchField
    method: MatchMethod
    pattern: str
    regex: Optional[re.Pattern] = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        """
        Raises:
            ArgumentError: pattern is empty
            PatternError: regex pattern does not compile
        """
        if not self.pattern:
            raise ArgumentError("Matcher pattern cannot be empty")

        if self.method == MatchMethod.REGEX:
            try:
                object.__setattr__(self, 'regex', re.compile(self.pattern))
            except re.error as e:
                raise PatternError(self.pattern, str(e)) from e

    def __str__(self) -> str:
        return f"{FIELD_NAMES[self.match_field]}:{self.method.value}={self.pattern}"

    def matches(self, window: Window) -> bool:
        """Check whether the window's field value satisfies this matcher"""
        value = self.match_field.value_of(window)

        if self.method == MatchMethod.EQUALS:
            return value == self.pattern
        if self.method == MatchMethod.CONTAINS:
            return self.pattern in value
        if self.method == MatchMethod.PREFIX:
            return value.startswith(self.pattern)
        if self.method == MatchMethod.SUFFIX:
            return value.endswith(self.pattern)
        # Unanchored: the pattern may match anywhere in the value
        return self.regex.search(value) is not None

class MatchSet:
    """Conjunction of matchers; a window must satisfy every one of them"""

    def __init__(self, matchers: Iterable[Matcher] = ()):
        self.matchers: List[Matcher] = list(matchers)

    def __len__(self) -> int:
        return len(self.matchers)

    def __iter__(self):
        return iter(self.matchers)

    def __str__(self) -> str:
        return " & ".join(str(matcher) for matcher in self.matchers)

    def __repr__(self) -> str:
        return f"MatchSet({self.matchers!r})"

    def matches(self, window: Window) -> bool:
        return all(matcher.matches(window) for matcher in self.matchers)

    def filter(self, windows: Sequence[Window]) -> List[Window]:
        """
        Select the windows satisfying every matcher

        Returns:
            Candidate list in the same order as the input
        """
        return [window for window in windows if self.matches(window)]

def parse_matcher(spec: str) -> Matcher:
    """
    Parse a `field[:method]=pattern` string

    Splits on the first '=' so the pattern may itself contain '='. The
    method defaults to equals when omitted.

    Args:
        spec: Raw matcher text from the command line

    Returns:
        Validated Matcher

    Raises:
        ArgumentError: missing '=', empty pattern, unknown field or method
        PatternError: regex pattern does not compile
    """
    selector, sep, pattern = spec.partition('=')
    if not sep:
        raise ArgumentError("Expected matcher in the form field[:method]=pattern")

    if not pattern:
        raise ArgumentError("Matcher pattern cannot be empty")

    field_token, sep, method_token = selector.partition(':')

    match_field = FIELD_ALIASES.get(field_token)
    if match_field is None:
        raise ArgumentError(f"Unsupported match field `{field_token}`")

    method = MatchMethod.EQUALS
    if sep:
        method = METHOD_ALIASES.get(method_token)
        if method is None:
            raise ArgumentError(f"Unsupported match method `{method_token}`")

    return Matcher(match_field, method, pattern)

def build_match_set(window_class: Optional[str], matchers: Iterable[Matcher]) -> MatchSet:
    """
    Combine the --class shorthand with explicit --match matchers

    The class matcher, when given, comes first.

    Raises:
        ArgumentError: no matcher was supplied at all
    """
    combined = []
    if window_class is not None:
        combined.append(Matcher(MatchField.CLASS, MatchMethod.EQUALS, window_class))
    combined.extend(matchers)

    if not combined:
        raise ArgumentError("Provide at least one matcher via --class or --match")

    return MatchSet(combined)
