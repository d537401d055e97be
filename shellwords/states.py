"""Scanner states and transitions for shell-like word splitting.

Each state is a small frozen dataclass. A transition takes the current state
and one input character and returns a ``Step``: the next state, the text to
append to the word being built, and whether that word is complete. The word
buffer itself is owned by the scan loop in ``lexer``.
"""

from dataclasses import dataclass
from typing import Union

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
COMMENT = "#"
NEWLINE = "\n"

# A backslash inside double quotes only escapes these
DOUBLE_QUOTE_ESCAPABLE = frozenset("$`\"\\")

# str.isspace accepts these, but they are not Unicode White_Space
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_space(char: str) -> bool:
    """Check if a character separates words outside quotes."""
    return char.isspace() and char not in INFORMATION_SEPARATORS


@dataclass(frozen=True)
class Unquoted:
    """Outside any quotes."""

    started: bool = False
    escaping: bool = False


@dataclass(frozen=True)
class SingleQuoted:
    """Inside '...'. Nothing but the closing quote is special."""


@dataclass(frozen=True)
class DoubleQuoted:
    """Inside "..."."""

    escaping: bool = False


@dataclass(frozen=True)
class Commented:
    """Inside a # comment, up to the end of the line."""


State = Union[Unquoted, SingleQuoted, DoubleQuoted, Commented]

START = Unquoted()


@dataclass(frozen=True)
class Step:
    """Result of feeding one character to a state."""

    state: State
    text: str = ""
    flush: bool = False


def step_unquoted(state: Unquoted, char: str, comments: bool = False) -> Step:
    """Handle a character outside quotes."""
    if state.escaping:
        return Step(Unquoted(started=True), char)

    if is_space(char):
        return Step(START, flush=state.started)

    if char == BACKSLASH:
        return Step(Unquoted(started=state.started, escaping=True))

    if char == SINGLE_QUOTE:
        return Step(SingleQuoted())

    if char == DOUBLE_QUOTE:
        return Step(DoubleQuoted())

    if comments and char == COMMENT and not state.started:
        return Step(Commented())

    return Step(Unquoted(started=True), char)


def step_single_quoted(state: SingleQuoted, char: str) -> Step:
    """Handle a character inside single quotes."""
    if char == SINGLE_QUOTE:
        return Step(Unquoted(started=True))
    return Step(state, char)


def step_double_quoted(state: DoubleQuoted, char: str) -> Step:
    """Handle a character inside double quotes."""
    if state.escaping:
        if char in DOUBLE_QUOTE_ESCAPABLE:
            return Step(DoubleQuoted(), char)
        if char == NEWLINE:
            # Line continuation
            return Step(DoubleQuoted())
        return Step(DoubleQuoted(), BACKSLASH + char)

    if char == BACKSLASH:
        return Step(DoubleQuoted(escaping=True))

    if char == DOUBLE_QUOTE:
        return Step(Unquoted(started=True))

    return Step(state, char)


def step_commented(state: Commented, char: str) -> Step:
    """Skip characters until the end of the line."""
    if char == NEWLINE:
        return Step(START)
    return Step(state)


def step(state: State, char: str, comments: bool = False) -> Step:
    """
    Feed one character to the scanner.

    Args:
        state: The current scanner state
        char: A single character of input
        comments: Whether # at the start of a word begins a comment

    Returns:
        The Step to apply
    """
    if isinstance(state, Unquoted):
        return step_unquoted(state, char, comments)
    if isinstance(state, SingleQuoted):
        return step_single_quoted(state, char)
    if isinstance(state, DoubleQuoted):
        return step_double_quoted(state, char)
    if isinstance(state, Commented):
        return step_commented(state, char)
    raise TypeError(f"Unknown scanner state: {state!r}")


def finish(state: State) -> Step:
    """
    Close the scan at end of input.

    Open quotes are closed implicitly. A dangling backslash outside quotes
    is dropped; inside double quotes it is kept as a literal backslash.
    """
    if isinstance(state, Unquoted):
        return Step(START, flush=state.started)
    if isinstance(state, DoubleQuoted) and state.escaping:
        return Step(START, BACKSLASH, flush=True)
    if isinstance(state, (SingleQuoted, DoubleQuoted)):
        return Step(START, flush=True)
    return Step(START)
