"""Shell-like lexer for splitting command lines into words."""

from . import states


def _scan(line: str, comments: bool) -> list[str]:
    """Run the scanner over line and collect the completed words."""
    tokens = []
    buffer = []
    state = states.START

    for char in line:
        result = states.step(state, char, comments)
        _apply(result, buffer, tokens)
        state = result.state

    _apply(states.finish(state), buffer, tokens)
    return tokens


def _apply(result: states.Step, buffer: list[str], tokens: list[str]) -> None:
    """Append a step's text to the buffer and flush it if the word is done."""
    if result.text:
        buffer.append(result.text)
    if result.flush:
        tokens.append("".join(buffer))
        buffer.clear()


def split(line: str) -> list[str]:
    """
    Split a line into words the way a POSIX shell would.

    Rules:
    - Unicode whitespace separates words, runs of it count once
    - Outside quotes, backslash makes the next character literal
    - Single quotes keep everything literal up to the closing quote
    - Inside double quotes, backslash only escapes $, `, ", \\ and newline
    - Quotes are removed and quoted text joins the surrounding word
    - Unterminated quotes are closed at the end of the line
    - A trailing backslash outside quotes is dropped

    Args:
        line: The line to split

    Returns:
        List of parsed words, empty if the line has none
    """
    return _scan(line, comments=False)


def split_with_comments(line: str) -> list[str]:
    """
    Split a line like split(), skipping comments.

    A # at the start of a word, outside quotes, starts a comment that runs
    to the end of the line. A # anywhere else is an ordinary character.

    Args:
        line: The line to split

    Returns:
        List of parsed words
    """
    return _scan(line, comments=True)
