"""Split every line of a shell-like script file."""

import json
from dataclasses import dataclass, field
from typing import TextIO

from . import lexer


class ScriptException(Exception):
    """Base exception for script errors."""

    pass


class ScriptNotReadable(ScriptException):
    """Raised when a script file cannot be read."""

    pass


@dataclass
class ScriptLine:
    """A non-comment line of a script and its words."""

    line_num: int
    text: str
    words: list[str] = field(default_factory=list)


def _is_comment(line: str) -> bool:
    """Check if a line is blank or a comment."""
    stripped = line.lstrip()
    return len(stripped) == 0 or stripped[0] == "#"


def split_lines(content: str) -> list[ScriptLine]:
    """
    Split each meaningful line of content into words.

    Blank lines and lines starting with # are skipped. Every other line is
    split on its own, so a quote left open is closed at the end of its line.

    Args:
        content: The script text

    Returns:
        One ScriptLine per remaining line, in file order
    """
    lines = []
    for line_num, line in enumerate(content.split("\n"), start=1):
        if _is_comment(line):
            continue

        lines.append(
            ScriptLine(
                line_num=line_num,
                text=line,
                words=lexer.split_with_comments(line),
            )
        )
    return lines


def load_script(path: str) -> list[ScriptLine]:
    """
    Load a script file and split its lines into words.

    Args:
        path: Path to a UTF-8 text file

    Returns:
        The split lines

    Raises:
        ScriptNotReadable: If the file cannot be opened or decoded
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptNotReadable(f"Cannot read script '{path}': {e}")

    return split_lines(content)


def write_jsonl(lines: list[ScriptLine], f: TextIO) -> None:
    """Write one compact JSON object per script line."""
    for line in lines:
        row = {"line": line.line_num, "words": line.words}
        f.write(json.dumps(row, separators=(",", ":"), ensure_ascii=False) + "\n")


def export_jsonl(lines: list[ScriptLine], output_file: str) -> None:
    """
    Export split script lines to JSON Lines format.

    Args:
        lines: The split lines
        output_file: Path to output file
    """
    with open(output_file, "w", encoding="utf-8") as f:
        write_jsonl(lines, f)
