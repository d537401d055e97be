"""Command-line interface handler for shellwords."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table

from . import __version__
from . import lexer
from . import script

console = Console()

COMMANDS = ("split", "script", "help", "version")
SPLIT_FORMATS = ("json", "lines", "table")
SCRIPT_FORMATS = ("jsonl", "table")


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: shellwords [-h | --help] <command> [<args>]

Commands:
  split                    Split a command line into words
      -c, --comments       Treat # at the start of a word as a comment
      -f, --format FMT     Output format: json, lines or table (default json)
      <text>               The text to split (read from stdin when omitted)

  script                   Split every line of a script file
      -f, --format FMT     Output format: jsonl or table (default jsonl)
      -o, --output FILE    Write JSON Lines to FILE instead of stdout (jsonl only)
      <path>               The script to read

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def print_words_table(words: list[str]) -> None:
    """Print words as a table, quoted so whitespace stays visible."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Word", style="green")

    for i, word in enumerate(words):
        table.add_row(str(i), repr(word))

    console.print(table)


def print_script_table(lines: list[script.ScriptLine]) -> None:
    """Print split script lines as a table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Words", style="green")

    for line in lines:
        table.add_row(str(line.line_num), " ".join(repr(w) for w in line.words))

    console.print(table)


def cmd_split(args: argparse.Namespace) -> None:
    """Execute the split command."""
    if args.format not in SPLIT_FORMATS:
        print(f"Error: Unknown format '{args.format}'", file=sys.stderr)
        sys.exit(1)

    text = args.text if args.text is not None else sys.stdin.read()

    if args.comments:
        words = lexer.split_with_comments(text)
    else:
        words = lexer.split(text)

    if args.format == "lines":
        for word in words:
            print(word)
    elif args.format == "table":
        print_words_table(words)
    else:
        print(json.dumps(words, ensure_ascii=False))


def cmd_script(args: argparse.Namespace) -> None:
    """Execute the script command."""
    if not args.path:
        print("Please specify a script to split\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    if args.format not in SCRIPT_FORMATS:
        print(f"Error: Unknown format '{args.format}'", file=sys.stderr)
        sys.exit(1)

    if args.output and args.format != "jsonl":
        print("Error: --output only writes jsonl", file=sys.stderr)
        sys.exit(1)

    try:
        lines = script.load_script(args.path)
    except script.ScriptNotReadable as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        script.export_jsonl(lines, args.output)
        console.print(
            f"[green]✓ Wrote {len(lines)} lines to {args.output}[/green]",
            highlight=False,
        )
    elif args.format == "table":
        print_script_table(lines)
    else:
        script.write_jsonl(lines, sys.stdout)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="shellwords", description="Shell-style word splitter", add_help=False
    )

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "-c", "--comments", action="store_true", help="Skip # comments"
    )
    split_parser.add_argument(
        "-f", "--format", type=str, default="json", help="Output format"
    )
    split_parser.add_argument("text", nargs="?", help="Text to split")

    # Script command
    script_parser = subparsers.add_parser("script", add_help=False)
    script_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for script"
    )
    script_parser.add_argument(
        "-f", "--format", type=str, default="jsonl", help="Output format"
    )
    script_parser.add_argument("-o", "--output", type=str, help="Output file path")
    script_parser.add_argument("path", nargs="?", help="Script file path")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    if not argv:
        print_usage()
        return

    # argparse would reject an unknown command without showing the usage
    if not argv[0].startswith("-") and argv[0] not in COMMANDS:
        print(f"Error: Unknown command '{argv[0]}'\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    args = parser.parse_args(argv)

    # Handle global and command-specific help
    if args.help or args.command == "help":
        print_usage()
        return

    if args.command == "version":
        print_version()
    elif args.command == "split":
        cmd_split(args)
    elif args.command == "script":
        cmd_script(args)


def run() -> None:
    """Run the CLI as a program, mapping failures to exit codes."""
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
