#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Label editor selections with short hints and narrow them one key at a time.

Usage

```
hop-hints [OPTIONS] init
hop-hints [OPTIONS] labels -n COUNT
hop-hints [OPTIONS] hints [TARGET ...]
hop-hints [OPTIONS] reduce --key KEY [CANDIDATE ...]
```

Options

- `-h, --help` — show help and exit.
- `--keyset, -k` — keys used to build hints (default from config).
- `--abort-key, -a` — key that cancels a session (default `<esc>`).
- `--format, -f` — `kakoune` (commands) or `plain` (text lines).
- `--face` — Kakoune face used to draw hints.
- `--config` — JSON5 config file (default `$HOP_HINTS_CONFIG`, then `~/.config/hop-hints/config.json5`).
- `--color, -c` — control ANSI coloring of debug output: `auto` (default), `always`, `never`.
- `--debug, -d` — repeatable; a numeric level (e.g. `2`), `level=N`, or `target=NAME` (labels, reduce, parse, config).

Examples

- Kakoune setup: `evaluate-commands %sh{ hop-hints init }`
- Line/column pairs on stdin: `printf '1 1\n1 5\n3 2\n' | hop-hints -f plain -k abcd hints`
- Label preview: `hop-hints -k abcd labels -n 10`
- One key: `hop-hints -f plain reduce --key c ca:1.1,1.3 cb:2.4,2.9 a:3.1,3.1`

Inputs / outputs

- stdin: targets (`L.C,L.C` or `LINE COLUMN`, one per line) for `hints`,
  candidates (`label:L.C,L.C`) for `reduce`, when none are given as arguments.
- stdout: Kakoune commands, or plain text lines.
- stderr: warnings and debug output.

Exit codes

```
0   Success (including cancelled and unmatched keys)
2   Configuration or runtime error
99  Usage/help displayed or invalid arguments
```
"""
from __future__ import annotations

import argparse
import sys
from typing import List

from . import debug
from .config import FORMATS, Config, load_config
from .debug import debug_echo, error
from .errors import HopHintsError
from .kakoune import format_hints, format_state, render_init_script
from .labels import Alphabet, assign_labels, generate_labels
from .reduction import Active, Resolved, make_candidates, next_state
from .selections import format_candidate, parse_candidates, parse_targets

ERROR_EXIT_CODE = 2
USAGE_EXIT_CODE = 99


def read_input_lines(values: list[str]) -> list[str]:
    """Return positional values, or piped stdin lines when there are none."""
    if values:
        return values
    if sys.stdin is None or sys.stdin.isatty():
        return []
    return sys.stdin.read().splitlines()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hop-hints",
        description="Label editor selections with short hints and narrow them one key at a time.",
        epilog=(
            "Examples:\n"
            "  %(prog)s init\n"
            "  %(prog)s -k abcd labels -n 10\n"
            "  printf '1 1\\n1 5\\n' | %(prog)s -f plain hints\n"
            "  %(prog)s reduce --key c ca:1.1,1.3 cb:2.4,2.9\n"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("-k", "--keyset", default=None, help="Keys used to build hints.")
    parser.add_argument("-a", "--abort-key", default=None, help="Key that cancels the session.")
    parser.add_argument("-f", "--format", choices=FORMATS, default=None, help="Output format.")
    parser.add_argument("--face", default=None, help="Kakoune face for hints.")
    parser.add_argument("--config", default=None, metavar="PATH", help="JSON5 configuration file.")
    parser.add_argument("--color", "-c", dest="color", choices=["auto", "always", "never"], default="auto",
                        help="Colorize debug output (auto|always|never)")
    parser.add_argument("--debug", "-d", nargs="?", const="1", action="append", dest="debug",
                        help="Enable debug. Use a level (integer), or level=N / target=NAME.")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    init = commands.add_parser("init", help="Print the Kakoune init script.")
    init.add_argument("--program", default="hop-hints", help="Command the script calls back.")

    labels = commands.add_parser("labels", help="Print COUNT labels, one per line.")
    labels.add_argument("-n", "--count", type=int, required=True, help="Number of labels.")

    hints = commands.add_parser("hints", help="Assign labels to targets.")
    hints.add_argument("targets", nargs="*", metavar="TARGET", help="L.C,L.C or 'LINE COLUMN'.")

    reduce = commands.add_parser("reduce", help="Narrow candidates by one typed key.")
    reduce.add_argument("--key", required=True, help="The typed key.")
    reduce.add_argument("candidates", nargs="*", metavar="CANDIDATE", help="label:L.C,L.C")

    return parser


def parse_args(argv: list[str], parser: argparse.ArgumentParser) -> argparse.Namespace:
    """Parse CLI arguments and apply the debug settings."""
    args = parser.parse_args(argv)

    debug.configure_from_env()
    try:
        level, category = debug.parse_debug_specs(args.debug)
    except ValueError as exc:
        parser.error(str(exc))
    if args.debug:
        debug.configure(level, category, args.color)
    else:
        debug.configure(debug.DEBUG_LEVEL, debug.DEBUG_TARGET_CATEGORY, args.color)

    if getattr(args, "count", 0) < 0:
        parser.error("--count must not be negative")
    return args


def run_init(args: argparse.Namespace, config: Config) -> str:
    return render_init_script(config.keyset, config.face, args.program)


def run_labels(args: argparse.Namespace, config: Config) -> str:
    labels = generate_labels(args.count, Alphabet.from_keys(config.keyset))
    return "".join(f"{label}\n" for label in labels)


def run_hints(args: argparse.Namespace, config: Config) -> str:
    targets = parse_targets(read_input_lines(args.targets))
    pairs = assign_labels(targets, Alphabet.from_keys(config.keyset))

    if config.format == "kakoune":
        return format_hints(pairs, config.face)
    return "".join(f"{sel.start.line} {sel.start.column} {label}\n" for label, sel in pairs)


def run_reduce(args: argparse.Namespace, config: Config) -> str:
    pairs = parse_candidates(read_input_lines(args.candidates))
    state = next_state(Active(make_candidates(pairs)), args.key, config.abort_key)
    debug_echo(1, "reduce", f"key {args.key!r} -> {state.name}")

    if config.format == "kakoune":
        return format_state(state, config.face, args.key)

    lines = [state.name]
    if isinstance(state, Active):
        lines.extend(format_candidate(c.suffix, c.target) for c in state.candidates)
    elif isinstance(state, Resolved):
        lines.append(f"{state.target.start.line} {state.target.start.column}")
    return "\n".join(lines) + "\n"


COMMANDS = {
    "init": run_init,
    "labels": run_labels,
    "hints": run_hints,
    "reduce": run_reduce,
}


def main(argv: List[str] | None = None) -> int:
    """CLI entrypoint."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        parser.print_help()
        return USAGE_EXIT_CODE

    try:
        args = parse_args(argv, parser)
    except SystemExit as exc:
        code = exc.code if exc.code is not None else 2
        if isinstance(code, int) and code not in (0, 2):
            return code
        return USAGE_EXIT_CODE

    try:
        config = load_config(args.config).override(
            keyset=args.keyset,
            abort_key=args.abort_key,
            face=args.face,
            format=args.format,
        )
        output = COMMANDS[args.command](args, config)
    except HopHintsError as exc:
        error(str(exc))
        return ERROR_EXIT_CODE

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
