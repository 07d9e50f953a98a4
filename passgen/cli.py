"""CLI for PassGen: generate passwords and score them."""

import argparse
import sys
from typing import List, Optional

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .charclass import CharacterClass, GroupMode
from .config import load_config, generator_config_from
from .errors import PassGenError
from .evaluator import assess_strength
from .generator import PasswordGenerator
from .log import setup_logging
from .suggestions import suggest_improvements

_CLASS_FLAGS = [
    ("no_upper", CharacterClass.UPPER_LETTERS),
    ("no_lower", CharacterClass.LOWER_LETTERS),
    ("no_digits", CharacterClass.NUMBERS),
    ("no_special", CharacterClass.SPECIAL_CHARACTERS),
]

_LABEL_STYLE = {
    "Weak": "red",
    "Moderate": "yellow",
    "Strong": "green",
    "Very Strong": "bold green",
}


def _styled(label: str) -> str:
    style = _LABEL_STYLE.get(label, "white")
    return f"[{style}]{label}[/{style}]"


def cmd_generate(args) -> int:
    cfg = generator_config_from(load_config())
    changes = {}
    if args.length is not None:
        changes["length"] = args.length
    disabled = {cls for flag, cls in _CLASS_FLAGS if getattr(args, flag)}
    if disabled:
        changes["classes"] = cfg.classes - disabled
    if args.exclude is not None:
        changes["excluded"] = args.exclude
    if args.one_per_group:
        changes["one_per_group"] = True
    if args.group_mode is not None:
        changes["group_mode"] = GroupMode(args.group_mode)

    generator = PasswordGenerator(cfg)
    generator.configure(**changes)
    for i in range(args.copies):
        try:
            pw = generator.generate()
        except PassGenError as e:
            print(f"[red]Error: {escape(str(e))}[/red]")
            return 2
        report = assess_strength(pw)
        print(
            f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}  "
            f"({_styled(report.label)}, {report.entropy:.1f} bits)"
        )
    return 0


def cmd_score(args) -> int:
    pw = args.password
    report = assess_strength(pw)
    sugg = suggest_improvements(pw)
    header = f"Strength: {report.label}"
    body = (
        f"Estimated entropy: {report.entropy:.1f} bits\n"
        f"Character classes: {', '.join(sorted(report.classes)) or 'none'}\n"
        f"Charset size: {report.charset_size}\n"
        f"Length: {report.length}"
    )
    print(Panel(body, title=header))
    if sugg["suggestions"]:
        print("[bold]Suggestions:[/bold]")
        for s in sugg["suggestions"]:
            print(f" • {escape(s)}")
    if sugg["examples"]:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Example stronger password")
        for ex in sugg["examples"]:
            table.add_row(escape(ex))
        print(table)
    return 0


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgen")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", "-n", type=int, help="Password length (default from config)")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase letters")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase letters")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-special", action="store_true", help="Disable special characters")
    gen.add_argument("--exclude", "-x", type=str, help="Characters to leave out")
    gen.add_argument("--one-per-group", action="store_true",
                     help="Include at least one character from every selected class")
    gen.add_argument("--group-mode", choices=[m.value for m in GroupMode],
                     help="Whether per-class characters replace or add to the length")
    gen.add_argument("--copies", "-c", type=_positive_int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else load_config().get("log_level", "WARNING"))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
