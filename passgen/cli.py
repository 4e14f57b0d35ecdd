"""CLI for passgen: generate, passphrase, check, hash."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .batch import generate_batch
from .charsets import CharClass
from .config import load_config
from .errors import PassgenError
from .formats import FORMATS, HASH_ALGORITHMS, format_password, generate_hash
from .evaluator import check_password_strength, score_password
from .passphrase import generate_passphrase, passphrase_entropy
from .policy import Policy, validate
from .strength import strength_label
from .suggestions import suggest_improvements

logger = logging.getLogger("passgen")

console = Console(highlight=False)
# annotations go to stderr so stdout carries nothing but passwords
err_console = Console(stderr=True, highlight=False)

_CLASS_FLAGS = (
    ("uppercase", "min_upper", CharClass.UPPER),
    ("lowercase", "min_lower", CharClass.LOWER),
    ("numbers", "min_digits", CharClass.DIGIT),
    ("special", "min_special", CharClass.SYMBOL),
)


def _emit(line: str) -> None:
    sys.stdout.write(line + "\n")


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def build_policy(args, cfg) -> Policy:
    """Translate generate flags into a Policy. No class flag means all four built-in classes."""
    any_flag = any(getattr(args, flag) or getattr(args, mflag) is not None for flag, mflag, _ in _CLASS_FLAGS)
    default_min = 0 if args.no_force_each else 1
    classes = {}
    for flag, mflag, char_class in _CLASS_FLAGS:
        override = getattr(args, mflag)
        if any_flag and not getattr(args, flag) and override is None:
            continue
        classes[char_class] = default_min if override is None else override
    if args.custom:
        classes[CharClass.CUSTOM] = args.min_custom or 0
    return Policy(
        length=args.length if args.length is not None else cfg["default_length"],
        classes=classes,
        exclude=frozenset(args.exclude or ""),
        avoid_ambiguous=args.avoid_ambiguous,
        avoid_lookalike_symbols=args.avoid_lookalike_symbols,
        symbols=cfg["symbols"],
        custom=args.custom or "",
        ambiguous=cfg["ambiguous_chars"],
    )


def cmd_generate(args, cfg):
    validated = validate(build_policy(args, cfg), max_length=cfg["max_length"])
    workers = args.workers if args.workers is not None else cfg["batch_workers"]
    results = generate_batch(validated, args.count, unique=args.unique, workers=workers)
    logger.info("generated %d password(s), pool size %d", len(results), validated.pool_size)
    for i, r in enumerate(results, 1):
        _emit(format_password(r.password, args.format))
        if args.show_strength:
            err_console.print(
                f"[dim]#{i} strength: {r.strength:.2f} bits ({strength_label(r.strength)})[/dim]"
            )


def cmd_passphrase(args, cfg):
    words = args.words if args.words is not None else cfg["passphrase_words"]
    for _ in range(args.count):
        _emit(generate_passphrase(words, args.separator, args.numbers, args.special))
    if args.show_strength:
        bits = passphrase_entropy(words, args.numbers, args.special)
        err_console.print(f"[dim]strength: {bits:.2f} bits ({strength_label(bits)})[/dim]")


def cmd_check(args, cfg):
    pw = args.password
    result = score_password(pw)
    sugg = suggest_improvements(pw)
    header = f"Score: {result['score']} / 100 - {result['label']}"
    body = (
        f"Length: {result['length']} characters\n"
        f"Strength: {check_password_strength(pw)}\n"
        f"Estimated entropy: {result['entropy']:.1f} bits\n"
        f"Penalty: {result['penalty']:.1f} bits\n"
        f"Final entropy: {result['final_bits']:.1f} bits"
    )
    console.print(Panel(body, title=header))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Criterion")
    table.add_column("", width=3)
    for criterion, passed in result["analysis"]:
        table.add_row(criterion, "[green]✓[/green]" if passed else "[red]✗[/red]")
    console.print(table)

    console.print("[bold]Detections:[/bold]")
    for e in result["explanations"]:
        console.print(f" • {escape(e)}")
    console.print("\n[bold]Suggestions:[/bold]")
    for s in sugg["suggestions"]:
        console.print(f" • {escape(s)}")
    for ex in sugg["examples"]:
        console.print(f"\nExample stronger password: [cyan]{escape(ex)}[/cyan]")


def cmd_hash(args, cfg):
    _emit(generate_hash(args.input, args.algorithm))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgen", description="A secure password generator CLI tool")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    parser.add_argument("--config", type=str, help="Path to a JSON config file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("-L", "--length", type=int, help="Password length (default from config, 16)")
    gen.add_argument("-u", "--uppercase", action="store_true", help="Include uppercase letters")
    gen.add_argument("-l", "--lowercase", action="store_true", help="Include lowercase letters")
    gen.add_argument("-n", "--numbers", action="store_true", help="Include digits")
    gen.add_argument("-s", "--special", action="store_true", help="Include special characters")
    gen.add_argument("--min-upper", type=_non_negative, help="Minimum uppercase letters")
    gen.add_argument("--min-lower", type=_non_negative, help="Minimum lowercase letters")
    gen.add_argument("--min-digits", type=_non_negative, help="Minimum digits")
    gen.add_argument("--min-special", type=_non_negative, help="Minimum special characters")
    gen.add_argument("--custom", type=str, help="Extra characters to allow")
    gen.add_argument("--min-custom", type=_non_negative, help="Minimum characters from --custom")
    gen.add_argument("-x", "--exclude", type=str, help="Characters that must never appear")
    gen.add_argument("-e", "--avoid-ambiguous", "--exclude-similar", action="store_true",
                     help="Avoid look-alike glyphs (0 O 1 l I)")
    gen.add_argument("--avoid-lookalike-symbols", action="store_true",
                     help="Avoid brackets, quotes, slashes and similar punctuation")
    gen.add_argument("--no-force-each", action="store_true",
                     help="Do not require every included class to appear")
    gen.add_argument("-c", "--count", type=_non_negative, default=1, help="How many passwords to generate")
    gen.add_argument("--unique", action="store_true", help="Never repeat a password within the batch")
    gen.add_argument("--show-strength", action="store_true", help="Print strength estimate to stderr")
    gen.add_argument("-f", "--format", choices=FORMATS, default="plain", help="Output encoding")
    gen.add_argument("--workers", type=_non_negative, help="Threads used for non-unique batches")
    gen.set_defaults(func=cmd_generate)

    pp = sub.add_parser("passphrase", help="Generate a passphrase")
    pp.add_argument("-w", "--words", type=int, help="Number of words (default from config, 4)")
    pp.add_argument("--separator", type=str, default=" ", help="Separator between words")
    pp.add_argument("-n", "--numbers", action="store_true", help="Insert a number")
    pp.add_argument("-s", "--special", action="store_true", help="Insert a special character")
    pp.add_argument("-c", "--count", type=_non_negative, default=1, help="How many passphrases to generate")
    pp.add_argument("--show-strength", action="store_true", help="Print strength estimate to stderr")
    pp.set_defaults(func=cmd_passphrase)

    ck = sub.add_parser("check", help="Check password strength")
    ck.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    ck.set_defaults(func=cmd_check)

    hs = sub.add_parser("hash", help="Hash or encode a string")
    hs.add_argument("input", type=str, help="Input string")
    hs.add_argument("-a", "--algorithm", choices=HASH_ALGORITHMS, default="sha256")
    hs.set_defaults(func=cmd_hash)
    return parser


def _setup_logging(verbose: int, default_level: str) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, str(default_level).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "min_custom", None) is not None and not args.custom:
        parser.error("--min-custom requires --custom")
    cfg = load_config(args.config)
    _setup_logging(args.verbose, cfg["log_level"])
    try:
        args.func(args, cfg)
    except PassgenError as e:
        logger.debug("command failed", exc_info=True)
        err_console.print(f"[red]{e.category}:[/red] {escape(str(e))}")
        return e.exit_code
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
