"""
subsearch command line.

Commands:
- search: find a pattern in a file or standard input
- bench: time every algorithm against the built-in find
- algorithms: list the available algorithms
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import click

from subsearch import __version__
from subsearch.cli._loader import STDIN, load_text
from subsearch.config import UNICODE_ALPHABET, is_alphabet_configured
from subsearch.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_BENCH_PATTERNS,
    NOT_FOUND,
    PATHOLOGICAL_PATTERN,
    PATHOLOGICAL_TEXT_SIZE,
)
from subsearch.matchers import MATCHERS, SPARSE_CAPABLE, available_algorithms, compile
from subsearch.types.errors import InvalidArgumentError, SubsearchError
from subsearch.utils.logger import configure_logging, logger
from subsearch.utils.timing import timed

ALL_ALGORITHMS = "all"

# Exit codes
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


def _alphabet_options(alphabet: str | None, binary: bool, algorithm: str) -> dict[str, Any]:
    """Turn the --alphabet option into matcher keyword arguments.

    Without --alphabet, decoded text is searched with sparse tables so any
    character in the file is accepted. Binary input, SUBSEARCH_ALPHABET_SIZE
    and matchers that need a bounded alphabet keep the configured default.
    """
    if alphabet is None:
        if binary or is_alphabet_configured() or algorithm not in SPARSE_CAPABLE:
            return {}
        return {"alphabet_size": None}
    if alphabet.lower() == UNICODE_ALPHABET:
        return {"alphabet_size": None}
    try:
        return {"alphabet_size": int(alphabet)}
    except ValueError:
        raise click.BadParameter(
            f"expected an integer or '{UNICODE_ALPHABET}', got {alphabet!r}",
            param_hint="--alphabet",
        ) from None


def _as_symbols(pattern: str, binary: bool) -> str | bytes:
    return pattern.encode("utf-8") if binary else pattern


def _fail(ctx: click.Context, error: SubsearchError) -> NoReturn:
    """Report a library error on stderr and exit."""
    logger.debug(f"{type(error).__name__}: {error}")
    click.echo(error.get_formatted_message(), err=True)
    ctx.exit(EXIT_INVALID)


alphabet_option = click.option(
    "--alphabet",
    default=None,
    metavar="SIZE|unicode",
    help="Alphabet size for table-driven algorithms, or 'unicode' for sparse tables.",
)
binary_option = click.option(
    "--binary",
    "-b",
    is_flag=True,
    help="Search raw bytes instead of UTF-8 text.",
)


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="subsearch", message="%(prog)s v%(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """subsearch - Substring Search Algorithms.

    Find patterns in text with Boyer-Moore, Knuth-Morris-Pratt, Z-algorithm
    or Rabin-Karp matchers, and compare how fast they run.
    """
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("search")
@click.argument("pattern")
@click.argument("source", required=False, default=STDIN)
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(available_algorithms()),
    default=DEFAULT_ALGORITHM,
    show_default=True,
    help="Search algorithm.",
)
@click.option("--all", "find_all", is_flag=True, help="Report every occurrence, not just the first.")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@binary_option
@alphabet_option
@click.pass_context
def search_command(
    ctx: click.Context,
    pattern: str,
    source: str,
    algorithm: str,
    find_all: bool,
    as_json: bool,
    binary: bool,
    alphabet: str | None,
) -> None:
    """Search SOURCE (a file, or - for stdin) for PATTERN.

    Prints the index of the first match, or of every match with --all.
    Exits with status 1 when the pattern does not occur.
    """
    options = _alphabet_options(alphabet, binary, algorithm)
    try:
        text = load_text(source, binary=binary)
        matcher = compile(_as_symbols(pattern, binary), algorithm, **options)
        if find_all:
            positions = list(matcher.search_all(text))
        else:
            first = matcher.search(text)
            positions = [] if first == NOT_FOUND else [first]
    except SubsearchError as e:
        _fail(ctx, e)

    logger.debug(f"{algorithm} found {len(positions)} match(es) in {len(text)} symbols")

    if as_json:
        click.echo(json.dumps({"pattern": pattern, "algorithm": algorithm, "positions": positions}))
    elif positions:
        for position in positions:
            click.echo(position)
    else:
        click.echo("Pattern not found", err=True)

    if not positions:
        ctx.exit(EXIT_NOT_FOUND)


@cli.command("bench")
@click.argument("source", required=False)
@click.option(
    "--pattern",
    "-p",
    "patterns",
    multiple=True,
    help="Pattern to search for; repeatable. Defaults to a built-in set.",
)
@click.option(
    "--algorithm",
    "-a",
    "algorithms",
    multiple=True,
    type=click.Choice(available_algorithms() + [ALL_ALGORITHMS]),
    default=(ALL_ALGORITHMS,),
    show_default=True,
    help="Algorithm to time; repeatable.",
)
@click.option("--repeat", "-r", type=click.IntRange(min=1), default=1, show_default=True)
@click.option(
    "--pathological",
    type=click.IntRange(min=0),
    is_flag=False,
    flag_value=PATHOLOGICAL_TEXT_SIZE,
    default=None,
    metavar="[N]",
    help=(
        "Search 'A' * N + 'B' for 52 'A's and a 'B' instead of reading SOURCE "
        f"(N defaults to {PATHOLOGICAL_TEXT_SIZE:,})."
    ),
)
@binary_option
@alphabet_option
@click.pass_context
def bench_command(
    ctx: click.Context,
    source: str | None,
    patterns: tuple[str, ...],
    algorithms: tuple[str, ...],
    repeat: int,
    pathological: int | None,
    binary: bool,
    alphabet: str | None,
) -> None:
    """Time compile-and-search for each pattern over SOURCE.

    The built-in find is timed first as the baseline; every algorithm's
    results are checked against it. Exits with status 1 on a disagreement.
    """
    if pathological is not None:
        text: str | bytes = "A" * pathological + "B"
        patterns = patterns or (PATHOLOGICAL_PATTERN,)
        if binary:
            text = text.encode("ascii")
    elif source is None:
        raise click.UsageError("Give a SOURCE file or --pathological N.")
    else:
        try:
            text = load_text(source, binary=binary)
        except SubsearchError as e:
            _fail(ctx, e)
    symbols = [_as_symbols(p, binary) for p in (patterns or DEFAULT_BENCH_PATTERNS)]

    names = available_algorithms() if ALL_ALGORITHMS in algorithms else list(dict.fromkeys(algorithms))
    options = {name: _alphabet_options(alphabet, binary, name) for name in names}

    click.echo(f"Search text size = {len(text)}")

    click.echo(f"\nSearching {repeat} time(s) for {len(symbols)} pattern(s) using built-in find")
    with timed("built-in find") as timing:
        for _ in range(repeat):
            expected = [text.find(p) for p in symbols]
    click.echo(f"Time to complete search: {timing.elapsed:.4f} secs")
    click.echo(f"Results = {expected}")

    disagreements = []
    for name in names:
        click.echo(f"\nSearching {repeat} time(s) for {len(symbols)} pattern(s) using {name}")
        try:
            with timed(name) as timing:
                for _ in range(repeat):
                    results = [compile(p, name, **options[name]).search(text) for p in symbols]
        except InvalidArgumentError as e:
            click.echo(f"Skipped: {e}")
            continue
        click.echo(f"Time to complete search: {timing.elapsed:.4f} secs")
        click.echo(f"Results = {results}")
        if results != expected:
            logger.warning(f"{name} disagrees with built-in find: {results} != {expected}")
            disagreements.append(name)

    if disagreements:
        click.echo(f"\nResults differ from built-in find: {', '.join(disagreements)}", err=True)
        ctx.exit(EXIT_NOT_FOUND)


@cli.command("algorithms")
def algorithms_command() -> None:
    """List the available search algorithms."""
    for name in available_algorithms():
        summary = (MATCHERS[name].__doc__ or "").strip().splitlines()[0]
        marker = " (default)" if name == DEFAULT_ALGORITHM else ""
        click.echo(f"{name}{marker}: {summary}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
