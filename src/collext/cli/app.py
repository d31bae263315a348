"""CLI application entry point and command routing for collext.

This module is the **sole error boundary** for the entire application.
It catches :class:`~collext.exceptions.CollextError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* Results go to stdout through :data:`~collext.cli.console.output`;
  diagnostics go to stderr through :data:`~collext.cli.console.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence

from collext.cli import exit_codes
from collext.cli.console import console, output
from collext.cli.inspect_payload import ACCESSORS, format_value, run_inspect
from collext.core import arrays
from collext.exceptions import CollextError, ItemFormatError
from collext.utils.logging import configure_logging, get_logger
from collext.version import __version__

_log = get_logger("cli")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_seed(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source (reproducible output).",
    )


def _add_items(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("items", nargs="*", metavar="ITEM", help="Elements to operate on.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``collext shuffle|pick|reverse ITEM...``
    * ``collext choose|remove COUNT ITEM...``
    * ``collext describe [--start --each --last --end] ITEM...``
    * ``collext get FILE KEY --as TYPE`` and ``collext inspect FILE``
    """
    parser = argparse.ArgumentParser(
        prog="collext",
        description="Sample, reorder and format items; read typed values from JSON.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    shuffle = commands.add_parser("shuffle", help="Print the items in random order.")
    _add_seed(shuffle)
    _add_items(shuffle)

    pick = commands.add_parser("pick", help="Print one randomly chosen item.")
    _add_seed(pick)
    _add_items(pick)

    reverse = commands.add_parser("reverse", help="Print the items in reverse order.")
    _add_items(reverse)

    for name, help_text in (
        ("choose", "Print COUNT randomly chosen items, order kept."),
        ("remove", "Print the items with COUNT random ones removed, order kept."),
    ):
        sampler = commands.add_parser(name, help=help_text)
        sampler.add_argument("count", type=int, metavar="COUNT")
        _add_seed(sampler)
        _add_items(sampler)

    describe = commands.add_parser("describe", help="Print the items with custom formatting.")
    describe.add_argument("--start", default="(", help="Leading text (default: '(').")
    describe.add_argument("--each", default="%s,", help="Format for all but the last item.")
    describe.add_argument("--last", default="%s", help="Format for the last item.")
    describe.add_argument("--end", default=")", help="Trailing text (default: ')').")
    _add_items(describe)

    get = commands.add_parser("get", help="Read one typed value from a JSON object file.")
    get.add_argument("file", metavar="FILE")
    get.add_argument("key", metavar="KEY")
    get.add_argument(
        "--as",
        dest="accessor",
        choices=sorted(ACCESSORS),
        default="string",
        help="Type to read the value as (default: string).",
    )

    inspect = commands.add_parser("inspect", help="Show every typed reading of each key.")
    inspect.add_argument("file", metavar="FILE")

    return parser


# ---------------------------------------------------------------------------
# Command dispatch (no business logic)
# ---------------------------------------------------------------------------

def _rng(args: argparse.Namespace) -> random.Random | None:
    """Seeded source when ``--seed`` was given, else the shared default."""
    if args.seed is None:
        return None
    return random.Random(args.seed)


def _print_items(items: Sequence[str]) -> int:
    for item in items:
        output.print(item, markup=False)
    return exit_codes.SUCCESS


def _handle_shuffle(args: argparse.Namespace) -> int:
    return _print_items(arrays.with_randomized_order(args.items, _rng(args)))


def _handle_pick(args: argparse.Namespace) -> int:
    item = arrays.random_object(args.items, _rng(args))
    if item is None:
        console.print("[yellow]Nothing to pick from: no items given.[/yellow]")
        return exit_codes.GENERAL_ERROR
    return _print_items([item])


def _handle_reverse(args: argparse.Namespace) -> int:
    return _print_items(arrays.reversed_copy(args.items))


def _handle_choose(args: argparse.Namespace) -> int:
    return _print_items(arrays.with_random_elements_chosen(args.items, args.count, _rng(args)))


def _handle_remove(args: argparse.Namespace) -> int:
    return _print_items(arrays.with_random_elements_removed(args.items, args.count, _rng(args)))


def _handle_describe(args: argparse.Namespace) -> int:
    try:
        text = arrays.description_with(args.items, args.start, args.each, args.last, args.end)
    except (TypeError, ValueError) as exc:
        raise ItemFormatError(
            f"Cannot format the items: {exc}",
            hint="Each format needs exactly one %s placeholder; write %% for a literal percent sign.",
        ) from exc
    output.print(text, markup=False)
    return exit_codes.SUCCESS


def _handle_get(args: argparse.Namespace) -> int:
    from collext.infra.payload_loader import load_mapping

    payload = load_mapping(args.file)
    value = ACCESSORS[args.accessor](payload, args.key)
    _log.debug("%s_for_key(%r) -> %r", args.accessor, args.key, value)
    output.print(format_value(value), markup=False)
    return exit_codes.SUCCESS


def _handle_inspect(args: argparse.Namespace) -> int:
    return run_inspect(args.file)


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "shuffle": _handle_shuffle,
    "pick": _handle_pick,
    "reverse": _handle_reverse,
    "choose": _handle_choose,
    "remove": _handle_remove,
    "describe": _handle_describe,
    "get": _handle_get,
    "inspect": _handle_inspect,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the collext CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CollextError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
