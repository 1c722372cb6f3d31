"""Command line entry point that runs the pattern demonstrations."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence

from patternbook import (
    abstract_factory,
    adapter,
    bridge,
    builder,
    chain,
    composite,
    decorator,
    facade,
    factory_method,
    iterator,
    mediator,
    observer,
    proxy,
    singleton,
    snapshot,
    state,
    strategy,
)

PATTERNS: tuple[str, ...] = (
    "abstract_factory",
    "adapter",
    "bridge",
    "builder",
    "chain",
    "composite",
    "decorator",
    "facade",
    "factory_method",
    "iterator",
    "mediator",
    "observer",
    "proxy",
    "singleton",
    "snapshot",
    "state",
    "strategy",
)


def _runners(pause: float) -> dict[str, Callable[[], object]]:
    return {
        "abstract_factory": abstract_factory.demo,
        "adapter": adapter.demo,
        "bridge": bridge.demo,
        "builder": builder.demo,
        "chain": chain.demo,
        "composite": composite.demo,
        "decorator": decorator.demo,
        "facade": facade.demo,
        "factory_method": factory_method.demo,
        "iterator": iterator.demo,
        "mediator": lambda: mediator.demo(pause),
        "observer": observer.demo,
        "proxy": proxy.demo,
        "singleton": singleton.demo,
        "snapshot": snapshot.demo,
        "state": state.demo,
        "strategy": strategy.demo,
    }


def _text(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _render(result: object) -> list[str]:
    if isinstance(result, tuple):
        return [" ".join(_text(value) for value in result)]
    return [
        " ".join(_text(v) for v in item) if isinstance(item, tuple) else _text(item)
        for item in result
    ]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternbook", description="Run design pattern demonstrations."
    )
    parser.add_argument(
        "patterns", nargs="*", metavar="PATTERN", help="patterns to run (default: all)"
    )
    parser.add_argument("--list", action="store_true", help="list the patterns and exit")
    parser.add_argument(
        "--pause", type=float, default=1.0, help="seconds the mediator demo waits between steps"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="also log each step")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demonstrations and print what they produce."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in PATTERNS:
            print(name)
        return 0

    unknown = [name for name in args.patterns if name not in PATTERNS]
    if unknown:
        parser.error(f"unknown pattern: {', '.join(unknown)}")

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    runners = _runners(args.pause)
    for name in args.patterns or PATTERNS:
        print(f"== {name} ==")
        for line in _render(runners[name]()):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())