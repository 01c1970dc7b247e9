"""Command line entry point that runs one of the pattern demonstrations."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from patternkit import (
    adapter,
    command,
    decorator,
    facade,
    mvc,
    observer,
    sorting,
    strategy,
    template_method,
)

PROGRAMS: dict[str, Callable[[], object]] = {
    "adapter": adapter.run,
    "command": command.run,
    "decorator": decorator.run,
    "decorator-if": decorator.run,
    "facade": facade.run,
    "observer": observer.run,
    "strategy": strategy.run,
    "template-method": template_method.run,
    "sort": sorting.run,
    "mvc": mvc.run,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration named on the command line."""
    parser = argparse.ArgumentParser(
        prog="patternkit", description="Run a design pattern demonstration."
    )
    parser.add_argument("pattern", choices=sorted(PROGRAMS))
    args = parser.parse_args(argv)
    PROGRAMS[args.pattern]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())