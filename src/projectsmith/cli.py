"""Command line interface for the project generator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import ProjectConfig
from .errors import ScaffoldError
from .scaffold import ProjectScaffolder, success_message
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)

_YES_ANSWERS = {"", "y", "yes"}


def _prompt_yes(question: str) -> bool:
    try:
        answer = input(f"{question} [Yn] ")
    except EOFError:
        return False
    return answer.strip().lower() in _YES_ANSWERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectsmith",
        description=(
            "Create a new project at PATH. The application and module names are "
            "derived from PATH unless --app or --module is given."
        ),
    )
    parser.add_argument("path", nargs="?", help="Directory of the new project, '.' for the current one")
    parser.add_argument("--app", help="Name of the application, defaults to the basename of PATH")
    parser.add_argument("--module", help="Name of the top level module, defaults to the camel-cased app name")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step to stderr")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    scaffolder = ProjectScaffolder(TemplateRenderer(), confirm=_prompt_yes, echo=print)
    try:
        config = ProjectConfig.from_path(args.path, app=args.app, module=args.module)
        scaffolder.create(config, args.path)
    except ScaffoldError as exc:
        LOGGER.debug("generation aborted: %s", type(exc).__name__)
        print(f"** (error) {exc}", file=sys.stderr)
        return 1

    print(success_message(args.path))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
