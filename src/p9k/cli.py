"""Command line interface for the p9k scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ArtifactKind, ArtifactRequest, resolve_target_directory
from .errors import EmptyNameError
from .scaffold import ArtifactScaffolder

LOGGER = logging.getLogger(__name__)

# short option and help text for each kind, in declaration order
_KIND_OPTIONS = {
    ArtifactKind.CONSTANT: ("-c", "Constant"),
    ArtifactKind.FUNCTION: ("-f", "Function"),
    ArtifactKind.INTERFACE: ("-i", "Interface"),
    ArtifactKind.MODULE: ("-m", "Module"),
    ArtifactKind.PACKAGE: ("-p", "Package"),
    ArtifactKind.REPOSITORY: ("-r", "Repository"),
    ArtifactKind.SCRIPT: ("-s", "Script"),
    ArtifactKind.TYPE: ("-t", "Type"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="p9k",
        description="Scaffold TypeScript boilerplate named after the target directory",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Target directory, relative to the current directory (defaults to the current directory)",
    )
    for kind, (short, help_text) in _KIND_OPTIONS.items():
        parser.add_argument(short, f"--{kind.value}", action="store_true", help=help_text)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log derived names and every written file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _request_from_args(args: argparse.Namespace) -> ArtifactRequest:
    return ArtifactRequest.from_flags({kind.value: getattr(args, kind.value) for kind in ArtifactKind})


def main(argv: Sequence[str] | None = None, *, cwd: str | Path | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("p9k").setLevel(logging.DEBUG)

    request = _request_from_args(args)
    if args.input is None and request.is_empty():
        sys.stdout.write(parser.format_help())

    base = Path.cwd() if cwd is None else Path(cwd)
    target = resolve_target_directory(base, args.input)
    scaffolder = ArtifactScaffolder()
    try:
        written = scaffolder.create(request, target)
    except EmptyNameError as exc:
        parser.error(str(exc))
        return 2

    LOGGER.info("wrote %d file(s) to %s", len(written), target)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
