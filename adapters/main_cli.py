import argparse
import sys
from typing import List, Optional

from infrastructure.logging import setup_logger
from infrastructure.telemetry import setup_opentelemetry

from adapters.normalize_cli import NormalizeCLI
from domain.version import __version__


def main(argv: Optional[List[str]] = None) -> int:
    """
    Unified entry point for the `mods-normalizer` command.

    Subcommands:
        normalize – Normalize a MODS XML file.
    """
    # Setup shared infrastructure
    setup_logger()
    setup_opentelemetry()

    # Top-level parser only defines subcommands; each subcommand parses its own arguments.
    parser = argparse.ArgumentParser(
        prog="mods-normalizer", description="MODS XML normalization CLI"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("normalize", help="Normalize a MODS XML file")

    # Parse only the subcommand name; the remaining args are passed through.
    args, remaining = parser.parse_known_args(argv)

    if args.command == "normalize":
        return NormalizeCLI().run(remaining)
    else:
        parser.error(f"Unknown subcommand: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
