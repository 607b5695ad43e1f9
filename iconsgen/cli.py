"""CLI entrypoint for iconsgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import GenerationError
from .logging import configure_logging
from .pipeline import IconsPipeline


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconsgen",
        description="Generate icon component modules, plugin and type declarations from SVG sources.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Regenerate the icon artifacts and metadata.",
    )
    generate_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Increase log verbosity for troubleshooting.",
    )
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root holding .iconsgen.yml (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--force",
        action="store_true",
        help="Regenerate even when the upstream version is already recorded.",
    )
    generate_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for iconsgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=getattr(args, "log_file", None))

    if args.command == "generate":
        try:
            pipeline = IconsPipeline.from_path(args.path)
            outcome = pipeline.run(force=bool(args.force))
        except GenerationError as exc:
            parser.exit(1, f"iconsgen generate failed during {exc.stage}: {exc}\n")
        if outcome.skipped:
            print(f"Icons up to date ({outcome.version})")
        else:
            print(f"Generated {outcome.icon_count} icons from {outcome.version}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
