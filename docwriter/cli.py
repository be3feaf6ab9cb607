"""CLI entrypoint for docwriter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, parse_exclude_option
from .llm.runner import GenerationError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docwriter",
        description="Generate project documentation and an API reference from source files.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory for documentation, relative to the project (default: docs).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        default=None,
        help="Comma separated directory names to exclude (default: node_modules,dist,build,.git).",
    )
    parser.add_argument(
        "--api-only",
        action="store_true",
        default=None,
        help="Generate only the API documentation.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a detailed log to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run a documentation pass for the requested project."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file)

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run(
            args.path,
            output=args.output,
            exclude=parse_exclude_option(args.exclude),
            api_only=args.api_only,
        )
    except (FileNotFoundError, NotADirectoryError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except GenerationError as exc:
        parser.exit(1, f"docwriter failed: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"docwriter failed to write output: {exc}\nRun with --verbose for more details.\n")

    print(f"Documentation generated in {_relativize(outcome.output_dir)}")
    if outcome.endpoint_count:
        print(f"Documented {outcome.endpoint_count} API endpoints")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
