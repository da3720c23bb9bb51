"""CLI entrypoints for uiregistry commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .scaffold import scaffold_project


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
        "default": argparse.SUPPRESS if suppress_default else False,
    }
    parser.add_argument("-v", "--verbose", **kwargs)


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root holding registry.config.yml (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uiregistry",
        description="Generate installable component registry manifests from a UI library.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser(
        "build",
        help="Build the registry (default command).",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_path_argument(build_parser)
    build_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Override output_dir from the config.",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate manifests without writing them.",
    )

    init_parser = subparsers.add_parser(
        "init",
        help="Create registry.config.yml for a new project.",
    )
    _add_verbose_option(init_parser, suppress_default=True)
    _add_path_argument(init_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for uiregistry commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    command = args.command or "build"
    path = getattr(args, "path", ".")

    if command == "init":
        try:
            result = scaffold_project(Path(path).expanduser().resolve())
        except OSError as exc:
            parser.exit(1, f"uiregistry init failed: {exc}\n")
        if result.created:
            print(f"Created {_relativize(result.path)}")
            print("Next: set base_url if needed, then run `uiregistry build`.")
        else:
            print(f"{_relativize(result.path)} already exists; nothing to do")
        return

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run_build(
            path,
            output_dir=getattr(args, "output", None),
            dry_run=bool(getattr(args, "dry_run", False)),
        )
    except ConfigError as exc:
        parser.exit(1, f"Error: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"uiregistry build failed: {exc}\nRun with --verbose for more details.\n")

    if outcome.written:
        print(f"Generated {len(outcome.written)} files in {_relativize(outcome.output_dir)}")
    else:
        print(f"{outcome.file_count} files generated (dry-run)")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
