"""CLI entrypoints for foliogen commands."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

from .collector import InteractiveCollector
from .config import ConfigError
from .gallery import AnchorNotFoundError
from .git.publisher import PublishError
from .github import InvalidRepositoryURL, RepositoryFetchError
from .logging import configure_logging
from .orchestrator import AddOptions, AddOutcome, Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _version() -> str:
    try:
        return metadata.version("foliogen")
    except metadata.PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foliogen",
        description="Add a new project to the portfolio from a GitHub URL.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser(
        "add",
        help="Add a new project page and gallery card from a GitHub URL.",
    )
    _add_verbose_option(add_parser, suppress_default=True)
    add_parser.add_argument("url", metavar="github-url", help="Repository URL to add.")
    add_parser.add_argument(
        "-n",
        "--number",
        help='Project number label (e.g. "Project 7"); defaults to the next free number.',
    )
    add_parser.add_argument("-t", "--tagline", help="Custom tagline.")
    add_parser.add_argument("-y", "--youtube", help="YouTube demo URL.")
    add_parser.add_argument("-l", "--linkedin", help="LinkedIn post URL.")
    add_parser.add_argument("--image", help="Card image URL.")
    add_parser.add_argument(
        "--root",
        default=".",
        help="Path to the portfolio root (defaults to current directory).",
    )
    add_parser.add_argument(
        "--no-push",
        dest="push",
        action="store_false",
        help="Skip git commit and push.",
    )
    add_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview the project without writing files.",
    )
    add_parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; accept detected values and defaults.",
    )
    add_parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a timestamped log of the run to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for foliogen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "add":
        _run_add(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_add(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    options = AddOptions(
        number=args.number,
        tagline=args.tagline,
        demo_url=args.youtube,
        social_url=args.linkedin,
        image_url=args.image,
        push=bool(args.push),
        dry_run=bool(args.dry_run),
    )
    collector = InteractiveCollector(interactive=False) if args.no_input else None

    try:
        orchestrator = Orchestrator(Path(args.root), collector=collector)
        outcome = orchestrator.run_add(args.url, options)
    except (InvalidRepositoryURL, RepositoryFetchError, AnchorNotFoundError, ConfigError) as exc:
        parser.exit(1, f"Error: {exc}\n")
    except PublishError as exc:
        parser.exit(
            1,
            f"Error: {exc}\nThe project files were written; push manually with: git push\n",
        )
    except (ValueError, OSError) as exc:
        parser.exit(1, f"Error: {exc}\nRun with --verbose for more details.\n")

    if outcome.dry_run:
        _print_preview(outcome)
        return

    print(f"Page: {_relativize(outcome.project_path)}")
    print(f"GitHub: {outcome.repository.url}")
    if outcome.record.demo_url:
        print(f"Demo: {outcome.record.demo_url}")
    if outcome.branch:
        print(f"Pushed to {orchestrator.publisher.remote}/{outcome.branch}")
    else:
        print("Skipped git push. Run: git add . && git commit -m \"Add project\" && git push")


def _print_preview(outcome: AddOutcome) -> None:
    print("DRY RUN - would create:")
    print(f"  File: {_relativize(outcome.project_path)}")
    print(f"  Title: {outcome.record.title}")
    print(f"  Tech: {', '.join(badge.name for badge in outcome.record.tech_stack)}")
    print(f"  Gallery: {_relativize(outcome.gallery_path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
