#!/usr/bin/env python3
"""
doctree CLI tool

Command line interface for registering projects for automatic indexing
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from doctree.catalog import read_autoindex
from doctree.config import default_project_name, get_autoindex_path, get_data_dir
from doctree.exceptions import CatalogWriteError, DoctreeError
from doctree.register import add_project

ADD_EPILOG = """
Examples:

  Register current directory for auto-indexing:

    $ doctree add .
"""


def run_add(directory: str, data_dir: str | None = None, project: str | None = None) -> None:
    """
    Register a directory in the autoindex catalog

    Args:
        directory: Project directory to register
        data_dir: Data directory. Defaults to XDG-based default (~/.local/share/doctree)
        project: Project name. Defaults to the current directory name
    """
    data_path = Path(data_dir) if data_dir is not None else get_data_dir()
    if project is None:
        project = default_project_name()

    try:
        data_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CatalogWriteError(f"Failed to create data directory {data_path}: {e}") from e

    entry = add_project(directory, project, get_autoindex_path(data_path))
    print(f"Added {entry.name} ({entry.path})")


def run_list(data_dir: str | None = None) -> None:
    """
    Print projects registered in the autoindex catalog

    Args:
        data_dir: Data directory. Defaults to XDG-based default (~/.local/share/doctree)
    """
    projects = read_autoindex(get_autoindex_path(data_dir))
    if not projects:
        print("No projects registered.")
        return

    for project in projects:
        print(f"{project.name}\t{project.path}\t{project.fingerprint}")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for all subcommands
    """
    parser = argparse.ArgumentParser(prog="doctree", description="doctree project registration tool")
    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    add_parser = subparsers.add_parser(
        "add",
        help="Register a directory for auto-indexing",
        epilog=ADD_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Exactly one directory; argparse exits with status 2 otherwise
    add_parser.add_argument("directory", metavar="DIR", help="Project directory to register")
    add_parser.add_argument("--data-dir", default=None, help="Where doctree stores its data (default: XDG-based ~/.local/share/doctree)")
    add_parser.add_argument("--project", default=None, help="Name of the project (default: current directory name)")

    list_parser = subparsers.add_parser("list", help="List registered projects")
    list_parser.add_argument("--data-dir", default=None, help="Where doctree stores its data (default: XDG-based ~/.local/share/doctree)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI main entry point
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    try:
        if args.command == "add":
            run_add(args.directory, data_dir=args.data_dir, project=args.project)
        elif args.command == "list":
            run_list(data_dir=args.data_dir)
    except (DoctreeError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
