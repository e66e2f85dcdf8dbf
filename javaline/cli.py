"""
javaline.cli - Javaline Command Line Interface

This module provides the main CLI entry point for javaline with subcommand support:

- javaline init                      Mark the current directory as a project root
- javaline add class <name> [dir]    Create <Name>.java, optionally inside dir
- javaline add package <name>        Create a package directory with pack_def.toml
- javaline root                      Show the root of the enclosing project
"""

import argparse
import os
import sys
from typing import Optional

from javaline.project.config import MANIFEST_FILENAME, ManifestError, NotInProjectError


def _info(args: argparse.Namespace, message: str) -> None:
    """Print an informational message unless --quiet was given."""
    if not getattr(args, "quiet", False):
        print(message)


def _not_in_project(e: NotInProjectError) -> int:
    print(f"Error: {e}", file=sys.stderr)
    print("Run 'javaline init' to create a project.", file=sys.stderr)
    return 1


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize a project in the current directory."""
    from javaline.project.scaffold import init_project

    cwd = os.getcwd()
    try:
        created = init_project(cwd)
    except OSError as e:
        print(f"Error initializing project: {e}", file=sys.stderr)
        return 1

    if created:
        _info(args, f"✓ Initialized javaline project in {cwd}")
    else:
        _info(args, f"⚠ Project already initialized in {cwd}")
    return 0


def cmd_add_class(args: argparse.Namespace) -> int:
    """Create a new class file."""
    from javaline.project.scaffold import add_class

    try:
        result = add_class(args.name, args.dir)
    except NotInProjectError as e:
        return _not_in_project(e)
    except ManifestError as e:
        print(f"Error in {MANIFEST_FILENAME}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error creating class: {e}", file=sys.stderr)
        return 1

    if result.overwritten:
        _info(args, f"⚠ Overwrote existing file {result.path}")
    _info(args, f"✓ Created class {result.class_name} at {result.path}")
    if result.qualifier:
        _info(args, f"  package: {result.qualifier}")
    return 0


def cmd_add_package(args: argparse.Namespace) -> int:
    """Create a new package directory and manifest."""
    from javaline.project.scaffold import add_package

    try:
        result = add_package(args.name)
    except NotInProjectError as e:
        return _not_in_project(e)
    except (OSError, UnicodeEncodeError) as e:
        print(f"Error creating package: {e}", file=sys.stderr)
        return 1

    if result.created:
        _info(args, f"✓ Created package {args.name}")
    else:
        _info(args, f"⚠ Package {args.name} already exists")
    _info(args, f"  ✓ Wrote {result.manifest.path}")
    return 0


def cmd_root(args: argparse.Namespace) -> int:
    """Print the root of the enclosing project."""
    from javaline.project.config import find_project_root

    cwd = os.getcwd()
    try:
        root = find_project_root(cwd)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if root is None:
        return _not_in_project(NotInProjectError(cwd))

    print(root)
    if root == os.path.realpath(cwd):
        _info(args, "  (current directory is the project root)")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="javaline",
        description="javaline - Scaffolding for lightweight Java projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  javaline init                     Mark this directory as a project root
  javaline add class greeter        Create Greeter.java here
  javaline add class greeter util   Create util/Greeter.java importing util's package
  javaline add package util         Create util/ with pack_def.toml
  javaline root                     Print the project root
        """,
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress informational output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    # init subcommand
    subparsers.add_parser(
        "init", help="Initialize a javaline project in the current directory"
    )

    # add subcommand
    add_parser = subparsers.add_parser("add", help="Add a class or package")
    add_subparsers = add_parser.add_subparsers(dest="kind", help="What to add")
    add_subparsers.required = True

    class_parser = add_subparsers.add_parser("class", help="Create a new class file")
    class_parser.add_argument("name", help="Class name (first letter is capitalized)")
    class_parser.add_argument(
        "dir",
        nargs="?",
        help="Directory to create the class in (default: current directory)",
    )

    package_parser = add_subparsers.add_parser(
        "package", help="Create a new package directory"
    )
    package_parser.add_argument("name", help="Name of the package")

    # root subcommand
    subparsers.add_parser("root", help="Show the root of the enclosing project")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the javaline CLI. Calls sys.exit with return code."""
    sys.exit(_main(argv))


def _main(argv: Optional[list[str]] = None) -> int:
    """Internal main that returns exit code."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.subcommand == "init":
        return cmd_init(args)
    elif args.subcommand == "add":
        if args.kind == "class":
            return cmd_add_class(args)
        elif args.kind == "package":
            return cmd_add_package(args)
        return 1
    elif args.subcommand == "root":
        return cmd_root(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    main()
