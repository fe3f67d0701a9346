# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the GqlModel command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from gqlmodel.compiler.artifact import serialize, write_artifact
from gqlmodel.compiler.observer import IntrospectionObserver, LoggingObserver
from gqlmodel.introspection.introspector import IntrospectionError, introspect
from gqlmodel.model.entities import Model
from gqlmodel.model.types import PrimitiveTypeRef
from gqlmodel.workspace.config import CONFIG_FILE_NAME, ConfigError, ProjectConfig, default_config_text, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the GqlModel CLI."""
    parser = argparse.ArgumentParser(
        prog="gqlmodel",
        description="GqlModel - build data models from GraphQL schema files",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a project configuration file",
        description=f"Write a starter {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that the schema files build into models",
        description="Introspect the configured schema files and summarize the resulting models.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the project configuration (default: current directory)",
    )
    check_parser.add_argument("--verbose", action="store_true", help="Log progress per file and model")

    # introspect subcommand
    introspect_parser = subparsers.add_parser(
        "introspect",
        help="Write the models as a JSON artifact",
        description="Introspect the configured schema files and write the models as JSON.",
    )
    introspect_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the project configuration (default: current directory)",
    )
    introspect_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Artifact path (default: the configured output, else standard output)",
    )
    introspect_parser.add_argument("--verbose", action="store_true", help="Log progress per file and model")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "introspect":
        return _cmd_introspect(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Initialized GqlModel project at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _load_project(Path(args.directory))
    if loaded is None:
        return 1
    directory, config = loaded

    models = _run(directory, config, _observer(args.verbose))
    if models is None:
        return 1

    if not models:
        print("No models found.")
        return 0

    for model in models:
        relations = sum(1 for f in model.fields if not isinstance(f.type, PrimitiveTypeRef))
        print(f"{model.name} [{model.source}]: {len(model.fields)} field(s), {relations} relation(s)")
    print(f"Checked {len(models)} model(s).")
    return 0


def _cmd_introspect(args: argparse.Namespace) -> int:
    """Handle the introspect subcommand."""
    loaded = _load_project(Path(args.directory))
    if loaded is None:
        return 1
    directory, config = loaded

    models = _run(directory, config, _observer(args.verbose))
    if models is None:
        return 1

    output = args.output if args.output is not None else config.output
    if output is None:
        print(serialize(models))
        return 0

    output_path = Path(output)
    if not output_path.is_absolute():
        output_path = directory / output_path
    try:
        write_artifact(models, output_path)
    except OSError as exc:
        print(f"Error: cannot write artifact '{output_path}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {len(models)} model(s) to '{output_path}'.")
    return 0


def _load_project(directory: Path) -> tuple[Path, ProjectConfig] | None:
    """Load the project configuration, printing an error on failure."""
    directory = directory.resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no GqlModel project found at '{directory}'. Run 'gqlmodel init' to create one.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_config(config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return directory, config


def _run(directory: Path, config: ProjectConfig, observer: IntrospectionObserver | None) -> list[Model] | None:
    """Introspect the project, printing an error on failure."""
    try:
        return introspect(config.to_options(directory), observer)
    except IntrospectionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _observer(verbose: bool) -> IntrospectionObserver | None:
    if not verbose:
        return None
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    return LoggingObserver()
