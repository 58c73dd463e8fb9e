# SPDX-License-Identifier: MIT
"""Command-line interface for srcsets."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Set up logging
logger = logging.getLogger("srcsets")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def parse_variables(args: list[str]) -> tuple[dict[str, str], list[str]]:
    """Parse KEY=value arguments from a list.

    Args:
        args: List of arguments.

    Returns:
        Tuple of (variables dict, remaining args).
    """
    variables: dict[str, str] = {}
    remaining: list[str] = []

    for arg in args:
        if "=" in arg and not arg.startswith("-"):
            key, _, value = arg.partition("=")
            if key:  # Valid KEY=value
                variables[key] = value
            else:
                remaining.append(arg)
        else:
            remaining.append(arg)

    return variables, remaining


def cmd_presets(args: argparse.Namespace) -> int:
    """List the target presets in the catalog."""
    setup_logging(args.verbose, args.debug)
    from srcsets.core.presets import PRESETS

    width = max(len(name) for name in PRESETS)
    for preset in PRESETS.values():
        print(f"{preset.name:<{width}}  {preset.describe()}")
    return 0


def cmd_graph(args: argparse.Namespace) -> int:
    """Run the standard configuration pass and print the result.

    KEY=value arguments become variables visible through get_var();
    IDE_ACTIVE=1 has the same effect as --ide.
    """
    setup_logging(args.verbose, args.debug)

    import srcsets
    from srcsets.configure.config import Configure
    from srcsets.core.errors import SrcsetsError
    from srcsets.core.project import Project
    from srcsets.core.standard import standard_configuration
    from srcsets.generators import JsonGenerator, MermaidGenerator

    variables, preset_names = parse_variables(args.extra)
    if variables:
        os.environ["SRCSETS_VARS"] = json.dumps(variables)
        srcsets._reset_vars()
        logger.debug("  SRCSETS_VARS=%s", os.environ["SRCSETS_VARS"])

    ide_active = args.ide or srcsets.get_var("IDE_ACTIVE", "0") == "1"

    try:
        config = Configure(build_dir=args.build_dir)
        project = Project(args.name, ide_active=ide_active)
        standard_configuration(
            project,
            *preset_names,
            is_test_module=args.test_module,
            android=config.android_settings(),
            tests=config.test_logging_settings(),
        )
    except SrcsetsError as e:
        logger.error("Configuration failed: %s", e)
        return 1

    generator: JsonGenerator | MermaidGenerator
    if args.format == "mermaid":
        generator = MermaidGenerator(side=args.side, direction=args.direction)
    else:
        generator = JsonGenerator()

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(generator.render(project))
        logger.info("Wrote %s", output)
    else:
        sys.stdout.write(generator.render(project))
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments common to all commands."""
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )


def main() -> int:
    """Main entry point for the srcsets CLI."""
    parser = argparse.ArgumentParser(
        prog="srcsets",
        description="Source-set graph configuration for multiplatform builds.",
        epilog="Run 'srcsets <command> --help' for command-specific help.",
    )
    from srcsets import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # srcsets presets
    presets_parser = subparsers.add_parser("presets", help="List target presets")
    add_common_args(presets_parser)
    presets_parser.set_defaults(func=cmd_presets)

    # srcsets graph
    graph_parser = subparsers.add_parser(
        "graph", help="Configure targets and show the source-set graph"
    )
    add_common_args(graph_parser)
    graph_parser.add_argument(
        "-n", "--name", default="project", help="Project name (default: project)"
    )
    graph_parser.add_argument(
        "-B",
        "--build-dir",
        default="build",
        help="Directory holding srcsets_config.json (default: build)",
    )
    graph_parser.add_argument(
        "--test-module",
        action="store_true",
        help="Configure a test-only module (no explicit API, no test logging)",
    )
    graph_parser.add_argument(
        "--ide", action="store_true", help="Mark the pass as running in an IDE"
    )
    graph_parser.add_argument(
        "-f",
        "--format",
        choices=["json", "mermaid"],
        default="json",
        help="Output format (default: json)",
    )
    graph_parser.add_argument(
        "--side",
        choices=["main", "test", "both"],
        default="both",
        help="Source sets to draw in mermaid output (default: both)",
    )
    graph_parser.add_argument(
        "--direction",
        choices=["LR", "TB", "RL", "BT"],
        default="TB",
        help="Mermaid graph direction (default: TB)",
    )
    graph_parser.add_argument("-o", "--output", help="Write output to this file")
    graph_parser.add_argument(
        "extra",
        nargs="*",
        help="Preset names (default: all) or variables (KEY=value)",
    )
    graph_parser.set_defaults(func=cmd_graph)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
