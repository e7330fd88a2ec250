# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the HyperLIR command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from hyperlir.compiler.build import CompilationResult, CompilerError, write_artifacts
from hyperlir.compiler.frontend import make_parser
from hyperlir.compiler.session import CompilerSession
from hyperlir.transport.client import TransmissionError
from hyperlir.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ProjectConfig,
    default_config_text,
    load_project_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the HyperLIR CLI."""
    parser = argparse.ArgumentParser(
        prog="hyperlir",
        description="HyperLIR - hypergraph rewriting program compiler",
    )
    parser.add_argument(
        "--config",
        help=f"Path to the configuration file (default: ./{CONFIG_FILE_NAME} when present)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a configuration file",
        description=f"Write a default {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a program for errors",
        description="Parse and analyze a program without writing artifacts.",
    )
    check_parser.add_argument("source", help="Program source file")

    # compile subcommand
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile a program into artifacts",
        description="Compile every state of a program and write one artifact per state.",
    )
    compile_parser.add_argument("source", help="Program source file")
    compile_parser.add_argument(
        "--out",
        help="Output directory for artifacts (default: the configured build directory)",
    )

    # send subcommand
    send_parser = subparsers.add_parser(
        "send",
        help="Compile a program and send one state to the execution service",
        description="Compile a program and POST the artifact of one state to the execution service.",
    )
    send_parser.add_argument("source", help="Program source file")
    send_parser.add_argument("state", help="Name of the state to send")
    send_parser.add_argument("--endpoint", help="Execution service URL (default: from configuration)")

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive editor",
        description="Launch a web-based editor that compiles programs and sends states.",
    )
    serve_parser.add_argument("source", nargs="?", help="Program source file to open")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)

    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "check":
        return _cmd_check(args, config)
    if args.command == "compile":
        return _cmd_compile(args, config)
    if args.command == "send":
        return _cmd_send(args, config)
    if args.command == "serve":
        return _cmd_serve(args, config)
    return 0


def _load_config(args: argparse.Namespace) -> ProjectConfig:
    """Load the configuration named by --config, or ./.hyperlir.yaml, or defaults."""
    if args.config:
        return load_project_config(Path(args.config))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_project_config(default_path)
    return ProjectConfig()


def _read_source(path_arg: str) -> str | None:
    """Read a program file, printing an error and returning None on failure."""
    path = Path(path_arg)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None


def _run(args: argparse.Namespace, config: ProjectConfig) -> tuple[CompilerSession, CompilationResult] | None:
    """Compile the source file named in *args*, reporting errors and warnings."""
    source = _read_source(args.source)
    if source is None:
        return None
    session = CompilerSession(
        parser=make_parser(config.parser_command),
        endpoint=config.endpoint,
        timeout=config.timeout,
    )
    try:
        result = session.run(source)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    return session, result


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
    print(f"Initialized HyperLIR configuration at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace, config: ProjectConfig) -> int:
    """Handle the check subcommand."""
    outcome = _run(args, config)
    if outcome is None:
        return 1
    _, result = outcome
    print(f"No issues found in {len(result.states)} state(s).")
    return 0


def _cmd_compile(args: argparse.Namespace, config: ProjectConfig) -> int:
    """Handle the compile subcommand."""
    outcome = _run(args, config)
    if outcome is None:
        return 1
    _, result = outcome

    build_dir = Path(args.out) if args.out else Path.cwd() / config.build_directory
    try:
        paths = write_artifacts(result, build_dir)
    except OSError as exc:
        print(f"Error: cannot write artifacts: {exc}", file=sys.stderr)
        return 1

    for name, preview in result.previews:
        print(f"{name}:")
        for line in preview.splitlines():
            print(f"  {line}")
    print(f"Wrote {len(paths)} artifact(s) to '{build_dir}'.")
    return 0


def _cmd_send(args: argparse.Namespace, config: ProjectConfig) -> int:
    """Handle the send subcommand."""
    if args.endpoint:
        config.endpoint = args.endpoint
    outcome = _run(args, config)
    if outcome is None:
        return 1
    session, _ = outcome

    try:
        response = session.send(args.state)
    except KeyError:
        print(f"Error: no state named '{args.state}'.", file=sys.stderr)
        return 1
    except TransmissionError as exc:
        print(f"Error: failed to send state '{args.state}': {exc}", file=sys.stderr)
        return 1

    print(f"State '{args.state}' sent to {config.endpoint}.")
    print(f"Server response: {response}")
    return 0


def _cmd_serve(args: argparse.Namespace, config: ProjectConfig) -> int:
    """Handle the serve subcommand."""
    source = ""
    if args.source:
        text = _read_source(args.source)
        if text is None:
            return 1
        source = text

    from hyperlir.webui.app import create_app

    session = CompilerSession(
        parser=make_parser(config.parser_command),
        endpoint=config.endpoint,
        timeout=config.timeout,
    )
    print(f"Serving editor at http://{args.host}:{args.port}/")
    app = create_app(session, source=source)
    app.run(host=args.host, port=args.port, debug=False)
    return 0
