#!/usr/bin/env python3
"""
Sandbox Exec CLI - Run commands on the execution service
"""

import argparse
import signal
import sys
from typing import Dict, Optional, Sequence

from pydantic import ValidationError

from exec_client.application import (
    RunCommand,
    ShutdownService,
    SignalService,
    connect,
)
from exec_client.domain.errors import ExecClientError
from exec_client.domain.value_objects import ExecutionHandle
from exec_client.infrastructure.config import Settings, get_settings
from exec_client.infrastructure.logging import configure_logging, get_logger
from exec_client.interfaces.signals import SignalForwarder

logger = get_logger(__name__)

# Exit code for any client-side failure
FAILURE_EXIT_CODE = -1


def env_entry(value: str) -> str:
    """Validate a KEY=VALUE environment entry"""
    key, sep, _ = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return value


def signal_number(value: str) -> int:
    """Parse a signal given as a number or a name (TERM, SIGTERM)"""
    if value.lstrip("-").isdigit():
        return int(value)
    name = value.upper()
    if not name.startswith("SIG"):
        name = f"SIG{name}"
    try:
        return int(signal.Signals[name])
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown signal {value!r}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        prog="sandbox-exec",
        description="Sandbox Exec CLI - Run commands on the execution service",
    )

    # Endpoint
    parser.add_argument("--host", help="Execution service host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Execution service port (default: 7878)")
    parser.add_argument(
        "--socket",
        dest="socket_path",
        help="Unix socket of the execution service, overrides --host/--port",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stop", help="Ask the execution service to stop")

    exec_cmd = sub.add_parser("exec", help="Run a program and wait for its exit code")
    exec_cmd.add_argument(
        "--env", "-e",
        dest="environment",
        action="append",
        type=env_entry,
        default=[],
        metavar="KEY=VALUE",
        help="Environment entry for the program, repeatable. Nothing is inherited.",
    )
    exec_cmd.add_argument("path", help="Program path on the service side")
    exec_cmd.add_argument("args", nargs=argparse.REMAINDER, help="Program arguments")

    kill_cmd = sub.add_parser("kill", help="Send a signal to a running execution")
    kill_cmd.add_argument("handle", type=int, help="Execution handle")
    kill_cmd.add_argument(
        "signal",
        nargs="?",
        type=signal_number,
        default=int(signal.SIGTERM),
        help="Signal number or name (default: TERM)",
    )

    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Apply command line overrides on top of the environment settings"""
    overrides: Dict[str, object] = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("socket_path", args.socket_path),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    if not overrides:
        return get_settings()
    return Settings(**overrides)


def run_exec(context, args: argparse.Namespace) -> int:
    command = RunCommand(context)
    command.start(args.path, args.args, args.environment)

    # only forward once there is a handle to forward to
    with SignalForwarder(SignalService(context)) as forwarder:
        return command.wait(on_poll=forwarder.drain)


def run_stop(context) -> int:
    ShutdownService(context).stop(context.settings.cli_stop_timeout)
    print("server stopped.")
    return 0


def run_kill(context, args: argparse.Namespace) -> int:
    SignalService(context).send_signal(ExecutionHandle(args.handle), args.signal)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI function, returns the process exit code"""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_settings(args)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return FAILURE_EXIT_CODE

    configure_logging(settings.log_level, settings.log_format)

    try:
        with connect(settings) as context:
            if args.command == "stop":
                return run_stop(context)
            if args.command == "kill":
                return run_kill(context, args)
            return run_exec(context, args)
    except ExecClientError as e:
        logger.debug("Command failed", command=args.command, error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return FAILURE_EXIT_CODE
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return FAILURE_EXIT_CODE


def entry_point():
    """CLI entry point"""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
