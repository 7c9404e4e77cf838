"""gvt command line interface.

Usage: gvt [--debug] <command> [params...]

Commands: init, add, detach, commit, checkout, history, version, status.
Each outcome maps to one exit code; messages go to stdout on success and
to stderr on failure.
"""

from __future__ import annotations

import argparse
import os
import sys

from .. import __version__
from ..core.controller import CommandResult, GvtController
from ..core.params import parse_history_limit, parse_target_file, parse_user_message, parse_version_id
from ..errors import (
    AlreadyInitializedError,
    GvtError,
    InvalidVersionError,
    IOFaultError,
    MissingArgumentError,
    NotInitializedError,
    WorkingFileNotFoundError,
)
from ..utils.env import determine_project_root
from ..utils.log import log_debug, log_error_detail


EXIT_SUCCESS = 0
EXIT_MISSING_COMMAND = 1
EXIT_UNKNOWN_COMMAND = 1
EXIT_UNINITIALIZED = -2
EXIT_SYSTEM_ERROR = -3
EXIT_ALREADY_INITIALIZED = 10
EXIT_INVALID_VERSION = 60

MISSING_ARGUMENT_CODES = {"add": 20, "detach": 30, "commit": 50}
FILE_NOT_FOUND_CODES = {"add": 21, "commit": 51}
IO_FAULT_CODES = {"add": 22, "detach": 31, "commit": 52}

SYSTEM_ERROR_MESSAGE = "Underlying system problem. See ERR for details."

COMMANDS = ("init", "add", "detach", "commit", "checkout", "history", "version", "status")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gvt",
        description="gvt - snapshot a file into numbered versions and check them out again",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=" | ".join(COMMANDS),
    )
    parser.add_argument(
        "params",
        nargs=argparse.REMAINDER,
        help="Command parameters, e.g. `add <file> -m <msg>`, `history -last <n>`",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.debug:
        os.environ["GVT_DEBUG"] = "1"

    if not parsed.command:
        return _fail(EXIT_MISSING_COMMAND, "Please specify command.")

    command = parsed.command.lower()
    params: list[str] = list(parsed.params)
    controller = GvtController(project_root=determine_project_root())
    log_debug(f"command={command} params={params} root={controller.project_root}")

    try:
        if command != "init":
            controller.ensure_initialized()

        if command == "init":
            result = controller.init()
        elif command in ("add", "detach", "commit"):
            result = cmd_file(command, params, controller)
        elif command == "checkout":
            result = cmd_checkout(params, controller)
        elif command == "history":
            result = controller.history(parse_history_limit(params))
        elif command == "version":
            result = controller.version(parse_version_id(params[0]) if params else None)
        elif command == "status":
            result = CommandResult(controller.get_status().format())
        else:
            return _fail(EXIT_UNKNOWN_COMMAND, f"Unknown command {parsed.command}.")
    except GvtError as e:
        return _report_error(command, e)
    except OSError as e:
        log_error_detail(e)
        return _fail(EXIT_SYSTEM_ERROR, SYSTEM_ERROR_MESSAGE)

    _print_message(result.message)
    return EXIT_SUCCESS


def cmd_file(command: str, params: list[str], controller: GvtController) -> CommandResult:
    """Run add, detach or commit with `<file> [-m <message>]` params."""
    file_name = parse_target_file(params)
    message = parse_user_message(params)
    if command == "add":
        return controller.add(file_name, message)
    if command == "detach":
        return controller.detach(file_name, message)
    return controller.commit(file_name, message)


def cmd_checkout(params: list[str], controller: GvtController) -> CommandResult:
    if len(params) != 1:
        raise InvalidVersionError(params[0] if params else "")
    return controller.checkout(parse_version_id(params[0]))


def exit_code_for(command: str, error: GvtError) -> int:
    """Map an error kind (and the command it came from) to an exit code."""
    if isinstance(error, NotInitializedError):
        return EXIT_UNINITIALIZED
    if isinstance(error, AlreadyInitializedError):
        return EXIT_ALREADY_INITIALIZED
    if isinstance(error, InvalidVersionError):
        return EXIT_INVALID_VERSION
    if isinstance(error, MissingArgumentError):
        return MISSING_ARGUMENT_CODES.get(error.operation, EXIT_SYSTEM_ERROR)
    if isinstance(error, WorkingFileNotFoundError):
        return FILE_NOT_FOUND_CODES.get(command, EXIT_SYSTEM_ERROR)
    if isinstance(error, IOFaultError):
        return IO_FAULT_CODES.get(error.operation, EXIT_SYSTEM_ERROR)
    return EXIT_SYSTEM_ERROR


def _report_error(command: str, error: GvtError) -> int:
    code = exit_code_for(command, error)
    if code == EXIT_SYSTEM_ERROR:
        log_error_detail(error)
        return _fail(code, SYSTEM_ERROR_MESSAGE)
    if isinstance(error, IOFaultError):
        log_error_detail(error)
    return _fail(code, error.message)


def _fail(code: int, message: str) -> int:
    print(message, file=sys.stderr)
    return code


def _print_message(message: str) -> None:
    print(message, end="" if message.endswith("\n") else "\n")


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
