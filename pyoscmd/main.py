import logging
import os
import sys

from returns.io import IOFailure, IOResultE
from returns.result import Failure, Success
from returns.unsafe import unsafe_perform_io

from pyoscmd import commands
from pyoscmd.args import ArgsConfig, args_parse
from pyoscmd.domain.config import Config
from pyoscmd.domain.errors import CommandFailed


def dispatch(args: ArgsConfig, argv: list[str], config: Config) -> IOResultE[int]:
    match args.action:
        case "run":
            return commands.run(args, argv, config)

        case "capture":
            return commands.capture(args, argv, config)

        case "script":
            return commands.script(args, config)

        case "fmt":
            return commands.fmt(args, config)

        case "doc":
            return commands.doc(args, config)

        case "build":
            return commands.build(args, argv, config)

        case action:
            return IOFailure(NotImplementedError(f"{action} is not implemented yet"))


def pyoscmd(args: ArgsConfig, argv: list[str]) -> IOResultE[int]:
    def enter(config: Config) -> Config:
        os.chdir(args.directory)
        return config

    return (
        commands.config_load(args)
        .map(enter)
        .bind(lambda config: dispatch(args, argv, config))
    )


def exit_status(returncode: int) -> int:
    """Child status as a shell reports it: 128 + N for a child killed by signal N."""
    return 128 - returncode if returncode < 0 else returncode


def main(argv: list[str] | None = None) -> int:
    args, rest = args_parse(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
    )

    match unsafe_perform_io(pyoscmd(args, rest)):
        case Success(code):
            return code
        case Failure(CommandFailed() as e):
            print(
                f"[pyoscmd] Error: '{' '.join(e.argv)}' exited with {e.returncode}",
                file=sys.stderr,
            )
            return exit_status(e.returncode)
        case Failure(e):
            print(f"[pyoscmd] Error: {e}", file=sys.stderr)
            for note in getattr(e, "__notes__", ()):
                print(f"[pyoscmd]   {note}", file=sys.stderr)
            return 1
    return 1
