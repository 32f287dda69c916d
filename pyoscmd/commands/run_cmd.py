import sys

from returns.io import IOResultE

from pyoscmd.commands.options import apply_options
from pyoscmd.domain.config import Config
from pyoscmd.domain.entities import CommandRepr, DecodedText, Presplit, RawText
from pyoscmd.domain.runner import Runner


def _command(args, argv: list[str]) -> CommandRepr:
    command = (*args.command, *argv)
    return RawText(command[0]) if len(command) == 1 else Presplit(command)


def _runner(args, argv: list[str], config: Config) -> Runner:
    runner = Runner(command=_command(args, argv)).with_stdin_data(args.stdin)
    return apply_options(args, config, runner)


def _print_decoded(text: DecodedText, file=None) -> DecodedText:
    print(text.data, end="", file=file or sys.stdout)
    if text.lossy:
        print("[pyoscmd] Warning: output was not valid UTF-8", file=sys.stderr)
    return text


def run(args, argv: list[str], config: Config) -> IOResultE[int]:
    return _runner(args, argv, config).run()


def capture(args, argv: list[str], config: Config) -> IOResultE[int]:
    runner = _runner(args, argv, config)
    match args.stream:
        case "stdout":
            result = runner.capture_stdout().map(_print_decoded)
        case "stderr":
            result = runner.capture_stderr().map(_print_decoded)
        case _:
            result = runner.capture_stdout_and_stderr().map(
                lambda output: (
                    _print_decoded(output[0]),
                    _print_decoded(output[1], file=sys.stderr),
                )
            )
    return result.map(lambda _: 0)
