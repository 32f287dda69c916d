from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
import logging
import sys
from typing import get_args

from returns.io import IOFailure, IOResultE, IOSuccess

from pyoscmd.domain.argv import normalize
from pyoscmd.domain.entities import (
    CommandRepr,
    DecodedText,
    OwnedPresplit,
    Presplit,
    ProcessOutput,
    RawText,
    command_repr,
)
from pyoscmd.domain.errors import CommandFailed, CommandSyntaxError
from pyoscmd.domain.process import CommandSpawner, run_os_cmd
from pyoscmd.types import Argv, InspectMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Runner:
    """Command runner with configurable preprocessing and inspection.

    - command: raw text or a pre-split argv
    - remove_comments: drop `//` lines (raw text only)
    - inspect: show the resolved argv on stderr, as a debug log record, or not at all
    - stdin_data: bytes written to the child's stdin
    - env: extra environment variables for the child only

    ```python
    Runner.from_command("cargo +nightly fmt").run()
    ```
    """

    command: CommandRepr = RawText("cargo")
    remove_comments: bool = True
    inspect: InspectMode = "stderr"
    stdin_data: bytes | None = None
    env: Mapping[str, str] | None = None

    def __post_init__(self):
        if not isinstance(self.command, (RawText, Presplit, OwnedPresplit)):
            raise TypeError(f"Not a command representation: {self.command!r}")
        if self.inspect not in get_args(InspectMode):
            raise ValueError(f"Unknown inspect mode: {self.inspect!r}")
        if self.stdin_data is not None and not isinstance(
            self.stdin_data, (bytes, bytearray, memoryview)
        ):
            raise TypeError("stdin_data must be bytes")

    @classmethod
    def from_command(
        cls, command: CommandRepr | str | Iterable[object], **options
    ) -> "Runner":
        return cls(command=command_repr(command), **options)

    def with_command(self, command: CommandRepr | str | Iterable[object]):
        return replace(self, command=command_repr(command))

    def with_remove_comments(self, remove_comments: bool):
        return replace(self, remove_comments=remove_comments)

    def with_inspect(self, inspect: InspectMode):
        return replace(self, inspect=inspect)

    def with_stdin_data(self, stdin_data: bytes | str | None):
        if isinstance(stdin_data, str):
            stdin_data = stdin_data.encode()
        return replace(self, stdin_data=stdin_data)

    def with_env(self, env: Mapping[str, str] | None):
        return replace(self, env=env)

    def argv(self) -> IOResultE[Argv]:
        try:
            return IOSuccess(normalize(self.command, self.remove_comments))
        except CommandSyntaxError as e:
            return IOFailure(e)

    def _inspect(self, argv: Argv) -> Argv:
        match self.inspect:
            case "stderr":
                print(list(argv), file=sys.stderr)
            case "log":
                logger.debug("%s", list(argv))
        return argv

    def _resolved(self) -> IOResultE[Argv]:
        return self.argv().map(self._inspect)

    def _spawner(self, argv: Argv) -> CommandSpawner:
        return CommandSpawner(
            command=argv,
            stdin="inherit",
            stdout="inherit",
            stderr="inherit",
            stdin_data=self.stdin_data,
            env=self.env,
        )

    def spawner(self) -> IOResultE[CommandSpawner]:
        return self.argv().map(self._spawner)

    def _run_with_stdin(self, argv: Argv) -> IOResultE[int]:
        def check(returncode: int) -> IOResultE[int]:
            if returncode:
                return IOFailure(CommandFailed(argv, returncode))
            return IOSuccess(0)

        return self._spawner(argv).wait().bind(check)

    def run(self) -> IOResultE[int]:
        """Normalizes, inspects, and runs the command with inherited stdio.

        Fails with `CommandFailed` when the command exits unsuccessfully.
        """
        if self.stdin_data is not None:
            return self._resolved().bind(self._run_with_stdin)
        return self._resolved().bind(lambda argv: run_os_cmd(argv, self.env))

    def output(self) -> IOResultE[ProcessOutput]:
        return self._resolved().bind(
            lambda argv: replace(
                self._spawner(argv), stdout="piped", stderr="piped"
            ).output()
        )

    # Captures return the data whatever the exit status; only `run` checks it.
    def capture_stdout(self) -> IOResultE[DecodedText]:
        return self._resolved().bind(
            lambda argv: self._spawner(argv).capture_stdout()
        )

    def capture_stderr(self) -> IOResultE[DecodedText]:
        return self._resolved().bind(
            lambda argv: self._spawner(argv).capture_stderr()
        )

    def capture_stdout_and_stderr(
        self,
    ) -> IOResultE[tuple[DecodedText, DecodedText]]:
        return self._resolved().bind(
            lambda argv: self._spawner(argv).capture_stdout_and_stderr()
        )


class RunnableCommand:
    """Base of the command presets: anything that can become a `Runner`."""

    def into_command(self) -> CommandRepr:
        raise NotImplementedError

    def into_runner(self) -> Runner:
        return Runner(command=self.into_command())

    def run(self) -> IOResultE[int]:
        return self.into_runner().run()
