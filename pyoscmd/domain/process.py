from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
import logging
import os
import subprocess

from returns.io import IOFailure, IOResultE, IOSuccess

from pyoscmd.domain.decoded import decode
from pyoscmd.domain.entities import DecodedText, ProcessOutput
from pyoscmd.domain.errors import (
    CommandFailed,
    EmptyCommand,
    SpawnFailed,
    StdinUnavailable,
)
from pyoscmd.types import Argv, StdioMode

logger = logging.getLogger(__name__)

_STDIO: dict[StdioMode, int | None] = {
    "inherit": None,
    "piped": subprocess.PIPE,
    "null": subprocess.DEVNULL,
}


def _child_env(env: Mapping[str, str] | None) -> dict[str, str] | None:
    if not env:
        return None
    return {**os.environ, **env}


def _popen(argv: Argv, env: Mapping[str, str] | None, **stdio):
    try:
        return IOSuccess(subprocess.Popen(argv, env=_child_env(env), **stdio))
    # ValueError and TypeError: NUL bytes or non-str items in argv or env
    except (OSError, ValueError, TypeError) as e:
        err = SpawnFailed(argv[0], e)
        if isinstance(e, FileNotFoundError):
            err.add_note(f"Command '{argv[0]}' not found!")
        return IOFailure(err)


def _reap(proc: subprocess.Popen):
    """Kills a child that will not get its input and closes its pipes."""
    logger.debug("killing %s", proc.args)
    proc.kill()
    proc.communicate()


def run_os_cmd(
    argv: Iterable[object], env: Mapping[str, str] | None = None
) -> IOResultE[int]:
    """Runs a command with the parent's stdio and waits for it.

    A non-zero exit status becomes a `CommandFailed`.
    """
    argv = tuple(map(str, argv))
    if not argv:
        return IOFailure(EmptyCommand())

    def wait(proc: subprocess.Popen) -> IOResultE[int]:
        if returncode := proc.wait():
            return IOFailure(CommandFailed(argv, returncode))
        return IOSuccess(0)

    return _popen(argv, env).bind(wait)


@dataclass(frozen=True)
class CommandSpawner:
    """Spawns an argv with configurable stdio.

    If `stdin_data` is set it is written to the child right after spawning,
    before anything is read back. Writing a large buffer while stdout or stderr
    is piped can deadlock once the child fills its output pipe; feed such
    payloads from a separate thread instead.
    """

    command: Argv | None = None
    stdin: StdioMode = "inherit"
    stdout: StdioMode = "piped"
    stderr: StdioMode = "inherit"
    stdin_data: bytes | None = None
    env: Mapping[str, str] | None = None

    @classmethod
    def from_argv(cls, argv: Iterable[object], **options) -> "CommandSpawner":
        return cls(command=tuple(map(str, argv)), **options)

    @property
    def effective_stdin(self) -> StdioMode:
        return "piped" if self.stdin_data is not None else self.stdin

    def spawn(self) -> IOResultE[subprocess.Popen]:
        if not self.command:
            return IOFailure(EmptyCommand())

        logger.debug(
            "spawn %s (stdin=%s, stdout=%s, stderr=%s)",
            self.command,
            self.effective_stdin,
            self.stdout,
            self.stderr,
        )
        return _popen(
            self.command,
            self.env,
            stdin=_STDIO[self.effective_stdin],
            stdout=_STDIO[self.stdout],
            stderr=_STDIO[self.stderr],
        ).bind(self._feed_stdin)

    def _feed_stdin(self, proc: subprocess.Popen) -> IOResultE[subprocess.Popen]:
        if self.stdin_data is None:
            return IOSuccess(proc)

        # Take the handle so that waiting on the child never touches it again.
        stdin, proc.stdin = proc.stdin, None
        if stdin is None:
            _reap(proc)
            return IOFailure(StdinUnavailable(self.command[0]))
        try:
            with stdin:
                stdin.write(self.stdin_data)
        except OSError as e:
            _reap(proc)
            return IOFailure(StdinUnavailable(self.command[0], e))
        return IOSuccess(proc)

    def wait(self) -> IOResultE[int]:
        """Spawns and waits, without checking the exit status."""
        return self.spawn().map(lambda proc: proc.wait())

    def output(self) -> IOResultE[ProcessOutput]:
        def collect(proc: subprocess.Popen) -> ProcessOutput:
            stdout, stderr = proc.communicate()
            if proc.returncode:
                logger.debug(
                    "%s exited with status %d", self.command[0], proc.returncode
                )
            return ProcessOutput(
                returncode=proc.returncode,
                stdout=stdout or b"",
                stderr=stderr or b"",
            )

        return self.spawn().map(collect)

    def capture_stdout(self) -> IOResultE[DecodedText]:
        return (
            replace(self, stdout="piped")
            .output()
            .map(lambda output: decode(output.stdout))
        )

    def capture_stderr(self) -> IOResultE[DecodedText]:
        return (
            replace(self, stderr="piped")
            .output()
            .map(lambda output: decode(output.stderr))
        )

    def capture_stdout_and_stderr(
        self,
    ) -> IOResultE[tuple[DecodedText, DecodedText]]:
        return (
            replace(self, stdout="piped", stderr="piped")
            .output()
            .map(lambda output: (decode(output.stdout), decode(output.stderr)))
        )
