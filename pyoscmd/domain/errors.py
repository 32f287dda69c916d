from collections.abc import Sequence


class CommandError(Exception):
    """Base class of every failure returned by the command pipeline."""


class EmptyCommand(CommandError):
    def __init__(self):
        super().__init__("empty command argv")


class CommandSyntaxError(CommandError, ValueError):
    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid command {text!r}: {reason}")
        self.text = text
        self.reason = reason


class SpawnFailed(CommandError):
    def __init__(self, program: str, error: OSError | ValueError | TypeError):
        super().__init__(f"Failed to spawn {program!r}: {error}")
        self.program = program
        self.error = error
        self.__cause__ = error


class StdinUnavailable(CommandError):
    def __init__(self, program: str, error: OSError | None = None):
        super().__init__(
            f"Failed to write stdin of {program!r}"
            + (f": {error}" if error else ": handle unavailable")
        )
        self.program = program
        self.error = error
        self.__cause__ = error


class CommandFailed(CommandError):
    def __init__(self, argv: Sequence[str], returncode: int):
        super().__init__(
            f"Failed to run command: {argv[0]!r} (exit status {returncode})"
        )
        self.argv = tuple(argv)
        self.returncode = returncode
