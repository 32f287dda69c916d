from pyoscmd.domain.argv import collect_raw, normalize, remove_comments
from pyoscmd.domain.decoded import decode
from pyoscmd.domain.entities import (
    CommandRepr,
    DecodedText,
    OwnedPresplit,
    Presplit,
    ProcessOutput,
    RawText,
    collect_owned,
    command_repr,
)
from pyoscmd.domain.errors import (
    CommandError,
    CommandFailed,
    CommandSyntaxError,
    EmptyCommand,
    SpawnFailed,
    StdinUnavailable,
)
from pyoscmd.domain.process import CommandSpawner, run_os_cmd
from pyoscmd.domain.runner import RunnableCommand, Runner

run = run_os_cmd

__all__ = [
    "CommandError",
    "CommandFailed",
    "CommandRepr",
    "CommandSpawner",
    "CommandSyntaxError",
    "DecodedText",
    "EmptyCommand",
    "OwnedPresplit",
    "Presplit",
    "ProcessOutput",
    "RawText",
    "RunnableCommand",
    "Runner",
    "SpawnFailed",
    "StdinUnavailable",
    "collect_owned",
    "collect_raw",
    "command_repr",
    "decode",
    "normalize",
    "remove_comments",
    "run",
    "run_os_cmd",
]
