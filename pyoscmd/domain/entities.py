from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from pyoscmd.types import Argv


@dataclass(frozen=True)
class RawText:
    """Shell-like command text, e.g. "cargo +nightly fmt"."""

    text: str


@dataclass(frozen=True)
class Presplit:
    """Pre-split argv, kept as the caller handed it over."""

    items: Sequence[str] = field(default=())


@dataclass(frozen=True)
class OwnedPresplit:
    """Pre-split argv owned by the representation itself."""

    items: Argv = ()


CommandRepr = RawText | Presplit | OwnedPresplit


def collect_owned(items: Iterable[object]) -> OwnedPresplit:
    return OwnedPresplit(tuple(map(str, items)))


def command_repr(value: CommandRepr | str | Iterable[object]) -> CommandRepr:
    match value:
        case RawText() | Presplit() | OwnedPresplit():
            return value
        case str():
            return RawText(value)
        case list() | tuple() if all(isinstance(item, str) for item in value):
            return Presplit(value)
        case _:
            return collect_owned(value)


@dataclass(frozen=True)
class DecodedText:
    """Decoded child-process output.

    `lossy` is set when the raw bytes were not valid UTF-8 and invalid
    sequences were replaced with U+FFFD.
    """

    lossy: bool
    data: str

    def __str__(self) -> str:
        return self.data


@dataclass(frozen=True)
class ProcessOutput:
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""
