from dataclasses import dataclass

from pyoscmd.domain.entities import CommandRepr, Presplit
from pyoscmd.domain.runner import RunnableCommand


@dataclass(frozen=True)
class CargoFmt(RunnableCommand):
    """`cargo +nightly fmt`, or plain `cargo fmt` with nightly=False."""

    nightly: bool = True

    def into_command(self) -> CommandRepr:
        return Presplit(("cargo", *(("+nightly",) if self.nightly else ()), "fmt"))
