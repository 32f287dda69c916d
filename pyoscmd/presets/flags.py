"""rustc codegen flags, passed to cargo through `RUSTFLAGS`.

See also: https://doc.rust-lang.org/rustc/codegen-options/index.html
"""

from dataclasses import dataclass
from typing import Literal

from pyoscmd.types import Argv

# rustc --print relocation-models
RelocationModel = Literal[
    "static",
    "pic",
    "pie",
    "dynamic-no-pic",
    "ropi",
    "rwpi",
    "ropi-rwpi",
    "default",
]

# rustc --print code-models
CodeModel = Literal["tiny", "small", "kernel", "medium", "large"]

LinkerFlavor = Literal[
    "em",
    "gcc",
    "ld",
    "msvc",
    "wasm-ld",
    "ld64.lld",
    "ld.lld",
    "lld-link",
]


def try_into_mini_arg(flag: str, value: object) -> str | None:
    """`flag=value`, or None if value is empty."""
    if value is None or value == "":
        return None
    return f"{flag}={value}"


def _bool_arg(flag: str, value: bool | None) -> str | None:
    return None if value is None else f"{flag}={str(value).lower()}"


@dataclass(frozen=True)
class RustFlags:
    """Flags for the rust compiler, each rendered as `-C key=value`.

    - crt_static: True => `target-feature=+crt-static`, False => `-crt-static`
    - native_target_cpu: True => `target-cpu=native`, False => `target-cpu=generic`
    - other_flags: appended verbatim
    """

    crt_static: bool | None = None
    prefer_dynamic: bool | None = None
    linker: str = ""
    linker_flavor: LinkerFlavor | None = None
    link_self_contained: bool | None = None
    relocation_model: RelocationModel | None = None
    code_model: CodeModel | None = None
    codegen_units: int | None = None
    native_target_cpu: bool | None = None
    other_flags: Argv = ()

    def into_vec(self) -> Argv:
        codegen = (
            None
            if self.crt_static is None
            else f"target-feature={'+' if self.crt_static else '-'}crt-static",
            _bool_arg("prefer-dynamic", self.prefer_dynamic),
            try_into_mini_arg("linker", self.linker),
            try_into_mini_arg("linker-flavor", self.linker_flavor),
            _bool_arg("link-self-contained", self.link_self_contained),
            try_into_mini_arg("relocation-model", self.relocation_model),
            try_into_mini_arg("code-model", self.code_model),
            try_into_mini_arg("codegen-units", self.codegen_units),
            None
            if self.native_target_cpu is None
            else f"target-cpu={'native' if self.native_target_cpu else 'generic'}",
        )
        return (
            *(arg for flag in codegen if flag for arg in ("-C", flag)),
            *self.other_flags,
        )

    def __str__(self) -> str:
        return " ".join(self.into_vec())
