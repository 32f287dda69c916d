from dataclasses import dataclass, field, fields
import logging
from typing import Literal

from pyoscmd.domain.entities import CommandRepr, OwnedPresplit
from pyoscmd.domain.runner import RunnableCommand, Runner
from pyoscmd.presets.flags import RustFlags
from pyoscmd.types import Argv

logger = logging.getLogger(__name__)

SubCmd = Literal["build", "run", "test", "bench", "check", "rustc"] | str


def profile_name(profile: str) -> str:
    """cargo spells the debug profile "dev"."""
    return "dev" if profile == "debug" else profile


def try_into_long_arg(flag: str, value: str) -> str | None:
    """`--flag=value`, or None if value is empty."""
    return f"--{flag}={value}" if value else None


def _enabled(options) -> tuple[str, ...]:
    return tuple(f.name for f in fields(options) if getattr(options, f.name))


@dataclass(frozen=True)
class BuildStd:
    """Standard library crates to rebuild with `-Z build-std`.

    `build_default` alone gives a bare `-Z build-std`; any explicit crate
    overrides it.
    """

    build_default: bool = False
    std: bool = False
    core: bool = False
    alloc: bool = False
    panic_abort: bool = False
    panic_unwind: bool = False
    test: bool = False
    proc_macro: bool = False

    def to_args(self) -> Argv:
        crates = tuple(name for name in _enabled(self) if name != "build_default")
        if crates:
            return ("-Z", f"build-std={','.join(crates)}")
        return ("-Z", "build-std") if self.build_default else ()


@dataclass(frozen=True)
class BuildStdFeatures:
    panic_immediate_abort: bool = False
    panic_unwind: bool = False
    backtrace: bool = False
    llvm_libunwind: bool = False
    system_llvm_libunwind: bool = False
    optimize_for_size: bool = False
    debug_refcell: bool = False
    debug_typeid: bool = False
    std_detect_file_io: bool = False
    std_detect_dlsym_getauxval: bool = False
    std_detect_env_override: bool = False
    windows_raw_dylib: bool = False

    def to_args(self) -> Argv:
        features = _enabled(self)
        return ("-Z", f"build-std-features={','.join(features)}") if features else ()


@dataclass(frozen=True)
class CargoCmd(RunnableCommand):
    """Configurable cargo build command.

    ```python
    CargoCmd(
        nightly=True,
        pkg="pyoscmd",
        build_std=BuildStd(core=True, alloc=True),
        build_std_features=BuildStdFeatures(panic_immediate_abort=True),
    ).into_vec()
    # ("cargo", "+nightly", "build", "--profile=release", "--package=pyoscmd",
    #  "-Z", "build-std=core,alloc",
    #  "-Z", "build-std-features=panic_immediate_abort")
    ```

    The rust flags are not part of the argv: `into_runner` hands them to the
    child as `RUSTFLAGS`, replacing any inherited value even when empty.
    """

    rust_flags: RustFlags = field(default_factory=RustFlags)
    nightly: bool = False
    cargo: str = "cargo"
    sub_command: SubCmd = "build"
    profile: str = "release"
    pkg: str = ""
    target: str = ""
    all_packages: bool = False
    all_features: bool = False
    no_default_features: bool = False
    features: tuple[str, ...] = ()
    build_std: BuildStd = field(default_factory=BuildStd)
    build_std_features: BuildStdFeatures = field(default_factory=BuildStdFeatures)
    other_args: tuple[str, ...] = ()

    def into_vec(self) -> Argv:
        return tuple(
            arg
            for arg in (
                self.cargo or "cargo",
                "+nightly" if self.nightly else None,
                self.sub_command,
                try_into_long_arg("profile", profile_name(self.profile)),
                try_into_long_arg("package", self.pkg),
                "--workspace" if self.all_packages else None,
                try_into_long_arg("target", self.target),
                "--all-features" if self.all_features else None,
                "--no-default-features" if self.no_default_features else None,
                try_into_long_arg("features", ",".join(self.features)),
                *self.build_std.to_args(),
                *self.build_std_features.to_args(),
                *self.other_args,
            )
            if arg
        )

    def env(self) -> dict[str, str]:
        rust_flags = str(self.rust_flags)
        logger.debug("setenv: RUSTFLAGS=%s", rust_flags)
        return {"RUSTFLAGS": rust_flags}

    def into_command(self) -> CommandRepr:
        return OwnedPresplit(self.into_vec())

    def into_runner(self) -> Runner:
        return Runner(command=self.into_command(), env=self.env())
