import os

import pytest
from returns.io import IOSuccess

from pyoscmd import OwnedPresplit, Presplit, Runner
from pyoscmd.presets import (
    BuildStd,
    BuildStdFeatures,
    CargoCmd,
    CargoDoc,
    CargoFmt,
    RustFlags,
)
from pyoscmd.presets.cargo_build import profile_name, try_into_long_arg
from pyoscmd.presets.flags import try_into_mini_arg
from tests.helpers import python, value


def test_cargo_cmd_into_vec():
    cmd = CargoCmd(
        nightly=True,
        pkg="testutils",
        target="aarch64-linux-android",
        build_std=BuildStd(alloc=True, core=True),
        build_std_features=BuildStdFeatures(panic_immediate_abort=True),
    )
    assert cmd.into_vec() == (
        "cargo",
        "+nightly",
        "build",
        "--profile=release",
        "--package=testutils",
        "--target=aarch64-linux-android",
        "-Z",
        "build-std=core,alloc",
        "-Z",
        "build-std-features=panic_immediate_abort",
    )


def test_cargo_cmd_defaults():
    assert CargoCmd().into_vec() == ("cargo", "build", "--profile=release")
    assert CargoCmd().env() == {"RUSTFLAGS": ""}


def test_cargo_cmd_options():
    cmd = CargoCmd(
        cargo="cross",
        sub_command="check",
        profile="debug",
        all_packages=True,
        all_features=True,
        no_default_features=True,
        features=("serde", "std"),
        other_args=("--locked",),
    )
    assert cmd.into_vec() == (
        "cross",
        "check",
        "--profile=dev",
        "--workspace",
        "--all-features",
        "--no-default-features",
        "--features=serde,std",
        "--locked",
    )


def test_empty_profile_is_dropped():
    assert CargoCmd(profile="").into_vec() == ("cargo", "build")


def test_helpers():
    assert profile_name("debug") == "dev"
    assert profile_name("release-lto") == "release-lto"
    assert try_into_long_arg("target", "") is None
    assert try_into_long_arg("target", "x86_64") == "--target=x86_64"
    assert try_into_mini_arg("codegen-units", 0) == "codegen-units=0"
    assert try_into_mini_arg("linker", "") is None


@pytest.mark.parametrize(
    "build_std, expected",
    [
        (BuildStd(), ()),
        (BuildStd(build_default=True), ("-Z", "build-std")),
        (BuildStd(build_default=True, core=True), ("-Z", "build-std=core")),
        (
            BuildStd(std=True, panic_abort=True, proc_macro=True),
            ("-Z", "build-std=std,panic_abort,proc_macro"),
        ),
    ],
)
def test_build_std(build_std, expected):
    assert build_std.to_args() == expected


def test_build_std_features():
    assert BuildStdFeatures().to_args() == ()
    features = BuildStdFeatures(optimize_for_size=True, panic_unwind=True)
    assert features.to_args() == (
        "-Z",
        "build-std-features=panic_unwind,optimize_for_size",
    )


def test_rust_flags():
    flags = RustFlags(
        crt_static=False,
        prefer_dynamic=True,
        linker_flavor="ld.lld",
        other_flags=("-Zlocation-detail=none",),
    )
    assert flags.into_vec() == (
        "-C",
        "target-feature=-crt-static",
        "-C",
        "prefer-dynamic=true",
        "-C",
        "linker-flavor=ld.lld",
        "-Zlocation-detail=none",
    )
    assert str(flags) == (
        "-C target-feature=-crt-static -C prefer-dynamic=true "
        "-C linker-flavor=ld.lld -Zlocation-detail=none"
    )


def test_rust_flags_order():
    flags = RustFlags(
        native_target_cpu=True,
        codegen_units=1,
        code_model="small",
        relocation_model="pic",
        link_self_contained=False,
        linker="clang",
        crt_static=True,
    )
    assert flags.into_vec() == (
        "-C",
        "target-feature=+crt-static",
        "-C",
        "linker=clang",
        "-C",
        "link-self-contained=false",
        "-C",
        "relocation-model=pic",
        "-C",
        "code-model=small",
        "-C",
        "codegen-units=1",
        "-C",
        "target-cpu=native",
    )
    assert str(RustFlags()) == ""
    assert RustFlags(native_target_cpu=False).into_vec() == ("-C", "target-cpu=generic")


def test_rust_flags_become_child_env(monkeypatch):
    monkeypatch.delenv("RUSTFLAGS", raising=False)
    cmd = CargoCmd(rust_flags=RustFlags(crt_static=True))

    runner = cmd.into_runner()
    assert runner.command == OwnedPresplit(cmd.into_vec())
    assert runner.env == {"RUSTFLAGS": "-C target-feature=+crt-static"}
    assert "RUSTFLAGS" not in os.environ

    plain = CargoCmd()
    assert plain.into_runner() == Runner(
        command=OwnedPresplit(plain.into_vec()), env={"RUSTFLAGS": ""}
    )


def test_empty_rust_flags_replace_inherited_ones(monkeypatch):
    monkeypatch.setenv("RUSTFLAGS", "-C target-cpu=native")
    code = "import os; print(repr(os.environ['RUSTFLAGS']), end='')"
    runner = CargoCmd().into_runner().with_command(python(code)).with_inspect("none")
    assert value(runner.capture_stdout()).data == "''"


def test_cargo_cmd_run(monkeypatch):
    calls = []

    def run_os_cmd(argv, env=None):
        calls.append((argv, env))
        return IOSuccess(0)

    monkeypatch.setattr("pyoscmd.domain.runner.run_os_cmd", run_os_cmd)
    cmd = CargoCmd(nightly=True, rust_flags=RustFlags(prefer_dynamic=False))
    assert value(cmd.run()) == 0
    assert calls == [
        (
            ("cargo", "+nightly", "build", "--profile=release"),
            {"RUSTFLAGS": "-C prefer-dynamic=false"},
        )
    ]


def test_cargo_doc():
    assert CargoDoc(pkg="pyoscmd").into_slice() == (
        "cargo",
        "+nightly",
        "rustdoc",
        "--package",
        "pyoscmd",
        "--all-features",
        "--open",
        "--",
        "--cfg",
        "__unstable_doc",
        "--document-private-items",
    )


def test_cargo_doc_minimal():
    doc = CargoDoc(
        custom_cfg="",
        nightly=False,
        all_features=False,
        open=False,
        enable_private_items=False,
    )
    assert doc.into_slice() == ("cargo", "rustdoc", "--")
    assert doc.into_command() == Presplit(("cargo", "rustdoc", "--"))


def test_cargo_fmt():
    assert CargoFmt().into_command() == Presplit(("cargo", "+nightly", "fmt"))
    assert CargoFmt(nightly=False).into_runner() == Runner(
        command=Presplit(("cargo", "fmt"))
    )
