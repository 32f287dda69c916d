from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Protocol
import argparse

from pyoscmd.types import Action, InspectMode, Stream


class ArgsConfig(Protocol):
    action: Action
    directory: Path
    config: Path | None
    verbose: bool
    inspect: InspectMode | None
    keep_comments: bool

    command: list[str]
    stdin: str | None
    stream: Stream
    name: str

    stable: bool
    pkg: str
    no_open: bool
    no_private_items: bool
    cfg: str

    cargo: str
    nightly: bool
    sub_command: str
    profile: str
    target: str
    workspace: bool
    all_features: bool
    no_default_features: bool
    features: list[str]
    rustflags: str


def _version() -> str:
    try:
        return version("pyoscmd")
    except PackageNotFoundError:
        return "unknown"


def args_parse(argv: list[str]) -> tuple[ArgsConfig, list[str]]:
    parser = argparse.ArgumentParser(
        prog="pyoscmd",
        description="Builds and runs OS commands",
        epilog="",
    )
    parser.add_argument("-d", "--dir", dest="directory", type=Path, default=Path.cwd())
    parser.add_argument("-c", "--config", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--inspect", choices=("stderr", "log", "none"), default=None)
    parser.add_argument("--keep-comments", action="store_true")
    parser.add_argument("--version", action="version", version=_version())

    subparser = parser.add_subparsers(dest="action", required=True)

    run = subparser.add_parser("run")
    run.add_argument("command", nargs="+")
    run.add_argument("--stdin", default=None)

    capture = subparser.add_parser("capture")
    capture.add_argument("command", nargs="+")
    capture.add_argument("--stdin", default=None)
    capture.add_argument(
        "--stream", choices=("stdout", "stderr", "both"), default="stdout"
    )

    script = subparser.add_parser("script")
    script.add_argument("name")

    fmt = subparser.add_parser("fmt")
    fmt.add_argument("--stable", action="store_true")

    doc = subparser.add_parser("doc")
    doc.add_argument("--pkg", default="")
    doc.add_argument("--cfg", default="__unstable_doc")
    doc.add_argument("--stable", action="store_true")
    doc.add_argument("--no-open", action="store_true")
    doc.add_argument("--no-private-items", action="store_true")

    build = subparser.add_parser("build")
    build.add_argument("--cargo", default="cargo")
    build.add_argument("--nightly", action="store_true")
    build.add_argument("--sub-command", default="build")
    build.add_argument("--profile", default="release")
    build.add_argument("--pkg", default="")
    build.add_argument("--target", default="")
    build.add_argument("--workspace", action="store_true")
    build.add_argument("--all-features", action="store_true")
    build.add_argument("--no-default-features", action="store_true")
    build.add_argument("--features", nargs="*", default=[])
    build.add_argument("--rustflags", default="")

    return parser.parse_known_args(argv)  # type: ignore
