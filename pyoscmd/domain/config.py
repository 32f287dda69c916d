from pathlib import Path
from typing import Any, NotRequired, TypedDict, get_args

import toml
from returns.io import IOFailure, IOResultE, IOSuccess, impure_safe

from pyoscmd.domain.entities import Presplit, RawText
from pyoscmd.domain.runner import Runner
from pyoscmd.types import InspectMode

CONFIG_FILE = "pyoscmd.toml"


class RunnerConfig(TypedDict):
    remove_comments: bool
    inspect: InspectMode


class Script(TypedDict):
    cmd: str
    args: NotRequired[list[str]]
    env: NotRequired[dict[str, str]]
    stdin: NotRequired[str]


class Config(TypedDict):
    runner: RunnerConfig
    scripts: dict[str, Script]


@impure_safe
def load_config_file(config_path: Path) -> dict[str, Any]:
    return toml.loads(config_path.read_text())


def create_runner_config(config: dict[str, Any]) -> RunnerConfig:
    inspect = config.get("inspect", "stderr")
    if inspect not in get_args(InspectMode):
        raise ValueError(f"Unknown inspect mode in [runner]: {inspect!r}")
    return RunnerConfig(
        remove_comments=bool(config.get("remove_comments", True)),
        inspect=inspect,
    )


def _strings(values) -> bool:
    return all(isinstance(value, str) for value in values)


def create_script(name: str, config: dict[str, Any]) -> Script:
    if not isinstance(config.get("cmd"), str):
        raise ValueError(f"Script '{name}' needs a 'cmd' string")
    args = config.get("args", [])
    if not isinstance(args, list) or not _strings(args):
        raise ValueError(f"Script '{name}': 'args' must be a list of strings")
    env = config.get("env", {})
    if not isinstance(env, dict) or not _strings(env.values()):
        raise ValueError(f"Script '{name}': 'env' must map names to strings")
    if not isinstance(config.get("stdin", ""), str):
        raise ValueError(f"Script '{name}': 'stdin' must be a string")
    # ignore type because the optional keys are only copied when present.
    return Script(  # type: ignore
        **{key: config[key] for key in ("cmd", "args", "env", "stdin") if key in config}
    )


@impure_safe
def parse_config(config: dict[str, Any]) -> Config:
    return {
        "runner": create_runner_config(config.get("runner", dict())),
        "scripts": {
            name: create_script(name, script)
            for name, script in config.get("scripts", dict()).items()
        },
    }


def load_config(config_path: Path) -> IOResultE[Config]:
    return load_config_file(config_path).bind(parse_config)


def default_config() -> Config:
    return {
        "runner": RunnerConfig(remove_comments=True, inspect="stderr"),
        "scripts": {},
    }


def script_runner(config: Config, name: str) -> IOResultE[Runner]:
    """Builds the runner of a named script.

    A script with `args` is a pre-split argv `[cmd, *args]`, otherwise `cmd` is
    raw command text.
    """
    if name not in config["scripts"]:
        return IOFailure(KeyError(f"No script named '{name}'"))
    script = config["scripts"][name]

    return IOSuccess(
        Runner(
            command=Presplit((script["cmd"], *script["args"]))
            if "args" in script
            else RawText(script["cmd"]),
            stdin_data=script["stdin"].encode() if "stdin" in script else None,
            env=script.get("env"),
            **config["runner"],
        )
    )
