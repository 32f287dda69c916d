from pathlib import Path

from returns.io import IOResultE, IOSuccess

from pyoscmd.domain.config import CONFIG_FILE, Config, default_config, load_config
from pyoscmd.domain.runner import Runner


def config_load(args) -> IOResultE[Config]:
    config_path: Path = args.config or Path(args.directory, CONFIG_FILE)
    if args.config is None and not config_path.exists():
        return IOSuccess(default_config())
    return load_config(config_path)


def apply_options(args, config: Config, runner: Runner) -> Runner:
    """Command line options win over the [runner] table of the config file."""
    return runner.with_remove_comments(
        config["runner"]["remove_comments"] and not args.keep_comments
    ).with_inspect(args.inspect or config["runner"]["inspect"])
