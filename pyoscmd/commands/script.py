from returns.io import IOResultE

from pyoscmd.commands.options import apply_options
from pyoscmd.domain.config import Config, script_runner


def script(args, config: Config) -> IOResultE[int]:
    return (
        script_runner(config, args.name)
        .map(lambda runner: apply_options(args, config, runner))
        .bind(lambda runner: runner.run())
    )
