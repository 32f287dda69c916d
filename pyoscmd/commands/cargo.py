from returns.io import IOFailure, IOResultE

from pyoscmd.commands.options import apply_options
from pyoscmd.domain.argv import collect_raw
from pyoscmd.domain.config import Config
from pyoscmd.domain.errors import CommandSyntaxError
from pyoscmd.presets import CargoCmd, CargoDoc, CargoFmt, RustFlags


def fmt(args, config: Config) -> IOResultE[int]:
    return apply_options(
        args, config, CargoFmt(nightly=not args.stable).into_runner()
    ).run()


def doc(args, config: Config) -> IOResultE[int]:
    return apply_options(
        args,
        config,
        CargoDoc(
            pkg=args.pkg,
            custom_cfg=args.cfg,
            nightly=not args.stable,
            open=not args.no_open,
            enable_private_items=not args.no_private_items,
        ).into_runner(),
    ).run()


def build(args, argv: list[str], config: Config) -> IOResultE[int]:
    try:
        other_flags = collect_raw(args.rustflags, strip_comments=False)
    except CommandSyntaxError as e:
        return IOFailure(e)

    cmd = CargoCmd(
        rust_flags=RustFlags(other_flags=other_flags),
        nightly=args.nightly,
        cargo=args.cargo,
        sub_command=args.sub_command,
        profile=args.profile,
        pkg=args.pkg,
        target=args.target,
        all_packages=args.workspace,
        all_features=args.all_features,
        no_default_features=args.no_default_features,
        features=tuple(args.features),
        other_args=tuple(argv),
    )
    return apply_options(args, config, cmd.into_runner()).run()
