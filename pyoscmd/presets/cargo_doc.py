from dataclasses import dataclass

from pyoscmd.domain.entities import CommandRepr, Presplit
from pyoscmd.domain.runner import RunnableCommand
from pyoscmd.types import Argv


@dataclass(frozen=True)
class CargoDoc(RunnableCommand):
    """Configurable `cargo rustdoc` command.

    ```
    cargo +nightly rustdoc --package PKG --all-features --open \\
        -- --cfg __unstable_doc --document-private-items
    ```

    An empty `pkg` drops `--package`, an empty `custom_cfg` drops `--cfg`.
    """

    pkg: str = ""
    custom_cfg: str = "__unstable_doc"
    nightly: bool = True
    all_features: bool = True
    open: bool = True
    enable_private_items: bool = True

    def into_slice(self) -> Argv:
        return (
            "cargo",
            *(("+nightly",) if self.nightly else ()),
            "rustdoc",
            *(("--package", self.pkg) if self.pkg else ()),
            *(("--all-features",) if self.all_features else ()),
            *(("--open",) if self.open else ()),
            "--",
            *(("--cfg", self.custom_cfg) if self.custom_cfg else ()),
            *(("--document-private-items",) if self.enable_private_items else ()),
        )

    def into_command(self) -> CommandRepr:
        return Presplit(self.into_slice())
