from pyoscmd.presets.cargo_build import BuildStd, BuildStdFeatures, CargoCmd
from pyoscmd.presets.cargo_doc import CargoDoc
from pyoscmd.presets.cargo_fmt import CargoFmt
from pyoscmd.presets.flags import RustFlags

__all__ = [
    "BuildStd",
    "BuildStdFeatures",
    "CargoCmd",
    "CargoDoc",
    "CargoFmt",
    "RustFlags",
]
